from enum import Enum


class JointId(str, Enum):
    """Kinect v2 관절 25개 (센서 순서 그대로)"""
    SPINE_BASE = "SpineBase"
    SPINE_MID = "SpineMid"
    NECK = "Neck"
    HEAD = "Head"
    SHOULDER_LEFT = "ShoulderLeft"
    ELBOW_LEFT = "ElbowLeft"
    WRIST_LEFT = "WristLeft"
    HAND_LEFT = "HandLeft"
    SHOULDER_RIGHT = "ShoulderRight"
    ELBOW_RIGHT = "ElbowRight"
    WRIST_RIGHT = "WristRight"
    HAND_RIGHT = "HandRight"
    HIP_LEFT = "HipLeft"
    KNEE_LEFT = "KneeLeft"
    ANKLE_LEFT = "AnkleLeft"
    FOOT_LEFT = "FootLeft"
    HIP_RIGHT = "HipRight"
    KNEE_RIGHT = "KneeRight"
    ANKLE_RIGHT = "AnkleRight"
    FOOT_RIGHT = "FootRight"
    SPINE_SHOULDER = "SpineShoulder"
    HAND_TIP_LEFT = "HandTipLeft"
    THUMB_LEFT = "ThumbLeft"
    HAND_TIP_RIGHT = "HandTipRight"
    THUMB_RIGHT = "ThumbRight"


# 전체 관절 어휘 (Skeleton 키는 항상 이 집합)
ALL_JOINTS = tuple(JointId)

# 뼈대 연결: child → parent (렌더링용 선분)
BONE_MAP = {
    JointId.FOOT_LEFT: JointId.ANKLE_LEFT,
    JointId.ANKLE_LEFT: JointId.KNEE_LEFT,
    JointId.KNEE_LEFT: JointId.HIP_LEFT,
    JointId.HIP_LEFT: JointId.SPINE_BASE,

    JointId.FOOT_RIGHT: JointId.ANKLE_RIGHT,
    JointId.ANKLE_RIGHT: JointId.KNEE_RIGHT,
    JointId.KNEE_RIGHT: JointId.HIP_RIGHT,
    JointId.HIP_RIGHT: JointId.SPINE_BASE,

    JointId.HAND_TIP_LEFT: JointId.HAND_LEFT,
    JointId.THUMB_LEFT: JointId.HAND_LEFT,
    JointId.HAND_LEFT: JointId.WRIST_LEFT,
    JointId.WRIST_LEFT: JointId.ELBOW_LEFT,
    JointId.ELBOW_LEFT: JointId.SHOULDER_LEFT,
    JointId.SHOULDER_LEFT: JointId.SPINE_SHOULDER,

    JointId.HAND_TIP_RIGHT: JointId.HAND_RIGHT,
    JointId.THUMB_RIGHT: JointId.HAND_RIGHT,
    JointId.HAND_RIGHT: JointId.WRIST_RIGHT,
    JointId.WRIST_RIGHT: JointId.ELBOW_RIGHT,
    JointId.ELBOW_RIGHT: JointId.SHOULDER_RIGHT,
    JointId.SHOULDER_RIGHT: JointId.SPINE_SHOULDER,

    JointId.SPINE_BASE: JointId.SPINE_MID,
    JointId.SPINE_MID: JointId.SPINE_SHOULDER,
    JointId.SPINE_SHOULDER: JointId.NECK,
    JointId.NECK: JointId.HEAD,
}

# 몸통 평면을 만드는 세 점
TORSO_PLANE_JOINTS = (JointId.SPINE_BASE, JointId.SHOULDER_LEFT, JointId.SHOULDER_RIGHT)
