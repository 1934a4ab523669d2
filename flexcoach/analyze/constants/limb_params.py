from typing import NamedTuple

from flexcoach.analyze.constants.joint_types import JointId
from flexcoach.utils.enums.enums import LimbSide


class LimbJoints(NamedTuple):
    """한쪽 팔 계산에 필요한 관절 묶음"""
    wrist: JointId
    elbow: JointId
    shoulder: JointId
    hip: JointId
    off_elbow: JointId  # 반대쪽 팔꿈치 (몸통 깊이 기준)


# 좌/우 분기를 없애기 위한 lookup table
LIMB_JOINTS = {
    LimbSide.left: LimbJoints(
        wrist=JointId.WRIST_LEFT,
        elbow=JointId.ELBOW_LEFT,
        shoulder=JointId.SHOULDER_LEFT,
        hip=JointId.HIP_LEFT,
        off_elbow=JointId.ELBOW_RIGHT,
    ),
    LimbSide.right: LimbJoints(
        wrist=JointId.WRIST_RIGHT,
        elbow=JointId.ELBOW_RIGHT,
        shoulder=JointId.SHOULDER_RIGHT,
        hip=JointId.HIP_RIGHT,
        off_elbow=JointId.ELBOW_LEFT,
    ),
}

# 드롭다운 인덱스 → 팔 방향 (0: 왼팔, 1: 오른팔)
SIDE_BY_INDEX = (LimbSide.left, LimbSide.right)

# Fallback defaults (settings에서 ENV 미지정 시 사용)
DEFAULT_MIN_ANGLE = 45
DEFAULT_MAX_ANGLE = 90
DEFAULT_NEAR_RATIO = 2.0 / 3.0  # 45~90 범위에서 +30도
DEFAULT_ABDUCTION_TOLERANCE = 10.0
DEFAULT_ALIGNMENT_TOLERANCE = 0.1
DEFAULT_SCENE_SCALE = 10.0
DEFAULT_ARROW_HEAD_PERCENT = 0.4

# 제어 레이어 입력 범위
MIN_ANGLE_LIMITS = (0, 90)
MAX_ANGLE_LIMITS = (0, 180)
ABDUCTION_TARGET_LIMITS = (0, 180)

# 퇴화 가드: 길이가 이보다 작은 벡터는 방향이 없다고 본다
GEOMETRY_EPS = 1e-6
