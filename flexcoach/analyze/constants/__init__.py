# re-exports: 다른 모듈에서 짧게 import 하도록

from .joint_types import (
    JointId, ALL_JOINTS, BONE_MAP, TORSO_PLANE_JOINTS,
)

from .limb_params import (
    LimbJoints,
    LIMB_JOINTS,
    SIDE_BY_INDEX,
    DEFAULT_MIN_ANGLE,
    DEFAULT_MAX_ANGLE,
    DEFAULT_NEAR_RATIO,
    DEFAULT_ABDUCTION_TOLERANCE,
    DEFAULT_ALIGNMENT_TOLERANCE,
    DEFAULT_SCENE_SCALE,
    DEFAULT_ARROW_HEAD_PERCENT,
    MIN_ANGLE_LIMITS,
    MAX_ANGLE_LIMITS,
    ABDUCTION_TARGET_LIMITS,
    GEOMETRY_EPS,
)
