from __future__ import annotations
from enum import Enum


# 운동하는 팔 방향
class LimbSide(str, Enum):
    left = "left"
    right = "right"


# 센서가 주는 관절 추적 신뢰도
class TrackingState(str, Enum):
    tracked = "Tracked"
    inferred = "Inferred"
    not_tracked = "NotTracked"


# 팔꿈치 각도 판정
class Classification(str, Enum):
    in_range = "InRange"
    near = "Near"
    out_of_range = "OutOfRange"
    unavailable = "Unavailable"
    invalid_side = "InvalidSide"


# 몸통 평면 정렬 상태
class AlignmentStatus(str, Enum):
    aligned = "Aligned"
    misaligned = "Misaligned"
    undetermined = "Undetermined"


# 프레임당 하나만 노출되는 안내 메시지 (위에 있을수록 우선순위 높음)
class FeedbackMessage(str, Enum):
    invalid_side = "invalid_side"
    arm_not_visible = "arm_not_visible"
    body_not_visible = "body_not_visible"
    align_arm = "align_arm"
    abduction_unavailable = "abduction_unavailable"
    abduction_out_of_tolerance = "abduction_out_of_tolerance"
    nominal = "nominal"


# 팔 강조 색상 (goal / close / not yet)
class BoneColor(str, Enum):
    goal = "green"
    close = "yellow"
    not_yet = "red"


# 관절 추적 상태별 뼈대 끝점 색상
class JointColor(str, Enum):
    tracked = "green"
    inferred = "red"
    not_tracked = "black"
