"""
가시성 체크 Domain Logic
관절 집합이 모두 Tracked 상태인지 판정
"""
from typing import Iterable

from flexcoach.analyze.constants import JointId
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.utils.enums.enums import TrackingState


def is_visible(skeleton: Skeleton, joint_names: Iterable[JointId]) -> bool:
    """
    모든 관절이 존재하고 Tracked일 때만 True.
    Inferred / NotTracked는 둘 다 '안 보임'으로 취급.
    """
    for joint in joint_names:
        sample = skeleton.get(joint)
        if sample is None or sample.confidence != TrackingState.tracked:
            return False
    return True
