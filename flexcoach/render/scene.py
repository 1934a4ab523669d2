"""
화면 쪽 bookkeeping
- tracking id 집합 차이로 등장/퇴장 인물 계산
- 스켈레톤 → 뼈대 선분 + 색
"""
import logging
from typing import Iterable, List, Optional, Set, Tuple

from flexcoach.analyze.constants import BONE_MAP, LIMB_JOINTS
from flexcoach.schemas.render_dto import BoneSegment
from flexcoach.schemas.skeleton_dto import Skeleton, Vector3
from flexcoach.utils.enums.enums import BoneColor, JointColor, LimbSide, TrackingState

logger = logging.getLogger(__name__)

JOINT_COLORS = {
    TrackingState.tracked: JointColor.tracked,
    TrackingState.inferred: JointColor.inferred,
    TrackingState.not_tracked: JointColor.not_tracked,
}


def to_scene_position(position: Vector3, scale: float) -> Vector3:
    x, y, z = position
    return (x * scale, y * scale, z * scale)


def build_bones(
        skeleton: Skeleton,
        *,
        scale: float,
        side: Optional[LimbSide] = None,
        highlight: Optional[BoneColor] = None,
) -> List[BoneSegment]:
    """BONE_MAP 순서대로 선분 생성. side의 위팔/아래팔만 highlight 색 적용."""
    arm_bones = set()
    if side is not None and highlight is not None:
        limb = LIMB_JOINTS[side]
        arm_bones = {(limb.wrist, limb.elbow), (limb.elbow, limb.shoulder)}

    bones = []
    for child, parent in BONE_MAP.items():
        src, dst = skeleton.joints[child], skeleton.joints[parent]
        bones.append(BoneSegment(
            child=child,
            parent=parent,
            start=to_scene_position(src.position, scale),
            end=to_scene_position(dst.position, scale),
            start_color=JOINT_COLORS[src.confidence],
            end_color=JOINT_COLORS[dst.confidence],
            highlight=highlight if (child, parent) in arm_bones else None,
        ))
    return bones


class BodyRegistry:
    """직전 프레임의 tracking id 집합을 기억하고 등장/퇴장을 계산"""

    def __init__(self):
        self._known: Set[int] = set()

    @property
    def known_ids(self) -> Set[int]:
        return set(self._known)

    def sync(self, tracked_ids: Iterable[int]) -> Tuple[List[int], List[int]]:
        """
        Returns:
            (added_ids, removed_ids), 둘 다 정렬된 리스트
        """
        current = set(tracked_ids)
        added = sorted(current - self._known)
        removed = sorted(self._known - current)
        for tid in removed:
            logger.info(f"👋 인물 퇴장: {tid}")
        for tid in added:
            logger.info(f"🙋 인물 등장: {tid}")
        self._known = current
        return added, removed
