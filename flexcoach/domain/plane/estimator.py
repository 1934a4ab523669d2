"""
몸통 평면 Domain Logic
척추 하단 + 양 어깨 세 점으로 기준 평면을 만들고 점-평면 거리를 잰다
"""
from typing import NamedTuple, Optional

import numpy as np

from flexcoach.analyze.constants import LIMB_JOINTS, TORSO_PLANE_JOINTS, GEOMETRY_EPS
from flexcoach.domain.visibility.checker import is_visible
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.utils.enums.enums import LimbSide


class Plane(NamedTuple):
    """단위 법선 + 평면 위의 한 점"""
    normal: np.ndarray
    point: np.ndarray


class BodyPlaneEstimator:
    """몸통 평면 추정기"""

    def estimate_plane(self, skeleton: Skeleton, side: LimbSide) -> Optional[Plane]:
        """
        spine-base / shoulder-left / shoulder-right 를 지나는 평면.
        세 점이 안 보이거나 한 직선 위에 있으면(법선 길이≈0) None.
        """
        if not is_visible(skeleton, TORSO_PLANE_JOINTS):
            return None

        base, left, right = (skeleton.position(j) for j in TORSO_PLANE_JOINTS)
        normal = np.cross(left - base, right - base)
        norm = float(np.linalg.norm(normal))
        if norm < GEOMETRY_EPS:
            return None

        return Plane(normal=normal / norm, point=base)

    @staticmethod
    def distance_to_plane(plane: Plane, point: np.ndarray) -> float:
        """부호 없는 수직 거리"""
        return abs(float(np.dot(np.asarray(point, dtype=float) - plane.point, plane.normal)))

    def off_elbow_distance(self, skeleton: Skeleton, side: LimbSide, plane: Plane) -> Optional[float]:
        """
        반대쪽 팔꿈치(몸통 깊이 기준)와 평면 사이 거리.
        반대쪽 팔꿈치가 안 보이면 None.
        """
        off_elbow = LIMB_JOINTS[side].off_elbow
        if not is_visible(skeleton, (off_elbow,)):
            return None
        return self.distance_to_plane(plane, skeleton.position(off_elbow))

    def is_aligned(self, skeleton: Skeleton, side: LimbSide, plane: Plane, tolerance: float) -> Optional[bool]:
        """거리 ≤ tolerance 이면 True. 측정 불가면 None (Misaligned와 구분)."""
        distance = self.off_elbow_distance(skeleton, side, plane)
        if distance is None:
            return None
        return distance <= tolerance
