"""
각도 계산 Domain Logic
관절 위치 → 팔꿈치 굴곡각 / 팔-몸통 외전각
"""
from typing import Optional

import numpy as np

from flexcoach.analyze.constants import LIMB_JOINTS, GEOMETRY_EPS, JointId
from flexcoach.domain.visibility.checker import is_visible
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.utils.enums.enums import LimbSide


def angle_between(v1: np.ndarray, v2: np.ndarray) -> Optional[float]:
    """
    두 벡터의 부호 없는 끼인각(도 단위, [0, 180]).
    cosθ = (v1·v2)/(|v1||v2|), 수치 안정성을 위해 clamp.
    길이가 0에 가까운 벡터가 있으면 None.
    """
    n1 = float(np.linalg.norm(v1))
    n2 = float(np.linalg.norm(v2))
    if n1 < GEOMETRY_EPS or n2 < GEOMETRY_EPS:
        return None
    cosv = float(np.dot(v1, v2) / (n1 * n2))
    cosv = max(-1.0, min(1.0, cosv))
    return float(np.degrees(np.arccos(cosv)))


def vertex_angle(a: np.ndarray, vertex: np.ndarray, c: np.ndarray) -> Optional[float]:
    """끼인각 ∠(a, vertex, c)"""
    return angle_between(a - vertex, c - vertex)


class AngleCalculator:
    """관절 각도 계산기"""

    def elbow_angle(self, skeleton: Skeleton, side: LimbSide) -> Optional[float]:
        """
        팔꿈치 꼭짓점에서 (팔꿈치→손목) · (팔꿈치→어깨) 끼인각

        Args:
            skeleton: 1프레임 스켈레톤
            side: 운동하는 팔

        Returns:
            각도(도) 또는 None (관절이 안 보이거나 퇴화된 경우)
        """
        limb = LIMB_JOINTS[side]
        if not is_visible(skeleton, (limb.wrist, limb.elbow, limb.shoulder)):
            return None

        return vertex_angle(
            skeleton.position(limb.wrist),
            skeleton.position(limb.elbow),
            skeleton.position(limb.shoulder),
        )

    def abduction_angle(self, skeleton: Skeleton, side: LimbSide) -> Optional[float]:
        """
        위팔과 몸통 사이 근사 외전각

        1) 양 엉덩이를 잇는 hip 벡터를 만든다
        2) (hip→어깨) 벡터를 hip 벡터에 사영해 엉덩이 선 위의 최근접점을 찾는다
        3) 어깨→최근접점 = 몸통 기준 벡터
        4) 몸통 기준 벡터와 (어깨→팔꿈치) 벡터의 끼인각

        hip 벡터 길이가 0에 가까우면 사영이 정의되지 않으므로 None.
        """
        limb = LIMB_JOINTS[side]
        required = (JointId.HIP_LEFT, JointId.HIP_RIGHT, limb.shoulder, limb.elbow)
        if not is_visible(skeleton, required):
            return None

        hip_left = skeleton.position(JointId.HIP_LEFT)
        hip_right = skeleton.position(JointId.HIP_RIGHT)
        shoulder = skeleton.position(limb.shoulder)
        elbow = skeleton.position(limb.elbow)

        hip_vec = hip_right - hip_left
        hip_len_sq = float(np.dot(hip_vec, hip_vec))
        if hip_len_sq < GEOMETRY_EPS ** 2:
            return None

        # 운동하는 쪽 엉덩이 기준으로 사영
        hip = skeleton.position(limb.hip)
        t = float(np.dot(shoulder - hip, hip_vec)) / hip_len_sq
        projected = hip + t * hip_vec

        torso_ref = projected - shoulder
        upper_arm = elbow - shoulder
        return angle_between(torso_ref, upper_arm)
