"""
운동 평가 Domain Logic
각도 · 가시성 · 몸통 평면 · 외전 체크를 합쳐 프레임별 피드백 상태를 만든다
"""
import logging
from typing import Optional, Tuple

from flexcoach.analyze.constants import LIMB_JOINTS, SIDE_BY_INDEX
from flexcoach.domain.angle.calculator import AngleCalculator
from flexcoach.domain.plane.estimator import BodyPlaneEstimator
from flexcoach.schemas.config_dto import ExerciseConfig
from flexcoach.schemas.evaluation_dto import AbductionResult, EvaluationResult, GuidanceVector
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.utils.enums.enums import (
    AlignmentStatus,
    Classification,
    FeedbackMessage,
    LimbSide,
)

logger = logging.getLogger(__name__)


def resolve_side(value) -> Optional[LimbSide]:
    """LimbSide / 'left'·'right' / 드롭다운 인덱스(0, 1) → LimbSide. 그 외는 None."""
    if isinstance(value, LimbSide):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return SIDE_BY_INDEX[value] if 0 <= value < len(SIDE_BY_INDEX) else None
    if isinstance(value, str):
        try:
            return LimbSide(value.strip().lower())
        except ValueError:
            return None
    return None


def classify_angle(angle: float, config: ExerciseConfig) -> Classification:
    """
    - min ≤ angle ≤ max              → InRange
    - max < angle ≤ max + ratio*폭   → Near (위쪽으로만, 덜 굽힌 쪽은 Near 없음)
    - 나머지                          → OutOfRange
    """
    if config.min_angle <= angle <= config.max_angle:
        return Classification.in_range
    if angle > config.min_angle and angle <= config.near_upper_bound:
        return Classification.near
    return Classification.out_of_range


def build_guidance(
        skeleton: Skeleton,
        side: LimbSide,
        angle: float,
        classification: Classification,
        config: ExerciseConfig,
) -> Optional[GuidanceVector]:
    """
    목표 범위 밖일 때만 화살표 생성.
    angle ≥ min 이면 손목→어깨, angle < min 이면 반대로 어깨→손목(reversed).
    """
    if classification == Classification.in_range:
        return None

    limb = LIMB_JOINTS[side]
    wrist = skeleton.joints[limb.wrist].position
    shoulder = skeleton.joints[limb.shoulder].position

    if angle >= config.min_angle:
        return GuidanceVector(origin=wrist, target=shoulder, reversed=False)
    return GuidanceVector(origin=shoulder, target=wrist, reversed=True)


class ExerciseEvaluator:
    """1명 · 1프레임 평가기 (상태 없음, 설정은 호출마다 주입)"""

    def __init__(
            self,
            angle_calculator: Optional[AngleCalculator] = None,
            plane_estimator: Optional[BodyPlaneEstimator] = None,
    ):
        self.angle_calculator = angle_calculator or AngleCalculator()
        self.plane_estimator = plane_estimator or BodyPlaneEstimator()

    def evaluate(self, skeleton: Skeleton, config: ExerciseConfig) -> EvaluationResult:
        """
        평가 순서 (메시지 우선순위도 같은 순서)
          1. 팔 방향 검증          → InvalidSide
          2. 팔꿈치 각도           → Unavailable
          3. 범위 판정 + 화살표
          4. 몸통 평면 정렬 (옵션) → body_not_visible / align_arm
          5. 외전 각도 (옵션)      → abduction_unavailable / abduction_out_of_tolerance
        """
        side = resolve_side(config.limb_side)
        if side is None:
            logger.debug(f"invalid limb side: {config.limb_side!r}")
            return EvaluationResult(
                classification=Classification.invalid_side,
                message=FeedbackMessage.invalid_side,
            )

        angle = self.angle_calculator.elbow_angle(skeleton, side)
        if angle is None:
            return EvaluationResult(
                side=side,
                classification=Classification.unavailable,
                message=FeedbackMessage.arm_not_visible,
            )

        classification = classify_angle(angle, config)
        guidance = build_guidance(skeleton, side, angle, classification, config)

        message = FeedbackMessage.nominal
        alignment_status, alignment_distance = None, None
        if config.require_body_alignment:
            alignment_status, alignment_distance = self._check_alignment(skeleton, side, config)
            if alignment_status == AlignmentStatus.undetermined:
                message = FeedbackMessage.body_not_visible
            elif alignment_status == AlignmentStatus.misaligned:
                message = FeedbackMessage.align_arm

        abduction = None
        show_readout = False
        if config.target_abduction_angle is not None and message == FeedbackMessage.nominal:
            abduction = self._check_abduction(skeleton, side, config)
            if not abduction.available:
                message = FeedbackMessage.abduction_unavailable
            else:
                show_readout = True
                if not abduction.within_tolerance:
                    message = FeedbackMessage.abduction_out_of_tolerance

        logger.debug(
            f"side={side.value} angle={angle:.1f} class={classification.value} message={message.value}"
        )
        return EvaluationResult(
            side=side,
            elbow_angle=angle,
            classification=classification,
            guidance=guidance,
            alignment_status=alignment_status,
            alignment_distance=alignment_distance,
            abduction=abduction,
            message=message,
            show_abduction_readout=show_readout,
        )

    def _check_alignment(
            self, skeleton: Skeleton, side: LimbSide, config: ExerciseConfig
    ) -> Tuple[AlignmentStatus, Optional[float]]:
        # 평면은 매 프레임 새로 계산 (몸이 움직이면 이전 평면은 무효)
        plane = self.plane_estimator.estimate_plane(skeleton, side)
        if plane is None:
            return AlignmentStatus.undetermined, None

        distance = self.plane_estimator.off_elbow_distance(skeleton, side, plane)
        if distance is None:
            return AlignmentStatus.undetermined, None

        if distance <= config.alignment_distance_tolerance:
            return AlignmentStatus.aligned, distance
        return AlignmentStatus.misaligned, distance

    def _check_abduction(
            self, skeleton: Skeleton, side: LimbSide, config: ExerciseConfig
    ) -> AbductionResult:
        angle = self.angle_calculator.abduction_angle(skeleton, side)
        if angle is None:
            return AbductionResult(available=False)

        within = abs(angle - config.target_abduction_angle) <= config.abduction_tolerance
        return AbductionResult(available=True, angle=angle, within_tolerance=within)
