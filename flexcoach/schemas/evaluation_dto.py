"""
평가 결과 DTO
Evaluator → 렌더링 레이어 전달용 (프레임 단위로 새로 생성)
"""
from typing import Optional

from pydantic import BaseModel, Field

from flexcoach.schemas.skeleton_dto import Vector3
from flexcoach.utils.enums.enums import (
    AlignmentStatus,
    Classification,
    FeedbackMessage,
    LimbSide,
)


class GuidanceVector(BaseModel):
    """교정 방향 화살표 (origin → target)"""
    origin: Vector3
    target: Vector3
    reversed: bool = Field(..., description="True면 어깨→손목 방향 (목표 최소각 미달)")

    class Config:
        frozen = True


class AbductionResult(BaseModel):
    """외전 각도 측정값. 계산 불가면 available=False, angle=None"""
    available: bool
    angle: Optional[float] = None
    within_tolerance: Optional[bool] = None

    class Config:
        frozen = True


class EvaluationResult(BaseModel):
    """1명 · 1프레임 평가 결과"""
    side: Optional[LimbSide] = None
    elbow_angle: Optional[float] = Field(default=None, description="팔꿈치 각도 (도)")
    classification: Classification
    guidance: Optional[GuidanceVector] = None

    alignment_status: Optional[AlignmentStatus] = None
    alignment_distance: Optional[float] = None
    abduction: Optional[AbductionResult] = None

    # 프레임당 하나의 안내 메시지 + 외전 수치 노출 여부
    message: FeedbackMessage
    show_abduction_readout: bool = False

    class Config:
        frozen = True
