"""
운동 설정 DTO
ConfigStore ↔ Evaluator ↔ API 간 전달용 (불변 스냅샷)
"""
from typing import Optional, Union

from pydantic import BaseModel, Field, validator

from flexcoach.analyze.constants import (
    DEFAULT_MIN_ANGLE,
    DEFAULT_MAX_ANGLE,
    DEFAULT_NEAR_RATIO,
    DEFAULT_ABDUCTION_TOLERANCE,
    DEFAULT_ALIGNMENT_TOLERANCE,
)
from flexcoach.utils.enums.enums import LimbSide


class ExerciseConfig(BaseModel):
    """팔꿈치 굴곡 운동 목표 설정"""
    min_angle: float = Field(default=DEFAULT_MIN_ANGLE, ge=0.0, le=180.0, description="목표 최소 각도 (도)")
    max_angle: float = Field(default=DEFAULT_MAX_ANGLE, ge=0.0, le=180.0, description="목표 최대 각도 (도)")

    # 범위 폭 대비 '근접' 허용 비율 (max 위쪽에만 적용)
    near_ratio: float = Field(default=DEFAULT_NEAR_RATIO, ge=0.0, description="근접 구간 비율")

    # 외전(팔-몸통) 목표 각도, None이면 외전 체크 안 함
    target_abduction_angle: Optional[float] = Field(
        default=None, ge=0.0, le=180.0, description="목표 외전 각도 (도)"
    )
    abduction_tolerance: float = Field(
        default=DEFAULT_ABDUCTION_TOLERANCE, ge=0.0, description="외전 허용 오차 (도)"
    )

    require_body_alignment: bool = Field(default=False, description="몸통 평면 정렬 필요 여부")
    alignment_distance_tolerance: float = Field(
        default=DEFAULT_ALIGNMENT_TOLERANCE, ge=0.0, description="평면 거리 허용치 (센서 단위)"
    )

    limb_side: LimbSide = Field(default=LimbSide.left, description="운동하는 팔 (left/right)")

    @validator("max_angle")
    def validate_min_le_max(cls, v, values):
        """min_angle <= max_angle 불변식"""
        min_angle = values.get("min_angle")
        if min_angle is not None and v < min_angle:
            raise ValueError(f"max_angle({v})는 min_angle({min_angle})보다 작을 수 없습니다")
        return v

    @property
    def near_upper_bound(self) -> float:
        """'근접' 판정 상한 = max + near_ratio * (max - min)"""
        return self.max_angle + self.near_ratio * (self.max_angle - self.min_angle)

    @classmethod
    def from_settings(cls, s) -> "ExerciseConfig":
        return cls(
            min_angle=s.EXERCISE_MIN_ANGLE,
            max_angle=s.EXERCISE_MAX_ANGLE,
            near_ratio=s.EXERCISE_NEAR_RATIO,
            target_abduction_angle=s.EXERCISE_ABDUCTION_TARGET,
            abduction_tolerance=s.EXERCISE_ABDUCTION_TOLERANCE,
            require_body_alignment=s.EXERCISE_REQUIRE_ALIGNMENT,
            alignment_distance_tolerance=s.EXERCISE_ALIGNMENT_TOLERANCE,
            limb_side=s.EXERCISE_LIMB_SIDE,
        )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "min_angle": 45,
                "max_angle": 90,
                "near_ratio": 0.667,
                "target_abduction_angle": None,
                "abduction_tolerance": 10,
                "require_body_alignment": False,
                "alignment_distance_tolerance": 0.1,
                "limb_side": "left",
            }
        }


class ConfigValueRequest(BaseModel):
    """설정 변경 요청 (입력 필드의 원문 텍스트도 허용)"""
    value: Optional[Union[bool, int, float, str]] = Field(
        default=None, description="새 값 (정수, 텍스트, bool, 또는 None)"
    )


class ConfigUpdateResult(BaseModel):
    """설정 변경 결과. 거부되면 config는 이전 값 그대로."""
    accepted: bool
    field: str
    error: Optional[str] = None
    config: ExerciseConfig
