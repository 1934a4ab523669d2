"""
운동 설정 저장소

- 설정은 불변 ExerciseConfig 스냅샷 하나로 관리
- 변경은 '검증 → 새 스냅샷 생성 → 참조 교체' 순서로 lock 안에서 수행
- 평가 쪽은 snapshot()으로 받은 객체만 보므로 min만 바뀌고 max는 안 바뀐 중간 상태를 볼 일이 없다
"""
from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import ValidationError

from flexcoach.analyze.constants import (
    ABDUCTION_TARGET_LIMITS,
    MAX_ANGLE_LIMITS,
    MIN_ANGLE_LIMITS,
)
from flexcoach.common.errors import ConfigValidationError
from flexcoach.domain.evaluation.evaluator import resolve_side
from flexcoach.schemas.config_dto import ConfigUpdateResult, ExerciseConfig

logger = logging.getLogger(__name__)

# "none" 류 입력은 외전 목표 해제로 본다
_NONE_TOKENS = ("", "none", "null", "off")


def parse_int_input(field: str, value: Any) -> int:
    """입력 필드 값(정수 또는 텍스트) → int. 빈 입력/비정수는 거부."""
    if isinstance(value, bool):
        raise ConfigValidationError(field, "정수가 필요합니다")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigValidationError(field, f"정수가 필요합니다: {value}")
        return int(value)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigValidationError(field, "empty input")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ConfigValidationError(field, f"정수가 아닙니다: {value!r}")
    raise ConfigValidationError(field, f"지원하지 않는 입력 타입: {type(value).__name__}")


def parse_float_input(field: str, value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ConfigValidationError(field, "숫자가 필요합니다")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            return float(value.strip())
        except ValueError:
            raise ConfigValidationError(field, f"숫자가 아닙니다: {value!r}")
    raise ConfigValidationError(field, "empty input")


def parse_bool_input(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in ("1", "true", "yes", "y", "on"):
            return True
        if token in ("0", "false", "no", "n", "off"):
            return False
    raise ConfigValidationError(field, f"bool 값이 아닙니다: {value!r}")


def _check_limits(field: str, value: float, limits: Tuple[float, float]) -> None:
    lo, hi = limits
    if value < lo or value > hi:
        raise ConfigValidationError(field, f"{value}는 허용 범위 [{lo}, {hi}] 밖입니다")


class ConfigStore:
    """프로세스 전역 운동 설정 (유일한 writer는 제어 레이어)"""

    def __init__(self, initial: Optional[ExerciseConfig] = None):
        self._config = initial or ExerciseConfig()
        self._lock = threading.Lock()

    def snapshot(self) -> ExerciseConfig:
        """현재 설정 스냅샷 (불변 객체라 그대로 공유)"""
        return self._config

    # ── 제어 레이어 setter ─────────────────────────────────
    def set_min_angle(self, value: Any) -> ConfigUpdateResult:
        """최소 각도: 정수 0~90, 현재 max보다 크면 거부"""
        def build(cur: ExerciseConfig) -> Dict[str, Any]:
            angle = parse_int_input("min_angle", value)
            _check_limits("min_angle", angle, MIN_ANGLE_LIMITS)
            if angle > cur.max_angle:
                raise ConfigValidationError(
                    "min_angle", f"{angle}는 현재 max_angle({cur.max_angle:g})보다 큽니다"
                )
            return {"min_angle": angle}

        return self._apply("min_angle", build)

    def set_max_angle(self, value: Any) -> ConfigUpdateResult:
        """최대 각도: 정수 0~180, 현재 min보다 작으면 거부"""
        def build(cur: ExerciseConfig) -> Dict[str, Any]:
            angle = parse_int_input("max_angle", value)
            _check_limits("max_angle", angle, MAX_ANGLE_LIMITS)
            if angle < cur.min_angle:
                raise ConfigValidationError(
                    "max_angle", f"{angle}는 현재 min_angle({cur.min_angle:g})보다 작습니다"
                )
            return {"max_angle": angle}

        return self._apply("max_angle", build)

    def set_abduction_target(self, value: Any) -> ConfigUpdateResult:
        """외전 목표: 정수 0~180, 또는 None/'none'으로 해제"""
        def build(cur: ExerciseConfig) -> Dict[str, Any]:
            if value is None or (isinstance(value, str) and value.strip().lower() in _NONE_TOKENS):
                return {"target_abduction_angle": None}
            angle = parse_int_input("target_abduction_angle", value)
            _check_limits("target_abduction_angle", angle, ABDUCTION_TARGET_LIMITS)
            return {"target_abduction_angle": angle}

        return self._apply("target_abduction_angle", build)

    def set_align_required(self, value: Any) -> ConfigUpdateResult:
        return self._apply(
            "require_body_alignment",
            lambda cur: {"require_body_alignment": parse_bool_input("require_body_alignment", value)},
        )

    def set_limb_side(self, value: Any) -> ConfigUpdateResult:
        """팔 방향: 'left'/'right' 또는 드롭다운 인덱스 0/1"""
        def build(cur: ExerciseConfig) -> Dict[str, Any]:
            raw = value
            if isinstance(raw, str) and raw.strip().isdigit():
                raw = int(raw.strip())
            side = resolve_side(raw)
            if side is None:
                raise ConfigValidationError("limb_side", f"알 수 없는 팔 방향: {value!r}")
            return {"limb_side": side}

        return self._apply("limb_side", build)

    def set_near_ratio(self, value: Any) -> ConfigUpdateResult:
        return self._apply(
            "near_ratio", lambda cur: {"near_ratio": parse_float_input("near_ratio", value)}
        )

    def set_abduction_tolerance(self, value: Any) -> ConfigUpdateResult:
        return self._apply(
            "abduction_tolerance",
            lambda cur: {"abduction_tolerance": parse_float_input("abduction_tolerance", value)},
        )

    def set_alignment_tolerance(self, value: Any) -> ConfigUpdateResult:
        return self._apply(
            "alignment_distance_tolerance",
            lambda cur: {
                "alignment_distance_tolerance": parse_float_input("alignment_distance_tolerance", value)
            },
        )

    # ── 내부 ───────────────────────────────────────────────
    def _apply(
            self, field: str, build: Callable[[ExerciseConfig], Dict[str, Any]]
    ) -> ConfigUpdateResult:
        """검증 후 새 스냅샷으로 교체. 실패하면 기존 설정 유지 + 실패 사유 반환."""
        with self._lock:
            current = self._config
            try:
                changes = build(current)
                # model_copy는 검증을 안 하므로 dump → 재생성으로 전체 불변식 재검사
                updated = ExerciseConfig(**{**current.model_dump(), **changes})
            except ConfigValidationError as e:
                logger.warning(f"⚠️ 설정 변경 거부: {e}")
                return ConfigUpdateResult(accepted=False, field=field, error=e.reason, config=current)
            except ValidationError as e:
                reason = "; ".join(err["msg"] for err in e.errors())
                logger.warning(f"⚠️ 설정 변경 거부: {field}: {reason}")
                return ConfigUpdateResult(accepted=False, field=field, error=reason, config=current)

            self._config = updated

        logger.info(f"✅ 설정 변경: {field}={getattr(updated, field)!r}")
        return ConfigUpdateResult(accepted=True, field=field, config=updated)


def create_config_store(s) -> ConfigStore:
    """settings 기반 초기 설정. ENV 값이 불변식을 깨면 기본값으로 시작."""
    try:
        initial = ExerciseConfig.from_settings(s)
    except ValidationError as e:
        logger.warning(f"⚠️ ENV 운동 설정이 유효하지 않아 기본값 사용: {e.errors()}")
        initial = ExerciseConfig()
    return ConfigStore(initial)
