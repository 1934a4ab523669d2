from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# helpers
from flexcoach.config.env_utils import env_bool, env_float, env_path
from flexcoach.analyze.constants import (
    DEFAULT_MIN_ANGLE,
    DEFAULT_MAX_ANGLE,
    DEFAULT_NEAR_RATIO,
    DEFAULT_ABDUCTION_TOLERANCE,
    DEFAULT_ALIGNMENT_TOLERANCE,
    DEFAULT_SCENE_SCALE,
    DEFAULT_ARROW_HEAD_PERCENT,
)


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수, 그것도 없으면 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any((parent / m).exists() for m in (".git", "pyproject.toml")):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "test")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = int(os.getenv("FASTAPI_PORT", 8000))
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    DATA_DIR: Path = env_path("DATA_DIR", ROOT / "data")
    RECORDINGS_DIR: Path = DATA_DIR / "recordings"

    # ── Exercise defaults (ConfigStore 초기값) ────────────
    EXERCISE_MIN_ANGLE: float = env_float("EXERCISE_MIN_ANGLE", DEFAULT_MIN_ANGLE)
    EXERCISE_MAX_ANGLE: float = env_float("EXERCISE_MAX_ANGLE", DEFAULT_MAX_ANGLE)
    EXERCISE_NEAR_RATIO: float = env_float("EXERCISE_NEAR_RATIO", DEFAULT_NEAR_RATIO)
    # 비어 있으면 외전 목표 없음
    EXERCISE_ABDUCTION_TARGET: Optional[float] = env_float("EXERCISE_ABDUCTION_TARGET", None)
    EXERCISE_ABDUCTION_TOLERANCE: float = env_float(
        "EXERCISE_ABDUCTION_TOLERANCE", DEFAULT_ABDUCTION_TOLERANCE
    )
    EXERCISE_REQUIRE_ALIGNMENT: bool = env_bool("EXERCISE_REQUIRE_ALIGNMENT", False)
    EXERCISE_ALIGNMENT_TOLERANCE: float = env_float(
        "EXERCISE_ALIGNMENT_TOLERANCE", DEFAULT_ALIGNMENT_TOLERANCE
    )
    EXERCISE_LIMB_SIDE: str = os.getenv("EXERCISE_LIMB_SIDE", "left").strip().lower()

    # ── Render params ─────────────────────────────────────
    SCENE_POSITION_SCALE: float = env_float("SCENE_POSITION_SCALE", DEFAULT_SCENE_SCALE)
    ARROW_HEAD_PERCENT: float = env_float("ARROW_HEAD_PERCENT", DEFAULT_ARROW_HEAD_PERCENT)


# 전역 싱글톤처럼 사용
settings = Settings()
