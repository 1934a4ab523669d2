import os
from pathlib import Path
from typing import Optional

"""환경 변수에서 bool 타입을 안전하게 읽는다."""


def env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


"""환경 변수에서 float 타입을 읽는다. 비어 있거나 숫자가 아니면 default."""


def env_float(name: str, default: Optional[float]) -> Optional[float]:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        return default


"""환경 변수에서 파일 경로를 Path 객체로 변환."""


def env_path(name: str, default: Path) -> Path:
    v = os.getenv(name)
    return Path(v) if v else default
