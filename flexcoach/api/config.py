from fastapi import APIRouter, Depends, HTTPException
import logging

from flexcoach.common.dependencies import get_config_store
from flexcoach.schemas.config_dto import ConfigUpdateResult, ConfigValueRequest, ExerciseConfig
from flexcoach.services.config_store import ConfigStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/config", tags=["Exercise Config"])

# URL 경로 → ConfigStore setter 이름
SETTERS = {
    "min-angle": "set_min_angle",
    "max-angle": "set_max_angle",
    "abduction-target": "set_abduction_target",
    "align-required": "set_align_required",
    "limb-side": "set_limb_side",
    "near-ratio": "set_near_ratio",
    "abduction-tolerance": "set_abduction_tolerance",
    "alignment-tolerance": "set_alignment_tolerance",
}


@router.get("", response_model=ExerciseConfig)
def read_config(store: ConfigStore = Depends(get_config_store)) -> ExerciseConfig:
    return store.snapshot()


@router.put("/{name}", response_model=ConfigUpdateResult)
def update_config(
        name: str,
        req: ConfigValueRequest,
        store: ConfigStore = Depends(get_config_store),
) -> ConfigUpdateResult:
    """
    설정값 1개 변경

    거부되면 422 + 사유 (설정은 이전 값 유지)
    """
    setter = SETTERS.get(name)
    if setter is None:
        raise HTTPException(status_code=404, detail=f"알 수 없는 설정: {name}")

    result = getattr(store, setter)(req.value)
    if not result.accepted:
        raise HTTPException(status_code=422, detail=f"{result.field}: {result.error}")
    return result


ROUTERS = [router]
