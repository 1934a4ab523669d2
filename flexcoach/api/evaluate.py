from fastapi import APIRouter, Depends, HTTPException
import logging

from pydantic import ValidationError

from flexcoach.common.dependencies import get_frame_service
from flexcoach.render.messages import title_text
from flexcoach.schemas.frame_dto import FrameRequest, FrameResponse, PersonFeedback, SkeletonInput
from flexcoach.services.frame_service import FrameEvaluationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/evaluate", tags=["Exercise Evaluation"])


# ========== API Endpoint ==========
@router.post("", response_model=PersonFeedback)
def evaluate_skeleton(
        req: SkeletonInput,
        service: FrameEvaluationService = Depends(get_frame_service),
) -> PersonFeedback:
    """스켈레톤 1개를 현재 설정으로 평가"""
    try:
        skeleton = req.to_skeleton()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"잘못된 스켈레톤: {e.errors()}")

    try:
        return service.evaluate_skeleton(skeleton)
    except Exception as e:
        logger.error(f"❌ 평가 실패: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"평가 실패: {e}")


@router.post("/frame", response_model=FrameResponse)
def evaluate_frame(
        req: FrameRequest,
        service: FrameEvaluationService = Depends(get_frame_service),
) -> FrameResponse:
    """센서 1프레임(여러 명) 평가 + 등장/퇴장 id"""
    try:
        return service.process_frame(req.bodies)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"잘못된 프레임: {e.errors()}")
    except Exception as e:
        logger.error(f"❌ 프레임 평가 실패: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"프레임 평가 실패: {e}")


@router.get("/title")
def exercise_title(service: FrameEvaluationService = Depends(get_frame_service)):
    return {"title": title_text(service.config_store.snapshot())}


ROUTERS = [router]
