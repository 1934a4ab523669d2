from typing import Optional
import logging
import threading

from fastapi import Depends

from flexcoach.services.config_store import ConfigStore
from flexcoach.services.frame_service import FrameEvaluationService
from flexcoach.services.service_factory import create_frame_service

logger = logging.getLogger(__name__)

# 프로세스 전역 서비스 (설정 저장소는 서비스가 소유, 요청 간에 유지)
_frame_service: Optional[FrameEvaluationService] = None
_lock = threading.Lock()


def get_frame_service() -> FrameEvaluationService:
    global _frame_service
    with _lock:
        if _frame_service is None:
            logger.info("🚀 FrameEvaluationService 생성")
            _frame_service = create_frame_service()
    return _frame_service


def get_config_store(
        service: FrameEvaluationService = Depends(get_frame_service),
) -> ConfigStore:
    """제어 레이어가 쓰는 설정 저장소"""
    return service.config_store
