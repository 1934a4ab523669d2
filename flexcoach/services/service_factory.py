from typing import Optional

from flexcoach.config.settings import settings
from flexcoach.domain.angle.calculator import AngleCalculator
from flexcoach.domain.evaluation.evaluator import ExerciseEvaluator
from flexcoach.domain.plane.estimator import BodyPlaneEstimator
from flexcoach.render.scene import BodyRegistry
from flexcoach.services.config_store import ConfigStore, create_config_store
from flexcoach.services.frame_service import FrameEvaluationService


def create_frame_service(config_store: Optional[ConfigStore] = None) -> FrameEvaluationService:
    """
    FrameEvaluationService 인스턴스 생성

    Args:
        config_store: 공유할 설정 저장소 (없으면 settings 기반으로 새로 생성)

    Returns:
        FrameEvaluationService 인스턴스
    """
    # Domain 컴포넌트 초기화
    evaluator = ExerciseEvaluator(
        angle_calculator=AngleCalculator(),
        plane_estimator=BodyPlaneEstimator(),
    )

    return FrameEvaluationService(
        config_store=config_store or create_config_store(settings),
        evaluator=evaluator,
        registry=BodyRegistry(),
        scene_scale=settings.SCENE_POSITION_SCALE,
        arrow_head_percent=settings.ARROW_HEAD_PERCENT,
    )
