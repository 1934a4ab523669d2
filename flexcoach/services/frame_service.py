"""
프레임 평가 Service
센서 body 목록 → 인물별 평가 + 화면 지시
"""
import logging
from typing import Iterable, Optional

from flexcoach.domain.evaluation.evaluator import ExerciseEvaluator
from flexcoach.render import messages
from flexcoach.render.arrow import build_arrow
from flexcoach.render.scene import BodyRegistry, build_bones
from flexcoach.schemas.config_dto import ExerciseConfig
from flexcoach.schemas.frame_dto import FrameResponse, PersonFeedback, TrackedBody
from flexcoach.schemas.render_dto import RenderInstructions
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.services.config_store import ConfigStore

logger = logging.getLogger(__name__)


class FrameEvaluationService:
    """
    프레임마다 1번 호출.
    - 프레임 시작 시 설정 스냅샷 1개를 잡고 모든 인물에 같은 스냅샷 사용
    - 인물 간 공유 상태는 없음 (registry는 id 집합만 기억)
    """

    def __init__(
            self,
            config_store: ConfigStore,
            evaluator: Optional[ExerciseEvaluator] = None,
            registry: Optional[BodyRegistry] = None,
            scene_scale: float = 1.0,
            arrow_head_percent: float = 0.4,
    ):
        self.config_store = config_store
        self.evaluator = evaluator or ExerciseEvaluator()
        self.registry = registry or BodyRegistry()
        self.scene_scale = scene_scale
        self.arrow_head_percent = arrow_head_percent

    def evaluate_skeleton(
            self, skeleton: Skeleton, config: Optional[ExerciseConfig] = None,
            tracking_id: Optional[int] = None,
    ) -> PersonFeedback:
        """단일 스켈레톤 평가 (config 미지정 시 현재 스냅샷)"""
        config = config or self.config_store.snapshot()
        result = self.evaluator.evaluate(skeleton, config)

        color = messages.arm_color(result.classification)
        render = RenderInstructions(
            angle_text=messages.angle_text(result),
            message_text=messages.message_text(result.message),
            abduction_text=messages.abduction_text(result, config),
            arm_color=color,
            bones=build_bones(skeleton, scale=self.scene_scale, side=result.side, highlight=color),
            arrow=build_arrow(
                result.guidance, scale=self.scene_scale, head_percent=self.arrow_head_percent
            ),
        )
        return PersonFeedback(tracking_id=tracking_id, result=result, render=render)

    def process_frame(self, bodies: Iterable[TrackedBody]) -> FrameResponse:
        config = self.config_store.snapshot()
        tracked = [b for b in bodies if b.is_tracked]

        added, removed = self.registry.sync(b.tracking_id for b in tracked)

        persons = [
            self.evaluate_skeleton(body.to_skeleton(), config, tracking_id=body.tracking_id)
            for body in tracked
        ]
        logger.debug(f"frame: tracked={len(tracked)} added={added} removed={removed}")

        return FrameResponse(
            persons=persons,
            added_ids=added,
            removed_ids=removed,
            arrow_enabled=any(p.render.arrow is not None for p in persons),
            title=messages.title_text(config),
        )
