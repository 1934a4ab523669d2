"""
Service Layer Tests

FrameEvaluationService: 설정 스냅샷 + 평가 + 화면 지시 조립
"""
import pytest

from flexcoach.analyze.constants import JointId
from flexcoach.schemas.frame_dto import TrackedBody
from flexcoach.utils.enums.enums import BoneColor, Classification, FeedbackMessage, TrackingState
from tests.test_helpers import arm_skeleton, skeleton_payload


def _body(tracking_id, angle, is_tracked=True, **kwargs):
    payload = skeleton_payload(arm_skeleton(angle, **kwargs))
    return TrackedBody(tracking_id=tracking_id, is_tracked=is_tracked, **payload)


class TestEvaluateSkeleton:

    def test_in_range_render(self, frame_service, right_angle_arm):
        feedback = frame_service.evaluate_skeleton(right_angle_arm)

        assert feedback.tracking_id is None
        assert feedback.result.classification == Classification.in_range
        assert feedback.render.angle_text == "90.0°"
        assert feedback.render.message_text == ""
        assert feedback.render.arm_color == BoneColor.goal
        assert feedback.render.arrow is None
        assert len(feedback.render.bones) == 24

    def test_out_of_range_has_scaled_arrow(self, frame_service, straight_arm):
        feedback = frame_service.evaluate_skeleton(straight_arm)

        assert feedback.render.arm_color == BoneColor.not_yet
        arrow = feedback.render.arrow
        assert arrow is not None
        # 손목(-0.2,-0.1,2) → 어깨(-0.2,0.5,2), 화면 배율 10
        assert arrow.points[0] == pytest.approx((-2.0, -1.0, 20.0))
        assert arrow.points[3] == pytest.approx((-2.0, 5.0, 20.0))

    def test_uses_current_config(self, frame_service):
        frame_service.config_store.set_max_angle(120)
        feedback = frame_service.evaluate_skeleton(arm_skeleton(110.0))
        assert feedback.result.classification == Classification.in_range

    def test_unavailable_has_no_arm_color(self, frame_service):
        skeleton = arm_skeleton(90.0, states={JointId.WRIST_LEFT: TrackingState.not_tracked})
        feedback = frame_service.evaluate_skeleton(skeleton)

        assert feedback.render.arm_color is None
        assert feedback.render.angle_text is None
        assert feedback.render.message_text


class TestProcessFrame:

    def test_added_and_removed_ids(self, frame_service):
        first = frame_service.process_frame([_body(1, 90.0), _body(2, 60.0)])
        assert first.added_ids == [1, 2]
        assert first.removed_ids == []

        second = frame_service.process_frame([_body(2, 60.0), _body(5, 90.0)])
        assert second.added_ids == [5]
        assert second.removed_ids == [1]

        third = frame_service.process_frame([])
        assert third.persons == []
        assert third.removed_ids == [2, 5]

    def test_untracked_bodies_are_skipped(self, frame_service):
        response = frame_service.process_frame([_body(1, 90.0), _body(2, 90.0, is_tracked=False)])

        assert [p.tracking_id for p in response.persons] == [1]
        assert response.added_ids == [1]

    def test_arrow_enabled_if_any_person_needs_guidance(self, frame_service):
        calm = frame_service.process_frame([_body(1, 90.0), _body(2, 60.0)])
        assert calm.arrow_enabled is False

        mixed = frame_service.process_frame([_body(1, 90.0), _body(2, 170.0)])
        assert mixed.arrow_enabled is True

    def test_persons_evaluated_independently(self, frame_service):
        response = frame_service.process_frame([
            _body(1, 90.0),
            _body(2, 90.0, states={JointId.ELBOW_LEFT: TrackingState.inferred}),
        ])
        by_id = {p.tracking_id: p for p in response.persons}

        assert by_id[1].result.message == FeedbackMessage.nominal
        assert by_id[2].result.message == FeedbackMessage.arm_not_visible

    def test_title_follows_config(self, frame_service):
        frame_service.config_store.set_min_angle(30)
        response = frame_service.process_frame([])
        assert "90°" in response.title
        assert "30°" in response.title
