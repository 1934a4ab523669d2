import pytest

from flexcoach.render.messages import (
    MESSAGE_TEXT,
    abduction_text,
    angle_text,
    arm_color,
    message_text,
    title_text,
)
from flexcoach.schemas.config_dto import ExerciseConfig
from flexcoach.schemas.evaluation_dto import AbductionResult, EvaluationResult
from flexcoach.utils.enums.enums import BoneColor, Classification, FeedbackMessage


def _result(**kwargs) -> EvaluationResult:
    base = dict(classification=Classification.in_range, message=FeedbackMessage.nominal)
    base.update(kwargs)
    return EvaluationResult(**base)


def test_every_message_has_text():
    for message in FeedbackMessage:
        assert message in MESSAGE_TEXT
    assert message_text(FeedbackMessage.nominal) == ""
    assert message_text(FeedbackMessage.align_arm)


@pytest.mark.parametrize("classification, expected", [
    (Classification.in_range, BoneColor.goal),
    (Classification.near, BoneColor.close),
    (Classification.out_of_range, BoneColor.not_yet),
    (Classification.unavailable, None),
    (Classification.invalid_side, None),
])
def test_arm_color(classification, expected):
    assert arm_color(classification) == expected


def test_angle_text_one_decimal():
    assert angle_text(_result(elbow_angle=87.46)) == "87.5°"
    assert angle_text(_result(classification=Classification.unavailable,
                              message=FeedbackMessage.arm_not_visible)) is None


class TestAbductionText:

    def test_shown_when_readout_enabled(self):
        config = ExerciseConfig(target_abduction_angle=30)
        result = _result(
            elbow_angle=60.0,
            abduction=AbductionResult(available=True, angle=52.04, within_tolerance=False),
            message=FeedbackMessage.abduction_out_of_tolerance,
            show_abduction_readout=True,
        )
        text = abduction_text(result, config)
        assert "52.0°" in text
        assert "30°" in text

    def test_hidden_without_readout(self):
        config = ExerciseConfig(target_abduction_angle=30)
        result = _result(
            abduction=AbductionResult(available=True, angle=31.0, within_tolerance=True),
            show_abduction_readout=False,
        )
        assert abduction_text(result, config) is None


def test_title_reflects_range():
    text = title_text(ExerciseConfig(min_angle=40, max_angle=100))
    assert "100°" in text
    assert "40°" in text
    assert text.index("100°") < text.index("40°")
