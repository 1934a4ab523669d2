"""
왜 분리했나?
- '상태 → 문장/색'은 표현 레이어다. 메시지 문구는 자유롭게 바꿔도 되고,
  계약은 어떤 조건에서 어떤 메시지가 우선하느냐(Evaluator)뿐이다.
"""
from typing import Optional

from flexcoach.schemas.config_dto import ExerciseConfig
from flexcoach.schemas.evaluation_dto import EvaluationResult
from flexcoach.utils.enums.enums import BoneColor, Classification, FeedbackMessage

MESSAGE_TEXT = {
    FeedbackMessage.invalid_side: "오류: 잘못된 팔 선택입니다.",
    FeedbackMessage.arm_not_visible: "팔이 화면에 보이도록 자세를 조정해 주세요.",
    FeedbackMessage.body_not_visible: "몸 전체가 보이도록 뒤로 물러나 주세요.",
    FeedbackMessage.align_arm: "팔을 몸통과 같은 평면에 맞춰 주세요.",
    FeedbackMessage.abduction_unavailable: "엉덩이/어깨가 감지되지 않습니다.",
    FeedbackMessage.abduction_out_of_tolerance: "팔과 몸통 사이 각도를 목표에 맞춰 주세요.",
    FeedbackMessage.nominal: "",
}

ARM_COLORS = {
    Classification.in_range: BoneColor.goal,
    Classification.near: BoneColor.close,
    Classification.out_of_range: BoneColor.not_yet,
}


def message_text(message: FeedbackMessage) -> str:
    return MESSAGE_TEXT[message]


def arm_color(classification: Classification) -> Optional[BoneColor]:
    """InRange→goal, Near→close, OutOfRange→not yet. 판정 불가면 None."""
    return ARM_COLORS.get(classification)


def angle_text(result: EvaluationResult) -> Optional[str]:
    if result.elbow_angle is None:
        return None
    return f"{result.elbow_angle:.1f}°"


def abduction_text(result: EvaluationResult, config: ExerciseConfig) -> Optional[str]:
    """외전 수치는 통과/실패와 무관하게, 노출 조건일 때만"""
    if not result.show_abduction_readout or result.abduction is None:
        return None
    return f"외전 {result.abduction.angle:.1f}° (목표 {config.target_abduction_angle:g}°)"


def title_text(config: ExerciseConfig) -> str:
    """현재 목표 범위를 담은 운동 제목"""
    return (
        "근력 운동\n"
        f"이 운동에서는 팔을 {config.max_angle:g}°에서 {config.min_angle:g}°까지 굽히는 연습을 합니다."
    )
