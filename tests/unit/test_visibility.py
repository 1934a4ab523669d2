import pytest

from flexcoach.analyze.constants import JointId, LIMB_JOINTS
from flexcoach.domain.visibility.checker import is_visible
from flexcoach.schemas.skeleton_dto import Skeleton
from flexcoach.utils.enums.enums import LimbSide, TrackingState
from tests.test_helpers import arm_skeleton

LEFT_ARM = (JointId.WRIST_LEFT, JointId.ELBOW_LEFT, JointId.SHOULDER_LEFT)


def test_all_tracked_is_visible(right_angle_arm):
    assert is_visible(right_angle_arm, LEFT_ARM) is True


@pytest.mark.parametrize("state", [TrackingState.inferred, TrackingState.not_tracked])
@pytest.mark.parametrize("joint", LEFT_ARM)
def test_single_untracked_joint_hides_set(joint, state):
    """하나라도 Inferred/NotTracked면 나머지와 무관하게 False"""
    skeleton = arm_skeleton(90.0, states={joint: state})
    assert is_visible(skeleton, LEFT_ARM) is False


def test_missing_joint_is_not_visible(right_angle_arm):
    # 헬퍼는 손가락 관절을 만들지 않으므로 NotTracked로 채워져 있다
    assert is_visible(right_angle_arm, (JointId.THUMB_LEFT,)) is False


def test_empty_set_is_visible(right_angle_arm):
    assert is_visible(right_angle_arm, ()) is True


def test_other_side_state_does_not_matter():
    limb = LIMB_JOINTS[LimbSide.right]
    skeleton = arm_skeleton(90.0, states={limb.elbow: TrackingState.not_tracked})
    assert is_visible(skeleton, LEFT_ARM) is True


def test_from_joints_fills_vocabulary():
    skeleton = Skeleton.from_joints({
        "ElbowLeft": (0.0, 0.2, 2.0),
        "WristLeft": {"x": 0.3, "y": 0.2, "z": 2.0, "tracking_state": "Inferred"},
    })
    assert len(skeleton.joints) == 25
    assert skeleton.confidence(JointId.ELBOW_LEFT) == TrackingState.tracked
    assert skeleton.confidence(JointId.WRIST_LEFT) == TrackingState.inferred
    assert skeleton.confidence(JointId.HEAD) == TrackingState.not_tracked
    assert skeleton.joints[JointId.HEAD].position == (0.0, 0.0, 0.0)
