import numpy as np
import pytest

from flexcoach.analyze.constants import JointId
from flexcoach.domain.plane.estimator import BodyPlaneEstimator, Plane
from flexcoach.utils.enums.enums import LimbSide, TrackingState
from tests.test_helpers import arm_skeleton


@pytest.fixture
def estimator():
    return BodyPlaneEstimator()


def test_plane_through_torso(estimator, right_angle_arm):
    plane = estimator.estimate_plane(right_angle_arm, LimbSide.left)
    assert plane is not None
    assert np.linalg.norm(plane.normal) == pytest.approx(1.0)
    # 헬퍼 몸통은 z=2 평면
    assert abs(plane.normal[2]) == pytest.approx(1.0)


@pytest.mark.parametrize("a, b", [(0.0, 0.0), (1.0, 0.0), (0.3, 0.6), (-2.0, 5.0)])
def test_point_on_plane_has_zero_distance(estimator, a, b):
    skeleton = arm_skeleton(90.0, overrides={
        JointId.SPINE_BASE: (0.1, -0.2, 2.3),
        JointId.SHOULDER_LEFT: (-0.25, 0.45, 2.1),
        JointId.SHOULDER_RIGHT: (0.22, 0.5, 1.9),
    })
    plane = estimator.estimate_plane(skeleton, LimbSide.left)
    base = skeleton.position(JointId.SPINE_BASE)
    left = skeleton.position(JointId.SHOULDER_LEFT)
    right = skeleton.position(JointId.SHOULDER_RIGHT)
    point = base + a * (left - base) + b * (right - base)
    assert estimator.distance_to_plane(plane, point) == pytest.approx(0.0, abs=1e-4)


def test_distance_is_unsigned(estimator):
    plane = Plane(normal=np.array([0.0, 0.0, 1.0]), point=np.array([0.0, 0.0, 2.0]))
    assert estimator.distance_to_plane(plane, (0.0, 0.0, 2.5)) == pytest.approx(0.5)
    assert estimator.distance_to_plane(plane, (0.0, 0.0, 1.5)) == pytest.approx(0.5)


def test_collinear_landmarks_give_no_plane(estimator):
    skeleton = arm_skeleton(90.0, overrides={
        JointId.SPINE_BASE: (0.0, 0.5, 2.0),
        JointId.SHOULDER_LEFT: (-0.2, 0.5, 2.0),
        JointId.SHOULDER_RIGHT: (0.2, 0.5, 2.0),
    })
    assert estimator.estimate_plane(skeleton, LimbSide.left) is None


def test_untracked_spine_gives_no_plane(estimator):
    skeleton = arm_skeleton(90.0, states={JointId.SPINE_BASE: TrackingState.inferred})
    assert estimator.estimate_plane(skeleton, LimbSide.left) is None


class TestIsAligned:
    """반대쪽 팔꿈치 기준 정렬"""

    def test_off_elbow_on_plane_is_aligned(self, estimator, right_angle_arm):
        plane = estimator.estimate_plane(right_angle_arm, LimbSide.left)
        assert estimator.is_aligned(right_angle_arm, LimbSide.left, plane, 0.05) is True

    def test_off_elbow_in_front_is_misaligned(self, estimator):
        skeleton = arm_skeleton(90.0, overrides={JointId.ELBOW_RIGHT: (0.2, 0.2, 2.3)})
        plane = estimator.estimate_plane(skeleton, LimbSide.left)
        assert estimator.is_aligned(skeleton, LimbSide.left, plane, 0.1) is False
        assert estimator.is_aligned(skeleton, LimbSide.left, plane, 0.3) is True

    def test_uses_opposite_elbow(self, estimator):
        # 운동하는 왼팔 팔꿈치가 평면 밖이어도 오른쪽 팔꿈치만 본다
        skeleton = arm_skeleton(90.0, overrides={JointId.ELBOW_LEFT: (-0.2, 0.2, 3.0)})
        plane = estimator.estimate_plane(skeleton, LimbSide.left)
        assert estimator.is_aligned(skeleton, LimbSide.left, plane, 0.1) is True
        assert estimator.is_aligned(skeleton, LimbSide.right, plane, 0.1) is False

    def test_untracked_off_elbow_is_undetermined(self, estimator):
        skeleton = arm_skeleton(90.0, states={JointId.ELBOW_RIGHT: TrackingState.not_tracked})
        plane = estimator.estimate_plane(skeleton, LimbSide.left)
        assert estimator.is_aligned(skeleton, LimbSide.left, plane, 0.1) is None
