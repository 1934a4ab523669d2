"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from fastapi.testclient import TestClient

from flexcoach.schemas.config_dto import ExerciseConfig
from flexcoach.services.config_store import ConfigStore
from flexcoach.services.frame_service import FrameEvaluationService
from tests.test_helpers import arm_skeleton


# ========================================
# Application Fixtures
# ========================================

@pytest.fixture(scope="session")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from flexcoach.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def frame_service():
    """테스트마다 새 설정 저장소를 가진 서비스"""
    return FrameEvaluationService(config_store=ConfigStore(ExerciseConfig()), scene_scale=10.0)


@pytest.fixture
def client(app, frame_service):
    """FastAPI TestClient (서비스 의존성을 테스트용으로 교체)"""
    from flexcoach.common.dependencies import get_frame_service

    app.dependency_overrides[get_frame_service] = lambda: frame_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def default_config() -> ExerciseConfig:
    """min=45, max=90, 왼팔"""
    return ExerciseConfig()


@pytest.fixture
def right_angle_arm():
    """왼팔 90도"""
    return arm_skeleton(90.0)


@pytest.fixture
def straight_arm():
    """왼팔 180도 (일직선)"""
    return arm_skeleton(180.0)


# ========================================
# Utility Functions
# ========================================

@pytest.fixture
def assert_valid_angle():
    """각도 값 유효성 검증 헬퍼"""
    def _assert(angle, min_val: float = 0.0, max_val: float = 180.0):
        assert angle is not None, "Angle should be available"
        assert angle == angle, "Angle should not be NaN"
        assert min_val <= angle <= max_val, f"Angle {angle} out of range [{min_val}, {max_val}]"
    return _assert
