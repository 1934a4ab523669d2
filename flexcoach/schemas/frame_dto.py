"""
프레임 평가 API의 Request/Response DTO
Router ↔ Service 간 데이터 전달용
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from flexcoach.analyze.constants import JointId
from flexcoach.schemas.evaluation_dto import EvaluationResult
from flexcoach.schemas.render_dto import RenderInstructions
from flexcoach.schemas.skeleton_dto import JointSample, Skeleton
from flexcoach.utils.enums.enums import TrackingState


# ============ Request DTO ============
class JointInput(BaseModel):
    """센서가 준 관절 1개"""
    joint: JointId = Field(..., description="관절 이름 (예: ElbowLeft)")
    x: float
    y: float
    z: float
    tracking_state: TrackingState = Field(default=TrackingState.tracked, description="추적 상태")


class SkeletonInput(BaseModel):
    """관절 리스트 (빠진 관절은 NotTracked 처리)"""
    joints: List[JointInput] = Field(default_factory=list)

    def to_skeleton(self) -> Skeleton:
        samples = {}
        for j in self.joints:
            samples[j.joint] = JointSample(
                name=j.joint, position=(j.x, j.y, j.z), confidence=j.tracking_state
            )
        return Skeleton(joints=samples)

    class Config:
        json_schema_extra = {
            "example": {
                "joints": [
                    {"joint": "ShoulderLeft", "x": 0.0, "y": 1.0, "z": 2.0, "tracking_state": "Tracked"},
                    {"joint": "ElbowLeft", "x": 0.0, "y": 0.7, "z": 2.0, "tracking_state": "Tracked"},
                    {"joint": "WristLeft", "x": 0.3, "y": 0.7, "z": 2.0, "tracking_state": "Tracked"},
                ]
            }
        }


class TrackedBody(SkeletonInput):
    """센서 body 1개"""
    tracking_id: int = Field(..., ge=0, description="센서 tracking id")
    is_tracked: bool = Field(default=True, description="False면 이번 프레임에서 무시")


class FrameRequest(BaseModel):
    """1프레임의 body 목록"""
    bodies: List[TrackedBody] = Field(default_factory=list)


# ============ Response DTO ============
class PersonFeedback(BaseModel):
    """1명 평가 + 화면 지시"""
    tracking_id: Optional[int] = None
    result: EvaluationResult
    render: RenderInstructions


class FrameResponse(BaseModel):
    """1프레임 전체 결과"""
    persons: List[PersonFeedback] = Field(default_factory=list)
    added_ids: List[int] = Field(default_factory=list, description="이번 프레임에 새로 등장")
    removed_ids: List[int] = Field(default_factory=list, description="이번 프레임에 사라짐")
    arrow_enabled: bool = Field(..., description="화살표를 그릴 인물이 하나라도 있는지")
    title: str
