"""
렌더링 지시 DTO
평가 결과 → 화면 레이어(텍스트, 뼈대 색, 화살표)
"""
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from flexcoach.analyze.constants import JointId
from flexcoach.schemas.skeleton_dto import Vector3
from flexcoach.utils.enums.enums import BoneColor, JointColor


class BoneSegment(BaseModel):
    """뼈대 선분 1개 (child → parent)"""
    child: JointId
    parent: JointId
    start: Vector3
    end: Vector3
    start_color: JointColor
    end_color: JointColor
    highlight: Optional[BoneColor] = Field(default=None, description="운동 팔 강조 색")


class ArrowGeometry(BaseModel):
    """화살표 polyline 4점 + 폭 곡선 keyframe (t, width)"""
    points: List[Vector3]
    width_keys: List[Tuple[float, float]]


class RenderInstructions(BaseModel):
    """1명 분량 화면 지시"""
    angle_text: Optional[str] = None
    message_text: str
    abduction_text: Optional[str] = None
    arm_color: Optional[BoneColor] = None
    bones: List[BoneSegment] = Field(default_factory=list)
    arrow: Optional[ArrowGeometry] = None
