"""
스켈레톤 관련 DTO
센서 1프레임 · 1인 분량의 관절 스냅샷
"""
from typing import Dict, Mapping, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, Field, validator

from flexcoach.analyze.constants import ALL_JOINTS, JointId
from flexcoach.utils.enums.enums import TrackingState

Vector3 = Tuple[float, float, float]

_ORIGIN: Vector3 = (0.0, 0.0, 0.0)


class JointSample(BaseModel):
    """관절 1개 (위치 + 추적 신뢰도)"""
    name: JointId
    position: Vector3 = Field(..., description="센서 좌표 (x, y, z)")
    confidence: TrackingState = Field(
        default=TrackingState.tracked, description="Tracked / Inferred / NotTracked"
    )

    class Config:
        frozen = True

    def as_array(self) -> np.ndarray:
        return np.array(self.position, dtype=float)


class Skeleton(BaseModel):
    """1명의 관절 전체. 키는 항상 관절 어휘 25개 전부."""
    joints: Dict[JointId, JointSample]

    class Config:
        frozen = True

    @validator("joints")
    def fill_vocabulary(cls, v):
        """키/이름 불일치는 거부, 빠진 관절은 NotTracked로 채움"""
        for key, sample in v.items():
            if sample.name != key:
                raise ValueError(f"joint key {key.value} != sample name {sample.name.value}")
        full = dict(v)
        for joint in ALL_JOINTS:
            if joint not in full:
                full[joint] = JointSample(
                    name=joint, position=_ORIGIN, confidence=TrackingState.not_tracked
                )
        return full

    @classmethod
    def from_joints(
            cls,
            joints: Mapping[Union[str, JointId], Union[Tuple[float, float, float], Mapping]],
            default_state: TrackingState = TrackingState.tracked,
    ) -> "Skeleton":
        """
        느슨한 입력 → Skeleton

        Args:
            joints: {관절명: (x, y, z)} 또는 {관절명: {"x":.., "y":.., "z":.., "tracking_state":..}}
            default_state: tracking_state가 없을 때 사용할 상태

        Returns:
            Skeleton
        """
        samples: Dict[JointId, JointSample] = {}
        for raw_name, raw in joints.items():
            name = JointId(raw_name)
            if isinstance(raw, Mapping):
                position = (float(raw.get("x", 0.0)), float(raw.get("y", 0.0)), float(raw.get("z", 0.0)))
                state = TrackingState(raw.get("tracking_state", default_state))
            else:
                x, y, z = raw
                position = (float(x), float(y), float(z))
                state = default_state
            samples[name] = JointSample(name=name, position=position, confidence=state)
        return cls(joints=samples)

    def get(self, joint: JointId) -> Optional[JointSample]:
        return self.joints.get(joint)

    def position(self, joint: JointId) -> np.ndarray:
        return self.joints[joint].as_array()

    def confidence(self, joint: JointId) -> TrackingState:
        return self.joints[joint].confidence
