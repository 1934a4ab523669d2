"""
교정 화살표 geometry
GuidanceVector → polyline 4점 + 폭 곡선 (머리 크기는 화살표 길이에 반비례)
"""
from typing import Optional

import numpy as np

from flexcoach.analyze.constants import DEFAULT_ARROW_HEAD_PERCENT, GEOMETRY_EPS
from flexcoach.schemas.evaluation_dto import GuidanceVector
from flexcoach.schemas.render_dto import ArrowGeometry

SHAFT_WIDTH = 0.4
HEAD_WIDTH = 1.0
NECK_T = 0.999


def _lerp(a: np.ndarray, b: np.ndarray, t: float) -> tuple:
    p = a + (b - a) * t
    return tuple(float(c) for c in p)


def build_arrow(
        guidance: Optional[GuidanceVector],
        *,
        scale: float = 1.0,
        head_percent: float = DEFAULT_ARROW_HEAD_PERCENT,
) -> Optional[ArrowGeometry]:
    """
    Args:
        guidance: 화살표 방향 (None이면 화살표 없음)
        scale: 센서 좌표 → 화면 좌표 배율
        head_percent: 머리 길이 (화면 단위)

    Returns:
        ArrowGeometry 또는 None (가이드 없음/길이 0)
    """
    if guidance is None:
        return None

    origin = np.array(guidance.origin, dtype=float) * scale
    end = np.array(guidance.target, dtype=float) * scale
    length = float(np.linalg.norm(end - origin))
    if length < GEOMETRY_EPS:
        return None

    # keyframe 순서가 뒤집히지 않도록 clamp
    adaptive = min(max(head_percent / length, 0.0), NECK_T)

    return ArrowGeometry(
        points=[
            tuple(float(c) for c in origin),
            _lerp(origin, end, NECK_T - adaptive),  # 목
            _lerp(origin, end, 1.0 - adaptive),     # 머리 최대폭
            tuple(float(c) for c in end),           # 끝
        ],
        width_keys=[
            (0.0, SHAFT_WIDTH),
            (NECK_T - adaptive, SHAFT_WIDTH),
            (1.0 - adaptive, HEAD_WIDTH),
            (1.0, 0.0),
        ],
    )
