"""Polygon spiral text layout engine."""

from polyspiral.engine.config import EngineConfig
from polyspiral.engine.context import (
    Contraction,
    Segment,
    Shape,
    SpiralConfig,
    SpiralLayout,
    measure_geometry,
)
from polyspiral.engine.errors import (
    DegenerateGeometry,
    InvalidConfiguration,
    LayoutError,
    SegmentLimitExceeded,
)
from polyspiral.engine.layout import iter_segments, layout, outer_width_profile

__all__ = [
    "EngineConfig",
    "Contraction",
    "Segment",
    "Shape",
    "SpiralConfig",
    "SpiralLayout",
    "DegenerateGeometry",
    "InvalidConfiguration",
    "LayoutError",
    "SegmentLimitExceeded",
    "iter_segments",
    "layout",
    "outer_width_profile",
    "measure_geometry",
]
