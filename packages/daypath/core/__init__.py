"""daypath core: anchors -> smooth curve -> time-of-day mapping."""

from daypath.core.curves import (
    DAY_SECONDS,
    CurveSpec,
    FitStrategy,
    LookupTable,
    build_lut,
    build_param_lut,
    fit,
    point_at_time,
    time_at_point,
)
from daypath.core.geometry import CubicSegment, Point2D
from daypath.core.timeline import CurveTimeline

__all__ = [
    "DAY_SECONDS",
    "CubicSegment",
    "CurveSpec",
    "CurveTimeline",
    "FitStrategy",
    "LookupTable",
    "Point2D",
    "build_lut",
    "build_param_lut",
    "fit",
    "point_at_time",
    "time_at_point",
]
