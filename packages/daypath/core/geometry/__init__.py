"""2D geometry primitives and cubic Bezier evaluation."""

from daypath.core.geometry.bezier import (
    bezier_arm,
    cubic_derivative,
    cubic_normal,
    cubic_point,
    cubic_second_derivative,
    distance,
    distance_squared,
    polyline_length,
)
from daypath.core.geometry.models import ORIGIN, CubicSegment, Point2D

__all__ = [
    "ORIGIN",
    "CubicSegment",
    "Point2D",
    "bezier_arm",
    "cubic_derivative",
    "cubic_normal",
    "cubic_point",
    "cubic_second_derivative",
    "distance",
    "distance_squared",
    "polyline_length",
]
