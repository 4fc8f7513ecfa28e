"""SVG path export for fitted curves."""

from __future__ import annotations

from collections.abc import Sequence

from daypath.core.geometry.bezier import bezier_arm
from daypath.core.geometry.models import CubicSegment, Point2D


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _pt(p: Point2D, precision: int) -> str:
    return f"{_fmt(p.x, precision)} {_fmt(p.y, precision)}"


def segments_to_svg_path(segments: Sequence[CubicSegment], precision: int = 2) -> str:
    """Build an SVG path (``M ... C ...``) tracing the fitted segments.

    Args:
        segments: Segments in path order.
        precision: Decimal places for coordinates (trailing zeros dropped).

    Returns:
        Path data string, or "" when there are no segments.

    Example:
        >>> a, b = Point2D(x=0, y=0), Point2D(x=10, y=5)
        >>> segments_to_svg_path([CubicSegment(p0=a, p1=a, p2=b, p3=b)])
        'M 0 0 C 0 0, 10 5, 10 5'
    """
    if not segments:
        return ""
    parts = [f"M {_pt(segments[0].p0, precision)}"]
    for seg in segments:
        parts.append(
            f"C {_pt(seg.p1, precision)}, {_pt(seg.p2, precision)}, {_pt(seg.p3, precision)}"
        )
    return " ".join(parts)


def smooth_quadratic_path(points: Sequence[Point2D], softness: float = 0.5, precision: int = 2) -> str:
    """Build a smooth quadratic SVG path through ``points``.

    The first span uses the chord midpoint as its control point; every later
    span uses a tangent-aligned arm from its start anchor whose length is
    proportional to the span's chord.

    Returns:
        Path data string, or "" for fewer than 2 points.
    """
    if len(points) < 2:
        return ""
    parts = [f"M {_pt(points[0], precision)}"]
    for i in range(1, len(points)):
        prev, curr = points[i - 1], points[i]
        if i == 1:
            arm = Point2D(x=(prev.x + curr.x) / 2, y=(prev.y + curr.y) / 2)
        else:
            arm = bezier_arm(points[i - 2], prev, curr, softness)
        parts.append(f"Q {_pt(arm, precision)}, {_pt(curr, precision)}")
    return " ".join(parts)
