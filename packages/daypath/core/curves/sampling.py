"""Adaptive flattening of a cubic segment into a polyline.

Recursive midpoint subdivision: an interval is split while the curve's
midpoint deviates from the chord by more than the tolerance. Recursion depth
and the number of emitted samples are both capped, so the cost per segment
is bounded regardless of the input shape.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from daypath.core.geometry.bezier import cubic_point
from daypath.core.geometry.models import CubicSegment, Point2D

logger = logging.getLogger(__name__)

MAX_DEPTH = 12
DEFAULT_MAX_ERROR_PX = 0.75
DEFAULT_MAX_POINTS = 64


@dataclass(frozen=True)
class CubicSamples:
    """Samples of one segment, index-aligned.

    Attributes:
        t: Local parameters, strictly increasing from 0.0 to 1.0.
        pt: Positions; the first and last are the segment's p0 and p3.
    """

    t: tuple[float, ...]
    pt: tuple[Point2D, ...]

    def __len__(self) -> int:
        return len(self.t)


def flatness_error(p0: Point2D, pm: Point2D, p1: Point2D) -> float:
    """Deviation of the sub-curve midpoint from the chord midpoint.

    This bounds the perpendicular distance of ``pm`` to the chord from above
    and also grows when the parameter speed is uneven along the interval.

    Example:
        >>> flatness_error(Point2D(x=0, y=0), Point2D(x=5, y=2), Point2D(x=10, y=0))
        2.0
    """
    cx = (p0.x + p1.x) * 0.5
    cy = (p0.y + p1.y) * 0.5
    return math.hypot(pm.x - cx, pm.y - cy)


def sample_cubic(
    c: CubicSegment,
    max_error_px: float = DEFAULT_MAX_ERROR_PX,
    max_points: int = DEFAULT_MAX_POINTS,
) -> CubicSamples:
    """Sample a cubic adaptively into a polyline with error control.

    Args:
        c: Segment to flatten.
        max_error_px: Flatness tolerance in coordinate units.
        max_points: Sample count above which refinement stops. Intervals still
            open when the cap is hit are closed with their end sample, so the
            output always ends at (1.0, p3).

    Returns:
        CubicSamples starting at (0.0, p0) and ending at (1.0, p3).

    Example:
        >>> a, b = Point2D(x=0, y=0), Point2D(x=90, y=0)
        >>> samples = sample_cubic(CubicSegment(p0=a, p1=a, p2=b, p3=b), max_error_px=0.5)
        >>> samples.t[0], samples.t[-1]
        (0.0, 1.0)
    """
    ts: list[float] = [0.0]
    ps: list[Point2D] = [c.p0]
    capped = False

    def refine(t0: float, p0: Point2D, t1: float, p1: Point2D, depth: int) -> None:
        nonlocal capped
        tm = 0.5 * (t0 + t1)
        pm = cubic_point(c, tm)
        if flatness_error(p0, pm, p1) > max_error_px and depth < MAX_DEPTH:
            if len(ts) < max_points:
                refine(t0, p0, tm, pm, depth + 1)
                refine(tm, pm, t1, p1, depth + 1)
                return
            capped = True
        ts.append(t1)
        ps.append(p1)

    refine(0.0, c.p0, 1.0, c.p3, 0)

    if capped:
        logger.debug("Sample cap of %d reached; refinement truncated", max_points)

    return CubicSamples(t=tuple(ts), pt=tuple(ps))
