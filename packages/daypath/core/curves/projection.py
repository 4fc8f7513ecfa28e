"""Nearest-point projection onto a single cubic segment.

Coarse uniform search followed by at most two Newton steps on
f(t) = |B(t) - p|², with the parameter clamped to [0, 1] after every step.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from daypath.core.geometry.bezier import (
    cubic_derivative,
    cubic_point,
    cubic_second_derivative,
    distance_squared,
)
from daypath.core.geometry.models import CubicSegment, Point2D
from daypath.core.utils.math import clamp01

DEFAULT_COARSE_STEPS = 25
NEWTON_ITERATIONS = 2
MIN_CURVATURE = 1e-6


@dataclass(frozen=True)
class Projection:
    """Closest point found on a segment.

    Attributes:
        t: Local parameter in [0, 1].
        point: Curve position at t.
        squared_distance: Squared distance from the query point.
    """

    t: float
    point: Point2D
    squared_distance: float


def project_point_to_cubic(
    c: CubicSegment,
    p: Point2D,
    coarse_steps: int = DEFAULT_COARSE_STEPS,
) -> Projection:
    """Project a point onto one cubic.

    Args:
        c: Segment to project onto.
        p: Query point.
        coarse_steps: Number of uniform intervals for the coarse search;
            the curve is evaluated at t = i / coarse_steps for i in
            0..coarse_steps.

    Returns:
        Projection with t in [0, 1]. Newton refinement stops early when
        f'' is below MIN_CURVATURE, the step is not finite, or a step would
        move away from the query point.
    """
    steps = max(1, int(coarse_steps))

    best_t = 0.0
    best_pt = c.p0
    best_d2 = distance_squared(best_pt, p)
    for i in range(1, steps + 1):
        t = i / steps
        q = cubic_point(c, t)
        d2 = distance_squared(q, p)
        if d2 < best_d2:
            best_t, best_pt, best_d2 = t, q, d2

    for _ in range(NEWTON_ITERATIONS):
        dq = cubic_derivative(c, best_t)
        d2q = cubic_second_derivative(c, best_t)
        rx = best_pt.x - p.x
        ry = best_pt.y - p.y
        # f' = 2 B'·(B - p); f'' = 2 (B''·(B - p) + B'·B')
        grad = 2.0 * (dq.x * rx + dq.y * ry)
        hess = 2.0 * (d2q.x * rx + d2q.y * ry + dq.x * dq.x + dq.y * dq.y)
        if abs(hess) < MIN_CURVATURE:
            break
        t_next = best_t - grad / hess
        if not math.isfinite(t_next):
            break
        t_next = clamp01(t_next)
        q = cubic_point(c, t_next)
        d2 = distance_squared(q, p)
        if d2 > best_d2:
            break
        best_t, best_pt, best_d2 = t_next, q, d2

    return Projection(t=best_t, point=best_pt, squared_distance=best_d2)
