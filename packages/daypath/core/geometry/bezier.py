"""Vector helpers and explicit cubic Bezier evaluation.

Mathematical Foundation:
- Cubic Bezier: B(t) = (1-t)³P₀ + 3(1-t)²t P₁ + 3(1-t)t² P₂ + t³ P₃
- B'(t)  = 3(1-t)²(P₁-P₀) + 6(1-t)t(P₂-P₁) + 3t²(P₃-P₂)
- B''(t) = 6(1-t)(P₂-2P₁+P₀) + 6t(P₃-2P₂+P₁)

Evaluation uses the Bernstein blend directly rather than de Casteljau
bisection so that repeated evaluations are reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence
import math

from daypath.core.geometry.models import CubicSegment, Point2D


def add(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(x=a.x + b.x, y=a.y + b.y)


def sub(a: Point2D, b: Point2D) -> Point2D:
    return Point2D(x=a.x - b.x, y=a.y - b.y)


def mul(a: Point2D, k: float) -> Point2D:
    return Point2D(x=a.x * k, y=a.y * k)


def dot(a: Point2D, b: Point2D) -> float:
    return a.x * b.x + a.y * b.y


def length(a: Point2D) -> float:
    return math.hypot(a.x, a.y)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def distance_squared(a: Point2D, b: Point2D) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def unit(a: Point2D, eps: float = 1e-12) -> Point2D:
    """Return a unit vector along a; vectors shorter than eps map to zero."""
    n = length(a)
    if n < eps:
        return Point2D(x=0.0, y=0.0)
    return Point2D(x=a.x / n, y=a.y / n)


def cubic_point(c: CubicSegment, t: float) -> Point2D:
    """Evaluate the cubic at parameter t.

    Args:
        c: Cubic segment
        t: Local parameter, normally in [0, 1]

    Returns:
        Point on the curve
    """
    u = 1.0 - t
    tt = t * t
    uu = u * u
    b0 = uu * u
    b1 = 3.0 * uu * t
    b2 = 3.0 * u * tt
    b3 = tt * t
    return Point2D(
        x=b0 * c.p0.x + b1 * c.p1.x + b2 * c.p2.x + b3 * c.p3.x,
        y=b0 * c.p0.y + b1 * c.p1.y + b2 * c.p2.y + b3 * c.p3.y,
    )


def cubic_derivative(c: CubicSegment, t: float) -> Point2D:
    """First derivative dB/dt at parameter t."""
    u = 1.0 - t
    k0 = 3.0 * u * u
    k1 = 6.0 * u * t
    k2 = 3.0 * t * t
    return Point2D(
        x=k0 * (c.p1.x - c.p0.x) + k1 * (c.p2.x - c.p1.x) + k2 * (c.p3.x - c.p2.x),
        y=k0 * (c.p1.y - c.p0.y) + k1 * (c.p2.y - c.p1.y) + k2 * (c.p3.y - c.p2.y),
    )


def cubic_second_derivative(c: CubicSegment, t: float) -> Point2D:
    """Second derivative d²B/dt² at parameter t."""
    u = 1.0 - t
    return Point2D(
        x=6.0 * u * (c.p2.x - 2.0 * c.p1.x + c.p0.x) + 6.0 * t * (c.p3.x - 2.0 * c.p2.x + c.p1.x),
        y=6.0 * u * (c.p2.y - 2.0 * c.p1.y + c.p0.y) + 6.0 * t * (c.p3.y - 2.0 * c.p2.y + c.p1.y),
    )


def cubic_normal(c: CubicSegment, t: float) -> Point2D:
    """Unit normal (derivative rotated a quarter turn counter-clockwise).

    A vanishing derivative yields the zero vector.
    """
    d = cubic_derivative(c, t)
    n = Point2D(x=-d.y, y=d.x)
    norm = length(n) or 1.0
    return Point2D(x=n.x / norm, y=n.y / norm)


def polyline_length(points: Sequence[Point2D]) -> float:
    """Return the cumulative length of a polyline."""
    total = 0.0
    for prev, curr in zip(points, points[1:]):
        total += distance(prev, curr)
    return total


def bezier_arm(prev_prev: Point2D, prev: Point2D, curr: Point2D, softness: float = 0.5) -> Point2D:
    """Place a handle at ``prev`` along the tangent ``prev_prev -> curr``.

    The arm length is ``|curr - prev| * softness``, so closely spaced anchors
    get short arms.

    Args:
        prev_prev: Anchor before ``prev`` (defines the tangent start)
        prev: Anchor the handle is attached to
        curr: Anchor after ``prev`` (defines the tangent end and arm length)
        softness: Arm length as a fraction of the ``prev -> curr`` chord

    Returns:
        Handle position
    """
    tx = curr.x - prev_prev.x
    ty = curr.y - prev_prev.y
    t_len = math.hypot(tx, ty) or 1.0
    arm = distance(prev, curr) * softness
    return Point2D(x=prev.x + tx / t_len * arm, y=prev.y + ty / t_len * arm)
