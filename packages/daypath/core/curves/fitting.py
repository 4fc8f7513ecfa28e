"""Curve fitting: anchors + tension -> cubic Bezier segments.

Three strategies share the CurveFitter contract:
- catmull_rom: Catmull-Rom tangents converted to Bezier handles (default)
- adaptive_sharpness: Catmull-Rom handles shortened at sharp joints
- symmetric_arm: tangent-aligned arms, opposite at every interior anchor,
  zero-length at the path ends

Every strategy clamps tension to [TENSION_MIN, TENSION_MAX] so extreme
settings cannot produce self-intersecting loops.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
import logging

from daypath.core.curves.models import CurveSpec
from daypath.core.curves.protocols import CurveFitter
from daypath.core.geometry.bezier import add, bezier_arm, dot, mul, sub, unit
from daypath.core.geometry.models import CubicSegment, Point2D
from daypath.core.utils.math import clamp, finite_or

logger = logging.getLogger(__name__)

TENSION_MIN = 0.15
TENSION_MAX = 0.85

# Handle scale = SHARP_HANDLE_SCALE + SMOOTH_HANDLE_BONUS * (1 - sharpness)
SHARP_HANDLE_SCALE = 0.4
SMOOTH_HANDLE_BONUS = 0.6

# Arm length as a fraction of the chord at tension 0
SYMMETRIC_SOFTNESS = 0.5


class FitStrategy(str, Enum):
    """Identifiers for built-in fitting strategies."""

    CATMULL_ROM = "catmull_rom"
    ADAPTIVE_SHARPNESS = "adaptive_sharpness"
    SYMMETRIC_ARM = "symmetric_arm"


def safe_tension(tension: float) -> float:
    """Clamp tension into the loop-free sub-range."""
    return clamp(finite_or(tension, 0.5), TENSION_MIN, TENSION_MAX)


def _with_phantoms(points: list[Point2D]) -> list[Point2D]:
    """Duplicate the first and last anchor as boundary points."""
    return [points[0], *points, points[-1]]


def joint_sharpness(before: Point2D, joint: Point2D, after: Point2D) -> float:
    """Sharpness of the turn at ``joint``.

    Defined as ``1 - dot(u_in, u_out)`` of the unit chords entering and
    leaving the joint while the turn is at most a right angle: 0 when the
    chords continue straight on, 1 at a right angle. Any turn past a right
    angle, up to a full reversal, scores 1. A zero-length chord contributes
    a zero vector.
    """
    u_in = unit(sub(joint, before))
    u_out = unit(sub(after, joint))
    d = dot(u_in, u_out)
    if d < 0.0:
        return 1.0
    return 1.0 - d


def handle_scale(sharpness: float) -> float:
    return SHARP_HANDLE_SCALE + SMOOTH_HANDLE_BONUS * (1.0 - sharpness)


def fit_catmull_rom(anchors: Sequence[Point2D], tension: float) -> list[CubicSegment]:
    """Fit a Catmull-Rom spline and convert each span to a cubic Bezier.

    For each anchor quadruple (p0, p1, p2, p3) of the phantom-padded list:
        b0 = p1, b3 = p2
        b1 = p1 + (p2 - p0) * k
        b2 = p2 - (p3 - p1) * k
    with k = (1 - tension) / 6.

    Args:
        anchors: Ordered anchors
        tension: Tension in [0, 1]

    Returns:
        len(anchors) - 1 segments, or [] for fewer than 2 anchors
    """
    pts = list(anchors)
    if len(pts) < 2:
        return []

    padded = _with_phantoms(pts)
    k = (1.0 - safe_tension(tension)) / 6.0

    segments: list[CubicSegment] = []
    for i in range(len(pts) - 1):
        p0, p1, p2, p3 = padded[i : i + 4]
        segments.append(
            CubicSegment(
                p0=p1,
                p1=add(p1, mul(sub(p2, p0), k)),
                p2=sub(p2, mul(sub(p3, p1), k)),
                p3=p2,
            )
        )
    return segments


def fit_adaptive_sharpness(anchors: Sequence[Point2D], tension: float) -> list[CubicSegment]:
    """Catmull-Rom fit with handles shortened at sharp joints.

    Each handle is scaled by ``0.4 + 0.6 * (1 - sharpness)`` of the joint it
    is attached to, so a segment's two handles scale independently. The
    first and last anchors have no turn and keep the full handle.
    """
    pts = list(anchors)
    if len(pts) < 2:
        return []

    padded = _with_phantoms(pts)
    k = (1.0 - safe_tension(tension)) / 6.0
    scales = [1.0] * len(pts)
    for j in range(1, len(pts) - 1):
        scales[j] = handle_scale(joint_sharpness(pts[j - 1], pts[j], pts[j + 1]))

    segments: list[CubicSegment] = []
    for i in range(len(pts) - 1):
        p0, p1, p2, p3 = padded[i : i + 4]
        segments.append(
            CubicSegment(
                p0=p1,
                p1=add(p1, mul(sub(p2, p0), k * scales[i])),
                p2=sub(p2, mul(sub(p3, p1), k * scales[i + 1])),
                p3=p2,
            )
        )
    return segments


def fit_symmetric_arm(anchors: Sequence[Point2D], tension: float) -> list[CubicSegment]:
    """Fit with tangent-aligned arms that are opposite at every interior anchor.

    The tangent at an interior anchor runs from its previous to its next
    neighbour. The outgoing arm of the segment leaving the anchor and the
    incoming arm of the segment arriving at it lie on opposite sides of that
    tangent, each as long as its own segment's chord times the softness.
    The first and last anchors get zero-length arms.
    """
    pts = list(anchors)
    n = len(pts)
    if n < 2:
        return []

    softness = SYMMETRIC_SOFTNESS * (1.0 - safe_tension(tension))

    segments: list[CubicSegment] = []
    for i in range(n - 1):
        start, end = pts[i], pts[i + 1]
        out_arm = bezier_arm(pts[i - 1], start, end, softness) if i > 0 else start
        in_arm = bezier_arm(pts[i + 2], end, start, softness) if i + 2 < n else end
        segments.append(CubicSegment(p0=start, p1=out_arm, p2=in_arm, p3=end))
    return segments


class FitterRegistry:
    """Registry of named curve fitting strategies."""

    def __init__(self) -> None:
        self._registry: dict[str, CurveFitter] = {}

    def register(self, name: str, fitter: CurveFitter) -> None:
        if name in self._registry:
            raise ValueError(f"Fit strategy '{name}' already registered")
        self._registry[name] = fitter

    def get(self, name: FitStrategy | str) -> CurveFitter:
        key = name.value if isinstance(name, FitStrategy) else name
        try:
            return self._registry[key]
        except KeyError as exc:
            raise ValueError(f"Fit strategy '{key}' is not registered") from exc

    def names(self) -> list[str]:
        return sorted(self._registry)


def build_default_registry() -> FitterRegistry:
    """Create a registry holding the built-in strategies."""
    registry = FitterRegistry()
    registry.register(FitStrategy.CATMULL_ROM.value, fit_catmull_rom)
    registry.register(FitStrategy.ADAPTIVE_SHARPNESS.value, fit_adaptive_sharpness)
    registry.register(FitStrategy.SYMMETRIC_ARM.value, fit_symmetric_arm)
    return registry


_DEFAULT_REGISTRY = build_default_registry()


def fit(
    anchors: Sequence[Point2D],
    tension: float,
    strategy: FitStrategy | str = FitStrategy.CATMULL_ROM,
    *,
    registry: FitterRegistry | None = None,
) -> list[CubicSegment]:
    """Fit cubic segments through anchors using a named strategy.

    Args:
        anchors: Ordered anchors
        tension: Tension in [0, 1]
        strategy: Strategy name (default: catmull_rom)
        registry: Registry to resolve the strategy from (default: built-ins)

    Returns:
        Fitted segments ([] for fewer than 2 anchors)

    Raises:
        ValueError: If the strategy is not registered
    """
    fitter = (registry or _DEFAULT_REGISTRY).get(strategy)
    segments = fitter(anchors, tension)
    if not segments:
        logger.debug("Fewer than 2 anchors (%d); no segments fitted", len(anchors))
    return segments


def fit_curve(spec: CurveSpec, strategy: FitStrategy | str = FitStrategy.CATMULL_ROM) -> list[CubicSegment]:
    """Fit a CurveSpec's anchors with its own tension."""
    return fit(spec.controls, spec.tension, strategy)
