"""Protocol definitions for curve fitting strategies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from daypath.core.geometry.models import CubicSegment, Point2D


@runtime_checkable
class CurveFitter(Protocol):
    """Converts ordered anchors plus tension into cubic segments.

    Implementations are pure: the same anchors and tension always produce
    the same segments. Fewer than two anchors produce an empty list.

    Example:
        >>> def fit_straight(anchors, tension):
        ...     return [CubicSegment(p0=a, p1=a, p2=b, p3=b) for a, b in zip(anchors, anchors[1:])]
    """

    def __call__(self, anchors: Sequence[Point2D], tension: float) -> list[CubicSegment]:
        """Fit segments through the anchors.

        Args:
            anchors: Ordered anchor points
            tension: Tension in [0, 1]; strategies clamp it further

        Returns:
            One segment per consecutive anchor pair
        """
        ...
