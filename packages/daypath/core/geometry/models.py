"""Geometry value types.

- Point2D: an immutable (x, y) coordinate pair
- CubicSegment: the four-point control polygon of a cubic Bezier

Both models are frozen and reject unknown fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Point2D(BaseModel):
    """A 2D point in anchor coordinate space.

    Example:
        >>> p = Point2D(x=12.0, y=220.0)
        >>> p.x
        12.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")


ORIGIN = Point2D(x=0.0, y=0.0)


class CubicSegment(BaseModel):
    """Cubic Bezier segment.

    p0 and p3 are the on-curve endpoints; p1 and p2 are the tangent handles.

    Example:
        >>> seg = CubicSegment(
        ...     p0=Point2D(x=0, y=0),
        ...     p1=Point2D(x=0, y=1),
        ...     p2=Point2D(x=1, y=1),
        ...     p3=Point2D(x=1, y=0),
        ... )
        >>> seg.p3.x
        1.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    p0: Point2D
    p1: Point2D
    p2: Point2D
    p3: Point2D

    def control_points(self) -> tuple[Point2D, Point2D, Point2D, Point2D]:
        return (self.p0, self.p1, self.p2, self.p3)
