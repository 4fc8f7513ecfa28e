"""Curve input models.

- CurveSpec: ordered anchors plus a tension scalar, as supplied by the editor

The model is immutable; a changed curve is a new CurveSpec.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daypath.core.geometry.models import Point2D
from daypath.core.utils.math import clamp01, finite_or


class CurveSpec(BaseModel):
    """Anchors and tension describing a curve.

    Tension outside [0, 1] is clamped on construction; non-finite tension
    falls back to 0.5.

    Attributes:
        controls: Ordered anchors the curve passes through.
        tension: 0 = loose/flowing, 1 = tight.

    Example:
        >>> spec = CurveSpec(controls=[{"x": 0, "y": 0}, {"x": 10, "y": 5}], tension=0.4)
        >>> spec.segment_count
        1
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    controls: tuple[Point2D, ...] = Field(default_factory=tuple, description="Ordered anchors")
    tension: float = Field(default=0.5, description="Curve tension [0,1]")

    @field_validator("tension")
    @classmethod
    def _clamp_tension(cls, v: float) -> float:
        return clamp01(finite_or(v, 0.5))

    @property
    def segment_count(self) -> int:
        return max(0, len(self.controls) - 1)
