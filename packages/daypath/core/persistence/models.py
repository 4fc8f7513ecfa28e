"""Persisted document schema.

A CurveDocument is the plain-data state the editor saves: the curve itself
and the timeline nodes placed along it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daypath.core.curves.mapping import clamp_time
from daypath.core.curves.models import CurveSpec


class NodeRecord(BaseModel):
    """A timeline node pinned to a time of day.

    Attributes:
        id: Stable node identifier.
        time: Seconds in day; values outside [0, 86400] are clamped and
            non-finite values become 0.
        label: Display label.
        icon: Icon token or URL (rendered by the host).
        color: CSS color token or hex.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    time: float = Field(..., description="Seconds in day")
    label: str = ""
    icon: str = ""
    color: str = ""

    @field_validator("time")
    @classmethod
    def _clamp_time(cls, v: float) -> float:
        return clamp_time(v)


class CurveDocument(BaseModel):
    """Curve plus nodes, as persisted.

    Example:
        >>> doc = CurveDocument(curve=CurveSpec(), nodes=[NodeRecord(id="wake", time=25200)])
        >>> doc.nodes[0].time
        25200.0
    """

    model_config = ConfigDict(extra="forbid")

    curve: CurveSpec = Field(default_factory=CurveSpec)
    nodes: list[NodeRecord] = Field(default_factory=list)
