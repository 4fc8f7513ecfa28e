"""Curve timeline: a curve paired with its lookup table.

The timeline is the entry point for callers that edit a curve and query it
repeatedly. It is immutable; replacing the curve returns a new timeline with
a freshly built table.

Usage:
    timeline = CurveTimeline(CurveSpec(controls=anchors, tension=0.42))
    p = timeline.point_at(4567)          # time -> point
    t = timeline.time_at(p)              # point -> time
    timeline = timeline.with_curve(edited_spec)
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from daypath.core.config.models import MappingConfig
from daypath.core.curves.lut import LookupTable, build_param_lut
from daypath.core.curves.mapping import DAY_SECONDS, point_at_time, time_at_point
from daypath.core.curves.models import CurveSpec
from daypath.core.curves.paths import segments_to_svg_path
from daypath.core.geometry.models import Point2D
from daypath.core.persistence.models import CurveDocument, NodeRecord

logger = logging.getLogger(__name__)


class CurveTimeline:
    """A curve, its mapping configuration and its lookup table."""

    def __init__(self, curve: CurveSpec, config: MappingConfig | None = None):
        """Build the lookup table for ``curve``.

        Args:
            curve: Anchors and tension
            config: Mapping settings (defaults if None)
        """
        self._curve = curve
        self._config = config or MappingConfig()
        self._lut = build_param_lut(
            curve,
            strategy=self._config.fit_strategy,
            max_error_px=self._config.max_error_px,
            max_points=self._config.max_points,
        )
        logger.debug(
            "Timeline built: %d anchors, %d samples, length %.3f",
            len(curve.controls),
            self._lut.size,
            self._lut.length,
        )

    @classmethod
    def from_document(
        cls, document: CurveDocument, config: MappingConfig | None = None
    ) -> CurveTimeline:
        return cls(document.curve, config)

    @property
    def curve(self) -> CurveSpec:
        return self._curve

    @property
    def config(self) -> MappingConfig:
        return self._config

    @property
    def lut(self) -> LookupTable:
        return self._lut

    @property
    def length(self) -> float:
        return self._lut.length

    def with_curve(self, curve: CurveSpec) -> CurveTimeline:
        """Return a new timeline for an edited curve (table rebuilt in full)."""
        return CurveTimeline(curve, self._config)

    def point_at(self, time: float) -> Point2D:
        return point_at_time(self._lut, time)

    def time_at(self, point: Point2D) -> float:
        return time_at_point(self._lut, point, self._config.coarse_steps)

    def sample(self, num_points: int = 20) -> list[Point2D]:
        """Points at evenly spaced times across the day.

        Args:
            num_points: Number of samples (first at time 0, last at DAY_SECONDS)

        Returns:
            List of points in time order

        Raises:
            ValueError: If num_points < 2
        """
        if num_points < 2:
            raise ValueError("num_points must be >= 2")

        return [self.point_at(DAY_SECONDS * i / (num_points - 1)) for i in range(num_points)]

    def node_positions(self, nodes: Iterable[NodeRecord]) -> dict[str, Point2D]:
        """Resolve each node's time to its position on the curve."""
        return {node.id: self.point_at(node.time) for node in nodes}

    def svg_path(self, precision: int = 2) -> str:
        return segments_to_svg_path(self._lut.segments, precision)
