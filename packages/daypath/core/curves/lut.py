"""Global arc-length lookup table over a fitted path.

The table stores, index-aligned:
- t: global curve parameter in [0, 1] (segment i covers [i/n, (i+1)/n])
- s: cumulative chord length of the sampled polyline
- seg_index: owning segment of each sample
- pt: sampled positions, shape (N, 2)

It is rebuilt in full from the segments whenever the curve changes and is
read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from typing import Any

import numpy as np

from daypath.core.curves.fitting import FitStrategy, fit
from daypath.core.curves.models import CurveSpec
from daypath.core.curves.sampling import DEFAULT_MAX_ERROR_PX, DEFAULT_MAX_POINTS, sample_cubic
from daypath.core.geometry.models import ORIGIN, CubicSegment, Point2D
from daypath.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class LookupTable:
    """Arc-length lookup table.

    Invariants: t and s are non-decreasing, t[0] == 0, t[-1] == 1, s[0] == 0,
    length == s[-1]. An empty table (no segments) has length 0 and answers
    every query with ``origin``.
    """

    t: np.ndarray
    s: np.ndarray
    seg_index: np.ndarray
    pt: np.ndarray
    length: float
    segments: tuple[CubicSegment, ...]
    origin: Point2D = ORIGIN

    @property
    def size(self) -> int:
        return int(self.t.shape[0])

    @property
    def is_empty(self) -> bool:
        return not self.segments or self.size == 0

    def point(self, index: int) -> Point2D:
        """Sampled position at ``index`` as a Point2D."""
        return Point2D(x=float(self.pt[index, 0]), y=float(self.pt[index, 1]))

    def points(self) -> list[Point2D]:
        return [self.point(i) for i in range(self.size)]

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for JSON output."""
        return {
            "length": self.length,
            "segment_count": len(self.segments),
            "t": self.t.tolist(),
            "s": self.s.tolist(),
            "seg_index": self.seg_index.tolist(),
            "pt": self.pt.tolist(),
        }


def empty_table(origin: Point2D = ORIGIN) -> LookupTable:
    """Table for a path with no segments."""
    return LookupTable(
        t=_frozen(np.zeros(0, dtype=float)),
        s=_frozen(np.zeros(0, dtype=float)),
        seg_index=_frozen(np.zeros(0, dtype=np.int64)),
        pt=_frozen(np.zeros((0, 2), dtype=float)),
        length=0.0,
        segments=(),
        origin=origin,
    )


def accumulate_lengths(pt: np.ndarray) -> np.ndarray:
    """Running sum of distances between consecutive points, starting at 0.

    Args:
        pt: Points, shape (N, 2)

    Returns:
        Array of N cumulative lengths (empty for no points)
    """
    if pt.shape[0] == 0:
        return np.zeros(0, dtype=float)
    delta = np.diff(pt, axis=0)
    seg = np.hypot(delta[:, 0], delta[:, 1])
    return np.concatenate(([0.0], np.cumsum(seg)))


def build_lut(
    segments: Sequence[CubicSegment],
    max_error_px: float = DEFAULT_MAX_ERROR_PX,
    max_points: int = DEFAULT_MAX_POINTS,
    origin: Point2D | None = None,
) -> LookupTable:
    """Build the global lookup table for a list of segments.

    Each segment is flattened with the adaptive sampler; its local parameter
    ``tl`` maps to the global ``(i + tl) / n``. The first sample of every
    segment after the first is skipped because it repeats the previous
    segment's last sample.

    Args:
        segments: Fitted segments, in path order
        max_error_px: Sampler flatness tolerance
        max_points: Sampler point cap per segment
        origin: Fallback point for queries (default: first segment start)

    Returns:
        LookupTable (empty if there are no segments)
    """
    seg_list = tuple(segments)
    seg_count = len(seg_list)
    if origin is None:
        origin = seg_list[0].p0 if seg_list else ORIGIN

    if seg_count == 0:
        return empty_table(origin)

    t_vals: list[float] = []
    xy: list[tuple[float, float]] = []
    owners: list[int] = []
    for i, seg in enumerate(seg_list):
        samples = sample_cubic(seg, max_error_px, max_points)
        start = 1 if i > 0 else 0
        for tl, p in zip(samples.t[start:], samples.pt[start:], strict=True):
            t_vals.append((i + tl) / seg_count)
            xy.append((p.x, p.y))
            owners.append(i)

    pt = np.asarray(xy, dtype=float)
    s = accumulate_lengths(pt)

    table = LookupTable(
        t=_frozen(np.asarray(t_vals, dtype=float)),
        s=_frozen(s),
        seg_index=_frozen(np.asarray(owners, dtype=np.int64)),
        pt=_frozen(pt),
        length=float(s[-1]),
        segments=seg_list,
        origin=origin,
    )
    logger.debug(
        "Built LUT: %d segments, %d samples, length %.3f",
        seg_count,
        table.size,
        table.length,
    )
    return table


@log_performance
def build_param_lut(
    curve: CurveSpec,
    *,
    strategy: FitStrategy | str = FitStrategy.CATMULL_ROM,
    max_error_px: float = DEFAULT_MAX_ERROR_PX,
    max_points: int = DEFAULT_MAX_POINTS,
) -> LookupTable:
    """Fit a CurveSpec and build its lookup table.

    The fallback point of the table is the first anchor, or the origin when
    the curve has no anchors.
    """
    segments = fit(curve.controls, curve.tension, strategy)
    origin = curve.controls[0] if curve.controls else ORIGIN
    return build_lut(segments, max_error_px, max_points, origin=origin)
