"""Time <-> point mapping along a lookup table.

Time is seconds in a day, [0, DAY_SECONDS]; it is spread uniformly over the
arc length of the path. Both directions go through the same linearization of
the table's (t, s) columns, so the forward and inverse mappings agree.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

import numpy as np

from daypath.core.curves.lut import LookupTable
from daypath.core.curves.projection import DEFAULT_COARSE_STEPS, project_point_to_cubic
from daypath.core.geometry.bezier import cubic_point
from daypath.core.geometry.models import Point2D
from daypath.core.utils.math import clamp, clamp01, finite_or

logger = logging.getLogger(__name__)

DAY_SECONDS = 86400.0

# Floor for denominators in table interpolation
_EPS = 1e-6


def clamp_time(time: float) -> float:
    """Clamp a time value into [0, DAY_SECONDS]; non-finite values map to 0."""
    return clamp(finite_or(time, 0.0), 0.0, DAY_SECONDS)


def lower_bound(values: Sequence[float] | np.ndarray, x: float) -> int:
    """Index of the first element >= x (len(values) if none).

    Example:
        >>> lower_bound([0.0, 1.0, 1.0, 3.0], 1.0)
        1
    """
    return int(np.searchsorted(np.asarray(values), x, side="left"))


def point_at_global_t(lut: LookupTable, g: float) -> Point2D:
    """Evaluate the exact cubic at global parameter g in [0, 1]."""
    n = len(lut.segments)
    if n == 0:
        return lut.origin
    seg_idx = min(n - 1, int(np.floor(g * n)))
    local_t = g * n - seg_idx
    return cubic_point(lut.segments[seg_idx], clamp01(local_t))


def s_at_global_t(lut: LookupTable, g: float) -> float:
    """Arc length at global parameter g by linear interpolation of the table."""
    if lut.is_empty:
        return 0.0
    return float(np.interp(g, lut.t, lut.s))


def global_t_at_time(lut: LookupTable, time: float) -> float:
    """Global curve parameter reached after time/DAY_SECONDS of the arc length.

    Linear interpolation between the two table samples bracketing the target
    arc length; 0.0 and 1.0 at and beyond the table ends.
    """
    if lut.is_empty:
        return 0.0

    target_s = clamp_time(time) / DAY_SECONDS * lut.length
    if target_s <= 0.0:
        return 0.0
    if target_s >= lut.length:
        return 1.0

    idx = min(max(lower_bound(lut.s, target_s), 1), lut.size - 1)
    s0, s1 = float(lut.s[idx - 1]), float(lut.s[idx])
    t0, t1 = float(lut.t[idx - 1]), float(lut.t[idx])
    w = (target_s - s0) / max(_EPS, s1 - s0)
    return t0 + w * (t1 - t0)


def point_at_time(lut: LookupTable, time: float) -> Point2D:
    """Map a time of day to a point on the curve.

    The target arc length is ``time / DAY_SECONDS * length``. The bracketing
    table samples give a global parameter by linear interpolation, and the
    exact cubic is evaluated there rather than the sampled polyline.

    Args:
        lut: Lookup table.
        time: Seconds in day; clamped into [0, DAY_SECONDS].

    Returns:
        Point on the curve. Targets at or beyond the table ends return the
        first/last sample; an empty table returns its fallback origin.
    """
    if lut.is_empty:
        return lut.origin

    target_s = clamp_time(time) / DAY_SECONDS * lut.length
    if target_s <= 0.0:
        return lut.point(0)
    if target_s >= lut.length:
        return lut.point(lut.size - 1)

    return point_at_global_t(lut, global_t_at_time(lut, time))


def time_at_point(
    lut: LookupTable,
    p: Point2D,
    coarse_steps: int = DEFAULT_COARSE_STEPS,
) -> float:
    """Map a point (e.g. a drag position) to the time of its nearest curve point.

    A global scan of the table samples picks the segment to refine; when the
    nearest sample sits on a boundary the segment on the other side is
    refined too. The refined global parameter is converted to arc length
    through the table columns.

    Args:
        lut: Lookup table.
        p: Query point in anchor coordinates.
        coarse_steps: Coarse search resolution of the projection.

    Returns:
        Time in [0, DAY_SECONDS]; 0 for an empty table.
    """
    if lut.is_empty:
        return 0.0

    dist = np.hypot(lut.pt[:, 0] - p.x, lut.pt[:, 1] - p.y)
    if not np.isfinite(dist).any():
        logger.debug("Non-finite query point (%s, %s); mapping to time 0", p.x, p.y)
        return 0.0
    best = int(np.argmin(dist))
    ties = np.flatnonzero(dist == dist[best])
    if ties.size > 1:
        # A far query rounds every offset to the same length; rank the tied
        # samples by |pt|² - 2 pt·p, which has no p - pt subtraction to lose.
        tied = lut.pt[ties]
        key = (tied**2).sum(axis=1) - 2.0 * (tied[:, 0] * p.x + tied[:, 1] * p.y)
        best = int(ties[np.argmin(key)])

    candidates = {int(lut.seg_index[best])}
    if best + 1 < lut.size:
        candidates.add(int(lut.seg_index[best + 1]))

    # The nearest sample stands unless a projection is strictly closer; far
    # queries overflow the squared distances of every projection.
    n = len(lut.segments)
    best_g = float(lut.t[best])
    nearest = float(dist[best])
    best_d2 = nearest * nearest
    for seg_idx in sorted(candidates):
        proj = project_point_to_cubic(lut.segments[seg_idx], p, coarse_steps)
        if proj.squared_distance < best_d2:
            best_d2 = proj.squared_distance
            best_g = (seg_idx + proj.t) / n

    s = s_at_global_t(lut, best_g)
    return clamp01(s / max(_EPS, lut.length)) * DAY_SECONDS
