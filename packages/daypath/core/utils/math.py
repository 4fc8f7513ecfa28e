"""Scalar helpers shared by the geometry and mapping code."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Limit ``value`` to [min_val, max_val].

    Example:
        >>> clamp(90000.0, 0.0, 86400.0)
        86400.0
    """
    return max(min_val, min(max_val, value))


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def finite_or(value: float, default: float) -> float:
    """``float(value)``, or ``default`` when that is NaN or infinite."""
    value = float(value)
    return value if math.isfinite(value) else default
