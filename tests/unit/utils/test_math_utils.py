"""Tests for math utilities."""

from __future__ import annotations

import numpy as np
import pytest

from daypath.core.utils.math import clamp, clamp01, finite_or


class TestClamp:
    """Tests for clamp and clamp01."""

    @pytest.mark.parametrize(("value", "expected"), [(-1, 0), (5, 5), (11, 10)])
    def test_clamp(self, value: int, expected: int) -> None:
        assert clamp(value, 0, 10) == expected

    def test_clamp_numpy_scalar(self) -> None:
        assert clamp(np.float64(2.5), 0.0, 1.0) == 1.0

    @pytest.mark.parametrize(("value", "expected"), [(-0.5, 0.0), (0.3, 0.3), (1.5, 1.0)])
    def test_clamp01(self, value: float, expected: float) -> None:
        assert clamp01(value) == expected


class TestFiniteOr:
    """Tests for finite_or."""

    def test_finite_passes_through(self) -> None:
        assert finite_or(3, 0.0) == 3.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_uses_default(self, value: float) -> None:
        assert finite_or(value, 0.5) == 0.5
