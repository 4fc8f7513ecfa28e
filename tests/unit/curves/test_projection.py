"""Tests for nearest-point projection onto a cubic."""

from __future__ import annotations

import math

import pytest

from daypath.core.curves.projection import project_point_to_cubic
from daypath.core.geometry.bezier import cubic_point
from daypath.core.geometry.models import CubicSegment, Point2D


class TestProjectPointToCubic:
    """Tests for project_point_to_cubic."""

    @pytest.mark.parametrize("t", [0.0, 0.13, 0.37, 0.5, 0.61, 0.9, 1.0])
    def test_recovers_parameter_of_on_curve_point(self, arch_segment: CubicSegment, t: float) -> None:
        target = cubic_point(arch_segment, t)
        proj = project_point_to_cubic(arch_segment, target)
        assert proj.t == pytest.approx(t, abs=1e-3)
        assert proj.squared_distance < 1e-2

    @pytest.mark.parametrize("t", [0.07, 0.33, 0.5, 0.77])
    def test_recovers_parameter_through_inflection(self, s_segment: CubicSegment, t: float) -> None:
        target = cubic_point(s_segment, t)
        proj = project_point_to_cubic(s_segment, target)
        assert proj.t == pytest.approx(t, abs=1e-3)

    def test_off_curve_point_above_apex(self, arch_segment: CubicSegment) -> None:
        """Newton refinement moves off the coarse grid (0.48/0.52) onto the apex."""
        proj = project_point_to_cubic(arch_segment, Point2D(x=50, y=200))
        assert proj.t == pytest.approx(0.5, abs=1e-3)
        assert proj.point.x == pytest.approx(50.0, abs=0.1)
        assert proj.point.y == pytest.approx(75.0, abs=0.1)
        assert math.sqrt(proj.squared_distance) == pytest.approx(125.0, abs=0.1)

    def test_point_beyond_start_clamps_to_zero(self, arch_segment: CubicSegment) -> None:
        proj = project_point_to_cubic(arch_segment, Point2D(x=-50, y=-50))
        assert proj.t == 0.0
        assert proj.point == arch_segment.p0

    def test_point_beyond_end_clamps_to_one(self, arch_segment: CubicSegment) -> None:
        proj = project_point_to_cubic(arch_segment, Point2D(x=150, y=-50))
        assert proj.t == 1.0
        assert proj.point == arch_segment.p3

    def test_result_never_worse_than_coarse_search(self, s_segment: CubicSegment) -> None:
        p = Point2D(x=97, y=13)
        proj = project_point_to_cubic(s_segment, p)
        for i in range(26):
            q = cubic_point(s_segment, i / 25)
            assert proj.squared_distance <= (q.x - p.x) ** 2 + (q.y - p.y) ** 2 + 1e-9

    def test_point_reported_matches_parameter(self, s_segment: CubicSegment) -> None:
        proj = project_point_to_cubic(s_segment, Point2D(x=120, y=-40))
        assert proj.point == cubic_point(s_segment, proj.t)

    def test_degenerate_segment(self, point_segment: CubicSegment) -> None:
        """Every parameter of a point-like segment is equally near; any t in range will do."""
        proj = project_point_to_cubic(point_segment, Point2D(x=9, y=8))
        assert 0.0 <= proj.t <= 1.0
        assert (proj.point.x, proj.point.y) == pytest.approx((point_segment.p0.x, point_segment.p0.y))
        assert proj.squared_distance == pytest.approx(25.0)

    def test_non_positive_coarse_steps_still_searches(self, arch_segment: CubicSegment) -> None:
        proj = project_point_to_cubic(arch_segment, Point2D(x=100, y=0), coarse_steps=0)
        assert proj.t == 1.0

    def test_nan_query_stays_finite_in_parameter(self, arch_segment: CubicSegment) -> None:
        proj = project_point_to_cubic(arch_segment, Point2D(x=float("nan"), y=0))
        assert 0.0 <= proj.t <= 1.0

    def test_deterministic(self, s_segment: CubicSegment) -> None:
        p = Point2D(x=33, y=44)
        assert project_point_to_cubic(s_segment, p) == project_point_to_cubic(s_segment, p)
