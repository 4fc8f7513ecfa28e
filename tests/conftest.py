"""Shared pytest fixtures for daypath tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from daypath.core.curves.models import CurveSpec
from daypath.core.geometry.models import CubicSegment, Point2D
from daypath.core.persistence.io import save_document
from daypath.core.persistence.models import CurveDocument, NodeRecord

# ============================================================================
# Anchor Fixtures
# ============================================================================


def pts(*coords: tuple[float, float]) -> list[Point2D]:
    """Build a Point2D list from (x, y) tuples."""
    return [Point2D(x=x, y=y) for x, y in coords]


@pytest.fixture
def reference_anchors() -> list[Point2D]:
    """Four anchors of an editor-style wave."""
    return pts((12, 220), (200, 60), (420, 260), (780, 140))


@pytest.fixture
def reference_curve(reference_anchors: list[Point2D]) -> CurveSpec:
    """Reference wave at tension 0.42."""
    return CurveSpec(controls=reference_anchors, tension=0.42)


@pytest.fixture
def inflection_curve() -> CurveSpec:
    """Point-symmetric S curve with an inflection at (150, 0)."""
    return CurveSpec(controls=pts((0, 0), (100, 100), (200, -100), (300, 0)), tension=0.5)


@pytest.fixture
def z_curve() -> CurveSpec:
    """Zig-zag whose middle leg doubles back across the first."""
    return CurveSpec(controls=pts((0, 0), (300, 0), (0, 200), (300, 200)), tension=0.5)


# ============================================================================
# Segment Fixtures
# ============================================================================


@pytest.fixture
def straight_segment() -> CubicSegment:
    """Straight segment with handles at the thirds (uniform speed)."""
    return CubicSegment(
        p0=Point2D(x=0, y=0),
        p1=Point2D(x=30, y=0),
        p2=Point2D(x=60, y=0),
        p3=Point2D(x=90, y=0),
    )


@pytest.fixture
def arch_segment() -> CubicSegment:
    """Symmetric arch with apex (50, 75)."""
    return CubicSegment(
        p0=Point2D(x=0, y=0),
        p1=Point2D(x=0, y=100),
        p2=Point2D(x=100, y=100),
        p3=Point2D(x=100, y=0),
    )


@pytest.fixture
def s_segment() -> CubicSegment:
    """Segment with an inflection between its handles."""
    return CubicSegment(
        p0=Point2D(x=0, y=0),
        p1=Point2D(x=60, y=120),
        p2=Point2D(x=140, y=-120),
        p3=Point2D(x=200, y=0),
    )


@pytest.fixture
def point_segment() -> CubicSegment:
    """Degenerate segment collapsed to one point."""
    p = Point2D(x=5, y=5)
    return CubicSegment(p0=p, p1=p, p2=p, p3=p)


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def reference_document(reference_curve: CurveSpec) -> CurveDocument:
    """Reference curve with three nodes."""
    return CurveDocument(
        curve=reference_curve,
        nodes=[
            NodeRecord(id="wake", time=123, label="Wake", icon="sun", color="#ffcc00"),
            NodeRecord(id="lunch", time=4567, label="Lunch"),
            NodeRecord(id="sleep", time=80321, label="Sleep", color="#223355"),
        ],
    )


@pytest.fixture
def document_path(tmp_path: Path, reference_document: CurveDocument) -> Path:
    """Reference document saved as JSON under tmp_path."""
    return save_document(tmp_path / "curve.json", reference_document)
