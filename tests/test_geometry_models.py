"""
Tests for the geometry data models.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from geowkt.core.errors import GeometryError, UnrepresentableGeometryError
from geowkt.models.geometry import (
    GeometryKind,
    LineString,
    Point,
    Space,
    Surface,
    geometry_kind,
    is_geometry,
    make_space,
    make_surface,
)

TRIANGLE = [(0, 0), (1, 0), (0, 1), (0, 0)]


class TestPoint:
    """Tests for Point."""

    def test_coordinates(self):
        point = Point(1, 2.5)
        assert point.x == 1
        assert point.y == 2.5
        assert point.xy == (1, 2.5)
        assert point.kind == GeometryKind.POINT

    def test_projection_ignored_in_equality(self):
        """Test that the projection tag does not affect equality."""
        assert Point(1, 2, proj="EPSG:4326") == Point(1, 2)
        assert Point(1, 2, proj="EPSG:4326").proj == "EPSG:4326"

    def test_decimal_coordinates(self):
        point = Point(Decimal("1.10"), Decimal("2"))
        assert point.xy == (Decimal("1.10"), Decimal("2"))

    @pytest.mark.parametrize(
        "x, y",
        [
            (None, 1),
            ("1", 2),
            (True, 2),
            (1, False),
            (Fraction(1, 3), 0),
            (float("inf"), 0),
            (0, float("-inf")),
            (float("nan"), 0),
            (Decimal("NaN"), 0),
            (Decimal("Infinity"), 0),
        ],
    )
    def test_invalid_coordinates(self, x, y):
        with pytest.raises(GeometryError):
            Point(x, y)

    def test_immutable(self):
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 3


class TestLineString:
    """Tests for LineString."""

    def test_pairs_converted_to_points(self):
        line = LineString([(0, 0), (1, 1)])
        assert line.points == (Point(0, 0), Point(1, 1))
        assert line.kind == GeometryKind.LINE
        assert len(line) == 2
        assert list(line) == [Point(0, 0), Point(1, 1)]

    def test_open_line(self):
        line = LineString([(0, 0), (1, 1), (2, 0)])
        assert not line.is_ring
        assert not line.is_filled

    def test_closed_filled_line(self):
        line = LineString(TRIANGLE, filled=True)
        assert line.is_ring
        assert line.is_filled

    def test_ring_compares_coordinates_only(self):
        """Test that differing projection tags do not break ring detection."""
        line = LineString([Point(0, 0, proj="a"), (1, 0), (1, 1), Point(0, 0, proj="b")])
        assert line.is_ring

    def test_projection_passed_to_points(self):
        line = LineString([(0, 0), (1, 1)], proj="EPSG:3857")
        assert all(p.proj == "EPSG:3857" for p in line.points)

    @pytest.mark.parametrize("points", [[], [(0, 0)]])
    def test_too_few_points(self, points):
        with pytest.raises(GeometryError) as exc_info:
            LineString(points)
        assert exc_info.value.details["geometry_type"] == "LineString"

    def test_invalid_point(self):
        with pytest.raises(GeometryError):
            LineString([(0, 0), (1, 2, 3)])


class TestSurface:
    """Tests for Surface."""

    def test_rings_stored_as_filled_lines(self):
        surface = Surface(TRIANGLE)
        assert isinstance(surface.outer, LineString)
        assert surface.outer.is_filled
        assert surface.inner == ()
        assert surface.kind == GeometryKind.SURFACE

    def test_inner_rings(self):
        hole = [(0.1, 0.1), (0.2, 0.1), (0.1, 0.2), (0.1, 0.1)]
        surface = make_surface(TRIANGLE, hole)
        assert len(surface.inner) == 1
        assert surface.rings == (surface.outer, surface.inner[0])
        assert surface.inner[0].is_filled

    def test_unfilled_line_accepted_as_ring(self):
        surface = Surface(LineString(TRIANGLE))
        assert surface.outer.is_filled
        assert surface.outer.points == LineString(TRIANGLE).points

    def test_open_ring_rejected(self):
        with pytest.raises(GeometryError, match="not closed"):
            Surface([(0, 0), (1, 0), (1, 1)])

    def test_open_inner_ring_rejected(self):
        with pytest.raises(GeometryError):
            Surface(TRIANGLE, ([(0, 0), (1, 1)],))


class TestSpace:
    """Tests for Space."""

    def test_components(self):
        space = Space([Point(1, 2), LineString([(0, 0), (1, 1)])])
        assert space.kind == GeometryKind.SPACE
        assert space.nr_components == 2
        assert len(space) == 2
        assert space.component(0) == Point(1, 2)
        assert not space.only_points
        assert space.points == (Point(1, 2),)

    def test_only_points(self):
        space = make_space(Point(i, i) for i in range(3))
        assert space.only_points
        assert space.points == (Point(0, 0), Point(1, 1), Point(2, 2))

    def test_empty_space_is_only_points(self):
        assert Space().only_points
        assert Space().nr_components == 0

    def test_nested(self):
        inner = Space([Point(1, 2)])
        outer = Space([inner, Point(3, 4)])
        assert list(outer) == [inner, Point(3, 4)]

    def test_non_geometry_component_rejected(self):
        with pytest.raises(GeometryError):
            Space([Point(1, 2), (3, 4)])


class TestGeometryKind:
    """Tests for geometry kind discrimination."""

    def test_kinds(self):
        assert geometry_kind(Point(0, 0)) == GeometryKind.POINT
        assert geometry_kind(LineString([(0, 0), (1, 1)])) == GeometryKind.LINE
        assert geometry_kind(Surface(TRIANGLE)) == GeometryKind.SURFACE
        assert geometry_kind(Space()) == GeometryKind.SPACE

    def test_is_geometry(self):
        assert is_geometry(Point(0, 0))
        assert not is_geometry((0, 0))
        assert not is_geometry(None)

    def test_unrepresentable(self):
        with pytest.raises(UnrepresentableGeometryError):
            geometry_kind("POINT(1 2)")
