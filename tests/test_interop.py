"""
Tests for conversion to and from Shapely geometries.
"""

import pytest
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString as ShapelyLineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point as ShapelyPoint,
    Polygon as ShapelyPolygon,
)

from geowkt.core.errors import UnrepresentableGeometryError
from geowkt.core.interop import from_shapely, to_shapely
from geowkt.core.parsers import parse_wkt
from geowkt.models.geometry import LineString, Point, Space, Surface

pytestmark = pytest.mark.interop

TRIANGLE = [(0, 0), (1, 0), (0, 1), (0, 0)]


class TestToShapely:
    """Tests for to_shapely."""

    def test_point(self):
        shape = to_shapely(Point(1, 2))
        assert isinstance(shape, ShapelyPoint)
        assert (shape.x, shape.y) == (1.0, 2.0)

    def test_line(self):
        shape = to_shapely(LineString([(0, 0), (1, 1)]))
        assert isinstance(shape, ShapelyLineString)
        assert list(shape.coords) == [(0.0, 0.0), (1.0, 1.0)]

    def test_filled_ring_becomes_polygon(self):
        shape = to_shapely(LineString(TRIANGLE, filled=True))
        assert isinstance(shape, ShapelyPolygon)
        assert shape.area == pytest.approx(0.5)

    def test_surface_with_hole(self):
        outer = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
        hole = [(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]
        shape = to_shapely(Surface(outer, (hole,)))
        assert shape.area == pytest.approx(96.0)
        assert len(shape.interiors) == 1

    def test_homogeneous_spaces(self):
        assert isinstance(to_shapely(Space([Point(0, 0), Point(1, 1)])), MultiPoint)
        lines = Space([LineString([(0, 0), (1, 1)]), LineString([(2, 2), (3, 3)])])
        assert isinstance(to_shapely(lines), MultiLineString)
        assert isinstance(to_shapely(Space([Surface(TRIANGLE)])), MultiPolygon)

    def test_mixed_space(self):
        shape = to_shapely(Space([Point(0, 0), LineString([(0, 0), (1, 1)])]))
        assert isinstance(shape, GeometryCollection)
        assert len(shape.geoms) == 2

    def test_none(self):
        assert to_shapely(None) is None

    def test_unrepresentable(self):
        with pytest.raises(UnrepresentableGeometryError):
            to_shapely((1, 2))


class TestFromShapely:
    """Tests for from_shapely."""

    def test_point(self):
        assert from_shapely(ShapelyPoint(1, 2), proj="EPSG:4326") == Point(1.0, 2.0)

    def test_z_dropped(self):
        assert from_shapely(ShapelyPoint(1, 2, 3)) == Point(1.0, 2.0)

    def test_line(self):
        line = from_shapely(ShapelyLineString([(0, 0), (1, 1)]))
        assert line == LineString([(0, 0), (1, 1)])

    def test_linear_ring_is_unfilled(self):
        line = from_shapely(LinearRing([(0, 0), (1, 0), (0, 1)]))
        assert line.is_ring
        assert not line.is_filled

    def test_polygon(self):
        surface = from_shapely(ShapelyPolygon(TRIANGLE))
        assert surface == Surface(TRIANGLE)

    def test_collections(self):
        space = from_shapely(MultiPoint([(0, 0), (1, 1)]), proj="p")
        assert space == Space([Point(0, 0), Point(1, 1)])
        assert space.proj == "p"
        assert space.component(0).proj == "p"

    def test_empty(self):
        assert from_shapely(ShapelyPoint()) is None
        assert from_shapely(GeometryCollection()) is None

    def test_round_trip(self):
        space = Space([Point(1, 2), Surface(TRIANGLE)])
        assert from_shapely(to_shapely(space)) == Space(
            [Point(1.0, 2.0), Surface([(float(x), float(y)) for x, y in TRIANGLE])]
        )


class TestShapelyWkt:
    """Tests for parsing WKT written by Shapely."""

    @pytest.mark.parametrize(
        "shape",
        [
            ShapelyPoint(1, 2),
            ShapelyLineString([(0, 0), (1, 1), (2, 0)]),
            ShapelyPolygon(TRIANGLE),
            MultiPoint([(0, 0), (1, 1)]),
            MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]]),
        ],
    )
    def test_parse_shapely_wkt(self, shape):
        geometry = parse_wkt(shape.wkt)
        assert geometry is not None
        assert to_shapely(geometry).equals(shape)
