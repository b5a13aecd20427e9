"""
Conversion between geowkt geometries and Shapely geometries.

Lets applications hand parsed WKT to Shapely for geometric operations and
bring Shapely results back for WKT output. Z values are dropped. Shapely
has no projection concept, so the projection tag is supplied by the caller
on the way back.
"""

import logging
from typing import Any, Optional

from shapely.geometry import (
    GeometryCollection,
    LineString as ShapelyLineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point as ShapelyPoint,
    Polygon as ShapelyPolygon,
)
from shapely.geometry.base import BaseGeometry

from geowkt.core.errors import UnrepresentableGeometryError
from geowkt.models.geometry import (
    Geometry,
    GeometryKind,
    LineString,
    Point,
    Space,
    Surface,
    geometry_kind,
)

logger = logging.getLogger(__name__)


def _xy(coords: Any) -> list:
    return [(c[0], c[1]) for c in coords]


def to_shapely(geometry: Optional[Geometry]) -> Optional[BaseGeometry]:
    """
    Convert a geometry tree into a Shapely geometry.

    A filled ring becomes a Polygon. A Space becomes MultiPoint,
    MultiLineString or MultiPolygon when its members share one kind, and a
    GeometryCollection otherwise.

    Args:
        geometry: Geometry value, or None

    Returns:
        Shapely geometry, or None for None

    Raises:
        UnrepresentableGeometryError: If geometry is not a geometry value
    """
    if geometry is None:
        return None

    kind = geometry_kind(geometry)
    if kind == GeometryKind.POINT:
        return ShapelyPoint(geometry.x, geometry.y)
    if kind == GeometryKind.LINE:
        coords = [p.xy for p in geometry.points]
        if geometry.is_ring and geometry.is_filled:
            return ShapelyPolygon(coords)
        return ShapelyLineString(coords)
    if kind == GeometryKind.SURFACE:
        return ShapelyPolygon(
            [p.xy for p in geometry.outer.points],
            [[p.xy for p in ring.points] for ring in geometry.inner],
        )

    members = [to_shapely(component) for component in geometry.components]
    if members and all(isinstance(m, ShapelyPoint) for m in members):
        return MultiPoint(members)
    if members and all(type(m) is ShapelyLineString for m in members):
        return MultiLineString(members)
    if members and all(isinstance(m, ShapelyPolygon) for m in members):
        return MultiPolygon(members)
    return GeometryCollection(members)


def from_shapely(shape: BaseGeometry, proj: Optional[Any] = None) -> Optional[Geometry]:
    """
    Convert a Shapely geometry into a geometry tree.

    Args:
        shape: Shapely geometry
        proj: Projection tag attached to every constructed geometry

    Returns:
        Geometry value, or None for an empty Shapely geometry

    Raises:
        UnrepresentableGeometryError: If the Shapely type is not supported
    """
    if shape.is_empty:
        return None

    if isinstance(shape, ShapelyPoint):
        return Point(shape.x, shape.y, proj=proj)
    if isinstance(shape, ShapelyLineString):
        # Also covers LinearRing, a closed but unfilled line
        return LineString(tuple(_xy(shape.coords)), filled=False, proj=proj)
    if isinstance(shape, ShapelyPolygon):
        return Surface(
            tuple(_xy(shape.exterior.coords)),
            tuple(tuple(_xy(ring.coords)) for ring in shape.interiors),
            proj=proj,
        )
    if isinstance(shape, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        components = [from_shapely(member, proj) for member in shape.geoms]
        return Space(tuple(c for c in components if c is not None), proj=proj)

    logger.error(f"Unsupported Shapely geometry type: {shape.geom_type}")
    raise UnrepresentableGeometryError(shape)
