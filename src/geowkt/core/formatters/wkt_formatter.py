"""
Geometry tree to WKT text.

The ``wkt_*`` functions accept geometry values as well as plain (x, y)
pairs and lists of pairs. Output never contains whitespace except the
single space between the two numbers of a pair. Numbers are written with
``str()``, without rounding.

``wkt_optimal`` picks the most compact representation for any geometry:
single member collections collapse to their member and collections of
points become MULTIPOINT.
"""

import logging
from typing import Any, List, Sequence

from geowkt.core.config import settings
from geowkt.core.errors import (
    GeometryError,
    NestingTooDeepError,
    UnrepresentableGeometryError,
)
from geowkt.models.geometry import (
    GeometryKind,
    LineString,
    Point,
    Space,
    Surface,
    is_geometry,
    is_number,
)
from geowkt.utils.logging import log_performance

logger = logging.getLogger(__name__)


def _is_pair(value: Any) -> bool:
    return isinstance(value, Point) or (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and is_number(value[0])
        and is_number(value[1])
    )


def _pair(value: Any) -> str:
    if isinstance(value, Point):
        return f"{value.x} {value.y}"
    if _is_pair(value):
        return f"{value[0]} {value[1]}"
    raise GeometryError(f"Expected a Point or an (x, y) pair, got {value!r}")


def _list_of_points(*points: Any) -> str:
    """
    Render points as ``(x1 y1,x2 y2,...)``.

    Accepts several points, one LineString, or one sequence of points.
    """
    if len(points) == 1 and isinstance(points[0], LineString):
        points = points[0].points
    elif len(points) == 1 and not _is_pair(points[0]):
        points = tuple(points[0])

    return "(" + ",".join(_pair(point) for point in points) + ")"


def wkt_point(*args: Any) -> str:
    """
    Format one point.

    Accepts ``x, y``, an ``(x, y)`` pair or a Point. No argument or None
    gives ``POINT()``, the encoding of "no geometry".

    Examples:
        >>> wkt_point(1, 2)
        'POINT(1 2)'
        >>> wkt_point(None)
        'POINT()'
    """
    if not args or (len(args) == 1 and args[0] is None):
        return "POINT()"
    if len(args) == 2:
        return f"POINT({_pair(args)})"
    if len(args) == 1:
        return f"POINT({_pair(args[0])})"
    raise GeometryError(f"wkt_point takes one point, got {len(args)} arguments")


def wkt_linestring(*points: Any) -> str:
    """
    Format an open line.

    Examples:
        >>> wkt_linestring((1, 2), (3, 4))
        'LINESTRING(1 2,3 4)'
    """
    return "LINESTRING" + _list_of_points(*points)


def _polygon_rings(args: Sequence[Any]) -> List[Any]:
    first = args[0]
    if isinstance(first, Surface):
        return list(first.rings)
    if isinstance(first, LineString):
        return list(args)
    if isinstance(first, (tuple, list)) and not _is_pair(first):
        # Each argument is a ring given as a sequence of points
        return list(args)
    # Each argument is a point of the outer ring
    return [args]


def wkt_polygon(*args: Any) -> str:
    """
    Format one polygon, the outer ring followed by any holes.

    Accepts a Surface, one or more LineString rings, one or more point
    sequences (one per ring), or the points of a single ring. Returns an
    empty string when called with nothing or None.

    Examples:
        >>> wkt_polygon((0, 0), (1, 0), (1, 1), (0, 0))
        'POLYGON((0 0,1 0,1 1,0 0))'
    """
    if not args or args[0] is None:
        return ""

    rings = _polygon_rings(args)
    return "POLYGON(" + ",".join(_list_of_points(ring) for ring in rings) + ")"


def wkt_multipoint(*points: Any) -> str:
    """Format points as MULTIPOINT, or an empty string for no points."""
    if not points:
        return ""
    return "MULTIPOINT(" + ",".join(wkt_point(point) for point in points) + ")"


def wkt_multilinestring(*lines: Any) -> str:
    """Format lines as MULTILINESTRING, or an empty string for no lines."""
    if not lines:
        return ""
    return "MULTILINESTRING(" + ",".join(wkt_linestring(line) for line in lines) + ")"


def wkt_multipolygon(*polygons: Any) -> str:
    """
    Format polygons as MULTIPOLYGON, or an empty string for no polygons.

    Each member is a Surface, a ring LineString or a sequence of points.
    The ``POLYGON`` keyword is removed from every member. None members
    are skipped.

    Examples:
        >>> wkt_multipolygon([(0, 0), (1, 0), (0, 1), (0, 0)])
        'MULTIPOLYGON(((0 0,1 0,0 1,0 0)))'
        >>> wkt_multipolygon(None)
        ''
    """
    members = [wkt_polygon(polygon) for polygon in polygons]
    members = [member[len("POLYGON"):] for member in members if member]
    if not members:
        return ""

    return "MULTIPOLYGON(" + ",".join(members) + ")"


def _geomcollection(geometries: Sequence[Any], depth: int) -> str:
    return (
        "GEOMETRYCOLLECTION("
        + ",".join(_optimal(geometry, depth) for geometry in geometries)
        + ")"
    )


def wkt_geomcollection(*geometries: Any) -> str:
    """
    Format geometries as GEOMETRYCOLLECTION.

    A single Space argument is unwrapped to its components; otherwise every
    argument is a member. Members are formatted with ``wkt_optimal``.
    """
    if len(geometries) == 1 and isinstance(geometries[0], Space):
        geometries = geometries[0].components
    return _geomcollection(geometries, 1)


def _optimal(geometry: Any, depth: int) -> str:
    if geometry is None:
        return wkt_point(None)

    if not is_geometry(geometry):
        logger.error(f"Cannot represent {type(geometry).__name__} value as WKT")
        raise UnrepresentableGeometryError(geometry)

    if depth > settings.max_nesting_depth:
        raise NestingTooDeepError(settings.max_nesting_depth)

    kind = geometry.kind
    if kind == GeometryKind.POINT:
        return wkt_point(geometry)
    if kind == GeometryKind.LINE:
        if geometry.is_ring and geometry.is_filled:
            return wkt_polygon(geometry)
        return wkt_linestring(geometry)
    if kind == GeometryKind.SURFACE:
        return wkt_multipolygon(geometry)
    if kind == GeometryKind.SPACE:
        if geometry.nr_components == 1:
            return _optimal(geometry.component(0), depth + 1)
        if geometry.only_points:
            return wkt_multipoint(*geometry.points)
        return _geomcollection(geometry.components, depth + 1)

    raise UnrepresentableGeometryError(geometry)


@log_performance(log_level=logging.DEBUG)
def wkt_optimal(geometry: Any) -> str:
    """
    Format any geometry in its most compact WKT form.

    Rules:
        - None gives ``POINT()``
        - a filled ring LineString gives POLYGON, other lines LINESTRING
        - a Surface is formatted as a one member MULTIPOLYGON
        - a Space with one component is formatted as that component
        - a Space of points gives MULTIPOINT (an empty Space gives "")
        - any other Space gives GEOMETRYCOLLECTION

    Raises:
        UnrepresentableGeometryError: If geometry is not a geometry value
        NestingTooDeepError: If Space values nest deeper than allowed
    """
    return _optimal(geometry, 0)


dumps = wkt_optimal
