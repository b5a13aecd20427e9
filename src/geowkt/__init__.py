"""
geowkt - Well-Known Text conversion for geometry trees.

This package parses WKT into points, line strings, polygons and
collections, and formats such geometries back into their most compact
WKT representation.
"""

__version__ = "0.1.0"

from geowkt.core.errors import (
    GeoWktException,
    GeometryError,
    MalformedCollectionError,
    MalformedWktError,
    NestingTooDeepError,
    UnrepresentableGeometryError,
    WktParseError,
)
from geowkt.core.formatters import (
    dumps,
    wkt_geomcollection,
    wkt_linestring,
    wkt_multilinestring,
    wkt_multipoint,
    wkt_multipolygon,
    wkt_optimal,
    wkt_point,
    wkt_polygon,
)
from geowkt.core.parsers import (
    BalancedComponentSplitter,
    ParseResult,
    ParseStatus,
    loads,
    parse_coordinates,
    parse_wkt,
    parse_wkt_geomcol,
    parse_wkt_linestring,
    parse_wkt_point,
    parse_wkt_polygon,
    split_components,
)
from geowkt.models import GeometryKind, LineString, Point, Space, Surface

__all__ = [
    "__version__",
    # Models
    "GeometryKind",
    "LineString",
    "Point",
    "Space",
    "Surface",
    # Parsing
    "BalancedComponentSplitter",
    "ParseResult",
    "ParseStatus",
    "loads",
    "parse_coordinates",
    "parse_wkt",
    "parse_wkt_geomcol",
    "parse_wkt_linestring",
    "parse_wkt_point",
    "parse_wkt_polygon",
    "split_components",
    # Formatting
    "dumps",
    "wkt_geomcollection",
    "wkt_linestring",
    "wkt_multilinestring",
    "wkt_multipoint",
    "wkt_multipolygon",
    "wkt_optimal",
    "wkt_point",
    "wkt_polygon",
    # Errors
    "GeoWktException",
    "GeometryError",
    "MalformedCollectionError",
    "MalformedWktError",
    "NestingTooDeepError",
    "UnrepresentableGeometryError",
    "WktParseError",
]
