"""
WKT formatting module for geowkt.

This module renders geometry values, or plain coordinate pairs, as
Well-Known Text.
"""

from .wkt_formatter import (
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

__all__ = [
    "dumps",
    "wkt_geomcollection",
    "wkt_linestring",
    "wkt_multilinestring",
    "wkt_multipoint",
    "wkt_multipolygon",
    "wkt_optimal",
    "wkt_point",
    "wkt_polygon",
]
