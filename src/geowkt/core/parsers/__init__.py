"""
WKT parsing module for geowkt.

This module turns Well-Known Text into geometry values, recursing into
collections of any depth.
"""

from .coordinates import parse_coordinates, parse_number, parse_pair
from .result import ParseResult, ParseStatus
from .splitter import BalancedComponentSplitter, split_components
from .wkt_parser import (
    loads,
    parse,
    parse_wkt,
    parse_wkt_geomcol,
    parse_wkt_linestring,
    parse_wkt_point,
    parse_wkt_polygon,
)

__all__ = [
    # Coordinates
    "parse_coordinates",
    "parse_number",
    "parse_pair",
    # Results
    "ParseResult",
    "ParseStatus",
    # Splitting
    "BalancedComponentSplitter",
    "split_components",
    # WKT
    "loads",
    "parse",
    "parse_wkt",
    "parse_wkt_geomcol",
    "parse_wkt_linestring",
    "parse_wkt_point",
    "parse_wkt_polygon",
]
