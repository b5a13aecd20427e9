#!/usr/bin/env python3
"""
Demo script showing how to convert between WKT and geowkt geometries.

This example demonstrates:
1. Parsing WKT of every supported kind
2. Formatting geometries in their most compact WKT form
3. Strict parsing with detailed errors
4. Handing geometries to Shapely
"""

import logging

from geowkt import (
    LineString,
    Point,
    Space,
    Surface,
    WktParseError,
    loads,
    parse_wkt,
    wkt_multipolygon,
    wkt_optimal,
)
from geowkt.core.interop import to_shapely
from geowkt.core.logging_config import setup_logging
from geowkt.utils.logging import PerformanceTimer

SAMPLES = [
    "POINT(4.89 52.37)",
    "linestring(1 2,2 3,3 2)",
    "POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,4 2,4 4,2 2))",
    "MULTIPOINT(1 2,3 4)",
    "MULTIPOLYGON(((0 0,1 0,0 1,0 0)),((2 2,3 2,2 3,2 2)))",
    "GEOMETRYCOLLECTION(POINT(1 2),GEOMETRYCOLLECTION(LINESTRING(0 0,1 1)))",
]


def main():
    """Run WKT conversion demo."""
    setup_logging(log_level="INFO")

    print("=" * 70)
    print("WKT Conversion Demo")
    print("=" * 70)

    # Example 1: Parse WKT
    print("\n1. Parsing WKT...")
    print("-" * 70)

    with PerformanceTimer("parse_samples", log_level=logging.INFO):
        for text in SAMPLES:
            geometry = parse_wkt(text)
            print(f"  {text}")
            print(f"    -> {type(geometry).__name__}, optimal: {wkt_optimal(geometry)}")

    # Example 2: Build and format geometries
    print("\n2. Formatting geometries...")
    print("-" * 70)

    triangle = [(0, 0), (1, 0), (0, 1), (0, 0)]
    examples = {
        "point": Point(1, 2),
        "open line": LineString([(0, 0), (1, 1)]),
        "filled ring": LineString(triangle, filled=True),
        "surface": Surface(triangle),
        "single member space": Space([Point(5, 6)]),
        "mixed space": Space([Point(1, 2), LineString([(0, 0), (1, 1)])]),
        "no geometry": None,
    }
    for name, geometry in examples.items():
        print(f"  {name:20s} {wkt_optimal(geometry)}")

    print(f"  {'two triangles':20s} {wkt_multipolygon(triangle, [(2, 2), (3, 2), (2, 3), (2, 2)])}")

    # Example 3: Strict parsing
    print("\n3. Strict parsing...")
    print("-" * 70)

    for text in ["GEOMETRYCOLLECTION(POINT(1 2),POLYGON((0 0", "CIRCLE(0 0,1)"]:
        try:
            loads(text)
        except WktParseError as e:
            print(f"  {text!r}: {e}")
            print(f"    details: {e.details}")

    # Example 4: Shapely
    print("\n4. Shapely interop...")
    print("-" * 70)

    surface = parse_wkt("POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,4 2,4 4,2 4,2 2))")
    shape = to_shapely(surface)
    print(f"  area={shape.area}, valid={shape.is_valid}")

    print("\n" + "=" * 70)
    print("Demo complete! See the test files for more examples.")
    print("=" * 70)


if __name__ == "__main__":
    main()
