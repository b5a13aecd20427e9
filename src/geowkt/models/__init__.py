"""
Geometry data models.
"""

from .geometry import (
    GEOMETRY_TYPES,
    Geometry,
    GeometryKind,
    LineString,
    Number,
    Point,
    Space,
    Surface,
    geometry_kind,
    is_geometry,
    is_number,
    make_space,
    make_surface,
)

__all__ = [
    "GEOMETRY_TYPES",
    "Geometry",
    "GeometryKind",
    "LineString",
    "Number",
    "Point",
    "Space",
    "Surface",
    "geometry_kind",
    "is_geometry",
    "is_number",
    "make_space",
    "make_surface",
]
