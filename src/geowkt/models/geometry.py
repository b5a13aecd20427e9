"""
Geometry tree used by the WKT parsers and formatters.

This module defines the closed set of geometry variants: Point, LineString,
Surface (a polygon with optional holes) and Space (a heterogeneous
collection). All values are immutable once constructed. Every variant may
carry an opaque projection tag which is passed through and never
interpreted.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, Union

from geowkt.core.errors import GeometryError, UnrepresentableGeometryError

Number = Union[int, float, Decimal]

# Types whose str() is a WKT number token
NUMBER_TYPES = (int, float, Decimal)


class GeometryKind(str, Enum):
    """Discriminator for the geometry variants."""

    POINT = "point"
    LINE = "line"
    SURFACE = "surface"
    SPACE = "space"


def is_number(value: Any) -> bool:
    """Return True for finite numeric coordinate values, excluding booleans."""
    if not isinstance(value, NUMBER_TYPES) or isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


@dataclass(frozen=True)
class Point:
    """
    A single coordinate pair.

    Attributes:
        x: Easting or longitude
        y: Northing or latitude
        proj: Opaque projection tag, ignored in comparisons
    """

    x: Number
    y: Number
    proj: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate coordinates after initialization."""
        if not is_number(self.x) or not is_number(self.y):
            raise GeometryError(
                f"Point coordinates must be finite numbers, got ({self.x!r}, {self.y!r})",
                geometry_type="Point",
            )

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.POINT

    @property
    def xy(self) -> Tuple[Number, Number]:
        """Coordinates as an (x, y) tuple."""
        return (self.x, self.y)


def _as_point(value: Any, proj: Any = None) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Point(value[0], value[1], proj=proj)
    raise GeometryError(
        f"Expected a Point or an (x, y) pair, got {value!r}",
        geometry_type="Point",
    )


@dataclass(frozen=True)
class LineString:
    """
    An ordered sequence of at least two points.

    Attributes:
        points: Points of the line, (x, y) pairs are converted to Point
        filled: True when the line is the boundary of an area
        proj: Opaque projection tag, ignored in comparisons
    """

    points: Tuple[Point, ...]
    filled: bool = False
    proj: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Convert points to a tuple of Point and validate the count."""
        points = tuple(_as_point(p, self.proj) for p in self.points)
        if len(points) < 2:
            raise GeometryError(
                f"LineString needs at least 2 points, got {len(points)}",
                geometry_type="LineString",
                details={"point_count": len(points)},
            )
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "filled", bool(self.filled))

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.LINE

    @property
    def is_ring(self) -> bool:
        """True when the first point equals the last point."""
        return self.points[0].xy == self.points[-1].xy

    @property
    def is_filled(self) -> bool:
        return self.filled

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


def _as_ring(value: Any, proj: Any) -> LineString:
    if isinstance(value, LineString):
        ring = value if value.filled else LineString(value.points, True, value.proj)
    else:
        ring = LineString(tuple(value), filled=True, proj=proj)

    if not ring.is_ring:
        raise GeometryError(
            "Polygon ring is not closed: first and last point differ",
            geometry_type="Surface",
            details={"first": ring.points[0].xy, "last": ring.points[-1].xy},
        )
    return ring


@dataclass(frozen=True)
class Surface:
    """
    A polygon: one outer ring and zero or more inner rings (holes).

    Rings may be given as LineString values or as point sequences; they are
    stored as filled LineStrings and must be closed.
    """

    outer: LineString
    inner: Tuple[LineString, ...] = ()
    proj: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "outer", _as_ring(self.outer, self.proj))
        object.__setattr__(
            self, "inner", tuple(_as_ring(ring, self.proj) for ring in self.inner)
        )

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.SURFACE

    @property
    def rings(self) -> Tuple[LineString, ...]:
        """Outer ring followed by the inner rings."""
        return (self.outer,) + self.inner


@dataclass(frozen=True)
class Space:
    """
    An ordered, possibly heterogeneous collection of geometries.

    Components may themselves be Space values.
    """

    components: Tuple["Geometry", ...] = ()
    proj: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        components = tuple(self.components)
        for component in components:
            if not is_geometry(component):
                raise GeometryError(
                    f"Space components must be geometries, got "
                    f"{type(component).__name__}",
                    geometry_type="Space",
                )
        object.__setattr__(self, "components", components)

    @property
    def kind(self) -> GeometryKind:
        return GeometryKind.SPACE

    @property
    def nr_components(self) -> int:
        return len(self.components)

    def component(self, index: int) -> "Geometry":
        """Return the component at ``index``."""
        return self.components[index]

    @property
    def only_points(self) -> bool:
        """True when every component is a Point (vacuously true when empty)."""
        return all(isinstance(c, Point) for c in self.components)

    @property
    def points(self) -> Tuple[Point, ...]:
        """The Point components, in order."""
        return tuple(c for c in self.components if isinstance(c, Point))

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator["Geometry"]:
        return iter(self.components)


Geometry = Union[Point, LineString, Surface, Space]

GEOMETRY_TYPES = (Point, LineString, Surface, Space)


def is_geometry(value: Any) -> bool:
    """Return True when ``value`` is one of the geometry variants."""
    return isinstance(value, GEOMETRY_TYPES)


def geometry_kind(value: Any) -> GeometryKind:
    """
    Discriminate a geometry value.

    Args:
        value: Any value

    Returns:
        The GeometryKind of the value

    Raises:
        UnrepresentableGeometryError: If value is not a geometry
    """
    if not is_geometry(value):
        raise UnrepresentableGeometryError(value)
    return value.kind


def make_space(components: Iterable[Geometry], proj: Optional[Any] = None) -> Space:
    """Build a Space from any iterable of geometries."""
    return Space(tuple(components), proj=proj)


def make_surface(
    outer: Union[LineString, Sequence[Any]],
    *inner: Union[LineString, Sequence[Any]],
    proj: Optional[Any] = None,
) -> Surface:
    """Build a Surface from an outer ring and any number of holes."""
    return Surface(outer, tuple(inner), proj=proj)
