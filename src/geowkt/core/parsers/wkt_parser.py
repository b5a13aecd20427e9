"""
WKT text to geometry tree.

Leaf shapes (POINT, LINESTRING, POLYGON) are recognized with fixed
patterns. Collections (MULTIPOINT, MULTILINESTRING, MULTIPOLYGON,
GEOMETRYCOLLECTION) are split with BalancedComponentSplitter and every
member is parsed again through the dispatcher.

The ``parse_wkt*`` functions return None for text they cannot parse;
``loads`` raises instead.
"""

import functools
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from geowkt.core.config import settings
from geowkt.core.errors import (
    GeometryError,
    MalformedCollectionError,
    MalformedWktError,
    NestingTooDeepError,
    WktParseError,
)
from geowkt.core.parsers.coordinates import parse_coordinates, parse_number
from geowkt.core.parsers.result import ParseResult
from geowkt.core.parsers.splitter import BalancedComponentSplitter
from geowkt.models.geometry import (
    Geometry,
    LineString,
    Point,
    Space,
    Surface,
)
from geowkt.utils.logging import log_performance

logger = logging.getLogger(__name__)

POINT_PATTERN = re.compile(r"^\s*POINT\s*\(\s*(\S+)\s+([^\s)]+)\s*\)\s*$", re.IGNORECASE)
LINESTRING_PATTERN = re.compile(
    r"^\s*LINESTRING\s*\((.*)\)\s*$", re.IGNORECASE | re.DOTALL
)
POLYGON_PATTERN = re.compile(
    r"^\s*POLYGON\s*\(\s*\((.*)\)\s*\)\s*$", re.IGNORECASE | re.DOTALL
)
RING_SEPARATOR = re.compile(r"\)\s*,?\s*\(")
COLLECTION_PATTERN = re.compile(
    r"^\s*(MULTIPOINT|MULTILINESTRING|MULTIPOLYGON|GEOMETRYCOLLECTION)\s*\((.*)\)\s*$",
    re.IGNORECASE | re.DOTALL,
)
KEYWORD_PATTERN = re.compile(r"^\s*([A-Za-z]+)")

# Member kind implied by a collection keyword, for members written
# without their own keyword, as in MULTIPOINT((1 2),(3 4)).
MEMBER_KEYWORDS = {
    "MULTIPOINT": "POINT",
    "MULTILINESTRING": "LINESTRING",
    "MULTIPOLYGON": "POLYGON",
}

Recognizer = Callable[..., ParseResult]


def recognizer(func: Recognizer) -> Recognizer:
    """
    Turn parse exceptions raised inside a recognizer into a MALFORMED result.

    Non-string input is never a match.
    """

    @functools.wraps(func)
    def wrapper(text: Any, *args: Any, **kwargs: Any) -> ParseResult:
        if not isinstance(text, str):
            return ParseResult.no_match(f"Expected WKT text, got {type(text).__name__}")
        try:
            return func(text, *args, **kwargs)
        except (WktParseError, NestingTooDeepError) as e:
            return ParseResult.malformed(e)

    return wrapper


@recognizer
def recognize_point(text: str, proj: Optional[Any] = None) -> ParseResult:
    """Recognize ``POINT(x y)``."""
    match = POINT_PATTERN.match(text)
    if not match:
        return ParseResult.no_match("Not a POINT")

    return ParseResult.parsed(
        Point(parse_number(match.group(1)), parse_number(match.group(2)), proj=proj)
    )


@recognizer
def recognize_linestring(text: str, proj: Optional[Any] = None) -> ParseResult:
    """Recognize ``LINESTRING(x y,...)`` with at least two points."""
    match = LINESTRING_PATTERN.match(text)
    if not match:
        return ParseResult.no_match("Not a LINESTRING")

    points = parse_coordinates(match.group(1), proj)
    if len(points) < 2:
        return ParseResult.no_match(
            f"LINESTRING needs at least 2 points, got {len(points)}"
        )
    return ParseResult.parsed(LineString(tuple(points), filled=False, proj=proj))


@recognizer
def recognize_polygon(text: str, proj: Optional[Any] = None) -> ParseResult:
    """
    Recognize ``POLYGON((outer),(inner),...)``.

    Rings never nest, so the ``)(`` boundaries between them are enough to
    separate them. The first ring is the outer boundary.
    """
    match = POLYGON_PATTERN.match(text)
    if not match:
        return ParseResult.no_match("Not a POLYGON")

    rings = [
        parse_coordinates(ring, proj) for ring in RING_SEPARATOR.split(match.group(1))
    ]
    try:
        surface = Surface(rings[0], tuple(rings[1:]), proj=proj)
    except GeometryError as e:
        raise MalformedWktError(f"Invalid POLYGON ring: {e.message}", text=text) from e
    return ParseResult.parsed(surface)


@recognizer
def recognize_collection(
    text: str, proj: Optional[Any] = None, depth: int = 0
) -> ParseResult:
    """
    Recognize a MULTI* or GEOMETRYCOLLECTION value.

    Every member is parsed through the dispatcher; one failing member fails
    the whole collection. The keyword only steers parsing and is not kept
    in the resulting Space.
    """
    match = COLLECTION_PATTERN.match(text)
    if not match:
        return ParseResult.no_match("Not a WKT collection")

    if depth >= settings.max_nesting_depth:
        raise NestingTooDeepError(settings.max_nesting_depth, text=text)

    keyword = match.group(1).upper()
    components: List[Geometry] = []
    for fragment in BalancedComponentSplitter(match.group(2)):
        result = _dispatch(_member_text(fragment, keyword), proj, depth + 1)
        if not result.ok:
            if result.error is not None:
                raise result.error
            raise MalformedCollectionError(
                f"{keyword} member is not a recognized geometry: {result.reason}",
                text=fragment,
            )
        components.append(result.geometry)

    if not components:
        raise MalformedCollectionError(f"{keyword} has no members", text=text)

    logger.debug(f"Parsed {keyword} with {len(components)} components")
    return ParseResult.parsed(Space(tuple(components), proj=proj))


def _member_text(fragment: str, keyword: str) -> str:
    """Prefix a keyword-less MULTI* member with its implied keyword."""
    if fragment[0].isalpha() or keyword not in MEMBER_KEYWORDS:
        return fragment

    member_keyword = MEMBER_KEYWORDS[keyword]
    if not fragment.startswith("("):
        # MULTIPOINT(1 2,3 4)
        return f"{member_keyword}({fragment})"
    return member_keyword + fragment


LEAF_RECOGNIZERS: Dict[str, Recognizer] = {
    "POINT": recognize_point,
    "LINESTRING": recognize_linestring,
    "POLYGON": recognize_polygon,
}


def _dispatch(text: Any, proj: Optional[Any], depth: int) -> ParseResult:
    if not isinstance(text, str):
        return ParseResult.no_match(f"Expected WKT text, got {type(text).__name__}")

    keyword = KEYWORD_PATTERN.match(text)
    leaf = LEAF_RECOGNIZERS.get(keyword.group(1).upper()) if keyword else None
    if leaf is not None:
        return leaf(text, proj)
    return recognize_collection(text, proj, depth)


def parse(text: Any, proj: Optional[Any] = None) -> ParseResult:
    """
    Parse any WKT geometry and report the outcome as a ParseResult.

    Args:
        text: WKT text
        proj: Projection tag attached to every constructed geometry

    Returns:
        ParseResult with status PARSED, NO_MATCH or MALFORMED
    """
    return _dispatch(text, proj, 0)


def _geometry_or_none(result: ParseResult, text: Any) -> Optional[Geometry]:
    if result.ok:
        return result.geometry
    logger.debug(f"Unparsable WKT ({result.status.value}): {result.reason}: {text!r:.80}")
    return None


def parse_wkt_point(text: Any, proj: Optional[Any] = None) -> Optional[Point]:
    """Parse ``POINT(x y)`` or return None."""
    return _geometry_or_none(recognize_point(text, proj), text)


def parse_wkt_linestring(text: Any, proj: Optional[Any] = None) -> Optional[LineString]:
    """Parse ``LINESTRING(...)`` or return None."""
    return _geometry_or_none(recognize_linestring(text, proj), text)


def parse_wkt_polygon(text: Any, proj: Optional[Any] = None) -> Optional[Surface]:
    """Parse ``POLYGON((...),...)`` into a Surface or return None."""
    return _geometry_or_none(recognize_polygon(text, proj), text)


def parse_wkt_geomcol(text: Any, proj: Optional[Any] = None) -> Optional[Space]:
    """Parse a MULTI* or GEOMETRYCOLLECTION value into a Space or return None."""
    return _geometry_or_none(recognize_collection(text, proj, 0), text)


@log_performance(log_level=logging.DEBUG)
def parse_wkt(text: Any, proj: Optional[Any] = None) -> Optional[Geometry]:
    """
    Parse any supported WKT geometry.

    Args:
        text: WKT text, keywords are case-insensitive
        proj: Projection tag attached to every constructed geometry

    Returns:
        The geometry, or None when the text cannot be parsed

    Examples:
        >>> parse_wkt("point(1 2)")
        Point(x=1, y=2, proj=None)
    """
    return _geometry_or_none(parse(text, proj), text)


def loads(text: str, proj: Optional[Any] = None) -> Geometry:
    """
    Parse any supported WKT geometry, raising on failure.

    Raises:
        WktParseError: If the text is not recognized or is malformed
        NestingTooDeepError: If collections nest deeper than allowed
    """
    return parse(text, proj).unwrap(text if isinstance(text, str) else None)
