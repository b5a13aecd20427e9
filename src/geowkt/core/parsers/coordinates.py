"""
Coordinate list parsing.

Turns the inside of a WKT point list, such as ``1 2,3.5 -4``, into Point
values. Coordinate values are preserved: integer tokens become ``int`` and
every other numeric token becomes ``float``. The text written back by the
formatters may differ from the input, ``1.50`` comes back as ``1.5``.
"""

import logging
import re
from typing import Any, List, Optional

from geowkt.core.errors import MalformedWktError
from geowkt.models.geometry import Number, Point

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
WHITESPACE = re.compile(r"\s+")


def parse_number(token: str) -> Number:
    """
    Convert one coordinate token to a number.

    Args:
        token: Text of a single number

    Returns:
        An int for integer tokens, a float otherwise

    Raises:
        MalformedWktError: If the token is not a number

    Examples:
        >>> parse_number("12")
        12
        >>> parse_number("-1.5e3")
        -1500.0
    """
    if INTEGER_PATTERN.match(token):
        return int(token)
    if NUMBER_PATTERN.match(token):
        return float(token)
    raise MalformedWktError(f"Invalid coordinate value: {token!r}", text=token)


def parse_pair(pair: str, proj: Optional[Any] = None) -> Point:
    """
    Parse ``"x y"`` into a Point.

    The pair is split on the first run of whitespace and both halves must
    be single numbers.

    Raises:
        MalformedWktError: If the pair does not hold exactly two numbers
    """
    tokens = WHITESPACE.split(pair.strip(), maxsplit=1)
    if len(tokens) != 2 or not tokens[0]:
        raise MalformedWktError(
            f"Coordinate pair needs two numbers, got {pair.strip()!r}", text=pair
        )
    return Point(parse_number(tokens[0]), parse_number(tokens[1]), proj=proj)


def parse_coordinates(text: str, proj: Optional[Any] = None) -> List[Point]:
    """
    Parse a comma separated list of coordinate pairs.

    Args:
        text: Point list without its enclosing parentheses
        proj: Projection tag attached to every point

    Returns:
        Points in input order; an empty list for blank input

    Raises:
        MalformedWktError: If any pair is not two numeric tokens

    Examples:
        >>> parse_coordinates("1 2,3 4")
        [Point(x=1, y=2, proj=None), Point(x=3, y=4, proj=None)]
    """
    if not text.strip():
        return []

    points = [parse_pair(pair, proj) for pair in text.split(",")]
    logger.debug(f"Parsed {len(points)} coordinate pairs")
    return points
