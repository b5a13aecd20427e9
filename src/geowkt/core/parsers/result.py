"""
Result type shared by the WKT recognizers.

Each recognizer answers with one of three outcomes: the text was parsed,
the text is not the kind of geometry this recognizer handles, or the text
claims to be that kind but is syntactically broken.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from geowkt.core.errors import NestingTooDeepError, WktParseError
from geowkt.models.geometry import Geometry


class ParseStatus(str, Enum):
    """Outcome of a single recognizer."""

    PARSED = "parsed"
    NO_MATCH = "no_match"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing a WKT fragment.

    Attributes:
        status: Parsed, no match or malformed
        geometry: The parsed geometry when status is PARSED
        reason: Human readable reason for a failure
        error: The exception describing a malformed input, if any
    """

    status: ParseStatus
    geometry: Optional[Geometry] = None
    reason: Optional[str] = None
    error: Optional[Union[WktParseError, NestingTooDeepError]] = None

    @property
    def ok(self) -> bool:
        return self.status == ParseStatus.PARSED

    @classmethod
    def parsed(cls, geometry: Geometry) -> "ParseResult":
        return cls(ParseStatus.PARSED, geometry=geometry)

    @classmethod
    def no_match(cls, reason: str) -> "ParseResult":
        return cls(ParseStatus.NO_MATCH, reason=reason)

    @classmethod
    def malformed(
        cls, error: Union[WktParseError, NestingTooDeepError]
    ) -> "ParseResult":
        return cls(ParseStatus.MALFORMED, reason=error.message, error=error)

    def unwrap(self, text: Optional[str] = None) -> Geometry:
        """
        Return the geometry or raise the failure as an exception.

        Args:
            text: Input text to attach to a no-match error

        Raises:
            WktParseError: If nothing matched or the input is malformed
            NestingTooDeepError: If the input nests deeper than allowed
        """
        if self.ok:
            if self.geometry is None:
                raise WktParseError(
                    "Parsed result carries no geometry",
                    status=self.status.value,
                    text=text,
                )
            return self.geometry
        if self.error is not None:
            raise self.error
        raise WktParseError(
            self.reason or "Unrecognized WKT geometry",
            status=self.status.value,
            text=text,
            error_code="UNRECOGNIZED_WKT",
        )
