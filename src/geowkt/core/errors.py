"""
Custom exception hierarchy for geowkt.

This module defines the exceptions raised by the WKT parsers, the
geometry model and the WKT formatters.
"""

from typing import Any, Dict, List, Optional


class GeoWktException(Exception):
    """
    Base exception for all geowkt-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeoWktException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class WktParseError(GeoWktException):
    """
    Raised when WKT text cannot be parsed.

    Carries the parse status (no match or malformed) so callers of the
    strict API can tell an unknown geometry keyword from broken syntax.
    """

    def __init__(
        self,
        message: str,
        status: Optional[str] = None,
        text: Optional[str] = None,
        error_code: str = "PARSE_ERROR",
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize WktParseError.

        Args:
            message: User-friendly error message
            status: Parse status name ("no_match" or "malformed")
            text: Offending WKT fragment, truncated for readability
            error_code: Specific parse error code
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if status:
            error_details["status"] = status
        if text is not None:
            error_details["text"] = text if len(text) <= 80 else text[:77] + "..."

        default_suggestions = [
            "Check the geometry keyword is one of POINT, LINESTRING, POLYGON, "
            "MULTIPOINT, MULTILINESTRING, MULTIPOLYGON or GEOMETRYCOLLECTION",
            "Verify every opening parenthesis has a matching closing one",
        ]

        super().__init__(
            message=message,
            error_code=error_code,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
        self.status = status
        self.text = text


class MalformedWktError(WktParseError):
    """Raised when a coordinate list or shape body is syntactically broken."""

    def __init__(self, message: str, text: Optional[str] = None, **kwargs: Any):
        super().__init__(
            message,
            status="malformed",
            text=text,
            error_code="MALFORMED_WKT",
            **kwargs,
        )


class MalformedCollectionError(WktParseError):
    """
    Raised when a collection body cannot be split into components.

    Used for unbalanced parentheses and empty components.
    """

    def __init__(self, message: str, text: Optional[str] = None, **kwargs: Any):
        super().__init__(
            message,
            status="malformed",
            text=text,
            error_code="MALFORMED_COLLECTION",
            **kwargs,
        )


class NestingTooDeepError(GeoWktException):
    """
    Raised when geometry nesting exceeds the configured maximum depth.

    Both the parser and the formatters recurse once per collection level,
    so both enforce the limit.
    """

    def __init__(self, max_depth: int, text: Optional[str] = None):
        details: Dict[str, Any] = {"max_depth": max_depth}
        if text is not None:
            details["text"] = text if len(text) <= 80 else text[:77] + "..."

        super().__init__(
            message=f"Geometry nesting exceeds maximum depth of {max_depth}",
            error_code="NESTING_TOO_DEEP",
            details=details,
            suggestions=["Raise GEOWKT_MAX_NESTING_DEPTH if the input is trusted"],
        )
        self.max_depth = max_depth
        self.text = text


class GeometryError(GeoWktException):
    """
    Raised when a geometry value violates a model invariant.

    Used for line strings with fewer than two points and polygon rings
    that are not closed.
    """

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeometryError.

        Args:
            message: User-friendly error message
            geometry_type: Type of geometry that caused the error
            details: Technical details about the geometry error
            suggestions: List of suggestions for fixing the geometry
        """
        error_details = details or {}
        if geometry_type:
            error_details["geometry_type"] = geometry_type

        default_suggestions = [
            "Line strings need at least two points",
            "Polygon rings must end with their first point",
        ]

        super().__init__(
            message=message,
            error_code="GEOMETRY_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class UnrepresentableGeometryError(GeoWktException, TypeError):
    """
    Raised when a value outside the geometry model is given to a formatter.

    This signals a programming error in the producer of the value, not bad
    input data, and is never swallowed by geowkt.
    """

    def __init__(self, value: Any):
        super().__init__(
            message=f"Cannot represent {type(value).__name__} value as WKT",
            error_code="UNREPRESENTABLE_GEOMETRY",
            details={"value_type": type(value).__name__},
            suggestions=["Pass a Point, LineString, Surface or Space instance"],
        )
        self.value = value


class ConfigurationError(GeoWktException):
    """
    Raised when library configuration is invalid.

    Used for invalid environment variables or settings values.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GEOWKT_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
