"""Error handling utilities for geosun."""

import sys
from typing import Optional


class GeoSunError(Exception):
    """Base exception for geosun-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class TimeParseError(GeoSunError, ValueError):
    """Raised when an instant cannot be interpreted as a UTC timestamp."""

    def __init__(self, instant):
        message = f"Invalid UTC time: {instant!r}"
        suggestions = [
            "Use ISO-8601 format with 'Z' suffix for UTC (e.g., '2008-06-20T23:59:00Z')",
            "A datetime object or a Unix timestamp in seconds is also accepted",
            "Example: --utc-time 2008-06-20T23:59:00Z",
        ]
        super().__init__(message, suggestions)


class StationUndefinedError(GeoSunError):
    """Raised when a station-relative value is requested without a station."""

    def __init__(self):
        message = "Station is not defined"
        suggestions = [
            "Call set_station(Station(latitude, longitude)) before bearing()",
            "On the command line, pass --station LAT,LON",
        ]
        super().__init__(message, suggestions)


class EllipsoidNotFoundError(GeoSunError, ValueError):
    """Raised when an ellipsoid name is not recognized."""

    def __init__(self, name: str, available_ellipsoids: list[str]):
        message = f"Unknown ellipsoid: '{name}'"
        suggestions = [
            f"Available ellipsoids: {', '.join(sorted(available_ellipsoids))}",
            "Ellipsoid names are case-sensitive (e.g., 'WGS84', 'GRS80')",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, GeoSunError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, GeoSunError):
        traceback.print_exc()

    return 1
