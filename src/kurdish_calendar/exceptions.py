"""
Calendar-specific exceptions.

Converters raise these; the formatters in `kurdish_calendar.formatting`
catch them and degrade to a failure result.
"""

from typing import Any, Dict, Optional


class CalendarError(Exception):
    """Base exception for calendar conversion errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize calendar error.

        Args:
            message: Error message
            error_code: Optional error code
            details: Optional error details
        """
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class OutOfRangeError(CalendarError, ValueError):
    """Raised when a year falls outside the range an algorithm or table covers."""

    def __init__(self, calendar: str, year: int, valid_range: Optional[tuple] = None):
        message = f"{calendar} year {year} is out of the supported range"
        if valid_range:
            message += f" [{valid_range[0]}, {valid_range[1]})"

        super().__init__(
            message=message,
            error_code="OUT_OF_RANGE",
            details={"calendar": calendar, "year": year, "valid_range": valid_range},
        )


class InvalidDateError(CalendarError, ValueError):
    """Raised when a date value cannot be interpreted."""

    def __init__(self, value: Any, reason: str = ""):
        message = f"Invalid date {value!r}"
        if reason:
            message += f": {reason}"

        super().__init__(
            message=message,
            error_code="INVALID_DATE",
            details={"value": value, "reason": reason},
        )
