"""civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError. Passing an
unsupported source type to ``DateTime.from_any`` raises the builtin
TypeError instead.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class ValidationError(CivilTimeError):
    """Invalid input values.

    Raised when an argument is well-typed but not acceptable.

    Examples:
        - Unknown unit tag such as "fortnight"
        - Duration mapping with an unknown key such as "weeks"
        - Range step that does not move forward
        - Non-finite epoch milliseconds
    """

    pass


class ParseError(CivilTimeError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as a date/time.

    Examples:
        - Invalid ISO 8601 format
        - Month 13 or day 30 in February
        - Malformed UTC offset
    """

    pass


__all__ = [
    "CivilTimeError",
    "ValidationError",
    "ParseError",
]
