"""ISO 8601 formatting and parsing.

This module provides functions for converting DateTime values to and from
ISO 8601 strings. Parsed values are always UTC: a trailing offset is
applied to the fields, and a string without one is read as UTC.

Supported forms:

Dates:
    - YYYY, YYYY-MM, YYYY-MM-DD
    - +YYYYYY-MM-DD / -YYYYYY-MM-DD (expanded years)

Times (after 'T', 't' or a space):
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS.f (any number of digits, truncated to milliseconds)

Offsets (times only):
    - Z
    - +HH:MM, -HH:MM, +HHMM, +HH

Examples:
    >>> parse_iso8601("2024-01-15T14:30:45.5+09:00")
    DateTime.from_fields(2024, 1, 15, 5, 30, 45, 500)

    >>> format_iso8601(parse_iso8601("2024-01-15"))
    '2024-01-15T00:00:00.000Z'
"""

from __future__ import annotations

import re

from civiltime._internal.calendar import days_in_month
from civiltime.core.datetime import DateTime
from civiltime.errors import ParseError

_ISO_PATTERN = re.compile(
    r"""
    (?P<year>[+-]\d{6}|\d{4})
    (?:-(?P<month>\d{2})
        (?:-(?P<day>\d{2})
            (?:[Tt\ ]
                (?P<hour>\d{2}):(?P<minute>\d{2})
                (?::(?P<second>\d{2})
                    (?:[.,](?P<fraction>\d+))?
                )?
                (?P<offset>[Zz]|(?P<sign>[+-])(?P<offset_hour>\d{2})(?::?(?P<offset_minute>\d{2}))?)?
            )?
        )?
    )?
    """,
    re.VERBOSE | re.ASCII,
)


def _check_range(name: str, value: int, low: int, high: int, s: str) -> None:
    if value < low or value > high:
        raise ParseError(f"{name} must be {low}-{high}, got {value} in {s!r}")


def parse_iso8601(s: str) -> DateTime:
    """Parse an ISO 8601 string into a DateTime.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        The UTC DateTime the string denotes.

    Raises:
        ParseError: If the string is not valid ISO 8601 or a component is
            out of range (month 13, February 30, hour 24, ...).

    Examples:
        >>> parse_iso8601("2024-02")
        DateTime.from_fields(2024, 2, 1, 0, 0, 0, 0)

        >>> parse_iso8601("2024-01-01T00:30-01:00")
        DateTime.from_fields(2024, 1, 1, 1, 30, 0, 0)
    """
    text = s.strip()
    if not text:
        raise ParseError("empty datetime string")

    match = _ISO_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(
            f"invalid ISO 8601 datetime: {s!r}. "
            "Expected YYYY-MM-DD with optional THH:MM[:SS[.sss]] and offset"
        )

    if match["year"] == "-000000":
        raise ParseError(f"year -000000 is not allowed: {s!r}")
    year = int(match["year"])
    month = int(match["month"] or 1)
    day = int(match["day"] or 1)
    hour = int(match["hour"] or 0)
    minute = int(match["minute"] or 0)
    second = int(match["second"] or 0)
    fraction = match["fraction"] or ""
    millisecond = int(fraction[:3].ljust(3, "0"))

    _check_range("month", month, 1, 12, s)
    _check_range("day", day, 1, days_in_month(year, month), s)
    _check_range("hour", hour, 0, 23, s)
    _check_range("minute", minute, 0, 59, s)
    _check_range("second", second, 0, 59, s)

    offset_minutes = 0
    if match["sign"]:
        offset_hour = int(match["offset_hour"])
        offset_minute = int(match["offset_minute"] or 0)
        _check_range("offset hour", offset_hour, 0, 23, s)
        _check_range("offset minute", offset_minute, 0, 59, s)
        offset_minutes = offset_hour * 60 + offset_minute
        if match["sign"] == "-":
            offset_minutes = -offset_minutes

    # Local time minus its offset is UTC
    return DateTime.from_fields(
        year, month, day, hour, minute - offset_minutes, second, millisecond
    )


def format_iso8601(value: DateTime) -> str:
    """Format a DateTime as an ISO 8601 string.

    Args:
        value: The DateTime to format.

    Returns:
        A string like '2024-01-15T14:30:45.000Z'.

    Raises:
        TypeError: If value is not a DateTime.
    """
    if not isinstance(value, DateTime):
        raise TypeError(f"expected DateTime, got {type(value).__name__}")
    return value.to_iso_format()


__all__ = ["parse_iso8601", "format_iso8601"]
