"""Epoch conversion utilities for DateTime.

This module provides functions for converting between DateTime and Unix
timestamps in milliseconds, the resolution DateTime carries.

Functions:
    to_unix_millis: Convert DateTime to Unix timestamp in milliseconds.
    from_unix_millis: Create DateTime from Unix milliseconds.

The Unix epoch is 1970-01-01T00:00:00.000Z.

Examples:
    >>> from civiltime.convert import from_unix_millis, to_unix_millis
    >>> to_unix_millis(from_unix_millis(1705329000000))
    1705329000000

    >>> from_unix_millis(0).year
    1970
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civiltime.core.datetime import DateTime


def to_unix_millis(dt: "DateTime") -> int:
    """Convert a DateTime to Unix timestamp in milliseconds.

    Args:
        dt: The DateTime to convert.

    Returns:
        Milliseconds since 1970-01-01T00:00:00.000Z (negative before it).

    Examples:
        >>> from civiltime import DateTime
        >>> to_unix_millis(DateTime.from_fields(1970, 1, 1, millisecond=500))
        500
    """
    return dt.to_unix_millis()


def from_unix_millis(millis: int) -> "DateTime":
    """Create a DateTime from Unix milliseconds.

    Args:
        millis: Milliseconds since 1970-01-01T00:00:00.000Z.

    Returns:
        A DateTime representing the given timestamp.

    Examples:
        >>> dt = from_unix_millis(1705329000000)
        >>> dt.year, dt.month, dt.day, dt.hour, dt.minute
        (2024, 1, 15, 14, 30)
    """
    from civiltime.core.datetime import DateTime

    return DateTime.from_unix_millis(millis)


__all__ = [
    "to_unix_millis",
    "from_unix_millis",
]
