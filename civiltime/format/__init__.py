"""DateTime formatting and parsing.

Functions:
    parse_iso8601: Parse an ISO 8601 date or date-time string as UTC.
    format_iso8601: Format a DateTime as an ISO 8601 string.

Examples:
    >>> from civiltime.format import parse_iso8601, format_iso8601
    >>> dt = parse_iso8601("2024-01-15T14:30:45Z")
    >>> dt.year
    2024
    >>> format_iso8601(dt)
    '2024-01-15T14:30:45.000Z'
"""

from __future__ import annotations

from civiltime.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
