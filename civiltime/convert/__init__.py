"""Conversion utilities for DateTime.

This module provides functions for converting DateTime values to and from
Unix epoch milliseconds.

Examples:
    >>> from civiltime.convert import from_unix_millis
    >>> from_unix_millis(86_400_000).day
    2
"""

from __future__ import annotations

from civiltime.convert.epoch import from_unix_millis, to_unix_millis

__all__: list[str] = [
    "from_unix_millis",
    "to_unix_millis",
]
