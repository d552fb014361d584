"""Internal utilities for civiltime.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, yearday, weekday, ordinals)
    - Field normalization (carrying out-of-range fields)
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.calendar import (
    days_in_month,
    is_leap_year,
    leap_days,
    weekday,
    yearday,
)
from civiltime._internal.normalize import (
    normalize_date,
    normalize_datetime,
    normalize_time,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "leap_days",
    "weekday",
    "yearday",
    "normalize_date",
    "normalize_datetime",
    "normalize_time",
]
