"""Internal constants for civiltime.

These constants define the calendar and unit conversion numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24

MILLIS_PER_MINUTE: int = SECONDS_PER_MINUTE * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = MINUTES_PER_HOUR * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = HOURS_PER_DAY * MILLIS_PER_HOUR  # 86_400_000

# Calendar
DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12
DAYS_PER_COMMON_YEAR: int = 365

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Weekday names, Sunday first (index 0)
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Unix epoch, 1970-01-01T00:00:00.000Z
UNIX_EPOCH_YEAR: int = 1970


__all__ = [
    "MILLIS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "DAYS_PER_COMMON_YEAR",
    "DAYS_IN_MONTH",
    "WEEKDAY_NAMES",
    "UNIX_EPOCH_YEAR",
]
