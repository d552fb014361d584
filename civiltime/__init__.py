"""civiltime: calendar date/time values in UTC.

civiltime represents points in civil time (proleptic Gregorian calendar,
UTC, millisecond precision), adds calendar-aware durations to them, and
breaks the span between two of them into calendar units.

Core Types:
    DateTime: A point in time; always canonical
    Duration: Years, months, days, hours, minutes, seconds, milliseconds
    Interval: Calendar breakdown between two DateTimes
    DateTimeRange: Steppable pair of DateTimes

Units:
    TimeUnit: Unit tags for start_of/end_of and Interval.to

Calendar Functions:
    is_leap_year, leap_days, days_in_month, yearday, weekday, weekday_name

Normalization Functions:
    normalize_time, normalize_date, normalize_datetime

Format Functions:
    parse_iso8601: Parse an ISO 8601 string as a UTC DateTime
    format_iso8601: Format a DateTime as an ISO 8601 string

Exceptions:
    CivilTimeError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string

Example:
    >>> from civiltime import DateTime, Interval
    >>> start = DateTime.from_any("2024-01-31")
    >>> start.plus(months=1)
    DateTime.from_fields(2024, 3, 2, 0, 0, 0, 0)
    >>> Interval(start, start.plus(months=1)).months
    1
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration
from civiltime.core.interval import Interval
from civiltime.core.range import DateTimeRange

# Units
from civiltime.units.timeunit import TimeUnit

# Calendar math and normalization
from civiltime._internal.calendar import (
    days_in_month,
    is_leap_year,
    leap_days,
    weekday,
    weekday_name,
    yearday,
)
from civiltime._internal.normalize import (
    DateFields,
    DateTimeFields,
    TimeFields,
    normalize_date,
    normalize_datetime,
    normalize_time,
)

# Exceptions
from civiltime.errors import (
    CivilTimeError,
    ParseError,
    ValidationError,
)

# Format functions
from civiltime.format import format_iso8601, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "DateTimeRange",
    "Duration",
    "Interval",
    # Units
    "TimeUnit",
    # Calendar math
    "days_in_month",
    "is_leap_year",
    "leap_days",
    "weekday",
    "weekday_name",
    "yearday",
    # Normalization
    "DateFields",
    "DateTimeFields",
    "TimeFields",
    "normalize_date",
    "normalize_datetime",
    "normalize_time",
    # Exceptions
    "CivilTimeError",
    "ValidationError",
    "ParseError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
