"""Field normalization for civiltime.

The normalizer reduces arbitrary integer date and time fields (month 14,
day 0, hour -5, ...) to canonical ranges without moving the instant they
describe. Only carries and borrows happen here, never rounding.

Carries cascade from the finest unit upward:

    millisecond -> second -> minute -> hour -> day -> month -> year

All divisions are floor divisions, so negative inputs borrow from the
next unit and leave a non-negative remainder.

This module is not part of the public API; the public names are
re-exported from :mod:`civiltime`.
"""

from __future__ import annotations

from typing import NamedTuple

from civiltime._internal.calendar import days_in_month, ordinal_to_ymd, ymd_to_ordinal
from civiltime._internal.constants import (
    HOURS_PER_DAY,
    MILLIS_PER_SECOND,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)


class DateFields(NamedTuple):
    """A (year, month, day) triple."""

    year: int
    month: int
    day: int


class TimeFields(NamedTuple):
    """An (hour, minute, second, millisecond) quadruple.

    As returned by :func:`normalize_time`, ``hour`` is unbounded.
    """

    hour: int
    minute: int
    second: int
    millisecond: int


class DateTimeFields(NamedTuple):
    """All seven fields of a date and time."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int


def normalize_time(hour: int, minute: int, second: int, millisecond: int) -> TimeFields:
    """Carry time fields upward into canonical ranges.

    ``minute``, ``second`` and ``millisecond`` come back in 0-59, 0-59 and
    0-999. ``hour`` absorbs the carry but is *not* reduced into 0-23; the
    caller decides where whole days go.

    Examples:
        >>> normalize_time(0, 0, 61, 1500)
        TimeFields(hour=0, minute=1, second=2, millisecond=500)
        >>> normalize_time(0, 0, 0, -1)
        TimeFields(hour=-1, minute=59, second=59, millisecond=999)
    """
    second_carry, millisecond = divmod(millisecond, MILLIS_PER_SECOND)
    minute_carry, second = divmod(second + second_carry, SECONDS_PER_MINUTE)
    hour_carry, minute = divmod(minute + minute_carry, MINUTES_PER_HOUR)
    return TimeFields(hour + hour_carry, minute, second, millisecond)


def normalize_date(year: int, month: int, day: int) -> DateFields:
    """Resolve month and day overflow into a canonical date.

    The month is folded into 1-12 first, carrying whole years. Then any
    day outside the month rolls forward or backward across month and year
    boundaries, as if subtracting (or adding) month lengths one month at a
    time. Day overflow is resolved through ordinal day numbers, so the cost
    does not grow with the size of the overflow.

    Examples:
        >>> normalize_date(2024, 14, 1)
        DateFields(year=2025, month=2, day=1)
        >>> normalize_date(2024, 3, 0)
        DateFields(year=2024, month=2, day=29)
        >>> normalize_date(2023, 2, 31)
        DateFields(year=2023, month=3, day=3)
    """
    year_carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    year += year_carry
    month = month_index + 1

    if 1 <= day <= days_in_month(year, month):
        return DateFields(year, month, day)

    ordinal = ymd_to_ordinal(year, month, 1) + day - 1
    return DateFields(*ordinal_to_ymd(ordinal))


def normalize_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> DateTimeFields:
    """Normalize all seven fields of a date and time.

    Time fields are normalized first; whole days of the resulting hour are
    folded into ``day`` before the date is normalized.

    Examples:
        >>> normalize_datetime(2023, 12, 31, 23, 59, 59, 1000)
        DateTimeFields(year=2024, month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
    """
    time = normalize_time(hour, minute, second, millisecond)
    day_carry, hour = divmod(time.hour, HOURS_PER_DAY)
    date = normalize_date(year, month, day + day_carry)
    return DateTimeFields(
        date.year,
        date.month,
        date.day,
        hour,
        time.minute,
        time.second,
        time.millisecond,
    )


__all__ = [
    "DateFields",
    "TimeFields",
    "DateTimeFields",
    "normalize_time",
    "normalize_date",
    "normalize_datetime",
]
