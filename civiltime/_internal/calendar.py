"""Calendar utilities for civiltime.

This module provides the pure calendar functions everything else is built
on: leap year logic, month lengths, day-of-year, weekday, and ordinal day
numbers in the proleptic Gregorian calendar.

Every function accepts any integer year (including 0 and negative years)
and relies on Python's floor division, so results stay consistent across
year 0.

This module is not part of the public API; the public names are
re-exported from :mod:`civiltime`.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_COMMON_YEAR,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    WEEKDAY_NAMES,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_days(year: int) -> int:
    """Return the number of leap years in [1, year].

    For non-positive years the count is negative or zero, so that
    ``leap_days(b) - leap_days(a)`` is always the number of leap years
    in ``(a, b]``.

    Examples:
        >>> leap_days(2000)
        485
        >>> leap_days(0)
        0
        >>> leap_days(-1)
        -1
    """
    return year // 4 - year // 100 + year // 400


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return DAYS_PER_COMMON_YEAR + 1 if is_leap_year(year) else DAYS_PER_COMMON_YEAR


def yearday(year: int, month: int, day: int) -> int:
    """Return the zero-based day of the year (January 1 is 0).

    Uses a Fairfield-style closed form that treats March as the first
    month of a computational year, so January and February become months
    13 and 14 of the previous one. ``m`` is that shifted month plus one:

    - January -> 14, February -> 15, March -> 4, ..., December -> 13

    ``306 * m // 10`` is the day offset of month ``m - 1`` counted from an
    early-March origin; ``-64`` moves the origin to January 1 of a common
    year (``-122 + 31 + 28 - 1``), and the final ``% 365`` folds January and
    February back to the front of the year. The leap day is then added for
    dates after February.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day of the month (1-31), already valid for the month.

    Returns:
        Day of year in 0-365.

    Examples:
        >>> yearday(2024, 1, 1)
        0
        >>> yearday(2024, 12, 31)
        365
        >>> yearday(2023, 12, 31)
        364
    """
    m = (month + 9) % 12 + 4
    day_of_year = (306 * m // 10 - 64 + day) % DAYS_PER_COMMON_YEAR
    if month > 2 and is_leap_year(year):
        day_of_year += 1
    return day_of_year


def weekday(year: int, month: int, day: int) -> int:
    """Return the day of week with Sunday=0 through Saturday=6.

    Examples:
        >>> weekday(1970, 1, 1)  # Thursday
        4
        >>> weekday(2024, 1, 1)  # Monday
        1
    """
    return (year + leap_days(year - 1) + yearday(year, month, day)) % DAYS_PER_WEEK


def weekday_name(index: int, full: bool = False) -> str:
    """Return the English name of a weekday index (Sunday=0).

    Args:
        index: Weekday index as returned by :func:`weekday`.
        full: Return the full name ("Thursday") instead of the
            three-letter abbreviation ("Thu").

    Raises:
        ValueError: If index is not in 0-6.

    Examples:
        >>> weekday_name(4)
        'Thu'
        >>> weekday_name(4, full=True)
        'Thursday'
    """
    if index < 0 or index >= DAYS_PER_WEEK:
        raise ValueError(f"weekday index must be 0-6, got {index}")
    name = WEEKDAY_NAMES[index]
    return name if full else name[:3]


def days_before_year(year: int) -> int:
    """Return the number of days from 0001-01-01 to January 1 of ``year``."""
    y = year - 1
    return y * DAYS_PER_COMMON_YEAR + leap_days(y)


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1, matching
    :meth:`datetime.date.toordinal`. Dates before year 1 get zero or
    negative ordinals.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day, valid for the month.

    Returns:
        The ordinal day number.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(0, 12, 31)
        0
    """
    return days_before_year(year) + yearday(year, month, day) + 1


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal (0001-01-01 is 1) back to year, month, day.

    Works for any integer ordinal: the 400-year cycle split uses floor
    division, so the remainder is never negative.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: 36524 days each (the last has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: 1461 days each
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: 365 days each (the last has 366)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle: December 31 of the previous year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month = 1
    dim = days_in_month(year, month)
    while n >= dim:
        n -= dim
        month += 1
        dim = days_in_month(year, month)
    return (year, month, n + 1)


def days_between(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
) -> int:
    """Return the exact number of days from ``start`` to ``end``.

    Both arguments are canonical ``(year, month, day)`` triples. The count
    is negative when ``end`` is earlier than ``start``.

    Examples:
        >>> days_between((2023, 1, 1), (2024, 1, 1))
        365
        >>> days_between((2024, 1, 1), (2025, 1, 1))
        366
    """
    start_year, start_month, start_day = start
    end_year, end_month, end_day = end
    return (
        (end_year - start_year) * DAYS_PER_COMMON_YEAR
        + leap_days(end_year - 1)
        - leap_days(start_year - 1)
        + yearday(end_year, end_month, end_day)
        - yearday(start_year, start_month, start_day)
    )


__all__ = [
    "is_leap_year",
    "leap_days",
    "days_in_month",
    "days_in_year",
    "yearday",
    "weekday",
    "weekday_name",
    "days_before_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "days_between",
]
