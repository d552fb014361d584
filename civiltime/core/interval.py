"""Interval class measuring the calendar distance between two DateTimes.

This module provides the Interval class. An interval knows its two
endpoints and breaks the distance between them into calendar units
(years, months, days, hours, minutes, seconds, milliseconds), anchored at
the start.
"""

from __future__ import annotations

from civiltime._internal.calendar import days_between, days_in_month
from civiltime._internal.constants import (
    HOURS_PER_DAY,
    MILLIS_PER_SECOND,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)
from civiltime._internal.normalize import normalize_time
from civiltime.core.datetime import DateTime, DateTimeLike
from civiltime.core.duration import Duration, DurationLike
from civiltime.errors import ValidationError
from civiltime.units.timeunit import TimeUnit

_PROJECTION_UNITS = frozenset(TimeUnit) - {TimeUnit.WEEK}


class Interval:
    """The span from ``start`` to ``end``, closed at both ends.

    The breakdown is computed once, at construction:

    - ``years`` and ``months`` count whole calendar months consumed from
      ``start``
    - ``days`` is what is left of the last partial month, measured in the
      month the count lands on
    - ``hours``, ``minutes``, ``seconds`` and ``milliseconds`` are the
      remaining time of day, with ``hours`` always in 0-23

    The decomposition is anchored at ``start``, so swapping the endpoints
    does not simply negate every component.

    No ordering is enforced: ``end`` may be earlier than ``start``, in
    which case ``years`` (and the totals from :meth:`to`) are negative.

    Attributes:
        start: The first endpoint.
        end: The second endpoint.

    Examples:
        >>> i = Interval.between("2023-01-31", "2023-03-03")
        >>> i.months, i.days
        (1, 0)
        >>> i.to("days")
        31
    """

    __slots__ = (
        "_start",
        "_end",
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_milliseconds",
        "_day_carry",
    )

    def __init__(self, start: DateTime, end: DateTime) -> None:
        """Create an interval and compute its calendar breakdown.

        Args:
            start: The anchor of the breakdown.
            end: The other endpoint; may be earlier than ``start``.
        """
        self._start = start
        self._end = end

        time = normalize_time(
            end.hour - start.hour,
            end.minute - start.minute,
            end.second - start.second,
            end.millisecond - start.millisecond,
        )
        # A negative time of day difference borrows a whole day
        self._day_carry, self._hours = divmod(time.hour, HOURS_PER_DAY)
        days = end.day - start.day + self._day_carry
        months = (end.year - start.year) * MONTHS_PER_YEAR + end.month - start.month

        def anchored_month_days() -> int:
            # Length of the month reached by moving `months` from start
            year_carry, month_index = divmod(start.month - 1 + months, MONTHS_PER_YEAR)
            return days_in_month(start.year + year_carry, month_index + 1)

        while days >= anchored_month_days():
            days -= anchored_month_days()
            months += 1
        while days < 0:
            months -= 1
            days += anchored_month_days()

        self._years, self._months = divmod(months, MONTHS_PER_YEAR)
        self._days = days
        self._minutes = time.minute
        self._seconds = time.second
        self._milliseconds = time.millisecond

    @classmethod
    def between(cls, start: DateTimeLike, end: DateTimeLike) -> Interval:
        """Create an interval from anything ``DateTime.from_any`` accepts.

        Examples:
            >>> Interval.between(0, "1970-01-02").to("hours")
            24
        """
        return cls(DateTime.from_any(start), DateTime.from_any(end))

    @classmethod
    def before(
        cls,
        end: DateTimeLike,
        duration: DurationLike | None = None,
        /,
        **components: int,
    ) -> Interval:
        """Create the interval that ends at ``end`` and lasts ``duration``.

        Examples:
            >>> i = Interval.before("2024-03-31", months=1)
            >>> i.start
            DateTime.from_fields(2024, 3, 2, 0, 0, 0, 0)
        """
        end_dt = DateTime.from_any(end)
        return cls(end_dt.minus(duration, **components), end_dt)

    @classmethod
    def after(
        cls,
        start: DateTimeLike,
        duration: DurationLike | None = None,
        /,
        **components: int,
    ) -> Interval:
        """Create the interval that starts at ``start`` and lasts ``duration``.

        Examples:
            >>> i = Interval.after("2024-01-15", {"months": 1, "days": 2})
            >>> i.end
            DateTime.from_fields(2024, 2, 17, 0, 0, 0, 0)
        """
        start_dt = DateTime.from_any(start)
        return cls(start_dt, start_dt.plus(duration, **components))

    @property
    def start(self) -> DateTime:
        """Return the start of the interval."""
        return self._start

    @property
    def end(self) -> DateTime:
        """Return the end of the interval."""
        return self._end

    @property
    def years(self) -> int:
        """Return the whole years of the breakdown."""
        return self._years

    @property
    def months(self) -> int:
        """Return the whole months left after whole years (0-11)."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days left after whole months."""
        return self._days

    @property
    def hours(self) -> int:
        """Return the hours left after whole days (0-23)."""
        return self._hours

    @property
    def minutes(self) -> int:
        """Return the minutes left after whole hours (0-59)."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the seconds left after whole minutes (0-59)."""
        return self._seconds

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds left after whole seconds (0-999)."""
        return self._milliseconds

    def as_duration(self) -> Duration:
        """Return the breakdown as a Duration.

        Adding the result to ``start`` gives back ``end`` whenever the day
        remainder fits the month reached from ``start``.

        Examples:
            >>> Interval.between("2024-01-15", "2025-03-20T06:00:00Z").as_duration()
            Duration(years=1, months=2, days=5, hours=6)
        """
        return Duration(
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    def to(self, unit: TimeUnit | str) -> int:
        """Express the whole interval in a single unit.

        ``years`` and ``months`` come from the calendar breakdown. ``days``
        and finer units are exact: they start from the true number of days
        between the endpoints (leap days included) and cascade down, so
        ``to("days")`` is not ``years * 365 + months * 30 + days``.

        Partial units are floored, so an interval that is 23 hours long
        spans 0 days and one of -23 hours spans -1 day.

        Args:
            unit: One of years, months, days, hours, minutes, seconds,
                milliseconds.

        Raises:
            ValidationError: If unit is not one of the above. Unknown tags
                are rejected here, so the final ``AssertionError`` arm is
                unreachable unless a TimeUnit member is added without a
                matching branch.

        Examples:
            >>> i = Interval.between("2024-01-01", "2025-01-01T01:30:00Z")
            >>> i.to("months")
            12
            >>> i.to("days")
            366
            >>> i.to("minutes")
            527130
        """
        parsed = TimeUnit.parse(unit)
        if parsed not in _PROJECTION_UNITS:
            raise ValidationError(
                f"unit must be one of years, months, days, hours, minutes, "
                f"seconds, milliseconds; got {unit!r}"
            )

        if parsed is TimeUnit.YEAR:
            return self._years
        if parsed is TimeUnit.MONTH:
            return self._years * MONTHS_PER_YEAR + self._months

        days = self._day_carry + days_between(
            (self._start.year, self._start.month, self._start.day),
            (self._end.year, self._end.month, self._end.day),
        )
        if parsed is TimeUnit.DAY:
            return days
        hours = days * HOURS_PER_DAY + self._hours
        if parsed is TimeUnit.HOUR:
            return hours
        minutes = hours * MINUTES_PER_HOUR + self._minutes
        if parsed is TimeUnit.MINUTE:
            return minutes
        seconds = minutes * SECONDS_PER_MINUTE + self._seconds
        if parsed is TimeUnit.SECOND:
            return seconds
        if parsed is TimeUnit.MILLISECOND:
            return seconds * MILLIS_PER_SECOND + self._milliseconds
        raise AssertionError(f"unhandled unit: {parsed!r}")

    def contains(self, dt: DateTime) -> bool:
        """Check if ``dt`` lies within the interval, endpoints included.

        Assumes ``start <= end``; a reversed interval contains nothing.

        Examples:
            >>> i = Interval.between("2024-01-01", "2024-01-10")
            >>> i.contains(DateTime.from_any("2024-01-10"))
            True
        """
        return self._start <= dt <= self._end

    def __contains__(self, dt: DateTime) -> bool:
        """Support 'dt in interval' syntax."""
        return self.contains(dt)

    def overlaps(self, other: Interval) -> bool:
        """Check if two intervals share at least one instant.

        Endpoints are inclusive, so intervals that touch overlap.

        Examples:
            >>> a = Interval.between("2024-01-01", "2024-01-10")
            >>> b = Interval.between("2024-01-10", "2024-01-15")
            >>> a.overlaps(b)
            True
        """
        return self._start <= other._end and other._start <= self._end

    def __eq__(self, other: object) -> bool:
        """Two intervals are equal if they have the same endpoints."""
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        """Return the interval in closed mathematical notation.

        Examples:
            >>> str(Interval.between("2024-01-01", "2024-01-02"))
            '[2024-01-01T00:00:00.000Z, 2024-01-02T00:00:00.000Z]'
        """
        return f"[{self._start}, {self._end}]"


__all__ = ["Interval"]
