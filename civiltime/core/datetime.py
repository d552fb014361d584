"""DateTime class representing a point in civil UTC time.

This module provides the DateTime class for representing instants in the
proleptic Gregorian calendar with millisecond precision. Every instance is
canonical: all public construction paths run the fields through
:func:`~civiltime._internal.normalize.normalize_datetime`.
"""

from __future__ import annotations

import datetime as _datetime
import math
from typing import TYPE_CHECKING, Union

from civiltime._internal.calendar import days_between, weekday, weekday_name, yearday
from civiltime._internal.calendar import days_in_month as _days_in_month
from civiltime._internal.calendar import is_leap_year as _is_leap_year
from civiltime._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    UNIX_EPOCH_YEAR,
)
from civiltime._internal.normalize import DateTimeFields, normalize_datetime
from civiltime._internal.validation import check_integers
from civiltime.core.duration import Duration, DurationLike
from civiltime.errors import ValidationError
from civiltime.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from civiltime.core.range import DateTimeRange


# Fields reset by start_of, finest first. Iteration stops at the unit
# being truncated to; every field before it is reset.
_TRUNCATION: tuple[tuple[TimeUnit, str, int], ...] = (
    (TimeUnit.SECOND, "second", 0),
    (TimeUnit.MINUTE, "minute", 0),
    (TimeUnit.HOUR, "hour", 0),
    (TimeUnit.DAY, "day", 1),
    (TimeUnit.MONTH, "month", 1),
)

_BOUNDARY_UNITS = frozenset(TimeUnit) - {TimeUnit.MILLISECOND}


def _as_duration(duration: DurationLike | None, components: dict[str, int]) -> Duration:
    """Merge a positional duration-like value with keyword components."""
    result = Duration.coerce(duration)
    if components:
        result = result + Duration.coerce(components)
    return result


class DateTime:
    """A point in civil time: a UTC date and time of day.

    DateTime is an immutable value. It cannot be instantiated directly;
    use one of the factories, all of which normalize their input:

    - :meth:`from_any` for epoch milliseconds, ISO strings and stdlib
      datetimes
    - :meth:`from_fields` for raw, possibly out-of-range fields
    - :meth:`now` for the current instant

    Ordering is chronological, which for canonical values is the
    lexicographic order of (year, month, day, hour, minute, second,
    millisecond).

    Attributes:
        year: The year (can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).

    Examples:
        >>> dt = DateTime.from_any("2024-01-15T14:30:45Z")
        >>> dt.hour
        14

        >>> DateTime.from_fields(2024, 14, 1)  # month 14 rolls into 2025
        DateTime.from_fields(2025, 2, 1, 0, 0, 0, 0)

        >>> dt.plus(months=1).start_of("month")
        DateTime.from_fields(2024, 2, 1, 0, 0, 0, 0)
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_millisecond",
    )

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError(
            "DateTime cannot be instantiated directly; "
            "use DateTime.from_any() or DateTime.from_fields()"
        )

    @classmethod
    def _from_fields(cls, fields: DateTimeFields) -> DateTime:
        """Create a DateTime from already-normalized fields.

        This is an internal factory method that bypasses normalization.
        """
        instance = object.__new__(cls)
        (
            instance._year,
            instance._month,
            instance._day,
            instance._hour,
            instance._minute,
            instance._second,
            instance._millisecond,
        ) = fields
        return instance

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> DateTime:
        """Create a DateTime from raw fields, normalizing overflow.

        Fields may be out of range in either direction; they are carried
        into the next larger unit.

        Examples:
            >>> DateTime.from_fields(2024, 1, 31, 24)
            DateTime.from_fields(2024, 2, 1, 0, 0, 0, 0)

            >>> DateTime.from_fields(2024, 0, 15)
            DateTime.from_fields(2023, 12, 15, 0, 0, 0, 0)

        Raises:
            TypeError: If a field is not an int.
        """
        check_integers(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
        )
        return cls._from_fields(
            normalize_datetime(year, month, day, hour, minute, second, millisecond)
        )

    @classmethod
    def from_any(cls, source: DateTimeLike) -> DateTime:
        """Create a DateTime from any supported source.

        Supported sources:
            - DateTime: returned unchanged
            - int or float: Unix epoch milliseconds (floats are truncated
              toward zero)
            - str: ISO 8601 date or date-time, read as UTC unless it
              carries an offset
            - datetime.datetime: aware values are converted to UTC, naive
              values are read as UTC
            - datetime.date: midnight UTC of that date

        Raises:
            TypeError: If the source type is not supported.
            ValidationError: If a float source is NaN or infinite.
            ParseError: If a string source is not valid ISO 8601.

        Examples:
            >>> DateTime.from_any(0)
            DateTime.from_fields(1970, 1, 1, 0, 0, 0, 0)

            >>> DateTime.from_any("2024-02-29")
            DateTime.from_fields(2024, 2, 29, 0, 0, 0, 0)
        """
        if isinstance(source, DateTime):
            return source
        # bool is an int subclass but never a timestamp
        if isinstance(source, bool):
            raise TypeError("unsupported source type: bool")
        if isinstance(source, int):
            return cls.from_unix_millis(source)
        if isinstance(source, float):
            if not math.isfinite(source):
                raise ValidationError(f"epoch milliseconds must be finite, got {source}")
            return cls.from_unix_millis(int(source))
        if isinstance(source, str):
            return cls.from_iso_format(source)
        if isinstance(source, _datetime.date):
            return cls.from_datetime(source)
        raise TypeError(f"unsupported source type: {type(source).__name__}")

    @classmethod
    def from_unix_millis(cls, millis: int) -> DateTime:
        """Create a DateTime from Unix milliseconds.

        Examples:
            >>> DateTime.from_unix_millis(-1)
            DateTime.from_fields(1969, 12, 31, 23, 59, 59, 999)
        """
        days, remaining = divmod(millis, MILLIS_PER_DAY)
        return cls.from_fields(UNIX_EPOCH_YEAR, 1, 1 + days, millisecond=remaining)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse a DateTime from an ISO 8601 string.

        See :func:`civiltime.format.iso8601.parse_iso8601` for the accepted
        forms.

        Raises:
            ParseError: If the string is not valid ISO 8601.
        """
        from civiltime.format.iso8601 import parse_iso8601

        return parse_iso8601(s)

    @classmethod
    def from_datetime(cls, value: _datetime.date) -> DateTime:
        """Create a DateTime from a stdlib ``datetime`` or ``date``.

        Microseconds are truncated to milliseconds.

        Examples:
            >>> import datetime
            >>> tz = datetime.timezone(datetime.timedelta(hours=9))
            >>> DateTime.from_datetime(datetime.datetime(2024, 1, 1, 3, tzinfo=tz))
            DateTime.from_fields(2023, 12, 31, 18, 0, 0, 0)
        """
        if isinstance(value, _datetime.datetime):
            offset = value.utcoffset()
            offset_millis = 0
            if offset is not None:
                offset_millis = offset // _datetime.timedelta(milliseconds=1)
            return cls.from_fields(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond // 1000 - offset_millis,
            )
        if isinstance(value, _datetime.date):
            return cls.from_fields(value.year, value.month, value.day)
        raise TypeError(f"expected datetime or date, got {type(value).__name__}")

    @classmethod
    def now(cls) -> DateTime:
        """Return the current UTC instant."""
        return cls.from_datetime(_datetime.datetime.now(_datetime.timezone.utc))

    @classmethod
    def range(cls, start: DateTimeLike, end: DateTimeLike) -> DateTimeRange:
        """Return the range from ``start`` to ``end``.

        Both ends accept anything :meth:`from_any` does.

        Examples:
            >>> r = DateTime.range("2024-01-01", "2024-01-03")
            >>> len(list(r))
            3
        """
        from civiltime.core.range import DateTimeRange

        return DateTimeRange(cls.from_any(start), cls.from_any(end))

    # Properties

    @property
    def year(self) -> int:
        """Return the year component (can be 0 or negative)."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._second

    @property
    def millisecond(self) -> int:
        """Return the millisecond component (0-999)."""
        return self._millisecond

    @property
    def weekday(self) -> int:
        """Return the day of week, Sunday=0 through Saturday=6.

        Examples:
            >>> DateTime.from_any("1970-01-01").weekday  # Thursday
            4
        """
        return weekday(self._year, self._month, self._day)

    @property
    def yearday(self) -> int:
        """Return the zero-based day of the year (January 1 is 0)."""
        return yearday(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return _is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return _days_in_month(self._year, self._month)

    def weekday_name(self, full: bool = False) -> str:
        """Return the English weekday name, abbreviated unless ``full``.

        Examples:
            >>> DateTime.from_any("1970-01-01").weekday_name()
            'Thu'
            >>> DateTime.from_any("1970-01-01").weekday_name(full=True)
            'Thursday'
        """
        return weekday_name(self.weekday, full=full)

    def fields(self) -> DateTimeFields:
        """Return all seven components as a named tuple."""
        return DateTimeFields(*self._key())

    # Derivation

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with specified components replaced.

        Any component not specified retains its current value. The result
        is normalized, so out-of-range values carry into larger units.

        Raises:
            TypeError: If a replacement is not an int.

        Examples:
            >>> dt = DateTime.from_any("2024-01-15")
            >>> dt.replace(month=14)
            DateTime.from_fields(2025, 2, 15, 0, 0, 0, 0)

            >>> DateTime.from_any("2023-01-31").replace(month=2)
            DateTime.from_fields(2023, 3, 3, 0, 0, 0, 0)
        """
        return DateTime.from_fields(
            self._year if year is None else year,
            self._month if month is None else month,
            self._day if day is None else day,
            self._hour if hour is None else hour,
            self._minute if minute is None else minute,
            self._second if second is None else second,
            self._millisecond if millisecond is None else millisecond,
        )

    def plus(self, duration: DurationLike | None = None, /, **components: int) -> DateTime:
        """Return this DateTime moved forward by a duration.

        Each duration component is added to the matching field and the
        result is normalized once, so adding one month to January 31 lands
        on the day that "February 31" overflows to.

        Args:
            duration: A Duration or mapping of duration fields.
            **components: Duration fields given as keywords; combined with
                ``duration`` when both are present.

        Examples:
            >>> dt = DateTime.from_any("2024-01-31T12:00:00Z")
            >>> dt.plus(days=1, hours=13)
            DateTime.from_fields(2024, 2, 2, 1, 0, 0, 0)

            >>> dt.plus({"months": 1})
            DateTime.from_fields(2024, 3, 2, 12, 0, 0, 0)
        """
        d = _as_duration(duration, components)
        return DateTime.from_fields(
            self._year + d.years,
            self._month + d.months,
            self._day + d.days,
            self._hour + d.hours,
            self._minute + d.minutes,
            self._second + d.seconds,
            self._millisecond + d.milliseconds,
        )

    def minus(self, duration: DurationLike | None = None, /, **components: int) -> DateTime:
        """Return this DateTime moved backward by a duration.

        Examples:
            >>> DateTime.from_any("2024-03-01").minus(days=1)
            DateTime.from_fields(2024, 2, 29, 0, 0, 0, 0)
        """
        return self.plus(-_as_duration(duration, components))

    def start_of(self, unit: TimeUnit | str) -> DateTime:
        """Return the first instant of the unit containing this DateTime.

        Every field finer than ``unit`` is reset. Weeks start on Sunday.

        Args:
            unit: One of year, month, week, day, hour, minute, second.

        Raises:
            ValidationError: If unit is not one of the above.

        Examples:
            >>> dt = DateTime.from_any("2024-01-17T14:30:45.123Z")  # Wednesday
            >>> dt.start_of("month")
            DateTime.from_fields(2024, 1, 1, 0, 0, 0, 0)
            >>> dt.start_of("week")
            DateTime.from_fields(2024, 1, 14, 0, 0, 0, 0)
        """
        unit = self._boundary_unit(unit)
        fields: dict[str, int] = {"millisecond": 0}
        if unit is TimeUnit.WEEK:
            fields["day"] = self._day - self.weekday
            unit = TimeUnit.DAY
        for stop, name, value in _TRUNCATION:
            if unit is stop:
                break
            fields[name] = value
        return self.replace(**fields)

    def end_of(self, unit: TimeUnit | str) -> DateTime:
        """Return the last millisecond of the unit containing this DateTime.

        Args:
            unit: One of year, month, week, day, hour, minute, second.

        Raises:
            ValidationError: If unit is not one of the above.

        Examples:
            >>> DateTime.from_any("2024-02-10").end_of("month")
            DateTime.from_fields(2024, 2, 29, 23, 59, 59, 999)
        """
        unit = self._boundary_unit(unit)
        start = self.start_of(unit)
        if unit is TimeUnit.WEEK:
            return start.plus(days=7, milliseconds=-1)
        return start.plus({unit.plural: 1, "milliseconds": -1})

    @staticmethod
    def _boundary_unit(unit: TimeUnit | str) -> TimeUnit:
        parsed = TimeUnit.parse(unit)
        if parsed not in _BOUNDARY_UNITS:
            raise ValidationError(
                f"unit must be one of year, month, week, day, hour, minute, "
                f"second; got {unit!r}"
            )
        return parsed

    # Conversions

    def to_unix_millis(self) -> int:
        """Return the Unix timestamp in milliseconds.

        Examples:
            >>> DateTime.from_any("1970-01-02").to_unix_millis()
            86400000
        """
        days = days_between((UNIX_EPOCH_YEAR, 1, 1), (self._year, self._month, self._day))
        return (
            days * MILLIS_PER_DAY
            + self._hour * MILLIS_PER_HOUR
            + self._minute * MILLIS_PER_MINUTE
            + self._second * MILLIS_PER_SECOND
            + self._millisecond
        )

    def to_iso_format(self) -> str:
        """Return the DateTime as an ISO 8601 string in UTC.

        Years outside 0-9999 use the expanded six-digit signed form.

        Examples:
            >>> DateTime.from_fields(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45.000Z'

            >>> DateTime.from_fields(-1, 1, 1).to_iso_format()
            '-000001-01-01T00:00:00.000Z'
        """
        if 0 <= self._year <= 9999:
            year = f"{self._year:04d}"
        else:
            year = f"{self._year:+07d}"
        return (
            f"{year}-{self._month:02d}-{self._day:02d}"
            f"T{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
            f".{self._millisecond:03d}Z"
        )

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware stdlib datetime in UTC.

        Raises:
            ValueError: If the year is outside the stdlib's 1-9999 range.
        """
        return _datetime.datetime(
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._millisecond * 1000,
            tzinfo=_datetime.timezone.utc,
        )

    # Arithmetic operators

    def __add__(self, other: object) -> DateTime:
        """Add a Duration to this DateTime.

        Examples:
            >>> DateTime.from_any("2024-01-15") + Duration(days=1, hours=2)
            DateTime.from_fields(2024, 1, 16, 2, 0, 0, 0)
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> DateTime:
        """Subtract a Duration from this DateTime."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    # Comparison operators

    def _key(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._millisecond,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() != other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a representation that rebuilds this value."""
        return "DateTime.from_fields({}, {}, {}, {}, {}, {}, {})".format(*self._key())

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


# Anything DateTime.from_any accepts
DateTimeLike = Union[DateTime, int, float, str, _datetime.date]


__all__ = ["DateTime", "DateTimeLike"]
