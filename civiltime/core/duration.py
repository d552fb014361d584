"""Duration class representing calendar-aware amounts of time.

This module provides the Duration class: the operand of ``DateTime.plus``
and friends. Components are kept exactly as given; what "one month" means
is decided by the normalizer when the duration is applied to a DateTime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Union

from civiltime._internal.validation import check_integers
from civiltime.errors import ValidationError


class Duration:
    """An amount of time in calendar units.

    Unlike a fixed span of milliseconds, a Duration keeps each unit
    separate: "1 month" stays one month and only gets a length once it is
    added to a concrete DateTime. Components are not normalized, so
    ``Duration(months=14)`` remains 14 months.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).
        hours: Number of hours (can be negative).
        minutes: Number of minutes (can be negative).
        seconds: Number of seconds (can be negative).
        milliseconds: Number of milliseconds (can be negative).

    Examples:
        >>> d = Duration(months=1, days=2)
        >>> d.months
        1
        >>> -d
        Duration(months=-1, days=-2)

        >>> Duration.coerce({"hours": 3})
        Duration(hours=3)
    """

    FIELDS: tuple[str, ...] = (
        "years",
        "months",
        "days",
        "hours",
        "minutes",
        "seconds",
        "milliseconds",
    )

    __slots__ = (
        "_years",
        "_months",
        "_days",
        "_hours",
        "_minutes",
        "_seconds",
        "_milliseconds",
    )

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero.

        Raises:
            TypeError: If a component is not an int.
        """
        check_integers(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
        )
        self._years = years
        self._months = months
        self._days = days
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._milliseconds = milliseconds

    @classmethod
    def coerce(cls, value: DurationLike | None = None) -> Duration:
        """Return ``value`` as a Duration.

        Accepts a Duration (returned as is), a mapping with any subset of
        :attr:`FIELDS` as keys (missing keys are 0), or None (zero).

        Raises:
            ValidationError: If a mapping has keys outside :attr:`FIELDS`.
            TypeError: If value is neither a Duration nor a mapping.

        Examples:
            >>> Duration.coerce({"days": 1, "milliseconds": -1})
            Duration(days=1, milliseconds=-1)
            >>> Duration.coerce(None)
            Duration()
        """
        if value is None:
            return cls()
        if isinstance(value, Duration):
            return value
        if isinstance(value, Mapping):
            unknown = sorted(set(value) - set(cls.FIELDS))
            if unknown:
                raise ValidationError(
                    f"unknown duration field(s): {', '.join(map(str, unknown))}; "
                    f"expected any of {', '.join(cls.FIELDS)}"
                )
            return cls(**value)
        raise TypeError(
            f"expected Duration or mapping, got {type(value).__name__}"
        )

    @property
    def years(self) -> int:
        """Return the years component."""
        return self._years

    @property
    def months(self) -> int:
        """Return the months component."""
        return self._months

    @property
    def days(self) -> int:
        """Return the days component."""
        return self._days

    @property
    def hours(self) -> int:
        """Return the hours component."""
        return self._hours

    @property
    def minutes(self) -> int:
        """Return the minutes component."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the seconds component."""
        return self._seconds

    @property
    def milliseconds(self) -> int:
        """Return the milliseconds component."""
        return self._milliseconds

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self._components())

    def _components(self) -> tuple[int, ...]:
        return (
            self._years,
            self._months,
            self._days,
            self._hours,
            self._minutes,
            self._seconds,
            self._milliseconds,
        )

    def as_dict(self) -> dict[str, int]:
        """Return all seven components keyed by field name.

        Examples:
            >>> Duration(days=2).as_dict()["days"]
            2
        """
        return dict(zip(self.FIELDS, self._components()))

    # Arithmetic operators

    def __neg__(self) -> Duration:
        """Return the duration with every component negated."""
        return Duration(*(-c for c in self._components()))

    def __pos__(self) -> Duration:
        return self

    def __add__(self, other: object) -> Duration:
        """Add two durations component by component."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(
            *(a + b for a, b in zip(self._components(), other._components()))
        )

    def __sub__(self, other: object) -> Duration:
        """Subtract two durations component by component."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: object) -> Duration:
        """Scale every component by an integer.

        Examples:
            >>> Duration(months=1, days=2) * 3
            Duration(months=3, days=6)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration(*(c * other for c in self._components()))

    __rmul__ = __mul__

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Check component-wise equality.

        ``Duration(months=12) != Duration(years=1)``: components are
        compared as given, never normalized.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._components() == other._components()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash(self._components())

    def __bool__(self) -> bool:
        """Return True if any component is non-zero."""
        return not self.is_zero

    def __repr__(self) -> str:
        """Return a representation listing the non-zero components.

        Examples:
            >>> Duration(years=1, hours=-2)
            Duration(years=1, hours=-2)
        """
        parts = [f"{name}={value}" for name, value in self.as_dict().items() if value]
        return f"Duration({', '.join(parts)})"


# Anything accepted where a duration is expected
DurationLike = Union[Duration, Mapping[str, int]]


__all__ = ["Duration", "DurationLike"]
