"""TimeUnit enumeration for calendar units.

This module provides the TimeUnit enum naming the units that
``DateTime.start_of``/``end_of`` and ``Interval.to`` dispatch on.
"""

from __future__ import annotations

from enum import Enum

from civiltime.errors import ValidationError


class TimeUnit(Enum):
    """Calendar and clock units, from milliseconds up to years.

    Unit tags may be given as members or as strings; strings are matched
    case-insensitively in singular or plural form.

    Examples:
        >>> TimeUnit.parse("months")
        <TimeUnit.MONTH: 'month'>

        >>> TimeUnit.parse("Day")
        <TimeUnit.DAY: 'day'>

        >>> TimeUnit.HOUR.plural
        'hours'
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def plural(self) -> str:
        """Return the plural tag, which is also the Duration field name."""
        return f"{self.value}s"

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Convert a unit tag to a TimeUnit.

        Args:
            value: A TimeUnit, or a singular/plural unit name.

        Returns:
            The matching TimeUnit.

        Raises:
            ValidationError: If the tag names no known unit.
        """
        if isinstance(value, TimeUnit):
            return value
        if isinstance(value, str):
            tag = value.strip().lower()
            if tag.endswith("s"):
                tag = tag[:-1]
            try:
                return cls(tag)
            except ValueError:
                raise ValidationError(f"unknown time unit: {value!r}") from None
        raise ValidationError(f"unknown time unit: {value!r}")


__all__ = ["TimeUnit"]
