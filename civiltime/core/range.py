"""DateTimeRange: a pair of DateTimes that can be stepped through.

``DateTime.range(start, end)`` returns a DateTimeRange. Stepping always
adds a multiple of the step to ``start`` rather than adding the step to the
previous value, so month steps from the 31st do not drift.
"""

from __future__ import annotations

from collections.abc import Iterator

from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration, DurationLike
from civiltime.core.interval import Interval
from civiltime.errors import ValidationError


class DateTimeRange:
    """The DateTimes from ``start`` to ``end``, both included.

    Iterating a range steps one day at a time; :meth:`step` takes any
    duration.

    Examples:
        >>> r = DateTime.range("2024-01-31", "2024-05-31")
        >>> [str(dt)[:10] for dt in r.step(months=1)]
        ['2024-01-31', '2024-03-02', '2024-03-31', '2024-05-01', '2024-05-31']
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: DateTime, end: DateTime) -> None:
        self._start = start
        self._end = end

    @property
    def start(self) -> DateTime:
        """Return the first DateTime of the range."""
        return self._start

    @property
    def end(self) -> DateTime:
        """Return the last DateTime of the range."""
        return self._end

    def interval(self) -> Interval:
        """Return the Interval spanning this range."""
        return Interval(self._start, self._end)

    def contains(self, dt: DateTime) -> bool:
        """Check if ``dt`` lies between start and end inclusive."""
        return self._start <= dt <= self._end

    def __contains__(self, dt: DateTime) -> bool:
        return self.contains(dt)

    def step(self, duration: DurationLike | None = None, /, **components: int) -> Iterator[DateTime]:
        """Yield ``start + k * duration`` for k = 0, 1, ... up to ``end``.

        Nothing is yielded when ``end`` is before ``start``. Every component
        of the step must be zero or positive; then each value is strictly
        later than the one before.

        Raises:
            ValidationError: If a step component is negative, or the step
                does not move ``start`` forward.
        """
        increment = Duration.coerce(duration)
        if components:
            increment = increment + Duration.coerce(components)
        if any(value < 0 for value in increment.as_dict().values()):
            raise ValidationError(
                f"range step components must not be negative, got {increment!r}"
            )
        if self._start.plus(increment) <= self._start:
            raise ValidationError(f"range step must move forward, got {increment!r}")
        return self._iterate(increment)

    def _iterate(self, increment: Duration) -> Iterator[DateTime]:
        k = 0
        current = self._start
        while current <= self._end:
            yield current
            k += 1
            current = self._start.plus(increment * k)

    def __iter__(self) -> Iterator[DateTime]:
        """Iterate one day at a time."""
        return self.step(days=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeRange):
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
        return f"DateTimeRange({self._start!r}, {self._end!r})"


__all__ = ["DateTimeRange"]
