"""Tests for DateTimeRange."""

from __future__ import annotations

import pytest

from civiltime import DateTime, DateTimeRange, Duration, Interval, ValidationError


def dates(values: object) -> list[str]:
    return [str(dt)[:10] for dt in values]  # type: ignore[attr-defined]


class TestDateTimeRange:
    """Tests for building and querying ranges."""

    def test_range_factory(self) -> None:
        """Test DateTime.range with mixed sources."""
        r = DateTime.range(0, "1970-01-03")
        assert isinstance(r, DateTimeRange)
        assert r.start == DateTime.from_fields(1970, 1, 1)
        assert r.end == DateTime.from_fields(1970, 1, 3)

    def test_contains(self) -> None:
        """Test inclusive membership."""
        r = DateTime.range("2024-01-01", "2024-01-10")
        assert r.contains(DateTime.from_any("2024-01-10"))
        assert DateTime.from_any("2024-01-05T12:00:00Z") in r
        assert DateTime.from_any("2024-01-10T00:00:00.001Z") not in r

    def test_interval(self) -> None:
        """Test the Interval spanning a range."""
        r = DateTime.range("2024-01-01", "2024-01-10")
        assert r.interval() == Interval.between("2024-01-01", "2024-01-10")
        assert r.interval().to("days") == 9

    def test_equality(self) -> None:
        """Test equality, hashing and repr."""
        a = DateTime.range("2024-01-01", "2024-01-10")
        b = DateTimeRange(DateTime.from_fields(2024, 1, 1), DateTime.from_fields(2024, 1, 10))
        assert a == b
        assert hash(a) == hash(b)
        assert a != DateTime.range("2024-01-01", "2024-01-11")
        assert repr(a) == (
            "DateTimeRange(DateTime.from_fields(2024, 1, 1, 0, 0, 0, 0), "
            "DateTime.from_fields(2024, 1, 10, 0, 0, 0, 0))"
        )


class TestDateTimeRangeIteration:
    """Tests for stepping through ranges."""

    def test_iterates_days_inclusive(self) -> None:
        """Test that plain iteration yields each day, both ends included."""
        r = DateTime.range("2024-02-27", "2024-03-01")
        assert dates(r) == ["2024-02-27", "2024-02-28", "2024-02-29", "2024-03-01"]

    def test_single_point(self) -> None:
        """Test a range whose ends coincide."""
        assert dates(DateTime.range("2024-01-01", "2024-01-01")) == ["2024-01-01"]

    def test_reversed_range_is_empty(self) -> None:
        """Test that nothing is yielded when end is before start."""
        assert list(DateTime.range("2024-01-10", "2024-01-01")) == []

    def test_step_months_does_not_drift(self) -> None:
        """Test that month steps are taken from start, not chained."""
        r = DateTime.range("2024-01-31", "2024-05-31")
        assert dates(r.step(months=1)) == [
            "2024-01-31",
            "2024-03-02",
            "2024-03-31",
            "2024-05-01",
            "2024-05-31",
        ]

    def test_step_hours(self) -> None:
        """Test sub-day steps that stop before the end."""
        r = DateTime.range("2024-01-01T00:00:00Z", "2024-01-01T02:30:00Z")
        assert [dt.hour for dt in r.step(hours=1)] == [0, 1, 2]

    def test_step_forms(self) -> None:
        """Test Duration, mapping and keyword steps."""
        r = DateTime.range("2024-01-01", "2024-01-08")
        expected = ["2024-01-01", "2024-01-04", "2024-01-07"]
        assert dates(r.step(Duration(days=3))) == expected
        assert dates(r.step({"days": 3})) == expected
        assert dates(r.step({"days": 2}, days=1)) == expected

    @pytest.mark.parametrize("step", [{}, {"days": 0}, {"months": 0, "milliseconds": 0}])
    def test_step_must_move_forward(self, step: dict[str, int]) -> None:
        """Test that empty steps are rejected at once."""
        r = DateTime.range("2024-01-01", "2024-12-31")
        with pytest.raises(ValidationError, match="must move forward"):
            r.step(step)

    @pytest.mark.parametrize(
        "step",
        [
            {"days": -1},
            {"months": 1, "days": -40},
            {"years": 1, "days": -365},
            {"days": 1, "milliseconds": -1},
        ],
    )
    def test_step_rejects_negative_components(self, step: dict[str, int]) -> None:
        """Test that backward and mixed-sign steps are rejected at once."""
        r = DateTime.range("2024-01-01", "2030-12-31")
        with pytest.raises(ValidationError, match="must not be negative"):
            r.step(step)

    def test_mixed_units_step_strictly_increases(self) -> None:
        """Test that a non-negative step with several units always advances."""
        r = DateTime.range("2024-01-31", "2026-12-31")
        values = list(r.step(months=1, days=1, hours=5))
        assert len(values) > 1
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_iteration_is_repeatable(self) -> None:
        """Test that a range can be iterated more than once."""
        r = DateTime.range("2024-01-01", "2024-01-03")
        assert list(r) == list(r)
        assert len(list(r)) == 3
