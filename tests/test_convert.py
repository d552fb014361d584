"""Tests for epoch conversion functions."""

from __future__ import annotations

from civiltime import DateTime
from civiltime.convert import from_unix_millis, to_unix_millis


class TestEpochConversion:
    """Tests for to_unix_millis and from_unix_millis."""

    def test_epoch(self) -> None:
        """Test the Unix epoch itself."""
        assert to_unix_millis(DateTime.from_fields(1970)) == 0
        assert from_unix_millis(0) == DateTime.from_fields(1970)

    def test_known_timestamp(self) -> None:
        """Test a timestamp with a time of day."""
        dt = from_unix_millis(1_705_329_000_000)
        assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (2024, 1, 15, 14, 30)
        assert to_unix_millis(dt) == 1_705_329_000_000

    def test_before_epoch(self) -> None:
        """Test negative timestamps."""
        assert from_unix_millis(-1) == DateTime.from_fields(1969, 12, 31, 23, 59, 59, 999)
        assert to_unix_millis(DateTime.from_fields(1969, 12, 31)) == -86_400_000
        assert to_unix_millis(DateTime.from_fields(1, 1, 1)) == -62_135_596_800_000

    def test_matches_methods(self) -> None:
        """Test that the functions agree with the DateTime methods."""
        for millis in (-10**15, -1, 0, 999, 10**13):
            dt = from_unix_millis(millis)
            assert dt == DateTime.from_unix_millis(millis)
            assert to_unix_millis(dt) == dt.to_unix_millis() == millis
