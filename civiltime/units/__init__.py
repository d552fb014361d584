"""Unit types for civiltime."""

from __future__ import annotations

from civiltime.units.timeunit import TimeUnit

__all__: list[str] = ["TimeUnit"]
