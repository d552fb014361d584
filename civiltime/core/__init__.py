"""Core value types.

This module provides the fundamental types:
    - DateTime: A point in civil UTC time with millisecond precision
    - Duration: Calendar-aware amount of time (years down to milliseconds)
    - Interval: Calendar breakdown of the span between two DateTimes
    - DateTimeRange: Steppable pair of DateTimes
"""

from __future__ import annotations

from civiltime.core.datetime import DateTime
from civiltime.core.duration import Duration
from civiltime.core.interval import Interval
from civiltime.core.range import DateTimeRange

__all__: list[str] = [
    "DateTime",
    "DateTimeRange",
    "Duration",
    "Interval",
]
