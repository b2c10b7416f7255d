"""Core module containing the timestamp value type, clocks and type definitions."""

from timepoint.core.clock import SYSTEM_CLOCK, FixedClock, SystemClock
from timepoint.core.exceptions import (
    TimePointError,
    TimePointParseError,
    TimePointRangeError,
)
from timepoint.core.timestamp import TimePoint, add_time, time_difference
from timepoint.core.types import Clock, FormatMode


__all__ = [
    "SYSTEM_CLOCK",
    "Clock",
    "FixedClock",
    "FormatMode",
    "SystemClock",
    "TimePoint",
    "TimePointError",
    "TimePointParseError",
    "TimePointRangeError",
    "add_time",
    "time_difference",
]
