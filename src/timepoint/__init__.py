"""
Microsecond-resolution timestamps.

A small value type wrapping an integer count of microseconds since the
Unix epoch, with wall-clock construction, arithmetic, comparison and
compact or calendar-style formatting.
"""

from timepoint.core.timestamp import (
    MICROSECONDS_PER_SECOND,
    TimePoint,
    add_time,
    time_difference,
)
from timepoint.core.types import FormatMode


__version__ = "1.0.0"

__all__ = [
    "FormatMode",
    "MICROSECONDS_PER_SECOND",
    "TimePoint",
    "add_time",
    "time_difference",
]
