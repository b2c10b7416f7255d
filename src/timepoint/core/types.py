"""
Type definitions shared by the timestamp modules.
"""

from enum import Enum
from typing import Protocol


class FormatMode(str, Enum):
    """
    Source of the calendar fields in calendar-style output.

    INSTANCE derives every field from the stored value. LIVE_CLOCK keeps the
    historical behaviour of reading the clock at format time for the date
    and time of day, taking only the fraction from the stored value.
    """

    INSTANCE = "instance"
    LIVE_CLOCK = "live_clock"


class Clock(Protocol):
    """Anything that can report the current time in microseconds."""

    def now_us(self) -> int:
        """Microseconds since the Unix epoch."""
        ...
