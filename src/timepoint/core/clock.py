"""
Clock sources.

The system clock backs ``TimePoint.now()``; ``FixedClock`` lets tests and
simulations pin the current time.
"""

import time

from timepoint.config.constants import MICROSECONDS_PER_SECOND, NANOSECONDS_PER_MICROSECOND


class SystemClock:
    """Wall clock at microsecond resolution."""

    __slots__ = ()

    def now_us(self) -> int:
        """
        Current Unix time in microseconds.

        Uses time.time_ns() so no precision is lost to float rounding.
        Hosts with coarser clocks simply report zeros in the low digits.
        """
        return time.time_ns() // NANOSECONDS_PER_MICROSECOND


class FixedClock:
    """
    Clock that only moves when told to.

    Example:
        >>> clock = FixedClock(1_000_000)
        >>> clock.advance(0.5)
        >>> clock.now_us()
        1500000
    """

    __slots__ = ("_now_us",)

    def __init__(self, now_us: int = 0) -> None:
        self._now_us = now_us

    def now_us(self) -> int:
        return self._now_us

    def set(self, now_us: int) -> None:
        """Jump to an absolute time."""
        self._now_us = now_us

    def advance(self, seconds: float) -> None:
        """Move forward (or back, for negative values) by ``seconds``."""
        self._now_us += int(seconds * MICROSECONDS_PER_SECOND)


SYSTEM_CLOCK = SystemClock()
