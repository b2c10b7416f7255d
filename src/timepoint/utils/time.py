"""
Elapsed-time helpers.

Measures wall-clock latency with TimePoint values so the same clock
(real or fixed) drives both timestamps and durations.
"""

from timepoint.config.constants import MICROSECONDS_PER_MILLISECOND, MICROSECONDS_PER_SECOND
from timepoint.core.timestamp import TimePoint, time_difference
from timepoint.core.types import Clock


def elapsed_us(start: TimePoint, clock: Clock | None = None) -> int:
    """
    Microseconds elapsed since ``start``.

    Args:
        start: Start of the interval.
        clock: Clock to read. Defaults to the system clock.
    """
    return TimePoint.now(clock).microseconds_since_epoch - start.microseconds_since_epoch


class LatencyTimer:
    """
    Context manager for measuring operation latency.

    Example:
        >>> with LatencyTimer() as timer:
        ...     do_something()
        >>> print(f"Latency: {timer.latency_us}μs")
    """

    __slots__ = ("_clock", "start", "end")

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock
        self.start = TimePoint()
        self.end = TimePoint()

    def __enter__(self) -> "LatencyTimer":
        self.start = TimePoint.now(self._clock)
        return self

    def __exit__(self, *args: object) -> None:
        self.end = TimePoint.now(self._clock)

    @property
    def latency_us(self) -> int:
        """Measured interval in microseconds."""
        return self.end.microseconds_since_epoch - self.start.microseconds_since_epoch

    @property
    def latency_seconds(self) -> float:
        """Measured interval in seconds."""
        return time_difference(self.end, self.start)


def format_duration_us(duration_us: int) -> str:
    """
    Format a duration in microseconds for human-readable display.

    Args:
        duration_us: Duration in microseconds.

    Returns:
        Formatted duration string.

    Examples:
        >>> format_duration_us(500)
        '500μs'
        >>> format_duration_us(1500)
        '1.50ms'
        >>> format_duration_us(1500000)
        '1.50s'
    """
    magnitude = abs(duration_us)
    if magnitude < MICROSECONDS_PER_MILLISECOND:
        return f"{duration_us}μs"
    elif magnitude < MICROSECONDS_PER_SECOND:
        return f"{duration_us / MICROSECONDS_PER_MILLISECOND:.2f}ms"
    else:
        return f"{duration_us / MICROSECONDS_PER_SECOND:.2f}s"
