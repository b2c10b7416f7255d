"""
Microsecond timestamp value type.

A TimePoint wraps a signed count of microseconds since the Unix epoch.
Zero doubles as the "unset" value produced by the default constructor.
"""

import re
from datetime import UTC, datetime, timedelta, tzinfo

from timepoint.config.constants import (
    COMPACT_FORMAT,
    DATETIME_FORMAT,
    FRACTION_FORMAT,
    MICROSECONDS_PER_SECOND,
)
from timepoint.core.clock import SYSTEM_CLOCK
from timepoint.core.exceptions import TimePointParseError, TimePointRangeError
from timepoint.core.types import Clock, FormatMode


_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MICROSECOND = timedelta(microseconds=1)
_COMPACT_RE = re.compile(r"(-)?(\d+)\.(\d{6})")


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    return value


def _split(microseconds: int) -> tuple[str, int, int]:
    """Sign, whole seconds and fraction, truncated toward zero."""
    seconds, micros = divmod(abs(microseconds), MICROSECONDS_PER_SECOND)
    return ("-" if microseconds < 0 else ""), seconds, micros


class TimePoint:
    """
    Point in time with microsecond resolution.

    Ordering and equality compare the raw microsecond count exactly.
    Instances are immutable apart from swap(), which is also why they are
    not hashable. Concurrent swap() calls on a shared instance must be
    serialized by the caller.

    Example:
        >>> ts = TimePoint(12_345_678)
        >>> ts.seconds_since_epoch
        12
        >>> ts.to_string()
        '12.345678'
    """

    __slots__ = ("_microseconds",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, microseconds: int = 0) -> None:
        """
        Initialize from a raw microsecond count.

        Args:
            microseconds: Microseconds since the epoch; negative values are
                instants before 1970.

        Raises:
            TypeError: If ``microseconds`` is not an int.
        """
        self._microseconds = _require_int(microseconds, "microseconds")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def now(cls, clock: Clock | None = None) -> "TimePoint":
        """
        Capture the current wall-clock time.

        Args:
            clock: Clock to read. Defaults to the system clock.
        """
        return cls((clock or SYSTEM_CLOCK).now_us())

    @classmethod
    def from_unix_time(cls, seconds: int) -> "TimePoint":
        """Convert whole Unix seconds."""
        return cls(_require_int(seconds, "seconds") * MICROSECONDS_PER_SECOND)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimePoint":
        """
        Convert a datetime without going through float seconds.

        Naive datetimes are taken as local time, like datetime.timestamp().
        """
        if dt.tzinfo is None:
            dt = dt.astimezone()
        return cls((dt - _EPOCH) // _ONE_MICROSECOND)

    @classmethod
    def parse(cls, text: str) -> "TimePoint":
        """
        Read the compact form produced by to_string().

        Raises:
            TimePointParseError: If ``text`` is not ``[-]<seconds>.<6 digits>``.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")

        match = _COMPACT_RE.fullmatch(text.strip())
        if match is None:
            raise TimePointParseError(f"Not a compact timestamp: {text!r}", text)

        sign, seconds, micros = match.groups()
        value = int(seconds) * MICROSECONDS_PER_SECOND + int(micros)
        return cls(-value if sign else value)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def microseconds_since_epoch(self) -> int:
        """Raw stored value."""
        return self._microseconds

    @property
    def seconds_since_epoch(self) -> int:
        """Whole seconds, truncated toward zero (-1.5s gives -1)."""
        sign, seconds, _ = _split(self._microseconds)
        return -seconds if sign else seconds

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        """
        Aware datetime for this instant.

        Args:
            tz: Target zone. None means the local zone of the process.

        Raises:
            TimePointRangeError: If the value is outside datetime's range.
        """
        try:
            return (_EPOCH + timedelta(microseconds=self._microseconds)).astimezone(tz)
        except (OverflowError, ValueError) as e:
            raise TimePointRangeError(
                f"{self._microseconds} microseconds is outside the calendar range",
                self._microseconds,
            ) from e

    # =========================================================================
    # Formatting
    # =========================================================================

    def to_string(self) -> str:
        """
        Compact form, e.g. '12.345678'.

        Negative values carry a single leading sign on the truncated
        magnitude, so -1.5s renders as '-1.500000' rather than '-1.-500000'.
        """
        sign, seconds, micros = _split(self._microseconds)
        return COMPACT_FORMAT.format(sign=sign, seconds=seconds, micros=micros)

    def to_formatted_string(
        self,
        show_microseconds: bool = True,
        tz: tzinfo | None = None,
        mode: FormatMode = FormatMode.INSTANCE,
        clock: Clock | None = None,
    ) -> str:
        """
        Calendar form.

        Args:
            show_microseconds: Append the six-digit fraction.
            tz: Zone for the calendar fields. None means the local zone.
            mode: INSTANCE renders this value. LIVE_CLOCK renders the
                current time from ``clock`` and only takes the fraction from
                this value.
            clock: Clock read in LIVE_CLOCK mode. Defaults to the system clock.

        Returns:
            'YYYY-MM-DD HH:MM:SS' or 'YYYY-MM-DD HH:MM:SS.ffffff'.

        Example:
            >>> TimePoint(1_530_000_000_123_456).to_formatted_string(tz=UTC)
            '2018-06-26 08:00:00.123456'
        """
        if mode is FormatMode.LIVE_CLOCK:
            fields = TimePoint.now(clock).to_datetime(tz)
            micros = _split(self._microseconds)[2]
        else:
            fields = self.to_datetime(tz)
            micros = fields.microsecond

        base = DATETIME_FORMAT.format(fields)
        if not show_microseconds:
            return base
        return FRACTION_FORMAT.format(base=base, micros=micros)

    # =========================================================================
    # Mutation
    # =========================================================================

    def swap(self, other: "TimePoint") -> None:
        """Exchange stored values with ``other`` in place."""
        if not isinstance(other, TimePoint):
            raise TypeError(f"cannot swap with {type(other).__name__}")
        self._microseconds, other._microseconds = other._microseconds, self._microseconds

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds == other._microseconds

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds != other._microseconds

    def __lt__(self, other: "TimePoint") -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds < other._microseconds

    def __le__(self, other: "TimePoint") -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds <= other._microseconds

    def __gt__(self, other: "TimePoint") -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds > other._microseconds

    def __ge__(self, other: "TimePoint") -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._microseconds >= other._microseconds

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TimePoint({self._microseconds})"


def time_difference(former: TimePoint, later: TimePoint) -> float:
    """
    Seconds from ``later`` to ``former``.

    The result is ``former - later`` and keeps its sign, so it is negative
    when ``former`` is the earlier instant.
    """
    diff = former.microseconds_since_epoch - later.microseconds_since_epoch
    return diff / MICROSECONDS_PER_SECOND


def add_time(ts: TimePoint, seconds: float) -> TimePoint:
    """
    New TimePoint offset by ``seconds``; ``ts`` is left untouched.

    The offset is truncated toward zero to whole microseconds.
    """
    delta = int(seconds * MICROSECONDS_PER_SECOND)
    return TimePoint(ts.microseconds_since_epoch + delta)
