"""
Timestamp constants and formatting values.

Everything that must stay byte-compatible with existing timestamp output
lives here, grouped by category.
"""

from typing import Final


# =============================================================================
# Units
# =============================================================================

MICROSECONDS_PER_SECOND: Final[int] = 1_000_000
MICROSECONDS_PER_MILLISECOND: Final[int] = 1_000
NANOSECONDS_PER_MICROSECOND: Final[int] = 1_000


# =============================================================================
# Output Formats
# =============================================================================

# Compact form: seconds, dot, six-digit zero-padded microseconds
COMPACT_FORMAT: Final[str] = "{sign}{seconds}.{micros:06d}"

# Calendar form, year/month/day hour:minute:second. Applied with str.format
# to a datetime; strftime("%Y") does not zero-pad years below 1000 on glibc.
DATETIME_FORMAT: Final[str] = (
    "{0.year:04d}-{0.month:02d}-{0.day:02d} {0.hour:02d}:{0.minute:02d}:{0.second:02d}"
)
FRACTION_FORMAT: Final[str] = "{base}.{micros:06d}"


# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX: Final[str] = "TIMEPOINT_"

# Setting value meaning "the time zone of the running process"
LOCAL_TIMEZONE: Final[str] = "local"


# =============================================================================
# Logging & Telemetry
# =============================================================================

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Maximum log queue size
MAX_LOG_QUEUE_SIZE: Final[int] = 10_000
