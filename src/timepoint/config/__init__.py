"""Configuration module for timepoint."""

from timepoint.config.constants import (
    COMPACT_FORMAT,
    DATETIME_FORMAT,
    ENV_PREFIX,
    LOCAL_TIMEZONE,
    MICROSECONDS_PER_SECOND,
)
from timepoint.config.settings import Settings, get_settings


__all__ = [
    "Settings",
    "get_settings",
    "COMPACT_FORMAT",
    "DATETIME_FORMAT",
    "ENV_PREFIX",
    "LOCAL_TIMEZONE",
    "MICROSECONDS_PER_SECOND",
]
