"""
Application settings with environment variable support.

Uses Pydantic Settings for type-safe configuration with automatic
environment variable loading and validation. All variables carry the
``TIMEPOINT_`` prefix, e.g. ``TIMEPOINT_TIMEZONE=Europe/Berlin``.
"""

from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from timepoint.config.constants import ENV_PREFIX, LOCAL_TIMEZONE
from timepoint.core.types import FormatMode


class Settings(BaseSettings):
    """
    Formatting and logging settings loaded from environment variables.

    The value type itself never reads these; they supply defaults for the
    CLI and the log formatter.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Formatting
    # =========================================================================

    timezone: str = Field(
        default=LOCAL_TIMEZONE,
        description="Time zone for calendar output: 'local' or an IANA name",
    )

    show_microseconds: bool = Field(
        default=True,
        description="Append the six-digit fraction to calendar output",
    )

    format_mode: FormatMode = Field(
        default=FormatMode.INSTANCE,
        description="Where calendar fields come from: the value or the live clock",
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file receiving all log records",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("timezone", mode="after")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure the zone name resolves."""
        if v.lower() == LOCAL_TIMEZONE:
            return LOCAL_TIMEZONE
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v!r}") from e
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def tzinfo(self) -> tzinfo | None:
        """Resolved zone, or None for the process local time zone."""
        if self.timezone == LOCAL_TIMEZONE:
            return None
        return ZoneInfo(self.timezone)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Clear cache with `get_settings.cache_clear()` after changing the
    environment.
    """
    return Settings()
