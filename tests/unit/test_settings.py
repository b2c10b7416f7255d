"""
Unit tests for Settings.

Tests defaults, environment loading and time zone validation.
"""

from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from timepoint.config.settings import Settings, get_settings
from timepoint.core.types import FormatMode


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = Settings()

        assert settings.timezone == "local"
        assert settings.tzinfo is None
        assert settings.show_microseconds is True
        assert settings.format_mode is FormatMode.INSTANCE
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test TIMEPOINT_* variables are read."""
        monkeypatch.setenv("TIMEPOINT_TIMEZONE", "Europe/Berlin")
        monkeypatch.setenv("TIMEPOINT_SHOW_MICROSECONDS", "false")
        monkeypatch.setenv("TIMEPOINT_FORMAT_MODE", "live_clock")
        monkeypatch.setenv("TIMEPOINT_LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.tzinfo == ZoneInfo("Europe/Berlin")
        assert settings.show_microseconds is False
        assert settings.format_mode is FormatMode.LIVE_CLOCK
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path: Path) -> None:
        """Test values are picked up from .env in the working directory."""
        (tmp_path / ".env").write_text("TIMEPOINT_TIMEZONE=UTC\n")

        assert Settings().timezone == "UTC"

    def test_local_is_case_insensitive(self) -> None:
        """Test 'LOCAL' normalizes to the local zone."""
        settings = Settings(timezone="LOCAL")

        assert settings.timezone == "local"
        assert settings.tzinfo is None

    def test_unknown_timezone_rejected(self) -> None:
        """Test unresolvable zone names fail validation."""
        with pytest.raises(ValidationError, match="Unknown time zone"):
            Settings(timezone="Mars/Olympus_Mons")

    def test_invalid_format_mode_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unknown format modes fail validation."""
        monkeypatch.setenv("TIMEPOINT_FORMAT_MODE", "sideways")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        """Test the accessor returns one shared instance."""
        assert get_settings() is get_settings()
