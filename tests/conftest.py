"""
Pytest configuration and shared fixtures.

Provides reusable test fixtures for all test modules.
"""

import os
import time
from collections.abc import Iterator
from pathlib import Path

import pytest

from timepoint.config.settings import get_settings
from timepoint.core.clock import FixedClock
from timepoint.core.timestamp import TimePoint


# 2018-06-26 08:00:00 UTC
JUNE_2018_US = 1_530_000_000_000_000


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate every test from TIMEPOINT_* variables and stray .env files."""
    for key in list(os.environ):
        if key.upper().startswith("TIMEPOINT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_utc() -> Iterator[None]:
    """Make the process local time zone UTC for the duration of a test."""
    original = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


# =============================================================================
# Clock & Value Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2018-06-26 08:00:00 UTC."""
    return FixedClock(JUNE_2018_US)


@pytest.fixture
def june_2018() -> TimePoint:
    """2018-06-26 08:00:00.123456 UTC."""
    return TimePoint(JUNE_2018_US + 123_456)
