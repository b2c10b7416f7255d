"""
Unit tests for clock sources.
"""

import time

from timepoint.core.clock import SYSTEM_CLOCK, FixedClock, SystemClock


class TestSystemClock:
    """Tests for SystemClock."""

    def test_returns_int(self) -> None:
        """Test the reading is an integer microsecond count."""
        assert isinstance(SYSTEM_CLOCK.now_us(), int)

    def test_tracks_wall_clock(self) -> None:
        """Test the reading agrees with time.time() to within a second."""
        reading = SystemClock().now_us()
        assert abs(reading - time.time() * 1_000_000) < 1_000_000


class TestFixedClock:
    """Tests for FixedClock."""

    def test_default_is_epoch(self) -> None:
        """Test a fresh clock reads zero."""
        assert FixedClock().now_us() == 0

    def test_does_not_move_on_its_own(self) -> None:
        """Test repeated reads are identical."""
        clock = FixedClock(42)
        assert clock.now_us() == clock.now_us() == 42

    def test_set(self) -> None:
        """Test jumping to an absolute time."""
        clock = FixedClock(42)
        clock.set(-7)
        assert clock.now_us() == -7

    def test_advance(self) -> None:
        """Test relative moves, forward and back."""
        clock = FixedClock(1_000_000)

        clock.advance(0.5)
        assert clock.now_us() == 1_500_000

        clock.advance(-2)
        assert clock.now_us() == -500_000
