"""Utility helpers built on TimePoint."""

from timepoint.utils.time import LatencyTimer, elapsed_us, format_duration_us


__all__ = [
    "LatencyTimer",
    "elapsed_us",
    "format_duration_us",
]
