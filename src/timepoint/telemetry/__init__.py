"""Telemetry module for logging."""

from timepoint.telemetry.logger import AsyncLogger, MicrosecondFormatter, setup_logging


__all__ = [
    "AsyncLogger",
    "MicrosecondFormatter",
    "setup_logging",
]
