"""
Async queue-based logging system.

Log records are queued and written by a background listener thread so the
caller never blocks on I/O. Record timestamps are rendered by TimePoint.
"""

import logging
import sys
from datetime import tzinfo
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path
from queue import Queue

from timepoint.config.constants import LOG_FORMAT, MAX_LOG_QUEUE_SIZE, MICROSECONDS_PER_SECOND
from timepoint.core.timestamp import TimePoint


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond precision timestamps."""

    def __init__(self, fmt: str | None = LOG_FORMAT, tz: tzinfo | None = None) -> None:
        super().__init__(fmt)
        self._tz = tz

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format time with microseconds; an explicit datefmt falls back to strftime."""
        ts = TimePoint(round(record.created * MICROSECONDS_PER_SECOND))
        if datefmt:
            return ts.to_datetime(self._tz).strftime(datefmt)
        return ts.to_formatted_string(show_microseconds=True, tz=self._tz)


class AsyncLogger:
    """
    Async-friendly logger with queue-based output.

    All logging calls are non-blocking - messages are queued
    and written by a background thread.
    """

    def __init__(
        self,
        name: str,
        level: int = logging.INFO,
        log_file: Path | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        """
        Initialize async logger.

        Args:
            name: Logger name.
            level: Logging level.
            log_file: Optional file path for logging.
            tz: Zone for record timestamps. None means local time.
        """
        self._name = name
        self._level = level
        self._log_file = log_file
        self._tz = tz
        self._queue: Queue[logging.LogRecord] = Queue(maxsize=MAX_LOG_QUEUE_SIZE)
        self._queue_handler: QueueHandler | None = None
        self._listener: QueueListener | None = None
        self._logger = logging.getLogger(name)

    def start(self) -> None:
        """Start the async logging system."""
        formatter = MicrosecondFormatter(LOG_FORMAT, tz=self._tz)

        handlers: list[logging.Handler] = []

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(self._level)
        handlers.append(console_handler)

        if self._log_file:
            self._log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self._log_file)
            file_handler.setFormatter(formatter)
            file_handler.setLevel(logging.DEBUG)  # Log everything to file
            handlers.append(file_handler)

        # Non-blocking front end
        self._queue_handler = QueueHandler(self._queue)
        self._logger.addHandler(self._queue_handler)
        self._logger.setLevel(self._level)

        self._listener = QueueListener(
            self._queue,
            *handlers,
            respect_handler_level=True,
        )
        self._listener.start()

    def stop(self) -> None:
        """Flush pending records and stop the listener."""
        if self._listener:
            self._listener.stop()
            for handler in self._listener.handlers:
                handler.close()
            self._listener = None
        if self._queue_handler:
            self._logger.removeHandler(self._queue_handler)
            self._queue_handler = None

    @property
    def logger(self) -> logging.Logger:
        """Get the underlying logger."""
        return self._logger

    def debug(self, msg: str, *args: object) -> None:
        """Log debug message."""
        self._logger.debug(msg, *args)

    def info(self, msg: str, *args: object) -> None:
        """Log info message."""
        self._logger.info(msg, *args)

    def warning(self, msg: str, *args: object) -> None:
        """Log warning message."""
        self._logger.warning(msg, *args)

    def error(self, msg: str, *args: object) -> None:
        """Log error message."""
        self._logger.error(msg, *args)

    def __enter__(self) -> "AsyncLogger":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.stop()


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    tz: tzinfo | None = None,
) -> AsyncLogger:
    """
    Set up package-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path.
        tz: Zone for record timestamps. None means local time.

    Returns:
        Started AsyncLogger; call stop() before exit to flush.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    async_logger = AsyncLogger(
        name="timepoint",
        level=numeric_level,
        log_file=log_file,
        tz=tz,
    )
    async_logger.start()

    return async_logger
