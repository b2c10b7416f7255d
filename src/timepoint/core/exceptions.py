"""Exceptions raised by the timestamp modules."""


class TimePointError(Exception):
    """Base exception for timepoint errors."""


class TimePointParseError(TimePointError, ValueError):
    """Text could not be read as a compact timestamp."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class TimePointRangeError(TimePointError, OverflowError):
    """Value lies outside the range a calendar date can represent."""

    def __init__(self, message: str, microseconds: int) -> None:
        super().__init__(message)
        self.microseconds = microseconds
