"""Errors raised by the timer engine."""


class TimerError(Exception):
    """Base class for timer errors."""


class AlreadyRunningError(TimerError):
    """Raised when ``start`` is called on a running timer."""

    def __init__(self, message: str = "Timer already running") -> None:
        super().__init__(message)


class InvalidTargetSize(TimerError, ValueError):
    """Raised when a sequence-form time value does not have three items."""

    def __init__(self, size: int, message: str = "Array size not valid") -> None:
        self.size = size
        super().__init__(message)
