"""Timer package."""

from .counter import (
    Precision,
    TimeCounter,
    TimeValues,
    normalize,
)
from .engine import (
    TimerEngine,
    TimerState,
    TimerConfig,
    TICK_INTERVAL_MS,
)
from .errors import AlreadyRunningError, InvalidTargetSize, TimerError
from .events import TimerEvent, TimerEventData
from .ticks import QtTickSource, TickSource

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerConfig",
    "TICK_INTERVAL_MS",
    "TimerEvent",
    "TimerEventData",
    "Precision",
    "TimeCounter",
    "TimeValues",
    "normalize",
    "TickSource",
    "QtTickSource",
    "TimerError",
    "AlreadyRunningError",
    "InvalidTargetSize",
]
