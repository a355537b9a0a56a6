"""Event kinds and payloads emitted by ``TimerEngine``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .counter import TimeValues


class TimerEvent(Enum):
    STARTED = "started"
    SECONDS_UPDATED = "secondsUpdated"
    MINUTES_UPDATED = "minutesUpdated"
    HOURS_UPDATED = "hoursUpdated"
    TARGET_ACHIEVED = "targetAchieved"
    PAUSED = "paused"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class TimerEventData:
    """Snapshot handed to every listener.

    ``time_values`` are the current components; ``total_time_values``
    are the cumulative counts at each unit.
    """

    event: TimerEvent
    time_values: TimeValues
    total_time_values: TimeValues
