"""Unit arithmetic for the timer.

Time is held as a ``(seconds, minutes, hours)`` triple, the same order the
public API uses for sequence-form values::

    normalize([90, 0, 0])           # -> (30, 1, 0)
    normalize({"minutes": 95})      # -> (0, 35, 1)

Carry and borrow
----------------
``TimeCounter.advance`` moves one second at a time.  Seconds carry into
minutes and minutes into hours; counting down borrows the other way and
stops at zero.  Hours are unbounded.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidTargetSize


# ── types ─────────────────────────────────────────────────────────────────


class Precision(Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"


TimeTuple = tuple[int, int, int]

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

# Index into a TimeTuple for each unit.
_UNIT_INDEX: dict[Precision, int] = {
    Precision.SECONDS: 0,
    Precision.MINUTES: 1,
    Precision.HOURS: 2,
}


@dataclass(frozen=True, slots=True)
class TimeValues:
    seconds: int = 0
    minutes: int = 0
    hours: int = 0

    def as_tuple(self) -> TimeTuple:
        return (self.seconds, self.minutes, self.hours)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


RawTime = Union[Mapping[str, int], Sequence[int], TimeValues]


# ── normalization ─────────────────────────────────────────────────────────


def normalize(raw: RawTime) -> TimeTuple:
    """Fold *raw* into a canonical ``(seconds, minutes, hours)`` tuple.

    Mappings may carry any subset of ``seconds``/``minutes``/``hours``;
    sequences must have exactly three items.  Overflowing seconds and
    minutes are carried into the next unit.
    """
    if isinstance(raw, TimeValues):
        seconds, minutes, hours = raw.as_tuple()
    elif isinstance(raw, Mapping):
        seconds = raw.get("seconds", 0)
        minutes = raw.get("minutes", 0)
        hours = raw.get("hours", 0)
    elif isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if len(raw) != 3:
            raise InvalidTargetSize(len(raw))
        seconds, minutes, hours = raw
    else:
        raise TypeError(
            f"Expected a mapping or a 3-item sequence, got {type(raw).__name__}"
        )

    carry, seconds = divmod(int(seconds), SECONDS_PER_MINUTE)
    carry, minutes = divmod(int(minutes) + carry, MINUTES_PER_HOUR)
    return (seconds, minutes, int(hours) + carry)


def to_total_seconds(values: TimeTuple) -> int:
    seconds, minutes, hours = values
    return seconds + SECONDS_PER_MINUTE * minutes + SECONDS_PER_HOUR * hours


# ── counter ───────────────────────────────────────────────────────────────


class TimeCounter:
    """Mutable ``(seconds, minutes, hours)`` holder driven one second at a time."""

    def __init__(self, values: TimeTuple = (0, 0, 0)) -> None:
        self.seconds, self.minutes, self.hours = values
        self._previous: TimeTuple = values
        self.total_seconds: int = to_total_seconds(values)

    def as_tuple(self) -> TimeTuple:
        return (self.seconds, self.minutes, self.hours)

    def advance(self, direction: int) -> None:
        """Step one second forward (``+1``) or backward (``-1``)."""
        self._previous = self.as_tuple()

        if direction > 0:
            self.seconds += 1
            if self.seconds >= SECONDS_PER_MINUTE:
                self.seconds = 0
                self.minutes += 1
                if self.minutes >= MINUTES_PER_HOUR:
                    self.minutes = 0
                    self.hours += 1
        elif self.total_seconds > 0:
            self.seconds -= 1
            if self.seconds < 0:
                self.seconds = SECONDS_PER_MINUTE - 1
                self.minutes -= 1
                if self.minutes < 0:
                    self.minutes = MINUTES_PER_HOUR - 1
                    self.hours -= 1

        self.total_seconds = to_total_seconds(self.as_tuple())

    def to_total_seconds(self) -> int:
        return self.total_seconds

    def unit_crossed(self, unit: Precision) -> bool:
        """True if *unit* changed value during the last ``advance``."""
        index = _UNIT_INDEX[unit]
        return self.as_tuple()[index] != self._previous[index]

    def compare(self, target: TimeTuple, precision: Precision) -> int:
        """Compare against *target*, ignoring units finer than *precision*.

        Returns -1, 0 or 1 like a classic ``cmp``.  Hours are compared
        first, then minutes, then seconds.
        """
        cutoff = _UNIT_INDEX[precision]
        current = self.as_tuple()
        for index in (2, 1, 0):
            if index < cutoff:
                break
            if current[index] != target[index]:
                return 1 if current[index] > target[index] else -1
        return 0

    def time_values(self) -> TimeValues:
        return TimeValues(self.seconds, self.minutes, self.hours)

    def total_time_values(self) -> TimeValues:
        total = self.total_seconds
        return TimeValues(
            seconds=total,
            minutes=total // SECONDS_PER_MINUTE,
            hours=total // SECONDS_PER_HOUR,
        )

    def __repr__(self) -> str:
        return f"TimeCounter({self.time_values()})"
