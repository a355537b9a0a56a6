"""Timer state machine for Hourglass.

States
------
IDLE      Never started.
RUNNING   Subscribed to the tick source, advancing one second per tick.
PAUSED    Unsubscribed, values kept; ``start()`` resumes.
STOPPED   Unsubscribed after ``stop()`` or target achievement.

Transitions
-----------
IDLE | STOPPED → RUNNING        (start)
PAUSED → RUNNING               (start with no options)
RUNNING → PAUSED               (pause)
IDLE | RUNNING | PAUSED → STOPPED  (stop, target achieved)

Per tick
--------
1. advance the counter one second (down when counting down)
2. ``secondsUpdated``, then ``minutesUpdated`` / ``hoursUpdated`` when
   those units changed
3. the user callback, when the configured precision unit changed
4. the target check, evaluated at precision granularity; a regular run
   must also have reached the target total, a countdown stops at zero
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from .counter import (
    Precision,
    RawTime,
    TimeCounter,
    TimeTuple,
    TimeValues,
    normalize,
    to_total_seconds,
)
from .errors import AlreadyRunningError
from .events import TimerEvent, TimerEventData
from .ticks import QtTickSource, TickSource, Unsubscribe

logger = logging.getLogger(__name__)


# ── enums / config ────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


TICK_INTERVAL_MS = 1000


def _noop(*_args) -> None:
    pass


@dataclass(frozen=True)
class TimerConfig:
    """Normalized snapshot of the options passed to ``start``."""

    precision: Precision = Precision.SECONDS
    countdown: bool = False
    start_values: TimeTuple = (0, 0, 0)
    target: TimeTuple | None = None
    callback: Callable[["TimerEngine"], None] = _noop


_SIGNAL_NAMES: dict[TimerEvent, str] = {
    TimerEvent.STARTED: "started",
    TimerEvent.SECONDS_UPDATED: "seconds_updated",
    TimerEvent.MINUTES_UPDATED: "minutes_updated",
    TimerEvent.HOURS_UPDATED: "hours_updated",
    TimerEvent.TARGET_ACHIEVED: "target_achieved",
    TimerEvent.PAUSED: "paused",
    TimerEvent.RESET: "reset_done",
}


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Count-up / countdown timer driven by an injected tick source.

    Signals
    -------
    Every signal carries a :class:`TimerEventData`.

    started          after ``start`` puts the timer in RUNNING
    seconds_updated  every tick
    minutes_updated  on ticks where the minutes component changed
    hours_updated    on ticks where the hours component changed
    target_achieved  once per run, just before the timer stops
    paused           after ``pause``
    reset_done       after ``reset``
    """

    started = pyqtSignal(object)
    seconds_updated = pyqtSignal(object)
    minutes_updated = pyqtSignal(object)
    hours_updated = pyqtSignal(object)
    target_achieved = pyqtSignal(object)
    paused = pyqtSignal(object)
    reset_done = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        tick_source: TickSource | None = None,
    ) -> None:
        super().__init__(parent)

        self._tick_source: TickSource = (
            tick_source if tick_source is not None else QtTickSource(self)
        )
        self._unsubscribe: Unsubscribe | None = None

        self._state: TimerState = TimerState.IDLE
        self._config: TimerConfig = TimerConfig()
        self._counter: TimeCounter = TimeCounter()
        self._run_id: int = 0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    def get_config(self) -> TimerConfig:
        return self._config

    def get_time_values(self) -> TimeValues:
        return self._counter.time_values()

    def get_total_time_values(self) -> TimeValues:
        return self._counter.total_time_values()

    # ══════════════════════════════════════════════════════════════════
    #  LISTENERS
    # ══════════════════════════════════════════════════════════════════

    def add_event_listener(
        self,
        event: TimerEvent | str,
        listener: Callable[[TimerEventData], None],
    ) -> None:
        """Register *listener* for *event* (enum member or its name)."""
        self._signal_for(event).connect(listener)

    def remove_event_listener(
        self,
        event: TimerEvent | str,
        listener: Callable[[TimerEventData], None],
    ) -> None:
        """Unregister *listener*.  Raises ``TypeError`` if it was not registered."""
        self._signal_for(event).disconnect(listener)

    def _signal_for(self, event: TimerEvent | str):
        return getattr(self, _SIGNAL_NAMES[TimerEvent(event)])

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(
        self,
        *,
        precision: Precision | str | None = None,
        countdown: bool | None = None,
        start_values: RawTime | None = None,
        target: RawTime | None = None,
        callback: Callable[[TimerEngine], None] | None = None,
    ) -> None:
        """Start a run, or resume a paused one when called with no options.

        Raises ``AlreadyRunningError`` while running and
        ``InvalidTargetSize`` for sequence values without three items.
        Neither leaves any trace on the engine.
        """
        if self._state == TimerState.RUNNING:
            raise AlreadyRunningError()

        options = (precision, countdown, start_values, target, callback)
        if self._state == TimerState.PAUSED and all(o is None for o in options):
            self._resume()
            return

        config = TimerConfig(
            precision=Precision(precision) if precision is not None else Precision.SECONDS,
            countdown=bool(countdown),
            start_values=normalize(start_values) if start_values is not None else (0, 0, 0),
            target=normalize(target) if target is not None else None,
            callback=callback if callback is not None else _noop,
        )

        self._release_tick_source()
        self._config = config
        self._counter = TimeCounter(config.start_values)
        self._run_id += 1

        if config.target is not None and config.target == config.start_values:
            logger.debug("Start values already equal target %s; not running", config.target)
            self._state = TimerState.STOPPED
            return

        self._unsubscribe = self._tick_source.subscribe(TICK_INTERVAL_MS, self._on_tick)
        self._state = TimerState.RUNNING
        logger.debug(
            "Timer started (precision=%s, countdown=%s, start=%s, target=%s)",
            config.precision.value,
            config.countdown,
            config.start_values,
            config.target,
        )
        self._emit(TimerEvent.STARTED)

    def stop(self) -> None:
        """Unsubscribe from the tick source.  Safe to call repeatedly."""
        self._release_tick_source()
        if self._state in (TimerState.RUNNING, TimerState.PAUSED):
            logger.debug("Timer stopped at %s", self._counter.time_values())
        self._state = TimerState.STOPPED

    def pause(self) -> None:
        """Freeze the current values.  No-op unless running."""
        if self._state != TimerState.RUNNING:
            return
        self._release_tick_source()
        self._state = TimerState.PAUSED
        logger.debug("Timer paused at %s", self._counter.time_values())
        self._emit(TimerEvent.PAUSED)

    def reset(self) -> None:
        """Put the counter back to the configured start values.

        A running timer keeps running from the restored values.
        """
        self._counter = TimeCounter(self._config.start_values)
        logger.debug("Timer reset to %s", self._counter.time_values())
        self._emit(TimerEvent.RESET)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _resume(self) -> None:
        self._unsubscribe = self._tick_source.subscribe(TICK_INTERVAL_MS, self._on_tick)
        self._state = TimerState.RUNNING
        logger.debug("Timer resumed at %s", self._counter.time_values())
        self._emit(TimerEvent.STARTED)

    def _release_tick_source(self) -> None:
        if self._unsubscribe is not None:
            unsubscribe, self._unsubscribe = self._unsubscribe, None
            unsubscribe()

    def _on_tick(self) -> None:
        # Listeners may stop/start us mid-tick; finish this tick on the
        # counter and config it began with.
        counter = self._counter
        config = self._config
        run_id = self._run_id

        counter.advance(-1 if config.countdown else 1)

        self._emit(TimerEvent.SECONDS_UPDATED, counter)
        if counter.unit_crossed(Precision.MINUTES):
            self._emit(TimerEvent.MINUTES_UPDATED, counter)
        if counter.unit_crossed(Precision.HOURS):
            self._emit(TimerEvent.HOURS_UPDATED, counter)

        if counter.unit_crossed(config.precision):
            config.callback(self)

        if run_id == self._run_id and self._is_target_achieved(counter, config):
            logger.info("Target achieved at %s", counter.time_values())
            self._emit(TimerEvent.TARGET_ACHIEVED, counter)
            self.stop()

    @staticmethod
    def _is_target_achieved(counter: TimeCounter, config: TimerConfig) -> bool:
        total = counter.to_total_seconds()
        if config.countdown and total == 0:
            # Zero is the floor; a countdown that can no longer move is done.
            return True
        if config.target is None or not counter.unit_crossed(config.precision):
            return False
        order = counter.compare(config.target, config.precision)
        if config.countdown:
            return order <= 0
        return order >= 0 and total >= to_total_seconds(config.target)

    def _emit(self, event: TimerEvent, counter: TimeCounter | None = None) -> None:
        counter = counter if counter is not None else self._counter
        data = TimerEventData(
            event=event,
            time_values=counter.time_values(),
            total_time_values=counter.total_time_values(),
        )
        self._signal_for(event).emit(data)
