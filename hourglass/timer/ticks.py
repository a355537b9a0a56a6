"""Tick sources: periodic invokers that drive a ``TimerEngine``.

The engine only needs ``subscribe(interval_ms, callback)`` returning an
unsubscribe callable.  ``QtTickSource`` is the production source and
fires from the Qt event loop; tests swap in a virtual clock.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer

Unsubscribe = Callable[[], None]


class TickSource(Protocol):
    def subscribe(self, interval_ms: int, callback: Callable[[], None]) -> Unsubscribe:
        ...


class QtTickSource(QObject):
    """One ``QTimer`` per subscription, owned by this object."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timers: list[QTimer] = []

    @property
    def active_subscriptions(self) -> int:
        return len(self._timers)

    def subscribe(self, interval_ms: int, callback: Callable[[], None]) -> Unsubscribe:
        qt_timer = QTimer(self)
        qt_timer.setInterval(interval_ms)
        qt_timer.timeout.connect(callback)
        qt_timer.start()
        self._timers.append(qt_timer)

        def unsubscribe() -> None:
            if qt_timer not in self._timers:
                return
            qt_timer.stop()
            qt_timer.timeout.disconnect()
            self._timers.remove(qt_timer)
            qt_timer.deleteLater()

        return unsubscribe
