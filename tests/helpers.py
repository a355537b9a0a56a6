"""Shared test helpers for Hourglass."""

from __future__ import annotations

from typing import Callable


class SignalCollector:
    """Records what a listener or callback was called with.

    Engine listeners receive one ``TimerEventData``, the user callback
    receives the engine, and ``QTimer.timeout`` passes nothing (stored as
    ``None``).  Connect an instance wherever a callable is expected and
    count or inspect the calls afterwards.
    """

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class VirtualTickSource:
    """Deterministic stand-in for ``QtTickSource``.

    Nothing fires until ``advance(ms)`` moves virtual time forward; every
    subscription then fires once per elapsed interval, in time order.
    """

    def __init__(self):
        self.now = 0
        self._next_id = 0
        # id -> [interval_ms, next_due, callback]
        self._subscriptions: dict[int, list] = {}

    @property
    def active_subscriptions(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, interval_ms: int, callback: Callable[[], None]):
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = [interval_ms, self.now + interval_ms, callback]

        def unsubscribe():
            self._subscriptions.pop(sub_id, None)

        return unsubscribe

    def advance(self, ms: int) -> None:
        end = self.now + ms
        while True:
            due = [
                (sub[1], sub_id)
                for sub_id, sub in self._subscriptions.items()
                if sub[1] <= end
            ]
            if not due:
                break
            when, sub_id = min(due)
            self.now = when
            sub = self._subscriptions[sub_id]
            sub[1] += sub[0]
            sub[2]()
        self.now = end

    def tick(self, seconds: int = 1) -> None:
        self.advance(seconds * 1000)
