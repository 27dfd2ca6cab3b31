"""Queued movement events, consumed by presentation after each step."""
from __future__ import annotations

from typing import Any, Callable

Event = tuple[str, dict[str, Any]]
_Handler = Callable[[str, dict[str, Any]], None]

CELL_ENTERED = "cell_entered"
ALTERED_CELL_ENTERED = "altered_cell_entered"
ALTERED_CELL_LEFT = "altered_cell_left"
TURN_ENDED_ON_ALTERED_CELL = "turn_ended_on_altered_cell"
MOVEMENT_STARTED = "movement_started"
MOVEMENT_STOPPED = "movement_stopped"


class EventQueue:
    """Events are only enqueued by ``publish``; nothing runs until the
    consumer calls ``drain()`` or ``flush()``.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._pending: list[Event] = []

    def __len__(self) -> int:
        return len(self._pending)

    def subscribe(self, name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(name)
        if handlers is not None and handler in handlers:
            handlers.remove(handler)

    def publish(self, name: str, **data: Any) -> None:
        self._pending.append((name, data))

    def pending(self) -> list[Event]:
        return list(self._pending)

    def drain(self) -> list[Event]:
        """Return pending events in publish order and empty the queue."""
        events = self._pending
        self._pending = []
        return events

    def flush(self) -> None:
        # Events published by handlers wait for the next flush.
        for name, data in self.drain():
            for handler in list(self._subscribers.get(name, [])):
                handler(name, data)

    def clear(self) -> None:
        self._pending.clear()
