"""A process-wide event dispatcher keyed by event id."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

EventHandler = Callable[["Event"], Any]


class EventId(enum.IntEnum):
    """Well-known event ids."""

    TICK = 0
    LOADSCENE_COMPLETED = 1


@dataclass
class Event:
    """An event carrying its id; subclass to attach data."""

    id: int


class EventManager:
    """Keeps ordered handler lists per event id and calls them on dispatch."""

    _instance: Optional[EventManager] = None

    def __init__(self) -> None:
        self._handlers: Dict[int, List[EventHandler]] = {}

    @classmethod
    def instance(cls) -> EventManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_event_handler(self, event_id: int, handler: Optional[EventHandler]) -> None:
        """Append ``handler`` for ``event_id``; the same handler may be added repeatedly."""
        if handler is None:
            return
        self._handlers.setdefault(event_id, []).append(handler)

    def remove_event_handler(
        self, event_id: int, handler: Optional[EventHandler]
    ) -> None:
        """Remove the first registration of ``handler`` for ``event_id``, if any."""
        if handler is None:
            return
        handlers = self._handlers.get(event_id)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def clear_event_handlers(self, event_id: int) -> None:
        """Forget every handler registered for ``event_id``."""
        self._handlers.pop(event_id, None)

    def dispatch_event(self, event: Event) -> None:
        """Call every handler registered for the event's id, in registration order."""
        for handler in list(self._handlers.get(event.id, ())):
            handler(event)