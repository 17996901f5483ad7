"""Events and the pool that stores them until they expire or are handled."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import InitVar, dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar

from amico.errors import NoAvailableEventIds, SomeEventIdsNotFound


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Event:
    """An event in the system.

    ``lifetime`` sets ``expiry_time`` relative to the moment of creation.
    ``id`` is assigned by the EventPool.
    """

    name: str
    source: str
    params: Any = None
    lifetime: InitVar[timedelta | None] = None
    expiry_time: datetime | None = None
    id: int = 0

    def __post_init__(self, lifetime: timedelta | None) -> None:
        if lifetime is not None:
            self.expiry_time = _now() + lifetime


class EventPool:
    """Stores events by ID, recycling the IDs of removed or expired events."""

    MAX_EVENT_ID: ClassVar[int] = 2**32 - 1

    def __init__(self, default_expiry_time: int) -> None:
        self.default_expiry_time = default_expiry_time
        self._events: dict[int, Event] = {}
        self._next_id = 0
        self._free_ids: list[int] = []

    def __len__(self) -> int:
        return len(self._events)

    def get_events(self) -> list[Event]:
        """Drop expired events and return copies of the remaining ones."""
        now = _now()
        expired = [
            event_id
            for event_id, event in self._events.items()
            if event.expiry_time is not None and event.expiry_time < now
        ]
        for event_id in expired:
            del self._events[event_id]
        self._free_ids.extend(expired)
        return [copy.deepcopy(event) for event in self._events.values()]

    def extend_events(self, events: Iterable[Event]) -> None:
        """Add events, giving each a fresh ID and the default expiry if it has none."""
        default_expiry = _now() + timedelta(seconds=self.default_expiry_time)
        for event in events:
            event_id = self._new_event_id()
            expiry = event.expiry_time if event.expiry_time is not None else default_expiry
            self._events[event_id] = replace(event, id=event_id, expiry_time=expiry)

    def remove_events(self, event_ids: Iterable[int]) -> None:
        """Remove the given events; raise SomeEventIdsNotFound for unknown IDs."""
        missing = []
        for event_id in event_ids:
            if self._events.pop(event_id, None) is not None:
                self._free_ids.append(event_id)
            else:
                missing.append(event_id)
        if missing:
            raise SomeEventIdsNotFound(missing)

    def _new_event_id(self) -> int:
        if self._free_ids:
            return self._free_ids.pop()
        if self._next_id == self.MAX_EVENT_ID:
            raise NoAvailableEventIds()
        event_id = self._next_id
        self._next_id += 1
        return event_id