"""The standard event generator and a simple world model."""

from __future__ import annotations

import time
from typing import Any

from amico.actions import Model
from amico.events import Event
from amico.traits import EventGenerator

DEFAULT_INTERVAL = 30.0

_ROOM_DESCRIPTION = "The current environment is a room with a dirty floor."


class StandardEventGenerator(EventGenerator):
    """Produces one ``HalfMinuteEvent`` after waiting ``interval`` seconds."""

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval

    def generate_event(self, source: str, params: Any) -> list[Event]:
        time.sleep(self.interval)
        return [Event("HalfMinuteEvent", source, params)]


class RoomModel(Model):
    """A fixed model of a room with a dirty floor; keeps the latest update."""

    def __init__(self) -> None:
        self.last_data: Any = None

    def update_model(self, data: Any) -> None:
        self.last_data = data

    def get_environment_description(self) -> str:
        return _ROOM_DESCRIPTION