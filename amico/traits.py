"""Abstract interfaces of the agent core."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from amico.events import Event


class Action(ABC):
    """Something the agent can do."""

    @abstractmethod
    def execute(self) -> None:
        """Run the action; raise ActionError on failure."""


class ActionSelector(ABC):
    """Chooses an action from the events currently in the pool."""

    @abstractmethod
    def select_action(self, events: list[Event]) -> tuple[Action, list[int]]:
        """Return the chosen action and the IDs of the events it resolves.

        Raise ActionSelectorError if no action can be chosen.
        """


class EventGenerator(ABC):
    """Produces events to be added to the pool."""

    @abstractmethod
    def generate_event(self, source: str, params: Any) -> list[Event]:
        """Return new events for the given source and input parameters."""