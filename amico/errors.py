"""Exceptions raised by the agent core: actions, selection, the event pool and configuration."""

from __future__ import annotations

from collections.abc import Iterable


class ActionError(Exception):
    """Raised when an action cannot be executed."""


class ExecutingActionError(ActionError):
    """The action itself failed while running."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Executing Action Error: {reason}")


class MissingRequiredParameters(ActionError):
    """A parameter marked as required was not supplied."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"Missing required parameters: {parameter}")


class InvalidParameterType(ActionError):
    """A parameter was supplied with a value of the wrong type."""

    def __init__(self, parameter: str, expected: str) -> None:
        self.parameter = parameter
        self.expected = expected
        super().__init__(f"Invalid parameter type: {parameter}, expected: {expected}")


class ActionSelectorError(Exception):
    """Raised when an action selector cannot choose an action."""


class SelectingActionFailed(ActionSelectorError):
    """Selecting an action failed for the given reason."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Selecting action failed: {reason}")


class EventPoolError(Exception):
    """Raised by the event pool."""


class NoAvailableEventIds(EventPoolError):
    """Every event ID is in use."""

    def __init__(self) -> None:
        super().__init__("No available event IDs left")


class EventIdNotFound(EventPoolError):
    """A single event ID is not present in the pool."""

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f"Event ID not found: {event_id}")


class SomeEventIdsNotFound(EventPoolError):
    """Some of the given event IDs are not present in the pool."""

    def __init__(self, event_ids: Iterable[int]) -> None:
        self.event_ids = list(event_ids)
        super().__init__(f"Event IDs not found: {self.event_ids}")


class ConfigError(Exception):
    """A configuration document could not be loaded."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__("Failed to load config")