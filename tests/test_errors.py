import pytest

from amico.errors import (
    ActionError,
    ActionSelectorError,
    ConfigError,
    EventIdNotFound,
    EventPoolError,
    ExecutingActionError,
    InvalidParameterType,
    MissingRequiredParameters,
    NoAvailableEventIds,
    SelectingActionFailed,
    SomeEventIdsNotFound,
)


def test_executing_action_error_message():
    err = ExecutingActionError("boom")
    assert str(err) == "Executing Action Error: boom"
    assert err.reason == "boom"
    assert isinstance(err, ActionError)


def test_missing_required_parameters_message():
    err = MissingRequiredParameters("room")
    assert str(err) == "Missing required parameters: room"
    assert err.parameter == "room"
    assert isinstance(err, ActionError)


def test_invalid_parameter_type_message():
    err = InvalidParameterType("room", "string")
    assert str(err) == "Invalid parameter type: room, expected: string"
    assert (err.parameter, err.expected) == ("room", "string")


def test_selecting_action_failed_message():
    err = SelectingActionFailed("no reply")
    assert str(err) == "Selecting action failed: no reply"
    assert isinstance(err, ActionSelectorError)


def test_no_available_event_ids_message():
    err = NoAvailableEventIds()
    assert str(err) == "No available event IDs left"
    assert isinstance(err, EventPoolError)


def test_event_id_not_found_message():
    err = EventIdNotFound(7)
    assert str(err) == "Event ID not found: 7"
    assert err.event_id == 7


def test_some_event_ids_not_found_lists_ids():
    err = SomeEventIdsNotFound(iter([3, 4]))
    assert err.event_ids == [3, 4]
    assert str(err) == "Event IDs not found: [3, 4]"


def test_config_error_keeps_detail():
    err = ConfigError("missing field")
    assert str(err) == "Failed to load config"
    assert err.detail == "missing field"


def test_event_pool_error_caught_by_base_class():
    err = SomeEventIdsNotFound([1])
    assert isinstance(err, EventPoolError)
    assert err.event_ids == [1]
    assert str(err) == "Event IDs not found: [1]"


def test_selector_error_caught_by_base_class():
    err = SelectingActionFailed("x")
    assert isinstance(err, ActionSelectorError)
    assert str(err) == "Selecting action failed: x"


@pytest.mark.parametrize(
    "factory, base, message",
    [
        (lambda: ExecutingActionError("a"), ActionError, "Executing Action Error: a"),
        (lambda: NoAvailableEventIds(), EventPoolError, "No available event IDs left"),
        (lambda: EventIdNotFound(1), EventPoolError, "Event ID not found: 1"),
    ],
)
def test_errors_are_exceptions_of_their_family(factory, base, message):
    with pytest.raises(base) as info:
        raise factory()
    assert str(info.value) == message