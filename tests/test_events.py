import time
from datetime import datetime, timedelta, timezone

import pytest

from amico.errors import NoAvailableEventIds, SomeEventIdsNotFound
from amico.events import Event, EventPool


def _past():
    return datetime.now(timezone.utc) - timedelta(seconds=1)


def test_event_pool_expiry_and_removal():
    pool = EventPool(1)
    pool.extend_events(
        [
            Event("ExampleEvent", "ExampleSource", None),
            Event("ExampleEvent2", "ExampleSource2", None, lifetime=timedelta(seconds=10)),
        ]
    )
    assert len(pool.get_events()) == 2

    time.sleep(1.2)

    remaining = pool.get_events()
    assert len(remaining) == 1
    assert remaining[0].name == "ExampleEvent2"

    pool.remove_events([1])
    assert pool.get_events() == []


def test_event_defaults():
    event = Event("n", "s")
    assert event.id == 0
    assert event.params is None
    assert event.expiry_time is None


def test_event_lifetime_sets_expiry():
    before = datetime.now(timezone.utc)
    event = Event("n", "s", {}, lifetime=timedelta(seconds=30))
    after = datetime.now(timezone.utc)
    assert before + timedelta(seconds=30) <= event.expiry_time <= after + timedelta(seconds=30)


def test_ids_are_assigned_in_order():
    pool = EventPool(60)
    pool.extend_events([Event("a", "s"), Event("b", "s"), Event("c", "s")])
    ids = {event.name: event.id for event in pool.get_events()}
    assert ids == {"a": 0, "b": 1, "c": 2}


def test_default_expiry_applied():
    pool = EventPool(60)
    before = datetime.now(timezone.utc)
    pool.extend_events([Event("a", "s")])
    (event,) = pool.get_events()
    assert event.expiry_time >= before + timedelta(seconds=60)


def test_explicit_expiry_kept():
    pool = EventPool(60)
    expiry = datetime.now(timezone.utc) + timedelta(hours=1)
    pool.extend_events([Event("a", "s", expiry_time=expiry)])
    assert pool.get_events()[0].expiry_time == expiry


def test_input_events_not_modified():
    pool = EventPool(60)
    event = Event("a", "s")
    pool.extend_events([Event("z", "s"), event])
    assert event.id == 0
    assert event.expiry_time is None


def test_removed_ids_are_reused_last_first():
    pool = EventPool(60)
    pool.extend_events([Event(name, "s") for name in "abc"])
    pool.remove_events([0, 2])
    pool.extend_events([Event("d", "s"), Event("e", "s")])
    ids = {event.name: event.id for event in pool.get_events()}
    assert ids == {"b": 1, "d": 2, "e": 0}


def test_expired_events_are_dropped_and_ids_recycled():
    pool = EventPool(60)
    pool.extend_events([Event("old", "s", expiry_time=_past())])
    assert pool.get_events() == []
    pool.extend_events([Event("new", "s")])
    (event,) = pool.get_events()
    assert event.id == 0


def test_remove_unknown_ids_raises_but_removes_known():
    pool = EventPool(60)
    pool.extend_events([Event("a", "s")])
    with pytest.raises(SomeEventIdsNotFound) as info:
        pool.remove_events([0, 99, 42])
    assert info.value.event_ids == [99, 42]
    assert len(pool) == 0


def test_get_events_returns_copies():
    pool = EventPool(60)
    pool.extend_events([Event("a", "s", {"k": 1})])
    pool.get_events()[0].params["k"] = 2
    assert pool.get_events()[0].params == {"k": 1}


class _TinyPool(EventPool):
    MAX_EVENT_ID = 2


def test_id_space_exhaustion():
    pool = _TinyPool(60)
    pool.extend_events([Event("a", "s"), Event("b", "s")])
    with pytest.raises(NoAvailableEventIds):
        pool.extend_events([Event("c", "s")])
    assert len(pool) == 2
    pool.remove_events([1])
    pool.extend_events([Event("c", "s")])
    assert len(pool) == 2