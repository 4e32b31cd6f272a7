"""Tests for named event handling on owning objects."""

from __future__ import annotations

from simple_events import EventHandlingBase
from tests.mocks import Recorder


class Thermostat(EventHandlingBase[float]):
    """Owner dispatching readings by name."""

    def __init__(self, room: str) -> None:
        self.room = room

    def report(self, name: str, value: float) -> None:
        self._events.get(name).dispatch(value)


class TestEventHandlingBase:
    """Delegation to the private event list."""

    def test_subscribe_and_dispatch(self):
        owner = Thermostat("kitchen")
        rec = Recorder()
        owner.subscribe("temperature", rec)
        owner.report("temperature", 21.5)
        assert rec.calls == [21.5]

    def test_sub_alias(self):
        owner = Thermostat("kitchen")
        rec = Recorder()
        owner.sub("temperature", rec)
        assert owner.has("temperature", rec)

    def test_one(self):
        owner = Thermostat("kitchen")
        rec = Recorder()
        owner.one("temperature", rec)
        owner.report("temperature", 1.0)
        owner.report("temperature", 2.0)
        assert rec.calls == [1.0]
        assert owner.has("temperature", rec) is False

    def test_unsubscribe_and_unsub(self):
        owner = Thermostat("kitchen")
        a, b = Recorder(), Recorder()
        owner.subscribe("temperature", a)
        owner.subscribe("temperature", b)
        owner.unsubscribe("temperature", a)
        owner.unsub("temperature", b)
        owner.report("temperature", 3.0)
        assert a.calls == []
        assert b.calls == []

    def test_names_are_separate(self):
        owner = Thermostat("kitchen")
        rec = Recorder()
        owner.subscribe("humidity", rec)
        owner.report("temperature", 20.0)
        assert rec.calls == []

    def test_owners_do_not_share_events(self):
        first, second = Thermostat("kitchen"), Thermostat("hall")
        rec = Recorder()
        first.subscribe("temperature", rec)
        second.report("temperature", 18.0)
        assert rec.calls == []
        assert not second.has("temperature", rec)

    def test_has_creates_dispatcher_for_unused_name(self):
        owner = Thermostat("kitchen")
        assert "pressure" not in owner._events
        assert owner.has("pressure", Recorder()) is False
        assert "pressure" in owner._events

    def test_unsubscribe_creates_dispatcher_for_unused_name(self):
        owner = Thermostat("kitchen")
        owner.unsubscribe("pressure", Recorder())
        assert "pressure" in owner._events

    def test_store_is_stable_per_owner(self):
        owner = Thermostat("kitchen")
        assert owner._events is owner._events
