"""Named event handling for any owning object."""

from __future__ import annotations

from typing import Generic

from simple_events.core.registry import Handler, TArgs
from simple_events.lists import EventList


class EventHandlingBase(Generic[TArgs]):
    """Gives an owner ``subscribe``/``one``/``has``/``unsubscribe`` by event name.

    Subclasses dispatch through ``self._events.get(name).dispatch(args)``;
    consumers only get the subscription methods. Every call creates the named
    dispatcher if it does not exist yet, ``has`` and ``unsubscribe`` included.
    """

    __events: EventList[TArgs] | None = None

    @property
    def _events(self) -> EventList[TArgs]:
        if self.__events is None:
            self.__events = EventList()
        return self.__events

    def subscribe(self, name: str, fn: Handler[TArgs]) -> None:
        self._events.get(name).subscribe(fn)

    def sub(self, name: str, fn: Handler[TArgs]) -> None:
        self.subscribe(name, fn)

    def one(self, name: str, fn: Handler[TArgs]) -> None:
        """Subscribe once to the event with the given name."""
        self._events.get(name).one(fn)

    def has(self, name: str, fn: Handler[TArgs]) -> bool:
        return self._events.get(name).has(fn)

    def unsubscribe(self, name: str, fn: Handler[TArgs]) -> None:
        self._events.get(name).unsubscribe(fn)

    def unsub(self, name: str, fn: Handler[TArgs]) -> None:
        self.unsubscribe(name, fn)
