"""Named event lists: dispatchers created on first use, looked up by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from loguru import logger

from simple_events.core.errors import EventsError
from simple_events.core.registry import TArgs
from simple_events.dispatcher import EventDispatcher

TDispatcher = TypeVar("TDispatcher", bound=EventDispatcher[Any])


class EventListBase(ABC, Generic[TDispatcher]):
    """Storage for dispatchers keyed by event name."""

    def __init__(self) -> None:
        self._events: dict[str, TDispatcher] = {}

    def get(self, name: str) -> TDispatcher:
        """Get the dispatcher for ``name``, creating it on first access."""
        if not isinstance(name, str):
            raise EventsError(
                "event name must be a string",
                code="invalid_event_name",
                details={"type": type(name).__name__},
            )
        event = self._events.get(name)
        if event is None:
            event = self.create_dispatcher()
            self._events[name] = event
            logger.debug("Created dispatcher for event {!r}", name)
        return event

    def remove(self, name: str) -> None:
        """Remove the dispatcher for ``name``; its subscribers are dropped for good."""
        if self._events.pop(name, None) is not None:
            logger.debug("Removed dispatcher for event {!r}", name)

    def __contains__(self, name: object) -> bool:
        return name in self._events

    def __len__(self) -> int:
        return len(self._events)

    @abstractmethod
    def create_dispatcher(self) -> TDispatcher:
        """Create a new dispatcher instance."""


class EventList(EventListBase[EventDispatcher[TArgs]]):
    """Named events that all carry the same argument type."""

    def create_dispatcher(self) -> EventDispatcher[TArgs]:
        return EventDispatcher()


class NonUniformEventList(EventListBase[EventDispatcher[Any]]):
    """Named events whose argument type differs per name.

    Annotate the result at the call site to recover the payload type, e.g.
    ``changed: EventDispatcher[int] = events.get("changed")``.
    """

    def create_dispatcher(self) -> EventDispatcher[Any]:
        return EventDispatcher()
