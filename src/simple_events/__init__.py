"""Typed in-process events: dispatchers, named event lists, subscribe-only views."""

from simple_events.config import configure
from simple_events.core.errors import DispatchError, EventsConfigurationError, EventsError
from simple_events.core.registry import EventView, HandlerRegistry, Subscription
from simple_events.dispatcher import EventDispatcher
from simple_events.handling import EventHandlingBase
from simple_events.lists import EventList, EventListBase, NonUniformEventList
from simple_events.log import enable_logging

__version__ = "0.1.0"

__all__ = [
    "DispatchError",
    "EventDispatcher",
    "EventHandlingBase",
    "EventList",
    "EventListBase",
    "EventView",
    "EventsConfigurationError",
    "EventsError",
    "HandlerRegistry",
    "NonUniformEventList",
    "Subscription",
    "__version__",
    "configure",
    "enable_logging",
]
