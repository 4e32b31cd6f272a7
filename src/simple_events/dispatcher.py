"""Single-channel event dispatcher."""

from __future__ import annotations

from typing import Generic

from simple_events.core.registry import EventView, Handler, HandlerRegistry, TArgs, Unsubscribe


class EventDispatcher(Generic[TArgs]):
    """Owner-side handle of one event channel.

    Keep the dispatcher private and hand out ``as_event()`` to consumers; the
    view can subscribe but never dispatch.
    """

    def __init__(self) -> None:
        self._registry: HandlerRegistry[TArgs] = HandlerRegistry()

    def subscribe(self, fn: Handler[TArgs]) -> Unsubscribe:
        """Subscribe a handler; returns a callable that unsubscribes it."""
        return self._registry.subscribe(fn)

    def sub(self, fn: Handler[TArgs]) -> Unsubscribe:
        return self.subscribe(fn)

    def one(self, fn: Handler[TArgs]) -> Unsubscribe:
        """Subscribe a handler for the next dispatch only."""
        return self._registry.subscribe(fn, once=True)

    def has(self, fn: Handler[TArgs]) -> bool:
        return self._registry.has(fn)

    def unsubscribe(self, fn: Handler[TArgs]) -> None:
        self._registry.unsubscribe(fn)

    def unsub(self, fn: Handler[TArgs]) -> None:
        self.unsubscribe(fn)

    def clear(self) -> None:
        """Remove every subscription."""
        self._registry.clear()

    @property
    def count(self) -> int:
        return self._registry.count

    @property
    def on_subscription_change(self) -> EventView[int]:
        return self._registry.on_subscription_change

    def dispatch(self, args: TArgs, *, raise_errors: bool | None = None) -> None:
        """Dispatch the event to all handlers before returning."""
        self._registry.dispatch_sync(args, raise_errors=raise_errors)

    def dispatch_async(self, args: TArgs) -> None:
        """Dispatch the event on a later turn of the running event loop."""
        self._registry.dispatch_async(args)

    def as_event(self) -> EventView[TArgs]:
        """Subscribe-only view of this dispatcher."""
        return self._registry.as_restricted_view()

    def __repr__(self) -> str:
        return f"<EventDispatcher subscriptions={self.count}>"
