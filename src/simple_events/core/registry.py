"""Handler storage behind every dispatcher, plus the subscribe-only view over it."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger

from simple_events.config import cfg
from simple_events.core.errors import DispatchError

TArgs = TypeVar("TArgs")

Handler = Callable[[TArgs], Any]
Unsubscribe = Callable[[], None]


@dataclass(eq=False)
class Subscription(Generic[TArgs]):
    """A registered handler; one-shot subscriptions run at most once."""

    handler: Handler[TArgs]
    is_once: bool = False
    is_executed: bool = False

    def execute(self, args: TArgs) -> None:
        if self.is_once and self.is_executed:
            return
        self.is_executed = True
        self.handler(args)


def _ensure_callable(fn: object) -> None:
    if not callable(fn):
        raise TypeError(f"event handler must be callable, got {type(fn).__name__}")


class HandlerRegistry(Generic[TArgs]):
    """Ordered handler storage for a single event channel.

    Dispatch order is subscription order. Duplicate subscriptions are kept and
    each one is invoked; ``unsubscribe`` drops the earliest matching entry.
    Handlers are matched with ``==`` so a re-fetched bound method finds its
    subscription; a callable class that defines ``__eq__`` therefore lets two
    equal but distinct handlers unsubscribe (and ``has``) each other.
    Every pass iterates a snapshot of the entries, so handlers may subscribe or
    unsubscribe (or dispatch again) without disturbing the pass in progress.
    One-shot entries leave the registry when the snapshot is taken.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription[TArgs]] = []
        self._subscription_change: HandlerRegistry[int] | None = None

    @property
    def count(self) -> int:
        """Number of current subscriptions."""
        return len(self._subscriptions)

    @property
    def on_subscription_change(self) -> EventView[int]:
        """Subscribe-only event receiving the new count whenever it changes."""
        if self._subscription_change is None:
            self._subscription_change = HandlerRegistry()
        return self._subscription_change.as_restricted_view()

    def subscribe(self, fn: Handler[TArgs], *, once: bool = False) -> Unsubscribe:
        """Add a handler; returns a callable that unsubscribes it."""
        _ensure_callable(fn)
        self._subscriptions.append(Subscription(fn, is_once=once))
        self._trigger_subscription_change()
        return lambda: self.unsubscribe(fn)

    def unsubscribe(self, fn: Handler[TArgs]) -> None:
        """Remove the earliest subscription of ``fn``; unknown handlers are ignored."""
        for i, sub in enumerate(self._subscriptions):
            if sub.handler == fn:
                del self._subscriptions[i]
                self._trigger_subscription_change()
                return

    def has(self, fn: Handler[TArgs]) -> bool:
        return any(sub.handler == fn for sub in self._subscriptions)

    def clear(self) -> None:
        """Drop every subscription."""
        if not self._subscriptions:
            return
        self._subscriptions.clear()
        self._trigger_subscription_change()

    def dispatch_sync(self, args: TArgs, *, raise_errors: bool | None = None) -> None:
        """Run every subscribed handler with ``args`` before returning.

        A failing handler does not stop the pass. Failures are logged; with
        ``raise_errors`` (default from config) they are raised afterwards as a
        single DispatchError.
        """
        errors = self._execute(self._take_snapshot(), args)
        if raise_errors is None:
            raise_errors = cfg.raise_errors
        if errors and raise_errors:
            raise DispatchError(
                f"{len(errors)} event handler(s) failed",
                errors=errors,
                code="handler_failed",
                details={"count": len(errors)},
            )

    def dispatch_async(self, args: TArgs) -> None:
        """Schedule a dispatch pass on the running event loop and return at once.

        The snapshot is taken now, so one-shot handlers are consumed by this call
        even though they run later. Handler errors are logged, never returned.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise DispatchError(
                "dispatch_async requires a running event loop",
                code="no_running_loop",
            ) from exc
        loop.call_soon(self._execute, self._take_snapshot(), args)

    def as_restricted_view(self) -> EventView[TArgs]:
        return EventView(self)

    def _take_snapshot(self) -> list[Subscription[TArgs]]:
        snapshot = list(self._subscriptions)
        if any(sub.is_once for sub in snapshot):
            self._subscriptions[:] = [sub for sub in self._subscriptions if not sub.is_once]
            self._trigger_subscription_change()
        return snapshot

    def _execute(self, snapshot: list[Subscription[TArgs]], args: TArgs) -> list[Exception]:
        errors: list[Exception] = []
        for sub in snapshot:
            try:
                sub.execute(args)
            except Exception as exc:
                if cfg.log_errors:
                    logger.exception("Event handler {!r} failed: {}", sub.handler, exc)
                errors.append(exc)
        return errors

    def _trigger_subscription_change(self) -> None:
        if self._subscription_change is not None:
            # Observer errors are logged, never raised.
            self._subscription_change.dispatch_sync(self.count, raise_errors=False)


class EventView(Generic[TArgs]):
    """Subscribe-only handle over a registry.

    Holds closures for the subscription side only; there is no attribute
    through which the event can be dispatched or cleared.
    """

    __slots__ = ("_subscribe", "_unsubscribe", "_has", "_count", "_on_change")

    def __init__(self, registry: HandlerRegistry[TArgs]) -> None:
        self._subscribe: Callable[[Handler[TArgs], bool], Unsubscribe] = (
            lambda fn, once: registry.subscribe(fn, once=once)
        )
        self._unsubscribe: Callable[[Handler[TArgs]], None] = lambda fn: registry.unsubscribe(fn)
        self._has: Callable[[Handler[TArgs]], bool] = lambda fn: registry.has(fn)
        self._count: Callable[[], int] = lambda: registry.count
        self._on_change: Callable[[], EventView[int]] = lambda: registry.on_subscription_change

    def subscribe(self, fn: Handler[TArgs]) -> Unsubscribe:
        return self._subscribe(fn, False)

    def sub(self, fn: Handler[TArgs]) -> Unsubscribe:
        return self.subscribe(fn)

    def one(self, fn: Handler[TArgs]) -> Unsubscribe:
        """Subscribe for the next dispatch only."""
        return self._subscribe(fn, True)

    def has(self, fn: Handler[TArgs]) -> bool:
        return self._has(fn)

    def unsubscribe(self, fn: Handler[TArgs]) -> None:
        self._unsubscribe(fn)

    def unsub(self, fn: Handler[TArgs]) -> None:
        self.unsubscribe(fn)

    @property
    def count(self) -> int:
        return self._count()

    @property
    def on_subscription_change(self) -> EventView[int]:
        return self._on_change()

    def __repr__(self) -> str:
        return f"<EventView subscriptions={self.count}>"
