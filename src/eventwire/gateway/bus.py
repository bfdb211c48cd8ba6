"""In-memory event bus: a registry of known event names plus their subscriptions."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from loguru import logger

from eventwire.core.errors import AlreadyRegisteredEventError, EventwireError, UnknownEventError
from eventwire.subscription import Subscription

__all__ = ["Bus", "BusLike", "Registry"]


class BusLike(Protocol):
    """What a subscriber needs from a bus: known event names and subscribe."""

    @property
    def registry(self) -> Any: ...

    def subscribe(self, event_name: str, callback: Callable[..., Any]) -> Any: ...


class Registry:
    """Ordered set of event names a bus knows about."""

    def __init__(self, event_names: Iterable[str] = ()) -> None:
        self._event_names: list[str] = []
        self._lock = threading.Lock()
        for name in event_names:
            self.register(name)

    def register(self, event_name: str) -> None:
        with self._lock:
            if event_name in self._event_names:
                raise AlreadyRegisteredEventError(event_name)
            self._event_names.append(event_name)
        logger.debug("Event registered: {}", event_name)

    def is_registered(self, event_name: str) -> bool:
        with self._lock:
            return event_name in self._event_names

    def check_event_name(self, event_name: str) -> None:
        """Raise UnknownEventError unless event_name is registered."""
        with self._lock:
            if event_name not in self._event_names:
                raise UnknownEventError(event_name, tuple(self._event_names))

    @property
    def event_names(self) -> tuple[str, ...]:
        """Registered names, in registration order."""
        with self._lock:
            return tuple(self._event_names)


class Bus:
    """Publish/subscribe bus keyed by registered event names."""

    def __init__(self, event_names: Iterable[str] = ()) -> None:
        self.registry = Registry(event_names)
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()

    def register(self, event_name: str) -> None:
        """Register a new event name."""
        self.registry.register(event_name)

    def subscribe(
        self, event_name: str, callback: Callable[..., Any], *, method_name: str | None = None
    ) -> Subscription:
        """Register callback for event_name and return the resulting Subscription.

        method_name defaults to the callback's own name.
        """
        self.registry.check_event_name(event_name)
        if not callable(callback):
            raise EventwireError(
                f"Callback must be callable, got {type(callback).__name__}",
                code="invalid_callback",
                details={"event_name": event_name},
            )
        subscription = Subscription(event_name, callback, method_name or "")
        with self._lock:
            self._subscriptions.append(subscription)
        logger.debug("Subscribed {} to {}", subscription.method_name, event_name)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription. Unknown subscriptions are ignored."""
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    @property
    def subscriptions(self) -> tuple[Subscription, ...]:
        with self._lock:
            return tuple(self._subscriptions)

    def publish(self, event_name: str, *args: Any, **kwargs: Any) -> int:
        """Run every callback subscribed to event_name; return how many ran.

        A failing callback is logged and does not stop the rest.
        """
        self.registry.check_event_name(event_name)
        with self._lock:
            targets = [s for s in self._subscriptions if s.event_name == event_name]

        for subscription in targets:
            try:
                subscription(*args, **kwargs)
            except Exception as exc:
                logger.exception(
                    "Subscriber {} failed on {}: {}", subscription.method_name, event_name, exc
                )
        return len(targets)
