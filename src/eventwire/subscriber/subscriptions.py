"""Read-only collection of the subscriptions made by one binding."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from eventwire.subscription import callback_name


def _method_name(subscription: Any) -> str:
    name = getattr(subscription, "method_name", None)
    if name:
        return name
    return callback_name(subscription.callback)


class Subscriptions:
    """Subscriptions created by a single ``subscribe_to`` / ``SubscriberState.call``.

    Order is binding order: manual definitions first, then autodiscovered ones.
    """

    def __init__(self, subscriptions: Iterable[Any]) -> None:
        self._subscriptions: tuple[Any, ...] = tuple(subscriptions)

    def method_names(self, event_name: str) -> list[str]:
        """Method names subscribed to event_name."""
        return [_method_name(s) for s in self._subscriptions if s.event_name == event_name]

    def event_names(self, method_name: str) -> list[str]:
        """Event names a given method is subscribed to."""
        return [s.event_name for s in self._subscriptions if _method_name(s) == method_name]

    def subscriptions(self, event_name: str | None = None, method_name: str | None = None) -> list[Any]:
        """All subscriptions, optionally limited by event name and/or method name."""
        subs: Iterable[Any] = self._subscriptions
        if event_name is not None:
            subs = [s for s in subs if s.event_name == event_name]
        if method_name is not None:
            subs = [s for s in subs if _method_name(s) == method_name]
        return list(subs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._subscriptions)

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{s.event_name}->{_method_name(s)}" for s in self._subscriptions)
        return f"Subscriptions([{pairs}])"
