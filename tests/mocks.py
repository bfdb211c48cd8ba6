"""Test doubles: a bus that records subscribe calls and a few handler contexts."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from eventwire.subscriber import MethodVisibility
from eventwire.subscription import Subscription


class MockRegistry:
    def __init__(self, event_names: list[str]) -> None:
        self.event_names = list(event_names)


class MockBus:
    """Minimal bus: known event names plus a log of subscribe calls."""

    def __init__(self, event_names: list[str], fail_on: str | None = None) -> None:
        self.registry = MockRegistry(event_names)
        self.subscribe_calls: list[tuple[str, Callable[..., Any]]] = []
        self.unsubscribed: list[Subscription] = []
        self.fail_on = fail_on

    def subscribe(self, event_name: str, callback: Callable[..., Any]) -> Subscription:
        if event_name == self.fail_on:
            raise RuntimeError(f"subscribe failed for {event_name}")
        self.subscribe_calls.append((event_name, callback))
        return Subscription(event_name, callback)

    def unsubscribe(self, subscription: Subscription) -> None:
        self.unsubscribed.append(subscription)


class Handlers:
    """Plain context with one conventional handler and one explicit one."""

    def __init__(self) -> None:
        self.received: list[tuple[str, Any]] = []

    def handle_a(self, payload: Any = None) -> None:
        self.received.append(("handle_a", payload))

    def on_b(self, payload: Any = None) -> None:
        self.received.append(("on_b", payload))


class ExplicitLookup:
    """Context that answers visibility itself instead of being inspected."""

    def __init__(self, visibility: dict[str, MethodVisibility]) -> None:
        self.visibility = visibility
        self.calls: list[str] = []

    def method_visibility(self, name: str) -> MethodVisibility:
        return self.visibility.get(name, MethodVisibility.ABSENT)

    def record(self, name: str, *args: Any) -> None:
        self.calls.append(name)

    def bound_method(self, name: str) -> Callable[..., Any]:
        """A partial, so the callable has no name of its own."""
        return functools.partial(self.record, name)
