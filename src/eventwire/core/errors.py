"""eventwire domain exceptions."""

from __future__ import annotations

from typing import Any


class EventwireError(Exception):
    """Base for eventwire errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_error = original_error


class ConfigurationError(EventwireError):
    """Config validation or load failure."""


class SubscriberError(EventwireError):
    """Base for errors raised while binding a context to a bus."""


class AlreadyBoundError(SubscriberError):
    """The (bus, context) pair has already been bound once."""

    def __init__(self, bus: Any, context: Any) -> None:
        self.bus = bus
        self.context = context
        super().__init__(
            f"{context!r} has already been subscribed to {bus!r}",
            code="already_bound",
        )


class DuplicateBindingError(SubscriberError):
    """The same (event name, method name) pair was bound more than once."""

    def __init__(self, duplicates: list[tuple[str, str]]) -> None:
        self.duplicates = list(duplicates)
        pairs = ", ".join(f"{event} -> {method}" for event, method in self.duplicates)
        super().__init__(
            f"Tried to subscribe the same method to the same event more than once: {pairs}",
            code="duplicate_binding",
            details={"duplicates": self.duplicates},
        )


class RestrictedMethodError(SubscriberError):
    """The bound method exists but is not public."""

    def __init__(self, event_name: str, method_name: str) -> None:
        self.event_name = event_name
        self.method_name = method_name
        super().__init__(
            f"Tried to subscribe restricted method '{method_name}' to event '{event_name}'",
            code="restricted_method",
            details={"event_name": event_name, "method_name": method_name},
        )


class UnresolvedMethodError(SubscriberError):
    """The bound method does not exist on the context."""

    def __init__(self, event_name: str, method_name: str) -> None:
        self.event_name = event_name
        self.method_name = method_name
        super().__init__(
            f"Tried to subscribe unknown method '{method_name}' to event '{event_name}'",
            code="unresolved_method",
            details={"event_name": event_name, "method_name": method_name},
        )


class BusError(EventwireError):
    """Base for bus registry errors."""


class UnknownEventError(BusError):
    """Event name is not registered on the bus."""

    def __init__(self, event_name: str, known: tuple[str, ...] = ()) -> None:
        self.event_name = event_name
        super().__init__(
            f"Unknown event '{event_name}'",
            code="unknown_event",
            details={"event_name": event_name, "known": list(known)},
        )


class AlreadyRegisteredEventError(BusError):
    """Event name was registered twice."""

    def __init__(self, event_name: str) -> None:
        self.event_name = event_name
        super().__init__(
            f"Event '{event_name}' is already registered",
            code="already_registered_event",
            details={"event_name": event_name},
        )
