"""Re-export from core.errors."""

from eventwire.core.errors import (
    AlreadyBoundError,
    AlreadyRegisteredEventError,
    BusError,
    ConfigurationError,
    DuplicateBindingError,
    EventwireError,
    RestrictedMethodError,
    SubscriberError,
    UnknownEventError,
    UnresolvedMethodError,
)

__all__ = [
    "AlreadyBoundError",
    "AlreadyRegisteredEventError",
    "BusError",
    "ConfigurationError",
    "DuplicateBindingError",
    "EventwireError",
    "RestrictedMethodError",
    "SubscriberError",
    "UnknownEventError",
    "UnresolvedMethodError",
]
