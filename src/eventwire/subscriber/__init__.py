"""Declarative subscribers.

Subclass :class:`Subscriber` and either name handlers ``on_<event>`` or declare
them explicitly::

    class Mailer(Subscriber):
        @handles("order_created")
        def send_receipt(self, order): ...

        def on_order_cancelled(self, order): ...

    subscriptions = Mailer().subscribe_to(bus)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, TypeVar

from eventwire.subscriber.context import AttributeLookup, MethodLookup, MethodVisibility, lookup_for
from eventwire.subscriber.state import Binding, ResolvedBinding, SubscriberState
from eventwire.subscriber.subscriptions import Subscriptions

__all__ = [
    "AttributeLookup",
    "Binding",
    "MethodLookup",
    "MethodVisibility",
    "ResolvedBinding",
    "Subscriber",
    "SubscriberState",
    "Subscriptions",
    "handles",
    "lookup_for",
]

F = TypeVar("F", bound=Callable[..., Any])

_HANDLES_ATTR = "__eventwire_handles__"


def handles(*event_names: str) -> Callable[[F], F]:
    """Mark a method as the handler for the given event names."""

    def decorator(f: F) -> F:
        existing = getattr(f, _HANDLES_ATTR, ())
        setattr(f, _HANDLES_ATTR, (*existing, *event_names))
        return f

    return decorator


class Subscriber:
    """Base class giving each subclass its own SubscriberState.

    A subclass also binds the declarations of every Subscriber base, most
    general first (reversed MRO). Bases are read when ``subscribe_to`` runs, so
    ``handle`` on a parent after a subclass exists still reaches the subclass.
    Class keywords ``prefix`` and ``autodiscover`` override the configured
    convention and are inherited from the nearest base.
    """

    _subscriber_state: ClassVar[SubscriberState] = SubscriberState()

    def __init_subclass__(
        cls,
        *,
        prefix: str | None = None,
        autodiscover: bool | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        # Every Subscriber ancestor once, most general first (reversed MRO).
        ancestors = tuple(
            base.__dict__["_subscriber_state"]
            for base in reversed(cls.__mro__[1:])
            if "_subscriber_state" in base.__dict__
        )
        state = cls._subscriber_state.derive(prefix=prefix, autodiscover=autodiscover, inherited=ancestors)
        for name, attr in cls.__dict__.items():
            for event_name in getattr(attr, _HANDLES_ATTR, ()):
                state.add_manual_definition(event_name, name)
        cls._subscriber_state = state

    @classmethod
    def handle(cls, event_name: str, with_: str) -> None:
        """Declare ``with_`` as the handler for ``event_name``."""
        cls._subscriber_state.add_manual_definition(event_name, with_)

    def subscribe_to(self, bus: Any) -> Subscriptions:
        """Bind this instance's handlers to bus. Allowed once per bus."""
        return type(self)._subscriber_state.call(bus, self)
