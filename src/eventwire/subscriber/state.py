"""Binding engine: turns declared and conventional handlers into bus subscriptions."""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from loguru import logger

from eventwire.config import cfg
from eventwire.core.errors import (
    AlreadyBoundError,
    DuplicateBindingError,
    RestrictedMethodError,
    SubscriberError,
    UnknownEventError,
    UnresolvedMethodError,
)
from eventwire.subscriber.context import MethodLookup, MethodVisibility, lookup_for
from eventwire.subscriber.subscriptions import Subscriptions
from eventwire.subscription import named


@dataclass(frozen=True)
class Binding:
    """An event name paired with a handler method name, not yet checked."""

    event_name: str
    method_name: str

    def as_pair(self) -> tuple[str, str]:
        return (self.event_name, self.method_name)


@dataclass(frozen=True)
class ResolvedBinding:
    """A Binding whose method was found public on the context.

    ``callback`` answers to the binding's method name, even for aliases.
    """

    binding: Binding
    callback: Callable[..., Any]

    @property
    def event_name(self) -> str:
        return self.binding.event_name


class SubscriberState:
    """Manual definitions plus the record of which (bus, context) pairs are bound.

    ``call`` is the only way to bind; it either registers every binding or none.

    ``inherited`` states contribute their own definitions ahead of this one's.
    They are read on every ``call``, so definitions added to them later are seen.
    """

    def __init__(
        self,
        manual_definitions: Iterable[Binding | tuple[str, str]] = (),
        *,
        prefix: str | None = None,
        autodiscover: bool | None = None,
        restricted_prefix: str | None = None,
        inherited: Sequence[SubscriberState] = (),
    ) -> None:
        self._own_definitions: list[Binding] = [
            d if isinstance(d, Binding) else Binding(*d) for d in manual_definitions
        ]
        self._inherited: tuple[SubscriberState, ...] = tuple(inherited)
        # (id(bus), id(context)) -> (bus, context); values keep the ids alive.
        self._calling_cache: dict[tuple[int, int], tuple[Any, Any]] = {}
        self._lock = threading.RLock()
        self._prefix = prefix
        self._autodiscover = autodiscover
        self._restricted_prefix = restricted_prefix

    @property
    def prefix(self) -> str:
        return cfg.autodiscover_prefix if self._prefix is None else self._prefix

    @property
    def autodiscover(self) -> bool:
        return cfg.autodiscover if self._autodiscover is None else self._autodiscover

    @property
    def own_definitions(self) -> tuple[Binding, ...]:
        """Definitions added to this state directly."""
        with self._lock:
            return tuple(self._own_definitions)

    @property
    def manual_definitions(self) -> tuple[Binding, ...]:
        """Inherited definitions, then this state's own, in declaration order."""
        inherited = [d for state in self._inherited for d in state.own_definitions]
        return (*inherited, *self.own_definitions)

    @property
    def calling_cache(self) -> tuple[tuple[Any, Any], ...]:
        """(bus, context) pairs already bound, oldest first."""
        with self._lock:
            return tuple(self._calling_cache.values())

    def derive(
        self,
        *,
        prefix: str | None = None,
        autodiscover: bool | None = None,
        inherited: Sequence[SubscriberState] | None = None,
    ) -> SubscriberState:
        """New empty state that inherits from this one, with an empty calling cache.

        ``inherited`` replaces the default chain (this state's ancestors, then itself).
        """
        return SubscriberState(
            prefix=self._prefix if prefix is None else prefix,
            autodiscover=self._autodiscover if autodiscover is None else autodiscover,
            restricted_prefix=self._restricted_prefix,
            inherited=(*self._inherited, self) if inherited is None else inherited,
        )

    def is_bound(self, bus: Any, context: Any) -> bool:
        with self._lock:
            return (id(bus), id(context)) in self._calling_cache

    def add_manual_definition(self, event_name: str, method_name: str) -> None:
        """Declare that method_name handles event_name. Checked on ``call``."""
        with self._lock:
            self._own_definitions.append(Binding(event_name, method_name))

    def call(self, bus: Any, context: Any) -> Subscriptions:
        """Bind context's handlers to bus and return the new subscriptions."""
        with self._lock:
            key = (id(bus), id(context))
            if key in self._calling_cache:
                raise AlreadyBoundError(bus, context)

            lookup = lookup_for(context, self._restricted_prefix)
            try:
                definitions = [*self.manual_definitions, *self._autodiscovered(bus, lookup)]
                self._check_duplicates(definitions)
                resolved = [self._resolve(binding, lookup) for binding in definitions]
                self._check_event_names(bus, definitions)
            except (SubscriberError, UnknownEventError) as exc:
                logger.warning("Refusing to subscribe {!r} to {!r}: {}", context, bus, exc)
                raise

            subscriptions = Subscriptions(self._subscribe(bus, resolved))
            self._calling_cache[key] = (bus, context)

        logger.debug("Subscribed {!r} to {!r}: {}", context, bus, subscriptions)
        return subscriptions

    def _autodiscovered(self, bus: Any, lookup: MethodLookup) -> Iterator[Binding]:
        if not self.autodiscover:
            return
        prefix = self.prefix
        for event_name in bus.registry.event_names:
            candidate = f"{prefix}{event_name}"
            # Restricted methods are discovered too, and rejected in _resolve.
            if lookup.method_visibility(candidate) is not MethodVisibility.ABSENT:
                logger.debug("Discovered handler {} for {}", candidate, event_name)
                yield Binding(event_name, candidate)

    @staticmethod
    def _check_duplicates(definitions: list[Binding]) -> None:
        duplicates = [b.as_pair() for b, count in Counter(definitions).items() if count > 1]
        if duplicates:
            raise DuplicateBindingError(duplicates)

    @staticmethod
    def _resolve(binding: Binding, lookup: MethodLookup) -> ResolvedBinding:
        visibility = lookup.method_visibility(binding.method_name)
        if visibility is MethodVisibility.RESTRICTED:
            raise RestrictedMethodError(binding.event_name, binding.method_name)
        if visibility is MethodVisibility.ABSENT:
            raise UnresolvedMethodError(binding.event_name, binding.method_name)
        callback = named(lookup.bound_method(binding.method_name), binding.method_name)
        return ResolvedBinding(binding, callback)

    @staticmethod
    def _check_event_names(bus: Any, definitions: list[Binding]) -> None:
        known = tuple(bus.registry.event_names)
        for binding in definitions:
            if binding.event_name not in known:
                raise UnknownEventError(binding.event_name, known)

    @staticmethod
    def _subscribe(bus: Any, resolved: list[ResolvedBinding]) -> list[Any]:
        made: list[Any] = []
        try:
            for binding in resolved:
                made.append(bus.subscribe(binding.event_name, binding.callback))
        except Exception:
            unsubscribe = getattr(bus, "unsubscribe", None)
            logger.exception("Bus rejected a subscription; rolling back {} made so far", len(made))
            if unsubscribe is not None:
                for subscription in reversed(made):
                    unsubscribe(subscription)
            raise
        return made
