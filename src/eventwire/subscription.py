"""Subscription record produced by a bus."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

_ids = itertools.count(1)


def callback_name(callback: Callable[..., Any]) -> str:
    """Name of a callback: its ``__name__``, else its type name."""
    return getattr(callback, "__name__", None) or type(callback).__name__


class NamedCallback:
    """Callable that answers to the name it was looked up by.

    Aliases (``on_b = handle_a``), partials and lambdas keep the handler name
    they were bound under instead of their own ``__name__``.
    """

    def __init__(self, callback: Callable[..., Any], name: str) -> None:
        self.callback = callback
        self.__name__ = name

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.callback(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<NamedCallback {self.__name__} -> {self.callback!r}>"


def named(callback: Callable[..., Any], name: str) -> Callable[..., Any]:
    """Return callback if it already carries name, else wrap it in NamedCallback."""
    if getattr(callback, "__name__", None) == name:
        return callback
    return NamedCallback(callback, name)


@dataclass(frozen=True, eq=False)
class Subscription:
    """One callback registered for one event name.

    ``method_name`` defaults to the callback's name. Identity-compared: two
    registrations of the same callback are distinct.
    """

    event_name: str
    callback: Callable[..., Any]
    method_name: str = ""
    id: int = field(default_factory=lambda: next(_ids))

    def __post_init__(self) -> None:
        if not self.method_name:
            object.__setattr__(self, "method_name", callback_name(self.callback))

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.callback(*args, **kwargs)
