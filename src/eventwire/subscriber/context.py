"""How a subscriber finds and inspects handler methods on its context."""

from __future__ import annotations

import enum
import functools
import inspect
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from eventwire.config import cfg

_COMPUTED_ATTRIBUTES = (property, functools.cached_property)


class MethodVisibility(enum.Enum):
    ABSENT = "absent"
    RESTRICTED = "restricted"
    PUBLIC = "public"


@runtime_checkable
class MethodLookup(Protocol):
    """Contexts may implement this to control which handlers they expose."""

    def method_visibility(self, name: str) -> MethodVisibility: ...

    def bound_method(self, name: str) -> Callable[..., Any]: ...


class AttributeLookup:
    """MethodLookup over a plain object.

    A callable attribute is RESTRICTED when its name starts with the restricted
    prefix (``_`` by default), PUBLIC otherwise. Non-callable attributes and
    properties are ABSENT; properties are never evaluated.
    """

    def __init__(self, context: Any, restricted_prefix: str | None = None) -> None:
        self.context = context
        self.restricted_prefix = cfg.restricted_prefix if restricted_prefix is None else restricted_prefix

    def method_visibility(self, name: str) -> MethodVisibility:
        try:
            static = inspect.getattr_static(self.context, name)
        except AttributeError:
            return MethodVisibility.ABSENT
        if isinstance(static, _COMPUTED_ATTRIBUTES):
            return MethodVisibility.ABSENT
        if not callable(getattr(self.context, name, None)):
            return MethodVisibility.ABSENT
        if self.restricted_prefix and name.startswith(self.restricted_prefix):
            return MethodVisibility.RESTRICTED
        return MethodVisibility.PUBLIC

    def bound_method(self, name: str) -> Callable[..., Any]:
        return getattr(self.context, name)


def lookup_for(context: Any, restricted_prefix: str | None = None) -> MethodLookup:
    """Use the context's own lookup when it has one, else inspect its attributes."""
    if isinstance(context, MethodLookup):
        return context
    return AttributeLookup(context, restricted_prefix)
