"""Naming-convention defaults."""

from __future__ import annotations

DEFAULT_AUTODISCOVER_PREFIX = "on_"
DEFAULT_RESTRICTED_PREFIX = "_"
