"""Config schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from eventwire.core.constants import DEFAULT_AUTODISCOVER_PREFIX, DEFAULT_RESTRICTED_PREFIX
from eventwire.core.errors import ConfigurationError

_ENV_OVERRIDE_KEYS = (
    "EVENTWIRE_AUTODISCOVER",
    "EVENTWIRE_AUTODISCOVER_PREFIX",
)

_PREFIX_KEYS = ("autodiscover_prefix", "restricted_prefix")


def _load_env_overrides() -> dict[str, str]:
    """Snapshot env overrides; refreshed on every reload."""
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.lower()
    if v in ("1", "true", "yes"):
        return True
    if v in ("0", "false", "no"):
        return False
    return None


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug(
            "Config reloaded: autodiscover={} prefix={!r}",
            self.autodiscover,
            self.autodiscover_prefix,
        )

    def _validate(self) -> None:
        """Validate config structure; raise ConfigurationError on failure."""
        for key in _PREFIX_KEYS:
            val = self._data.get(key)
            if val is None:
                continue
            if not isinstance(val, str):
                raise ConfigurationError(
                    f"{key} must be a string",
                    code=f"invalid_{key}",
                    details={"type": type(val).__name__},
                )
            if not val.isidentifier():
                raise ConfigurationError(
                    f"{key} must be a valid identifier prefix",
                    code=f"invalid_{key}",
                    details={"value": val},
                )
        autodiscover = self._data.get("autodiscover")
        if autodiscover is not None and not isinstance(autodiscover, bool):
            raise ConfigurationError(
                "autodiscover must be a boolean",
                code="invalid_autodiscover",
                details={"type": type(autodiscover).__name__},
            )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def autodiscover(self) -> bool:
        """Bind prefixed methods to bus events without explicit declaration."""
        parsed = _parse_bool_env(self._env.get("EVENTWIRE_AUTODISCOVER", ""))
        if parsed is not None:
            return parsed
        return bool(self._data.get("autodiscover", True))

    @property
    def autodiscover_prefix(self) -> str:
        """Prefix joined to an event name to form the conventional handler name."""
        env_val = self._env.get("EVENTWIRE_AUTODISCOVER_PREFIX", "").strip()
        if env_val:
            return env_val
        return str(self._data.get("autodiscover_prefix", DEFAULT_AUTODISCOVER_PREFIX))

    @property
    def restricted_prefix(self) -> str:
        """Methods whose name starts with this are not public."""
        return str(self._data.get("restricted_prefix", DEFAULT_RESTRICTED_PREFIX))


cfg: Config = Config({})
