"""Load eventwire settings from YAML (+ .env) into a Config."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from eventwire.config.schema import Config, cfg
from eventwire.core.errors import ConfigurationError

# Key under which an application config file may nest eventwire's settings.
SECTION = "eventwire"


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path, *, section: str | None = None) -> dict[str, Any]:
    """Read settings from a YAML file with SafeLoader.

    A missing file or a top level that is not a mapping yields ``{}``. With
    ``section``, only that key of the file is returned; it must be a mapping.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise
    if not isinstance(data, dict):
        logger.warning("Config file {} has invalid structure (expected dict)", path)
        return {}
    if section is None:
        return data

    nested = data.get(section, {})
    if not isinstance(nested, dict):
        raise ConfigurationError(
            f"{section} section of {path} must be a mapping",
            code="invalid_section",
            details={"section": section, "type": type(nested).__name__},
        )
    return nested


def load_config_with_env(path: str | Path, *, section: str | None = None) -> dict[str, Any]:
    """Load .env into the process environment, then read the YAML file.

    EVENTWIRE_* variables are picked up by Config on reload.
    """
    from dotenv import load_dotenv

    load_dotenv()
    return load_config(path, section=section)


def configure(
    path: str | Path,
    *,
    section: str | None = SECTION,
    overrides: dict[str, Any] | None = None,
    config: Config | None = None,
) -> Config:
    """Load settings from path and reload ``config`` (the global ``cfg`` by default).

    ``section`` defaults to the ``eventwire`` key; pass None when the whole file
    holds eventwire settings. ``overrides`` are merged on top of the file.
    Raises ConfigurationError when the merged settings are invalid.
    """
    data = _deep_update(load_config_with_env(path, section=section), overrides or {})
    target = cfg if config is None else config
    target.reload(data)
    logger.info("eventwire configured from {}", path)
    return target
