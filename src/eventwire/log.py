"""loguru setup for applications embedding eventwire."""

from __future__ import annotations

import os
import sys
from typing import Any

from loguru import logger

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(verbose: bool = False) -> str:
    """verbose=True or LOG_LEVEL=DEBUG enables DEBUG; otherwise LOG_LEVEL or INFO."""
    if verbose:
        return "DEBUG"
    env_level = (os.environ.get("LOG_LEVEL") or "").upper()
    if env_level in _LEVELS:
        return env_level
    return "INFO"


def setup_logging(verbose: bool = False, *, sink: Any = None) -> str:
    """Enable eventwire logs and replace loguru sinks with a single one.

    Returns the level in effect.
    """
    level = resolve_level(verbose)
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )
    logger.enable("eventwire")
    return level
