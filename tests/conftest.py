"""Shared fixtures."""

import pytest

from eventwire.config import cfg


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from default config with no EVENTWIRE_* env overrides."""
    monkeypatch.delenv("EVENTWIRE_AUTODISCOVER", raising=False)
    monkeypatch.delenv("EVENTWIRE_AUTODISCOVER_PREFIX", raising=False)
    cfg.reload({})
    yield
    monkeypatch.undo()
    cfg.reload({})
