"""Test loguru setup."""

import io

from loguru import logger

from eventwire.config import cfg
from eventwire.log import resolve_level, setup_logging


class TestResolveLevel:
    def test_verbose_is_debug(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_level(verbose=True) == "DEBUG"

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert resolve_level() == "WARNING"

    def test_unknown_env_level_defaults_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert resolve_level() == "INFO"

    def test_default_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_level() == "INFO"


class TestSetupLogging:
    def test_enables_library_logs(self):
        # Arrange
        sink = io.StringIO()

        # Act
        try:
            level = setup_logging(verbose=True, sink=sink)
            cfg.reload({"autodiscover_prefix": "when_"})
        finally:
            logger.remove()
            logger.disable("eventwire")

        # Assert
        assert level == "DEBUG"
        assert "Config reloaded" in sink.getvalue()
        assert "when_" in sink.getvalue()
