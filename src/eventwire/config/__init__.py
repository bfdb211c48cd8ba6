"""Configuration: YAML + env overlay."""

from eventwire.config.schema import Config, cfg
from eventwire.config.loader import SECTION, _deep_update, configure, load_config, load_config_with_env

__all__ = ["SECTION", "Config", "_deep_update", "cfg", "configure", "load_config", "load_config_with_env"]
