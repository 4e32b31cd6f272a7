"""Configuration: YAML + env overlay."""

from simple_events.config.loader import _deep_update, configure, load_config, load_config_with_env
from simple_events.config.schema import DEFAULTS, Config, cfg

__all__ = ["DEFAULTS", "Config", "_deep_update", "cfg", "configure", "load_config", "load_config_with_env"]
