"""Config loading: YAML file plus optional .env."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from simple_events.config.schema import DEFAULTS, Config, cfg


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load config from YAML file. Use SafeLoader. Returns raw dict."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise
    if not isinstance(data, dict):
        logger.warning("Config file {} has invalid structure (expected dict)", path)
        return {}
    return data


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load config from YAML after loading .env, so env overrides see its values."""
    from dotenv import load_dotenv

    load_dotenv()
    return load_config(path)


def configure(path: str | Path, *, env: bool = True) -> Config:
    """Load dispatch settings from ``path`` over the defaults and apply them to ``cfg``."""
    data = load_config_with_env(path) if env else load_config(path)
    cfg.reload(_deep_update(copy.deepcopy(DEFAULTS), data))
    logger.info("Event config loaded from {}", path)
    return cfg
