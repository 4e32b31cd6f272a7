"""Config schema and accessor for dispatch defaults."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from simple_events.core.errors import EventsConfigurationError

_ENV_RAISE_ERRORS = "SIMPLE_EVENTS_RAISE_ERRORS"
_ENV_LOG_ERRORS = "SIMPLE_EVENTS_LOG_ERRORS"
_ENV_OVERRIDE_KEYS = (_ENV_RAISE_ERRORS, _ENV_LOG_ERRORS)

_DISPATCH_FLAGS = ("raise_errors", "log_errors")

DEFAULTS: dict[str, Any] = {"dispatch": {"raise_errors": False, "log_errors": True}}


def _load_env_overrides() -> dict[str, str]:
    """Snapshot env overrides; refreshed on every reload."""
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.strip().lower()
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
            "Config reloaded: raise_errors={} log_errors={}",
            self.raise_errors,
            self.log_errors,
        )

    def _validate(self) -> None:
        """Validate config structure; raise EventsConfigurationError on failure."""
        dispatch = self._data.get("dispatch")
        if dispatch is None:
            return
        if not isinstance(dispatch, dict):
            raise EventsConfigurationError(
                "dispatch must be a mapping",
                code="invalid_dispatch",
                details={"type": type(dispatch).__name__},
            )
        for flag in _DISPATCH_FLAGS:
            if flag in dispatch and not isinstance(dispatch[flag], bool):
                raise EventsConfigurationError(
                    f"dispatch.{flag} must be a bool",
                    code="invalid_dispatch_flag",
                    details={"key": flag, "type": type(dispatch[flag]).__name__},
                )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path (e.g. 'dispatch.raise_errors')."""
        obj: Any = self._data
        for part in key.split("."):
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def _flag(self, name: str, env_key: str, default: bool) -> bool:
        override = _parse_bool_env(self._env.get(env_key, ""))
        if override is not None:
            return override
        return bool(self.get(f"dispatch.{name}", default))

    @property
    def raise_errors(self) -> bool:
        """Re-raise collected handler errors after a synchronous dispatch pass."""
        return self._flag("raise_errors", _ENV_RAISE_ERRORS, False)

    @property
    def log_errors(self) -> bool:
        """Log handler failures with traceback."""
        return self._flag("log_errors", _ENV_LOG_ERRORS, True)


cfg = Config()
