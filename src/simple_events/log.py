"""Switch this package's loguru records on or off without touching host sinks."""

from __future__ import annotations

from loguru import logger

_PACKAGE = "simple_events"


def enable_logging(enabled: bool = True) -> None:
    """Emit (or silence) handler-failure and store logs from this package."""
    if enabled:
        logger.enable(_PACKAGE)
    else:
        logger.disable(_PACKAGE)
