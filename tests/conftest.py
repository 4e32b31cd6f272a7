"""Shared fixtures."""

from __future__ import annotations

import pytest

from simple_events.config import cfg


@pytest.fixture
def default_cfg():
    """Global dispatch config reset to defaults around the test."""
    cfg.reload({}, validate=False)
    yield cfg
    cfg.reload({}, validate=False)
