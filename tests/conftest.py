"""Global pytest configuration and fixtures.

Pins configured decoding defaults and restores root logging state so CLI
invocations cannot leak handlers between tests.
"""

from __future__ import annotations

import logging

import pytest

from b64url.config import settings
from b64url.core.codec import BoundaryPolicy


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against the documented default settings."""
    monkeypatch.setattr(settings, "strict", False)
    monkeypatch.setattr(settings, "boundary_policy", BoundaryPolicy.ZERO_FILL)
    monkeypatch.setattr(settings, "log_level", "WARNING")
    monkeypatch.setattr(settings, "log_json", False)
    return settings


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
