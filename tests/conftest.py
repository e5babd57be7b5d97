"""Pytest configuration and shared fixtures for klaw-exhaustive tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from klaw_exhaustive._config import reset_config
from klaw_exhaustive._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def default_config() -> Iterator[None]:
    """Run each test with the default configuration and no log hooks."""
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()
    package_logger = logging.getLogger('klaw_exhaustive')
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def stopped_status() -> dict[str, object]:
    """A plain-data process status nobody handles."""
    return {'kind': 'Stopped', 'signal': 11}
