"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo any logging configuration a test (or the CLI) installed."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("eligibility")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
