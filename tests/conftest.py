"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made to the root logger."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
