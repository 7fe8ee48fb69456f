"""Shared fixtures for unit tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_project_logger():
    """Let logs propagate to root for caplog and drop handlers added by a test."""
    logger = logging.getLogger("mock_server")
    old_propagate = logger.propagate
    old_level = logger.level
    old_handlers = list(logger.handlers)
    logger.propagate = True
    yield
    for handler in logger.handlers:
        if handler not in old_handlers:
            handler.close()
    logger.handlers[:] = old_handlers
    logger.setLevel(old_level)
    logger.propagate = old_propagate
