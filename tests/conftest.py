"""
Pytest configuration and shared fixtures for stringutil tests.
"""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture stringutil debug records while the test runs."""
    messages: list[str] = []
    logger.enable("stringutil")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("stringutil")
