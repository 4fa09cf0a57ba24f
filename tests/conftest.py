"""Shared pytest fixtures."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by setup_logging so they do not outlive captured streams."""
    yield
    logger.remove()
