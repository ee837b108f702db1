"""
Pytest configuration and fixtures for the logext test suite.
"""

import logging
from unittest.mock import MagicMock

import pytest

from logext import set_provider


@pytest.fixture(autouse=True)
def default_provider():
    """Every test starts and ends with the stdlib provider installed."""
    set_provider(None)
    yield
    set_provider(None)


@pytest.fixture
def recording_provider():
    """
    Provider double that hands out one MagicMock logger and records the channel names asked for.
    """
    channel = MagicMock(name="channel_logger")
    provider = MagicMock(name="provider")
    provider.get_logger.return_value = channel
    set_provider(provider)
    return provider


@pytest.fixture
def restore_root_logging():
    """Remove the handlers setup_logging() installs on the root logger and restore its level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
