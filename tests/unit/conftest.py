"""Unit test fixtures.

Most helpers are in tests/conftest.py. This file re-exports them for
unit tests and adds unit-specific helpers.
"""

import logging

import pytest

from tests.conftest import run_cmd

__all__ = ["run_cmd"]


@pytest.fixture
def reset_logging(monkeypatch):
    """Allow configure_logging to run again and drop its handlers afterwards."""
    from agentlink.utils import logger as logger_module

    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root_logger = logging.getLogger("agentlink")
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)
