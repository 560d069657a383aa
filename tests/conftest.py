"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up stdcheck loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("stdcheck_")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def debug_logger(tmp_path):
    """DEBUG-level logger writing to a temporary debug.log."""
    from stdcheck.verbose import setup_logger

    return setup_logger(tmp_path / "debug.log", logger_name="stdcheck_debug")
