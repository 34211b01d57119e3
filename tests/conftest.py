"""Pytest configuration and shared fixtures for nullsafe tests."""

import logging

import pytest
import structlog

import nullsafe._config
from nullsafe._logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_state():
    """Leave structlog, the nullsafe stdlib logger and nullsafe config as each test found them."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    structlog.reset_defaults()
    nullsafe._config._config = None
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def calls():
    """A list that recording blocks append their arguments to."""
    return []


@pytest.fixture
def recorder(calls):
    """A block that records every call's arguments and returns them as a tuple."""

    def record(*args):
        calls.append(args)
        return args

    return record
