"""Pytest configuration and fixtures."""

import logging

import numpy as np
import pytest

import densetensor as dn


@pytest.fixture
def arange_data():
    """Fixture for the flat buffer 0.0 .. 11.0."""
    return np.arange(12, dtype=np.float32)


@pytest.fixture
def t223(arange_data):
    """Fixture for a (2, 2, 3) tensor holding 0.0 .. 11.0."""
    return dn.Tensor(arange_data, (2, 2, 3))


@pytest.fixture
def default_printoptions():
    """Restore the default print options after the test."""
    prev = dn.get_printoptions()
    yield prev
    dn.set_printoptions(**dn.PrintOptions().as_dict())


@pytest.fixture
def package_logger():
    """Detach any handler setup_logging adds during the test."""
    logger = logging.getLogger("densetensor")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
