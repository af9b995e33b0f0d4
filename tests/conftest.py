"""Pytest configuration and shared fixtures for ferrum tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_ferrum_logger():
    """Undo any configure_logging()/init() done by a test."""
    logger = logging.getLogger('ferrum')
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    structlog.reset_defaults()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from ferrum import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from ferrum import DivisionByZero, Err

    return Err(DivisionByZero())


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from ferrum import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from ferrum import Nothing

    return Nothing


@pytest.fixture
def numbers():
    """A Sequence with a repeated element."""
    from ferrum import Sequence

    return Sequence.of(3, 1, 4, 1, 5)
