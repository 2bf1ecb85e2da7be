"""Shared pytest fixtures for the test suite."""

import logging

import pytest

VALID_CPF = "52998224725"
RANDOM_KEY = "123e4567-e12b-12d1-a456-426655440000"
EMAIL_KEY = "fulano@example.com"


@pytest.fixture
def email_key() -> str:
    return EMAIL_KEY


@pytest.fixture
def random_key() -> str:
    return RANDOM_KEY


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
