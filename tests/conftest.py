import os
from collections.abc import Generator
from unittest.mock import Mock

import pytest
from loguru import logger

from tuplefetch.constants import ENV_PREFIX
from tuplefetch.models.config import Config

BASE_URL = "https://jsonplaceholder.typicode.com"
USERS_URL = f"{BASE_URL}/users"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TUPLEFETCH_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)


@pytest.fixture
def config() -> Config:
    """Fixture that returns a Config object built without a .env file."""
    return Config(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def warn() -> Mock:
    """Stand-in for the warning channel."""
    return Mock()


@pytest.fixture
def log_messages() -> Generator[list, None, None]:
    """Collect loguru messages emitted during the test."""
    messages: list = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
