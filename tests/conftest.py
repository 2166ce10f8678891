"""
Pytest configuration and shared fixtures for converter tests.

This module provides common fixtures, mocks, and test utilities that are
shared across multiple test modules.
"""

import logging
from typing import List
from unittest.mock import AsyncMock, patch

import pytest

from pinboard_to_raindrop.config.pydantic_config import TOKEN_ENV_VAR
from tests.fixtures.test_data import (
    SAMPLE_PINBOARD_POSTS,
    TEST_TOKEN,
    create_pinboard_bookmark,
    create_reference_options,
)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep a developer's real token out of the tests."""
    monkeypatch.delenv(TOKEN_ENV_VAR, raising=False)
    yield
    # setup_logging reconfigures the root logger; undo it between tests
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler).__module__ == "logging":
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def pinboard_token() -> str:
    return TEST_TOKEN


@pytest.fixture
def sample_posts() -> List[dict]:
    return [dict(post) for post in SAMPLE_PINBOARD_POSTS]


@pytest.fixture
def reference_bookmark():
    return create_pinboard_bookmark()


@pytest.fixture
def reference_options():
    return create_reference_options()


@pytest.fixture
def output_csv(tmp_path):
    return tmp_path / "raindrop.csv"


@pytest.fixture
def mock_httpx():
    """
    Patch httpx.AsyncClient and yield the mock client instance.

    Set ``mock_httpx.get.return_value`` (or ``side_effect``) in the test.
    """
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value = mock_client
        yield mock_client
