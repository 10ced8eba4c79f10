"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A mocked API client (transport port)
- A console API client with recorded history
- Settings cache isolation
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest

from coreg.adapters.transport.console import ConsoleApiClient
from coreg.config.settings import get_settings


@pytest.fixture
def api() -> Mock:
    """Mocked API client returning a sentinel response."""
    api = Mock()
    api.execute.return_value = Mock(name="response")
    return api


@pytest.fixture
def console_api() -> ConsoleApiClient:
    """Console API client with an empty history."""
    return ConsoleApiClient()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
