"""Pytest configuration.

Markers (registered in pyproject.toml):
- unit: collaborators mocked
- integration: httpx transport exercised through pytest-httpx
"""

import pytest

from zkdrop.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Settings are cached per process; start every test from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
