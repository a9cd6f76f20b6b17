"""Root fixtures shared by all test levels."""

import pytest

from retry_executor.configuration import get_settings
from retry_executor.logging import configure_logging

# Silences log output for the whole run
configure_logging()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached Settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
