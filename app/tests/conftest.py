"""Shared pytest configuration.

Clears the cached settings singleton so environment overrides made with
monkeypatch are picked up by every test.
"""

import pytest

from mini_i18n.configuration import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
