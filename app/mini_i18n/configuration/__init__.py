"""Configuration module - public API.

Centralized configuration for mini-i18n using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings singleton
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine section

Example:
    ```python
    from mini_i18n.configuration import get_settings

    settings = get_settings()
    default_locale = settings.i18n.DEFAULT_LOCALE
    ```
"""

from mini_i18n.configuration.i18n import I18nSettings
from mini_i18n.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "get_settings"]
