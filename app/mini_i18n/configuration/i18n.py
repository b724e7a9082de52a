"""Translation engine settings."""

from typing import Any, Optional

from pydantic import Field, field_validator

from mini_i18n.configuration.base import SectionSettings


class I18nSettings(SectionSettings):
    """Defaults used when building a Translator from configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale selected at startup (default: en)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing in the
            current locale. Empty or unset disables the fallback.
        I18N_DEBUG: Log missing translations at warning level (default: false)

    Example:
        ```python
        from mini_i18n.configuration import get_settings

        settings = get_settings()
        locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: Optional[str] = Field(default=None, alias="I18N_FALLBACK_LOCALE")
    DEBUG: bool = Field(default=False, alias="I18N_DEBUG")

    @field_validator("FALLBACK_LOCALE", mode="before")
    @classmethod
    def empty_fallback_is_none(cls, v: Any) -> Optional[str]:
        """Treat an empty I18N_FALLBACK_LOCALE as no fallback."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v
