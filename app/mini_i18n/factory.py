"""Factory functions for creating translators.

Usage:
    translator = create_translator("en", {"en": en, "es": es}, fallback_locale="en")

    # From environment configuration (I18N_DEFAULT_LOCALE, I18N_FALLBACK_LOCALE, ...)
    translator = create_translator_from_settings({"en": en, "es": es})
"""

from typing import Optional

from mini_i18n.configuration import Settings, get_settings
from mini_i18n.logging import get_module_logger
from mini_i18n.models import TranslationTable
from mini_i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    locale: str,
    translations: TranslationTable,
    fallback_locale: Optional[str] = None,
    debug: bool = False,
) -> Translator:
    """Create a Translator.

    Args:
        locale: Initial current locale.
        translations: Mapping of locale to translation tree.
        fallback_locale: Locale consulted when a key is missing.
        debug: Log missing translations at warning level.

    Returns:
        Translator: Configured translator instance
    """
    return Translator(
        locale=locale,
        translations=translations,
        fallback_locale=fallback_locale,
        debug=debug,
    )


def create_translator_from_settings(
    translations: TranslationTable,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create a Translator using the locales configured in settings.

    Args:
        translations: Mapping of locale to translation tree.
        settings: Settings to read the i18n section from (default: the
            cached settings singleton).

    Returns:
        Translator: Configured translator instance
    """
    settings = settings or get_settings()
    i18n = settings.i18n
    logger.info(
        "translator_created_from_settings",
        locale=i18n.DEFAULT_LOCALE,
        fallback_locale=i18n.FALLBACK_LOCALE,
    )
    return create_translator(
        i18n.DEFAULT_LOCALE,
        translations,
        fallback_locale=i18n.FALLBACK_LOCALE,
        debug=i18n.DEBUG,
    )
