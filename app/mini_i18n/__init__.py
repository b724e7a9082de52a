"""mini-i18n - lightweight translation runtime.

Resolves dotted keys against per-locale translation trees, falls back to a
secondary locale, selects plural forms by count and interpolates
``{{ name }}`` placeholders.

Main components:
- models: TranslationKey, TranslationCatalog and the tree type aliases
- interpolation: interpolate() and to_display_string()
- translator: Translator engine
- factory: create_translator() and create_translator_from_settings()

Example:
    from mini_i18n import create_translator

    t = create_translator("en", {"en": {"user": {"greeting": "Hello, {{name}}!"}}})
    t.t("user.greeting", {"name": "Ana"})  # "Hello, Ana!"
"""

from mini_i18n.factory import create_translator, create_translator_from_settings
from mini_i18n.interpolation import interpolate, to_display_string
from mini_i18n.models import (
    PLURAL_SUFFIX,
    TranslationCatalog,
    TranslationKey,
    TranslationTable,
    TranslationTree,
    Variables,
)
from mini_i18n.translator import Translator

__all__ = [
    "Translator",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationTable",
    "TranslationTree",
    "Variables",
    "PLURAL_SUFFIX",
    "interpolate",
    "to_display_string",
    "create_translator",
    "create_translator_from_settings",
]
