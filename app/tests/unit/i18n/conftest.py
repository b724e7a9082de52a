"""Feature-level fixtures for translation engine tests."""

import pytest

from tests.factories.i18n import make_translation_table, make_translator


@pytest.fixture
def translation_table():
    """English and Spanish demo catalogs."""
    return make_translation_table()


@pytest.fixture
def translator(translation_table):
    """Translator in English with no fallback."""
    return make_translator("en", translation_table)


@pytest.fixture
def es_translator(translation_table):
    """Translator in Spanish falling back to English."""
    return make_translator("es", translation_table, fallback_locale="en")
