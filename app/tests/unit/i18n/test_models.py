"""Tests for mini_i18n.models module."""

import pytest

from mini_i18n.models import PLURAL_SUFFIX, TranslationCatalog, TranslationKey, build_catalogs
from tests.factories.i18n import make_translation_catalog, make_translation_key


class TestTranslationKey:
    """Tests for TranslationKey model."""

    def test_str_representation(self):
        """__str__() returns the dotted path."""
        assert str(make_translation_key("user.roles.admin")) == "user.roles.admin"

    def test_from_string(self):
        """from_string() keeps the path verbatim."""
        key = TranslationKey.from_string("messages.unread")
        assert key.path == "messages.unread"

    def test_segments_any_depth(self):
        """segments splits on every dot."""
        assert make_translation_key("user.roles.admin").segments == ("user", "roles", "admin")
        assert make_translation_key("title").segments == ("title",)

    def test_plural(self):
        """plural() appends the plural suffix."""
        key = make_translation_key("messages.unread").plural()
        assert PLURAL_SUFFIX == "_plural"
        assert key.path == "messages.unread_plural"

    def test_immutability(self):
        """TranslationKey is frozen."""
        key = make_translation_key()
        with pytest.raises(AttributeError):
            key.path = "other"  # type: ignore[misc]

    def test_hashable(self):
        """Equal keys hash equally."""
        assert len({TranslationKey("a.b"), TranslationKey("a.b")}) == 1


class TestTranslationCatalog:
    """Tests for TranslationCatalog descent."""

    def test_get_message_nested(self):
        """get_message() descends through nested mappings."""
        catalog = make_translation_catalog()
        assert catalog.get_message(TranslationKey("user.roles.admin")) == "Administrator"

    def test_get_message_missing_segment(self):
        """A missing segment is not found."""
        catalog = make_translation_catalog()
        assert catalog.get_message(TranslationKey("user.roles.owner")) is None
        assert catalog.get_message(TranslationKey("nope")) is None

    def test_get_message_through_leaf(self):
        """Descending past a string leaf is not found."""
        catalog = make_translation_catalog()
        assert catalog.get_message(TranslationKey("user.greeting.extra")) is None

    def test_get_message_non_string_terminal(self):
        """A key naming a subtree is not found."""
        catalog = make_translation_catalog()
        assert catalog.get_message(TranslationKey("user.roles")) is None

    def test_get_message_non_string_leaf_value(self):
        """Leaves that are not strings are not found."""
        catalog = TranslationCatalog(locale="en", messages={"a": {"n": 5, "l": ["x"]}})
        assert catalog.get_message(TranslationKey("a.n")) is None
        assert catalog.get_message(TranslationKey("a.l")) is None

    def test_get_message_empty_string(self):
        """An empty template is treated as missing."""
        catalog = TranslationCatalog(locale="en", messages={"empty": ""})
        assert catalog.get_message(TranslationKey("empty")) is None

    def test_dotted_key_is_not_a_flat_key(self):
        """A flat key containing a dot is not reachable."""
        catalog = TranslationCatalog(locale="en", messages={"a.b": "flat"})
        assert catalog.get_message(TranslationKey("a.b")) is None

    def test_has_message(self):
        """has_message() mirrors get_message()."""
        catalog = make_translation_catalog()
        assert catalog.has_message(TranslationKey("global.title"))
        assert not catalog.has_message(TranslationKey("global"))

    def test_messages_not_mutated(self):
        """Lookups never change the tree."""
        tree = {"user": {"greeting": "Hi"}}
        catalog = TranslationCatalog(locale="en", messages=tree)
        catalog.get_message(TranslationKey("user.missing"))
        assert tree == {"user": {"greeting": "Hi"}}


class TestBuildCatalogs:
    """Tests for build_catalogs()."""

    def test_wraps_each_locale(self):
        """One catalog per locale."""
        catalogs = build_catalogs({"en": {"a": "A"}, "es": {"a": "Á"}})
        assert set(catalogs) == {"en", "es"}
        assert catalogs["es"].locale == "es"

    def test_skips_non_mapping_trees(self):
        """Locales whose tree is not a mapping are dropped."""
        catalogs = build_catalogs({"en": {"a": "A"}, "xx": "broken"})
        assert list(catalogs) == ["en"]
