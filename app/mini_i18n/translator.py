"""Translation engine: keyed lookup, fallback and plural selection.

Resolution order for ``t(key, variables)``:

1. If ``variables["count"]`` is a number other than 1 and ``<key>_plural``
   exists in the current or the fallback locale, the plural key is used.
2. The chosen key is looked up in the current locale, then in the fallback
   locale.
3. If nothing resolves, the requested key itself is returned.
"""

from numbers import Number
from typing import Any, Dict, List, Mapping, Optional

from mini_i18n.interpolation import interpolate
from mini_i18n.logging import get_module_logger
from mini_i18n.models import (
    TranslationCatalog,
    TranslationKey,
    TranslationTable,
    Variables,
    build_catalogs,
)

logger = get_module_logger()


class Translator:
    """Resolves dotted keys to interpolated strings for the current locale.

    The translation table is supplied once and never mutated. The current
    locale is the only mutable state; a Translator shared between threads
    needs external synchronization around ``set_locale``, since
    ``set_locale`` followed by ``t`` is not atomic.

    Attributes:
        catalogs: Catalog per locale present in the translation table.
    """

    def __init__(
        self,
        locale: str,
        translations: TranslationTable,
        fallback_locale: Optional[str] = None,
        debug: bool = False,
    ):
        """Initialize Translator.

        A locale missing from ``translations`` is accepted; lookups against
        it simply find nothing.

        Args:
            locale: Initial current locale.
            translations: Mapping of locale to translation tree.
            fallback_locale: Locale consulted when the current one has no
                translation for a key.
            debug: Log missing translations at warning level.
        """
        self._locale = locale
        self._fallback_locale = fallback_locale
        self._debug = debug
        self.catalogs: Dict[str, TranslationCatalog] = build_catalogs(translations)
        logger.debug(
            "translator_initialized",
            locale=locale,
            fallback_locale=fallback_locale,
            locale_count=len(self.catalogs),
        )

    @property
    def fallback_locale(self) -> Optional[str]:
        """Locale consulted when the current one lacks a key, or None."""
        return self._fallback_locale

    @property
    def debug(self) -> bool:
        """Whether missing translations are logged at warning level."""
        return self._debug

    def get_locale(self) -> str:
        """Return the current locale."""
        return self._locale

    def set_locale(self, locale: str) -> None:
        """Replace the current locale.

        Any string is accepted, including locales absent from the table.

        Args:
            locale: New current locale.
        """
        previous = self._locale
        self._locale = locale
        logger.debug("locale_changed", previous_locale=previous, locale=locale)

    def t(self, key: str, variables: Optional[Variables] = None) -> str:
        """Translate a dotted key and interpolate variables.

        Args:
            key: Dotted key path (e.g., "user.greeting").
            variables: Optional variables for interpolation. A numeric
                ``count`` other than 1 selects the ``_plural`` form when one
                exists.

        Returns:
            Interpolated translation, or ``key`` unchanged if no translation
            exists in the current or fallback locale.
        """
        requested = TranslationKey.from_string(key)
        lookup_key = requested

        if variables is not None and _is_plural_count(variables.get("count")):
            plural_key = requested.plural()
            if self._exists(self._locale, plural_key) or (
                self._fallback_locale is not None
                and self._exists(self._fallback_locale, plural_key)
            ):
                lookup_key = plural_key

        template = self._lookup(self._locale, lookup_key)

        if template is None and self._fallback_locale is not None:
            template = self._lookup(self._fallback_locale, lookup_key)
            if template is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(lookup_key),
                    requested_locale=self._locale,
                    fallback_locale=self._fallback_locale,
                )

        if template is None:
            log = logger.warning if self._debug else logger.debug
            log(
                "translation_not_found",
                key=key,
                locale=self._locale,
                fallback_locale=self._fallback_locale,
            )
            return key

        return interpolate(template, variables)

    def plural(self, count: float, options: Mapping[str, Any]) -> str:
        """Select and interpolate one of the supplied plural templates.

        No key lookup is involved. ``zero`` is used for a count of 0 when
        supplied, ``one`` for a count of 1, and ``other`` otherwise. The
        template is interpolated with ``count`` plus every entry of
        ``options``, so extra placeholders can be passed alongside the forms.

        Args:
            count: Number the phrase refers to.
            options: Templates ``one`` and ``other``, optional ``zero``, and
                any extra variables.

        Returns:
            Interpolated template.

        Example:
            >>> translator.plural(0, {"one": "one item", "other": "{{count}} items"})
            '0 items'
        """
        variables = {"count": count, **options}

        if count == 0 and options.get("zero"):
            template = options["zero"]
        elif count == 1:
            template = options["one"]
        else:
            template = options["other"]

        return interpolate(template, variables)

    def has_message(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if a translation exists for key in a locale.

        Only the given locale is checked: no fallback and no plural form.

        Args:
            key: Dotted key path.
            locale: Locale to check (default: current locale).

        Returns:
            True if the key resolves to a template, False otherwise.
        """
        return self._exists(
            locale if locale is not None else self._locale,
            TranslationKey.from_string(key),
        )

    def get_available_locales(self) -> List[str]:
        """Get the locales present in the translation table.

        Returns:
            List of locale identifiers.
        """
        return list(self.catalogs.keys())

    def _lookup(self, locale: str, key: TranslationKey) -> Optional[str]:
        catalog = self.catalogs.get(locale)
        return catalog.get_message(key) if catalog else None

    def _exists(self, locale: str, key: TranslationKey) -> bool:
        return self._lookup(locale, key) is not None


def _is_plural_count(count: Any) -> bool:
    # bool is a Number subclass but never counts as one here
    return isinstance(count, Number) and not isinstance(count, bool) and count != 1
