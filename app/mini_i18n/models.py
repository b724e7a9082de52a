"""Translation models for mini-i18n.

Defines the translation tree types, dotted translation keys and the
per-locale catalog that walks a tree.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

# A tree node is either a leaf template or a nested mapping of nodes.
TranslationTree = Mapping[str, Union[str, "TranslationTree"]]
TranslationTable = Mapping[str, TranslationTree]
VariableValue = Union[str, int, float, bool, None]
Variables = Mapping[str, VariableValue]

PLURAL_SUFFIX = "_plural"


@dataclass(frozen=True)
class TranslationKey:
    """Dotted path naming a leaf in a translation tree.

    Keys are hierarchical (e.g., "user.roles.admin") and may be of any depth.
    Frozen to ensure immutability and hashability.

    Attributes:
        path: Full dot-separated key path as supplied by the caller.
    """

    path: str

    def __str__(self) -> str:
        return self.path

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create a TranslationKey from a dot-separated string.

        No validation is performed: any string is a key, and keys that do not
        name a leaf simply fail to resolve.

        Args:
            key_string: Dot-separated key (e.g., "messages.unread").

        Returns:
            TranslationKey instance.
        """
        return cls(path=key_string)

    @property
    def segments(self) -> Tuple[str, ...]:
        """Path segments used for tree descent.

        Returns:
            Tuple of segments (e.g., ("user", "roles", "admin")).
        """
        return tuple(self.path.split("."))

    def plural(self) -> "TranslationKey":
        """Return the plural form of this key (``<path>_plural``)."""
        return TranslationKey(path=f"{self.path}{PLURAL_SUFFIX}")


@dataclass(frozen=True)
class TranslationCatalog:
    """One locale's translation tree.

    The tree is never mutated by the catalog.

    Attributes:
        locale: Locale identifier this catalog is for (e.g., "en").
        messages: Nested mapping of keys to templates or further mappings.
    """

    locale: str
    messages: TranslationTree = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Resolve a key by descending the tree one segment at a time.

        Descent fails closed: a missing segment, a non-mapping intermediate
        node, or a non-string (or empty) terminal value all mean not found.

        Args:
            key: TranslationKey to resolve.

        Returns:
            Template string, or None if not found.
        """
        current: Any = self.messages
        for segment in key.segments:
            if not isinstance(current, Mapping) or segment not in current:
                return None
            current = current[segment]

        if isinstance(current, str) and current:
            return current
        return None

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a template exists for the given key.

        Args:
            key: TranslationKey to check.

        Returns:
            True if the key resolves to a template, False otherwise.
        """
        return self.get_message(key) is not None


def build_catalogs(translations: TranslationTable) -> Dict[str, TranslationCatalog]:
    """Wrap every locale tree of a translation table in a catalog.

    Entries whose tree is not a mapping are skipped; lookups against those
    locales then behave as if the locale were absent.
    """
    return {
        locale: TranslationCatalog(locale=locale, messages=tree)
        for locale, tree in translations.items()
        if isinstance(tree, Mapping)
    }
