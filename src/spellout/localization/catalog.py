"""Locale-scoped message catalog with layered fallback.

A MessageCatalog is the merged view of the catalog layers available for a
locale's language: the exact locale (``fr_CA``) over the language catalog
(``fr``). When the language has no catalog at all, the English catalog is
used in its place. Layers never mix languages, so an English day
abbreviation can never leak into a German catalog that lacks one.

Two lookup flavors serve the two kinds of caller:

- get(key): always returns a string; a key missing from the catalog comes
  back as the key itself, which is visibly wrong but never crashes.
- lookup(key): returns None for a missing key, for callers that continue a
  fallback chain of their own (ordinal suffixes, day abbreviations).

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from spellout.constants import DEFAULT_LANGUAGE
from spellout.localization.loading import DEFAULT_LOADER

if TYPE_CHECKING:
    from collections.abc import Mapping

    from spellout.locale_utils import LocaleId
    from spellout.localization.loading import CatalogLoader
    from spellout.localization.types import CatalogKey, CatalogName

__all__ = [
    "MessageCatalog",
    "catalog_chain",
    "load_catalog",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Immutable key to localized string mapping for one locale.

    Attributes:
        locale: Locale the catalog was resolved for
        entries: Read-only merged mapping of all loaded layers
        sources: Catalog names that contributed, most specific first
    """

    locale: LocaleId
    entries: Mapping[CatalogKey, str]
    sources: tuple[CatalogName, ...] = ()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: CatalogKey) -> str:
        """Return the localized string, or the key itself if it is missing."""
        return self.entries.get(key, key)

    def lookup(self, key: CatalogKey) -> str | None:
        """Return the localized string, or None if it is missing."""
        return self.entries.get(key)

    @property
    def is_fallback(self) -> bool:
        """True when the locale's own language had no catalog."""
        return self.locale.language not in self.sources


def catalog_chain(locale: LocaleId) -> tuple[CatalogName, ...]:
    """Return catalog names of the locale's language, most specific first.

    Example:
        >>> catalog_chain(LocaleId("fr", "CA"))
        ('fr_CA', 'fr')
        >>> catalog_chain(LocaleId("de"))
        ('de',)
    """
    if locale.region:
        return (f"{locale.language}_{locale.region}", locale.language)
    return (locale.language,)


def _load_layers(
    names: tuple[CatalogName, ...], source: CatalogLoader
) -> tuple[dict[CatalogKey, str], list[CatalogName]]:
    """Load and merge layers; later names are overridden by earlier ones.

    A missing layer is skipped silently. Any other failure (CatalogFormatError,
    an unsafe catalog name, an unreadable file) is logged at WARNING and the
    layer is skipped.
    """
    merged: dict[CatalogKey, str] = {}
    loaded: list[CatalogName] = []
    for name in reversed(names):
        try:
            data = source.load(name)
        except FileNotFoundError:
            continue
        except (OSError, ValueError) as e:
            logger.warning("Skipping catalog '%s': %s", name, e)
            continue
        merged.update(data)
        loaded.append(name)
    loaded.reverse()
    return merged, loaded


def load_catalog(locale: LocaleId, loader: CatalogLoader | None = None) -> MessageCatalog:
    """Build the merged catalog for a locale.

    Missing layers are skipped. Malformed layers are logged at WARNING and
    skipped. If no layer of the locale's language loads, the English catalog
    is used instead (logged at INFO). This function never raises for catalog
    problems; with nothing loadable the catalog is empty and every get()
    returns its key.

    Args:
        locale: Locale to resolve
        loader: Catalog source (defaults to the bundled JSON catalogs)

    Returns:
        MessageCatalog for the locale
    """
    source = DEFAULT_LOADER if loader is None else loader
    merged, loaded = _load_layers(catalog_chain(locale), source)

    if not loaded and locale.language != DEFAULT_LANGUAGE:
        logger.info("No catalog for locale '%s'. Falling back to %s", locale, DEFAULT_LANGUAGE)
        merged, loaded = _load_layers((DEFAULT_LANGUAGE,), source)

    if not loaded:
        logger.warning("No catalog available for locale '%s'. Keys will be shown", locale)
    return MessageCatalog(locale=locale, entries=MappingProxyType(merged), sources=tuple(loaded))
