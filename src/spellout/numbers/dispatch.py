"""Language dispatch for number word formatters.

Selects the NumberWords variant for a locale by language subtag. Dispatch
happens once, when a locale bundle is built; the chosen instance is stored in
the immutable bundle so formatting calls never branch on language again.

Adding a language is additive: implement a NumberWords subclass, ship a
catalog, and register a factory here (or at import time of the new module via
register_number_words()).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock
from typing import TYPE_CHECKING

from spellout.numbers.english import EnglishNumberWords
from spellout.numbers.french import FrenchNumberWords
from spellout.numbers.german import GermanNumberWords
from spellout.numbers.italian import ItalianNumberWords
from spellout.numbers.spanish import SpanishNumberWords

if TYPE_CHECKING:
    from spellout.locale_utils import LocaleId
    from spellout.localization.catalog import MessageCatalog
    from spellout.numbers.base import NumberWords

__all__ = [
    "NumberWordsFactory",
    "number_words_for",
    "register_number_words",
    "registered_languages",
]

type NumberWordsFactory = Callable[[MessageCatalog], NumberWords]
"""Builds a NumberWords variant from the locale's catalog."""

# Only the US region drops "and" after hundreds; every other English
# region (and unknown languages falling back to English) keeps it.
_NO_CONJUNCTION_REGIONS = frozenset({"US"})

_registry: dict[str, NumberWordsFactory] = {
    "de": GermanNumberWords,
    "es": SpanishNumberWords,
    "fr": FrenchNumberWords,
    "it": ItalianNumberWords,
}
_registry_lock = Lock()


def register_number_words(language: str, factory: NumberWordsFactory) -> None:
    """Register or replace the formatter factory for a language subtag.

    Bundles already cached keep the formatter they were built with; call
    LocaleWords.clear_cache() to rebuild them.

    Args:
        language: Language subtag (e.g., "pt"); case-insensitive
        factory: Callable taking a MessageCatalog and returning NumberWords
    """
    with _registry_lock:
        _registry[language.lower()] = factory


def registered_languages() -> tuple[str, ...]:
    """Return the language subtags with a dedicated formatter, sorted."""
    with _registry_lock:
        return tuple(sorted(_registry))


def number_words_for(locale: LocaleId, catalog: MessageCatalog) -> NumberWords:
    """Select the number word formatter for a locale.

    Args:
        locale: Locale being resolved
        catalog: Catalog the formatter reads its words from

    Returns:
        Registered formatter for the language, or English (British style
        unless the region is US) for any other language

    Example:
        >>> number_words_for(LocaleId("en", "US"), catalog).use_and
        False
    """
    with _registry_lock:
        factory = _registry.get(locale.language)
    if factory is not None:
        return factory(catalog)
    return EnglishNumberWords(catalog, use_and=locale.region not in _NO_CONJUNCTION_REGIONS)
