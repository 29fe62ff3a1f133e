"""Locale facade for calendar and number words.

This module is the externally visible surface of spellout. A LocaleWords
bundle ties together everything needed to render words for one locale:

Architecture:
    - LocaleWords: Immutable bundle (locale, catalog, number words, minor words)
    - Built once per locale and cached process-wide
    - Month/day names go through the width selector (runtime.names)
    - Cardinals/ordinals go through the language's NumberWords variant
    - Never raises from a formatting operation; degraded output instead

Thread Safety:
    Bundles are immutable and safe to share without synchronization. The
    cache dict is guarded by an RLock held only around dict access; bundles
    are built outside the lock. Two threads missing the cache for the same
    locale may both build a bundle. Construction is pure, so the bundles are
    value-equivalent, and the first one published is the one kept.

Python 3.13+. Uses Babel for locale identifiers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from spellout.constants import (
    DAY_ABBREVIATION_LENGTHS,
    DEFAULT_MINOR_WORDS,
    MINOR_WORDS_KEY,
    MINOR_WORDS_SEPARATOR,
    UNBOUNDED_WIDTH,
)
from spellout.enums import WordCase
from spellout.locale_utils import LocaleId, parse_locale_id, to_locale_id
from spellout.localization.catalog import MessageCatalog, load_catalog
from spellout.numbers.dispatch import number_words_for
from spellout.runtime.names import is_bounded, select_by_width

if TYPE_CHECKING:
    from babel import Locale

    from spellout.localization.loading import CatalogLoader
    from spellout.localization.types import LocaleCode
    from spellout.numbers.base import NumberWords

__all__ = ["LocaleWords", "resolve"]

logger = logging.getLogger(__name__)

_WORD_SEPARATORS = frozenset(" -")


def _load_minor_words(catalog: MessageCatalog) -> frozenset[str]:
    """Read the comma-separated minor.words entry, or use the defaults."""
    listing = catalog.lookup(MINOR_WORDS_KEY)
    if listing is None:
        return frozenset(DEFAULT_MINOR_WORDS)
    words = (word.strip().lower() for word in listing.split(MINOR_WORDS_SEPARATOR))
    return frozenset(word for word in words if word)


@dataclass(frozen=True, slots=True)
class LocaleWords:
    """Immutable per-locale bundle of word-forming operations.

    Use LocaleWords.create() to obtain an instance; it caches one bundle per
    locale for the life of the process.

    Examples:
        >>> LocaleWords.create("en-GB").to_words(121)
        'one hundred and twenty one'
        >>> LocaleWords.create("en-US").to_words(121)
        'one hundred twenty one'
        >>> LocaleWords.create("fr").month_name(8)
        'août'
        >>> LocaleWords.create("de").to_ordinal_words(1)
        'erste'

    Attributes:
        locale: Resolved locale identifier
        catalog: Localized strings for the locale
        numbers: Number word formatter selected for the locale's language
        minor_words: Lowercase function words kept lowercase in title case
    """

    _cache: ClassVar[dict[LocaleId, LocaleWords]] = {}
    _cache_lock: ClassVar[RLock] = RLock()

    locale: LocaleId
    catalog: MessageCatalog
    numbers: NumberWords
    minor_words: frozenset[str]

    # ------------------------------------------------------------------
    # Construction and cache management
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, locale: LocaleId, loader: CatalogLoader | None = None) -> LocaleWords:
        """Build a bundle without consulting or filling the cache."""
        catalog = load_catalog(locale, loader)
        return cls(
            locale=locale,
            catalog=catalog,
            numbers=number_words_for(locale, catalog),
            minor_words=_load_minor_words(catalog),
        )

    @classmethod
    def create(
        cls,
        locale: LocaleId | Locale | LocaleCode | None = None,
        *,
        loader: CatalogLoader | None = None,
    ) -> LocaleWords:
        """Return the bundle for a locale, building and caching it on a miss.

        Never raises: None selects English, malformed identifiers fall back to
        English (warning logged), and locales without a catalog use the
        English catalog.

        Args:
            locale: LocaleId, Babel Locale, locale code ("en-GB", "fr_CA"), or None
            loader: Custom catalog source. Bundles built from a custom loader
                are returned uncached.

        Returns:
            LocaleWords for the locale
        """
        locale_id = to_locale_id(locale)
        if loader is not None:
            return cls.build(locale_id, loader)

        with cls._cache_lock:
            cached = cls._cache.get(locale_id)
        if cached is not None:
            return cached

        bundle = cls.build(locale_id)

        with cls._cache_lock:
            existing = cls._cache.get(locale_id)
            if existing is not None:
                logger.debug("Bundle for '%s' built concurrently; keeping the first", locale_id)
                return existing
            cls._cache[locale_id] = bundle
        logger.debug("Built words bundle for '%s' from %s", locale_id, bundle.catalog.sources)
        return bundle

    @classmethod
    def create_or_raise(cls, locale_code: LocaleCode) -> LocaleWords:
        """Return the bundle for a locale code, validating it strictly.

        Args:
            locale_code: Locale code (e.g., "en-GB", "de")

        Returns:
            Cached LocaleWords for the locale

        Raises:
            ValueError: If the code is malformed or unknown to Babel
        """
        return cls.create(parse_locale_id(locale_code, strict=True))

    @classmethod
    def clear_cache(cls) -> None:
        """Drop every cached bundle.

        Intended for tests. It does not cancel resolutions in progress; a
        bundle being built concurrently may be published after the clear.
        """
        with cls._cache_lock:
            cls._cache.clear()
        logger.debug("Words bundle cache cleared")

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached bundles."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with:
            - size: Number of cached bundles
            - locales: Tuple of cached locale identifiers (POSIX form)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "locales": tuple(str(locale) for locale in cls._cache),
            }

    # ------------------------------------------------------------------
    # Calendar names
    # ------------------------------------------------------------------

    def month_name(self, month: int, min_width: int = 0, max_width: int | None = UNBOUNDED_WIDTH) -> str:
        """Return a month name fitted to a width window.

        Args:
            month: Month number (1-12)
            min_width: Minimum width
            max_width: Maximum width (UNBOUNDED_WIDTH or None for no limit)

        Returns:
            Full or abbreviated month name; "" if month is out of range
        """
        if not 1 <= month <= 12:
            return ""
        full = self.catalog.get(f"month.{month}")
        abbrev = self.catalog.get(f"month.{month}.abbr")
        return select_by_width(full, abbrev, min_width, max_width)

    def day_name(self, day: int, min_width: int = 0, max_width: int | None = UNBOUNDED_WIDTH) -> str:
        """Return a day name fitted to a width window.

        Abbreviations of length 3, 4 and 5 are tried in turn. The first one
        found is the fallback candidate; a later one replaces it when its
        length lies inside [min_width, max_width]. Without any abbreviation
        entry, the first three characters of the full name are used.

        Args:
            day: Day of week, 1 = Sunday through 7 = Saturday
            min_width: Minimum width
            max_width: Maximum width (UNBOUNDED_WIDTH or None for no limit)

        Returns:
            Full or abbreviated day name; "" if day is out of range
        """
        if not 1 <= day <= 7:
            return ""
        full = self.catalog.get(f"day.{day}")
        upper = max_width if is_bounded(max_width) else UNBOUNDED_WIDTH

        best: str | None = None
        for length in DAY_ABBREVIATION_LENGTHS:
            abbrev = self.catalog.lookup(f"day.{day}.abbr.{length}")
            if abbrev is None:
                continue
            if best is None or min_width <= len(abbrev) <= upper:
                best = abbrev
        if best is None:
            best = full[:3]
        return select_by_width(full, best, min_width, max_width)

    def am_pm(self, hour: int, uppercase: bool = True) -> str:
        """Return the AM marker for hours before 12, otherwise PM."""
        marker = "AM" if hour < 12 else "PM"
        return self.catalog.get(f"ampm.{marker if uppercase else marker.lower()}")

    def era(self, year: int) -> str:
        """Return the AD equivalent for positive years, otherwise BC."""
        return self.catalog.get("era.ad" if year > 0 else "era.bc")

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def ordinal_suffix(self, value: int) -> str:
        """Return the ordinal suffix for a number (st, nd, rd, th in English).

        Looks up the exact value first (French 1er, but 101e), then the last
        two digits (11th, 12th, 13th), then the last digit, then the default.
        The sign is ignored.
        """
        magnitude = abs(value)
        keys = (
            f"ordinal.suffix.exact.{magnitude}",
            f"ordinal.suffix.{magnitude % 100}",
            f"ordinal.suffix.{magnitude % 10}",
        )
        for key in keys:
            suffix = self.catalog.lookup(key)
            if suffix is not None:
                return suffix
        return self.catalog.get("ordinal.suffix.default")

    def ordinal_number(self, value: int, min_width: int = 1) -> str:
        """Format a number as digits plus ordinal suffix (21st, 1er, 3.).

        Args:
            value: Number to format
            min_width: Minimum digit count, zero-padded

        Returns:
            Digits with a leading "-" for negatives, then the suffix
        """
        digits = str(abs(value)).zfill(min_width)
        sign = "-" if value < 0 else ""
        return f"{sign}{digits}{self.ordinal_suffix(value)}"

    def to_words(self, value: int) -> str:
        """Spell out a cardinal number."""
        return self.numbers.cardinal(value)

    def to_ordinal_words(self, value: int) -> str:
        """Spell out an ordinal number."""
        return self.numbers.ordinal(value)

    def spell(self, value: int, *, ordinal: bool = False, case: WordCase | str = WordCase.LOWER) -> str:
        """Spell out a number and apply a word case in one call.

        Args:
            value: Number to spell
            ordinal: Use ordinal words
            case: WordCase or its picture string ("W", "w", "Ww")

        Returns:
            Number words in the requested case
        """
        words = self.to_ordinal_words(value) if ordinal else self.to_words(value)
        return self.format_word_case(words, case)

    # ------------------------------------------------------------------
    # Word case
    # ------------------------------------------------------------------

    def is_minor_word(self, word: str) -> bool:
        """True if the word is a minor word (case-insensitive)."""
        return word.lower() in self.minor_words

    def format_word_case(self, words: str, case: WordCase | str) -> str:
        """Apply an upper, lower or title word case.

        Title case capitalizes the first letter of each word, where words are
        separated by spaces or hyphens. Minor words stay lowercase unless they
        open the text. Unknown case strings leave the text unchanged.

        Example:
            >>> LocaleWords.create("en").format_word_case("one hundred and five", "Ww")
            'One Hundred and Five'
        """
        try:
            case = WordCase(case)
        except ValueError:
            return words
        if case is WordCase.UPPER:
            return words.upper()
        if case is WordCase.LOWER:
            return words
        return self._title_case(words)

    def _title_case(self, words: str) -> str:
        parts: list[str] = []
        current: list[str] = []
        first = True

        def flush() -> None:
            nonlocal first
            if not current:
                return
            word = "".join(current)
            if first or not self.is_minor_word(word):
                word = word[0].upper() + word[1:]
            parts.append(word)
            current.clear()
            first = False

        for char in words:
            if char in _WORD_SEPARATORS:
                flush()
                parts.append(char)
            else:
                current.append(char)
        flush()
        return "".join(parts)


def resolve(locale: LocaleId | Locale | LocaleCode | None = None) -> LocaleWords:
    """Return the cached LocaleWords for a locale (see LocaleWords.create)."""
    return LocaleWords.create(locale)
