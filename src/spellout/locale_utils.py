"""Locale identifier parsing and normalization.

Centralizes locale format normalization used throughout the codebase.
Provides the canonical LocaleId value used as the bundle cache key, so that
"en-GB", "en_GB", "EN-gb" and "en_GB.UTF-8" all resolve to one entry.

Python 3.13+. Uses Babel for locale syntax and CLDR validation.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale

from spellout.constants import DEFAULT_LANGUAGE

if TYPE_CHECKING:
    from spellout.localization.types import LocaleCode

__all__ = [
    "LocaleId",
    "get_babel_locale",
    "normalize_locale",
    "parse_locale_id",
    "to_locale_id",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Language subtag plus optional region subtag.

    Immutable and hashable; equality is by (language, region). The language is
    stored lowercase and the region uppercase, so values built from differently
    cased input compare equal once normalized through parse_locale_id().

    Attributes:
        language: Language subtag (e.g., "en", "fr")
        region: Region subtag (e.g., "US", "GB") or None
    """

    language: str
    region: str | None = None

    def __str__(self) -> str:
        """Return the POSIX form, e.g. 'en_GB' or 'fr'."""
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language


ENGLISH = LocaleId(DEFAULT_LANGUAGE)


def normalize_locale(locale_code: LocaleCode) -> str:
    """Convert a BCP-47 or POSIX locale code to bare POSIX form for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding suffixes and modifiers found in environment values are dropped.

    Args:
        locale_code: Locale code (e.g., "en-US", "de_DE.UTF-8", "ca_ES@valencia")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "de_DE", "ca_ES")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
    """
    code = locale_code.strip().split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: LocaleCode) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def parse_locale_id(locale_code: LocaleCode, *, strict: bool = False) -> LocaleId:
    """Parse a locale code into a LocaleId.

    The subtags come from Babel's syntactic parser, so well-formed codes for
    languages without CLDR data (e.g., "xx-YY") still parse. With strict=True
    the language must also be known to Babel.

    Args:
        locale_code: Locale code (e.g., "en-GB", "fr_CA", "de")
        strict: Require CLDR data for the locale

    Returns:
        LocaleId with lowercase language and uppercase region

    Raises:
        ValueError: If the code is malformed, or strict and unknown to Babel

    Example:
        >>> parse_locale_id("en-gb")
        LocaleId(language='en', region='GB')
    """
    normalized = normalize_locale(locale_code)
    parts = parse_locale(normalized)
    language, region = parts[0], parts[1]
    if strict:
        try:
            get_babel_locale(normalized)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
    return LocaleId(language.lower(), region.upper() if region else None)


def to_locale_id(value: LocaleId | Locale | LocaleCode | None) -> LocaleId:
    """Coerce any accepted locale representation to a LocaleId.

    Never raises: None selects English, and malformed codes log a warning and
    fall back to English.

    Args:
        value: LocaleId, Babel Locale, locale code string, or None

    Returns:
        LocaleId for the value
    """
    if value is None:
        return ENGLISH
    if isinstance(value, LocaleId):
        return value
    if isinstance(value, Locale):
        return LocaleId(value.language, value.territory)
    try:
        return parse_locale_id(value)
    except ValueError as e:
        logger.warning("Invalid locale format '%s': %s. Falling back to en", value, e)
        return ENGLISH
