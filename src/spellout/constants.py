"""Shared constants for spellout.

Centralized configuration values used across the localization, numbers and
runtime packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Locale defaults: Root language and catalog location
- Width limits: Name selection bounds
- Number words: Magnitude limit for spelled-out numbers
- Minor words: Title-casing function words

Python 3.13+. Zero external dependencies.
"""

import sys
from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LANGUAGE",
    "CATALOG_DIRECTORY",
    "CATALOG_SUFFIX",
    # Width limits
    "UNBOUNDED_WIDTH",
    "DAY_ABBREVIATION_LENGTHS",
    # Number words
    "WORDS_LIMIT",
    # Minor words
    "MINOR_WORDS_KEY",
    "MINOR_WORDS_SEPARATOR",
    "DEFAULT_MINOR_WORDS",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Language used when no locale is given, and whose catalog stands in for a
# language that has none.
DEFAULT_LANGUAGE: str = "en"

# Directory holding the bundled JSON catalogs (one file per catalog name).
CATALOG_DIRECTORY: Path = Path(__file__).parent / "localization" / "data"

CATALOG_SUFFIX: str = ".json"

# ============================================================================
# WIDTH LIMITS
# ============================================================================

# "No maximum" for name widths. Callers pass the largest representable
# integer; None is accepted as a synonym at the API boundary.
UNBOUNDED_WIDTH: int = sys.maxsize

# Day abbreviation lengths tried in order (catalog keys day.<n>.abbr.<len>).
DAY_ABBREVIATION_LENGTHS: tuple[int, ...] = (3, 4, 5)

# ============================================================================
# NUMBER WORDS
# ============================================================================

# No scale word above millions is defined. Magnitudes at or beyond one
# billion are rendered as plain decimal digits.
WORDS_LIMIT: int = 1_000_000_000

# ============================================================================
# MINOR WORDS
# ============================================================================

MINOR_WORDS_KEY: str = "minor.words"
MINOR_WORDS_SEPARATOR: str = ","

# Used when a catalog has no minor.words entry.
DEFAULT_MINOR_WORDS: tuple[str, ...] = (
    "and", "or", "the", "a", "an", "of", "in", "on", "to", "for", "at", "by",
)
