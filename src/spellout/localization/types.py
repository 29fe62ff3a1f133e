"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating catalog loaders.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "CatalogData",
    "CatalogKey",
    "CatalogName",
    "LocaleCode",
]

type CatalogKey = str
"""Dotted catalog key (e.g., 'month.1', 'day.3.abbr.4', 'word.hundred')."""

type CatalogName = str
"""Catalog identifier in POSIX locale form (e.g., 'en', 'fr', 'en_GB')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en-US', 'fr_CA', 'de')."""

type CatalogData = Mapping[CatalogKey, str]
"""Key to localized string mapping as returned by a loader."""
