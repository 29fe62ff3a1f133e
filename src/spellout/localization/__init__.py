"""Message catalog package.

Provides the key/string catalogs that every word-forming operation reads
from, and the loaders that supply them.

Submodules:
    types   - PEP 695 type aliases (CatalogKey, CatalogName, LocaleCode, CatalogData)
    loading - CatalogLoader protocol, PathCatalogLoader, DEFAULT_LOADER
    catalog - MessageCatalog, catalog_chain, load_catalog
    data    - Bundled JSON catalogs (en, fr, de, es, it)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from spellout.localization.catalog import MessageCatalog, catalog_chain, load_catalog
from spellout.localization.loading import DEFAULT_LOADER, CatalogLoader, PathCatalogLoader
from spellout.localization.types import CatalogData, CatalogKey, CatalogName, LocaleCode

__all__ = [
    # Catalog
    "MessageCatalog",
    "catalog_chain",
    "load_catalog",
    # Loader protocol and implementations
    "CatalogLoader",
    "PathCatalogLoader",
    "DEFAULT_LOADER",
    # Type aliases for user code type annotations
    "CatalogData",
    "CatalogKey",
    "CatalogName",
    "LocaleCode",
]
