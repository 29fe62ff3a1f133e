"""Catalog loading infrastructure.

Provides the protocol for catalog loaders and a filesystem implementation
that reads JSON catalogs with path-traversal protection.

Components:
    CatalogLoader - Protocol for loading catalogs (structural typing)
    PathCatalogLoader - Disk-based JSON loader
    DEFAULT_LOADER - PathCatalogLoader over the bundled catalogs

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from spellout.constants import CATALOG_DIRECTORY, CATALOG_SUFFIX
from spellout.errors import CatalogFormatError
from spellout.localization.types import CatalogData, CatalogName

__all__ = [
    "DEFAULT_LOADER",
    "CatalogLoader",
    "PathCatalogLoader",
]


class CatalogLoader(Protocol):
    """Protocol for loading the key/string catalog of one locale.

    This is a Protocol (structural typing) rather than ABC to allow any object
    with a matching load() method to be injected, including plain test doubles.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, catalogs):
        ...         self.catalogs = catalogs
        ...     def load(self, name):
        ...         try:
        ...             return self.catalogs[name]
        ...         except KeyError:
        ...             raise FileNotFoundError(name) from None
    """

    def load(self, name: CatalogName) -> CatalogData:
        """Load the catalog stored under a name.

        Args:
            name: Catalog name in POSIX locale form (e.g., 'en', 'fr_CA')

        Returns:
            Mapping of catalog keys to localized strings

        Raises:
            FileNotFoundError: If no catalog exists under this name
            CatalogFormatError: If the catalog exists but is malformed
        """


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """File system catalog loader.

    Reads ``<directory>/<name>.json``; each file holds a single JSON object
    mapping catalog keys to strings.

    Security:
        Catalog names containing path separators or ".." are rejected, so a
        locale string taken from user input cannot escape the directory.

    Example:
        >>> loader = PathCatalogLoader(Path("catalogs"))
        >>> loader.load("fr")["month.1"]
        'janvier'

    Attributes:
        directory: Directory holding the catalog files
    """

    directory: Path

    @staticmethod
    def _validate_name(name: CatalogName) -> None:
        """Validate a catalog name for path traversal attacks.

        Raises:
            ValueError: If name is empty or contains unsafe path components
        """
        if not name:
            msg = "Catalog name cannot be empty"
            raise ValueError(msg)
        if ".." in name:
            msg = f"Path traversal sequences not allowed in catalog name: '{name}'"
            raise ValueError(msg)
        if "/" in name or "\\" in name:
            msg = f"Path separators not allowed in catalog name: '{name}'"
            raise ValueError(msg)

    def describe_path(self, name: CatalogName) -> str:
        """Return the file path a catalog name maps to, for diagnostics."""
        return str(self.directory / f"{name}{CATALOG_SUFFIX}")

    def load(self, name: CatalogName) -> CatalogData:
        """Load and validate a JSON catalog.

        Args:
            name: Catalog name (e.g., 'en', 'de')

        Returns:
            Read-only mapping of catalog keys to strings

        Raises:
            FileNotFoundError: If the catalog file does not exist
            CatalogFormatError: If the file is not UTF-8 JSON holding an object of strings
            ValueError: If the name is unsafe
        """
        self._validate_name(name)
        path = Path(self.describe_path(name))
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CatalogFormatError(name, f"not valid UTF-8 ({e})") from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogFormatError(name, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise CatalogFormatError(name, f"expected a JSON object, got {type(data).__name__}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise CatalogFormatError(
                    name, f"value for '{key}' must be a string, got {type(value).__name__}"
                )
        return MappingProxyType(data)


DEFAULT_LOADER: CatalogLoader = PathCatalogLoader(CATALOG_DIRECTORY)
