"""Error types for spellout.

Formatting operations never raise: missing catalogs, missing keys and
out-of-domain input all degrade to a usable string. The types here cover the
few places where a failure is reported to an internal caller (catalog
loading) or to a caller that asked for strict validation.

Python 3.13+.
"""

__all__ = ["CatalogFormatError"]


class CatalogFormatError(ValueError):
    """Raised when a catalog source exists but does not hold key/string pairs.

    The catalog builder catches this, logs it, and skips the offending layer
    of the fallback chain, so it is only visible to code that calls a loader
    directly.

    Attributes:
        catalog_name: Name of the catalog that failed to load (e.g., "fr")
    """

    def __init__(self, catalog_name: str, reason: str) -> None:
        """Initialize CatalogFormatError.

        Args:
            catalog_name: Name of the malformed catalog
            reason: Human-readable description of the problem
        """
        super().__init__(f"Malformed catalog '{catalog_name}': {reason}")
        self.catalog_name = catalog_name
