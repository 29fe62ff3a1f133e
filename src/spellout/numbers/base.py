"""Number word formatter contract.

Different languages have fundamentally different number word systems:

- English: twenty one (base 10)
- French: quatre-vingt-dix (80+10=90, mixed base 20)
- German: einundzwanzig (one-and-twenty, reversed and fused)
- Spanish: veintiuno (contracted forms)
- Italian: ventuno (elided forms)

Each language subclass handles these differences algorithmically while
taking every word from the locale's MessageCatalog. The base class owns the
conventions all languages share: the zero atom, the minus token, and the
plain-digit fallback for magnitudes without scale words.

Python 3.13+.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from spellout.constants import WORDS_LIMIT

if TYPE_CHECKING:
    from spellout.localization.catalog import MessageCatalog

__all__ = ["NumberWords"]


class NumberWords(ABC):
    """Cardinal and ordinal words for one language.

    Subclasses implement _positive() for 1 <= value < WORDS_LIMIT and
    _ordinal() for non-negative values below the same limit. Neither public
    operation raises: a word missing from the catalog appears as its
    catalog key.

    Attributes:
        catalog: Catalog supplying the words
    """

    __slots__ = ("catalog",)

    def __init__(self, catalog: MessageCatalog) -> None:
        self.catalog = catalog

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.catalog.locale!s})"

    def word(self, key: str) -> str:
        """Return a catalog word, or the key when it is missing."""
        return self.catalog.get(key)

    def number(self, value: int) -> str:
        """Return the catalog atom for a number (number.<value>)."""
        return self.catalog.get(f"number.{value}")

    def cardinal(self, value: int) -> str:
        """Format an integer as words.

        Args:
            value: Integer to format

        Returns:
            The number as words (e.g., 21 -> "twenty one"), or its decimal
            digits when abs(value) >= WORDS_LIMIT
        """
        if abs(value) >= WORDS_LIMIT:
            return str(value)
        if value == 0:
            return self.number(0)
        if value < 0:
            return f"{self.word('word.minus')} {self._positive(-value)}"
        return self._positive(value)

    def ordinal(self, value: int) -> str:
        """Format an integer as ordinal words.

        Args:
            value: Integer to format

        Returns:
            The number as ordinal words (e.g., 21 -> "twenty first"), or
            its decimal digits when abs(value) >= WORDS_LIMIT
        """
        if abs(value) >= WORDS_LIMIT:
            return str(value)
        if value < 0:
            return f"{self.word('word.minus')} {self._ordinal(-value)}"
        return self._ordinal(value)

    @abstractmethod
    def _positive(self, value: int) -> str:
        """Words for 1 <= value < WORDS_LIMIT."""

    @abstractmethod
    def _ordinal(self, value: int) -> str:
        """Ordinal words for 0 <= value < WORDS_LIMIT."""

    def _irregular_ordinal(self, value: int) -> str | None:
        """Return the catalog's ordinal.word.<value> entry, if any."""
        return self.catalog.lookup(f"ordinal.word.{value}")
