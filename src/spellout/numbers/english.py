"""English number words.

Supports both American English (no "and" after hundred) and British English
("and" after hundred, and before a small remainder of thousands or millions).

Examples:
    21 -> "twenty one"
    121 -> "one hundred twenty one" (US) or "one hundred and twenty one" (GB)
    2001 -> "two thousand one" (US) or "two thousand and one" (GB)
    21 -> "twenty first" (ordinal)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spellout.numbers.base import NumberWords

if TYPE_CHECKING:
    from spellout.localization.catalog import MessageCatalog

__all__ = ["EnglishNumberWords"]

# Cardinal atoms whose ordinal is not cardinal + "th", checked in this order.
_IRREGULAR_ORDINALS = (1, 2, 3, 5, 8, 9, 12)

_TY = "ty"

# (scale, catalog key) from largest to smallest.
_SCALES = ((1_000_000, "word.million"), (1_000, "word.thousand"))


class EnglishNumberWords(NumberWords):
    """English cardinals and ordinals.

    Attributes:
        use_and: Insert "and" after hundreds (British style)
    """

    __slots__ = ("use_and",)

    def __init__(self, catalog: MessageCatalog, use_and: bool = True) -> None:
        super().__init__(catalog)
        self.use_and = use_and

    def _connector(self, conjunct: bool) -> str:
        if conjunct and self.use_and:
            return f" {self.word('word.and')} "
        return " "

    def _positive(self, value: int) -> str:
        if value < 20:
            return self.number(value)
        if value < 100:
            tens, ones = divmod(value, 10)
            if ones == 0:
                return self.number(tens * 10)
            return f"{self.number(tens * 10)} {self.number(ones)}"
        if value < 1000:
            hundreds, remainder = divmod(value, 100)
            words = f"{self.number(hundreds)} {self.word('word.hundred')}"
            if remainder == 0:
                return words
            return words + self._connector(True) + self._positive(remainder)

        scale, key = next((s, k) for s, k in _SCALES if value >= s)
        count, remainder = divmod(value, scale)
        words = f"{self._positive(count)} {self.word(key)}"
        if remainder == 0:
            return words
        # British style conjuncts only before a remainder under one hundred
        return words + self._connector(remainder < 100) + self._positive(remainder)

    def _ordinal(self, value: int) -> str:
        words = self.cardinal(value)

        for n in _IRREGULAR_ORDINALS:
            cardinal_word = self.number(n)
            if words.endswith(cardinal_word):
                return words[: -len(cardinal_word)] + self._irregular_word(n)

        if words.endswith(_TY):
            return words[: -len(_TY)] + self.word("ordinal.word.suffix.ty")
        return words + self.word("ordinal.word.suffix.default")

    def _irregular_word(self, n: int) -> str:
        """Irregular ordinal for an atom, or cardinal + default suffix."""
        irregular = self._irregular_ordinal(n)
        if irregular is not None:
            return irregular
        return self.number(n) + self.word("ordinal.word.suffix.default")
