"""German number words.

German reverses the order of tens and ones and joins them with "und":

- 21 = einundzwanzig (one-and-twenty)
- 45 = fünfundvierzig (five-and-forty)

Numbers below one million are written as a single word (einhunderteins,
zweitausenddreihundert); millions stand apart and pluralize
(eine Million, zwei Millionen).
"""

from spellout.numbers.base import NumberWords

__all__ = ["GermanNumberWords"]

_ORDINAL_TABLE_MAX = 20


class GermanNumberWords(NumberWords):
    """German cardinals and ordinals."""

    __slots__ = ()

    def _compound(self, value: int) -> str:
        """Form of a number used inside a compound: ein, not eins."""
        if value == 1:
            return self.word("number.1.compound")
        return self.number(value)

    def _positive(self, value: int) -> str:
        if value < 20:
            return self.number(value)
        if value < 100:
            tens, ones = divmod(value, 10)
            if ones == 0:
                return self.number(value)
            return self._compound(ones) + self.word("word.and") + self.number(tens * 10)
        if value < 1000:
            hundreds, remainder = divmod(value, 100)
            words = self._compound(hundreds) + self.word("word.hundred")
            return words + self._positive(remainder) if remainder else words
        if value < 1_000_000:
            thousands, remainder = divmod(value, 1000)
            if thousands == 1:
                words = self._compound(1) + self.word("word.thousand")
            else:
                words = self._positive(thousands) + self.word("word.thousand")
            return words + self._positive(remainder) if remainder else words
        millions, remainder = divmod(value, 1_000_000)
        if millions == 1:
            words = f"{self.word('number.1.feminine')} {self.word('word.million')}"
        else:
            words = f"{self._positive(millions)} {self.word('word.million.plural')}"
        return f"{words} {self._positive(remainder)}" if remainder else words

    def _ordinal(self, value: int) -> str:
        if 1 <= value <= _ORDINAL_TABLE_MAX:
            irregular = self._irregular_ordinal(value)
            if irregular is not None:
                return irregular
        return self.cardinal(value) + self.word("ordinal.word.suffix.default")
