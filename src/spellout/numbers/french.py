"""French number words.

French uses a mixed base-20 (vigesimal) system for 70-99:

- 70 = soixante-dix (60+10)
- 80 = quatre-vingts (4x20)
- 90 = quatre-vingt-dix (4x20+10)

Special rules:

- 21, 31, 41, 51, 61 and 71 use "et" (vingt et un, soixante et onze);
  81 and 91 are hyphenated instead (quatre-vingt-un, quatre-vingt-onze).
- quatre-vingts and the multiples of cent take a plural "s" only when
  nothing follows them. mille is invariable and counts as following words
  (deux cent mille, quatre-vingt mille); million is a noun and does not
  (deux cents millions).
"""

from spellout.numbers.base import NumberWords

__all__ = ["FrenchNumberWords"]

_SIXTY = 60
_EIGHTY = 80
_ORDINAL_TABLE_MAX = 20


class FrenchNumberWords(NumberWords):
    """French cardinals and ordinals."""

    __slots__ = ()

    def _plural(self, words: str) -> str:
        return words + self.word("word.plural")

    def _positive(self, value: int, final: bool = True) -> str:
        """Words for value; final=False suppresses the plural of cent and vingt."""
        if value < 20:
            return self.number(value)
        if value < 100:
            return self._tens(value, final)
        if value < 1000:
            hundreds, remainder = divmod(value, 100)
            if hundreds == 1:
                words = self.word("word.hundred")
            else:
                words = f"{self.number(hundreds)} {self.word('word.hundred')}"
            if remainder:
                return f"{words} {self._positive(remainder, final)}"
            return words if hundreds == 1 or not final else self._plural(words)
        if value < 1_000_000:
            thousands, remainder = divmod(value, 1000)
            words = self.word("word.thousand")
            if thousands > 1:
                words = f"{self._positive(thousands, final=False)} {words}"
            if remainder:
                return f"{words} {self._positive(remainder)}"
            return words
        millions, remainder = divmod(value, 1_000_000)
        if millions == 1:
            words = f"{self.number(1)} {self.word('word.million')}"
        else:
            words = f"{self._positive(millions)} {self.word('word.million.plural')}"
        if remainder:
            return f"{words} {self._positive(remainder)}"
        return words

    def _tens(self, value: int, final: bool = True) -> str:
        tens, ones = divmod(value, 10)

        # 70-79 and 90-99 count teens on top of soixante / quatre-vingt
        if tens in (7, 9):
            base = self.number(_SIXTY if tens == 7 else _EIGHTY)
            if ones == 1 and tens == 7:
                return f"{base} {self.word('word.and')} {self.number(11)}"
            return f"{base}-{self.number(10 + ones)}"

        if ones == 0:
            if tens == 8 and final:
                return self._plural(self.number(_EIGHTY))
            return self.number(tens * 10)

        if ones == 1 and tens != 8:
            return f"{self.number(tens * 10)} {self.word('word.and')} {self.number(1)}"
        return f"{self.number(tens * 10)}-{self.number(ones)}"

    def _ordinal(self, value: int) -> str:
        if 1 <= value <= _ORDINAL_TABLE_MAX:
            irregular = self._irregular_ordinal(value)
            if irregular is not None:
                return irregular
        # quatre-vingtième, deux centième: no plural marker before the suffix
        cardinal = self._positive(value, final=False) if value else self.number(0)
        if cardinal.endswith("e"):
            cardinal = cardinal[:-1]
        return cardinal + self.word("ordinal.word.suffix.default")
