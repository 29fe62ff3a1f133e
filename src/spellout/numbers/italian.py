"""Italian number words.

Numbers are written as single words without spaces, with elision rules:

- 21 = ventuno (venti + uno, drop the "i")
- 28 = ventotto (venti + otto, drop the "i")
- 31 = trentuno (trenta + uno, drop the "a")
- 23 = ventitré (tre takes an accent as the last element of a compound)

Millions stand apart and pluralize: un milione, due milioni.
"""

from spellout.numbers.base import NumberWords

__all__ = ["ItalianNumberWords"]

_ORDINAL_TABLE_MAX = 20
_VOWELS = frozenset("aeio")

# Ones that start with a vowel and trigger elision of the tens word
_ELIDING_ONES = (1, 8)


class ItalianNumberWords(NumberWords):
    """Italian cardinals and ordinals."""

    __slots__ = ()

    def _positive(self, value: int) -> str:
        if value >= 1_000_000:
            millions, remainder = divmod(value, 1_000_000)
            if millions == 1:
                words = f"{self.word('number.1.short')} {self.word('word.million')}"
            else:
                words = f"{self._positive(millions)} {self.word('word.million.plural')}"
            return f"{words} {self._positive(remainder)}" if remainder else words

        words = self._compose(value)
        if value > 20 and value % 10 == 3 and value % 100 != 13:
            # Final "tre" of a compound is accented: ventitré, centotré
            plain = self.number(3)
            if words.endswith(plain):
                words = words[: -len(plain)] + self.word("number.3.accented")
        return words

    def _compose(self, value: int) -> str:
        """Fused words for 1 <= value < 1,000,000."""
        if value < 20:
            return self.number(value)
        if value < 100:
            tens, ones = divmod(value, 10)
            tens_word = self.number(tens * 10)
            if ones == 0:
                return tens_word
            if ones in _ELIDING_ONES:
                tens_word = tens_word[:-1]
            return tens_word + self.number(ones)
        if value < 1000:
            hundreds, remainder = divmod(value, 100)
            words = self.word("word.hundred")
            if hundreds > 1:
                words = self.number(hundreds) + words
            return words + self._compose(remainder) if remainder else words
        thousands, remainder = divmod(value, 1000)
        if thousands == 1:
            words = self.word("word.thousand")
        else:
            words = self._compose(thousands) + self.word("word.thousand.plural")
        return words + self._compose(remainder) if remainder else words

    def _ordinal(self, value: int) -> str:
        if 1 <= value <= _ORDINAL_TABLE_MAX:
            irregular = self._irregular_ordinal(value)
            if irregular is not None:
                return irregular
        cardinal = self.cardinal(value)
        if cardinal[-1:] in _VOWELS:
            cardinal = cardinal[:-1]
        return cardinal + self.word("ordinal.word.suffix.default")
