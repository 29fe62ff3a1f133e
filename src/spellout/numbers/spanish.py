"""Spanish number words.

Spanish has several special rules:

- 16-19 are contracted: dieciséis, diecisiete, dieciocho, diecinueve
- 21-29 are contracted: veintiuno, veintidós, veintitrés, ...
- 31 and above use "y" between tens and ones: treinta y uno
- 100 is "cien" alone, but "ciento" when followed by more
- 500, 700 and 900 are irregular: quinientos, setecientos, novecientos

Ordinals above twenty are the cardinal followed by the ordinal indicator
(veintiuno -> veintiunoº). This is a deliberate simplification; Spanish has
no regular ordinal word form past the common range.
"""

from spellout.numbers.base import NumberWords

__all__ = ["SpanishNumberWords"]

_ORDINAL_TABLE_MAX = 20


class SpanishNumberWords(NumberWords):
    """Spanish cardinals and ordinals."""

    __slots__ = ()

    def _hundreds(self, hundreds: int, remainder: int) -> str:
        if hundreds == 1:
            return self.word("word.hundred.compound" if remainder else "word.hundred")
        irregular = self.catalog.lookup(f"number.{hundreds * 100}")
        if irregular is not None:
            return irregular
        return self.number(hundreds) + self.word("word.hundreds")

    def _positive(self, value: int) -> str:
        if value < 30:
            # 0-29 are single catalog atoms, including the contracted forms
            return self.number(value)
        if value < 100:
            tens, ones = divmod(value, 10)
            if ones == 0:
                return self.number(value)
            return f"{self.number(tens * 10)} {self.word('word.and')} {self.number(ones)}"
        if value < 1000:
            hundreds, remainder = divmod(value, 100)
            words = self._hundreds(hundreds, remainder)
            return f"{words} {self._positive(remainder)}" if remainder else words
        if value < 1_000_000:
            thousands, remainder = divmod(value, 1000)
            words = self.word("word.thousand")
            if thousands > 1:
                words = f"{self._positive(thousands)} {words}"
            return f"{words} {self._positive(remainder)}" if remainder else words
        millions, remainder = divmod(value, 1_000_000)
        if millions == 1:
            words = f"{self.word('number.1.short')} {self.word('word.million')}"
        else:
            words = f"{self._positive(millions)} {self.word('word.million.plural')}"
        return f"{words} {self._positive(remainder)}" if remainder else words

    def _ordinal(self, value: int) -> str:
        if 1 <= value <= _ORDINAL_TABLE_MAX:
            irregular = self._irregular_ordinal(value)
            if irregular is not None:
                return irregular
        return self.cardinal(value) + self.word("ordinal.word.suffix.default")
