"""Number words: cardinal and ordinal spelling per language.

Submodules:
    base     - NumberWords abstract base (shared zero/minus/limit conventions)
    english  - EnglishNumberWords (US and British conjunction styles)
    french   - FrenchNumberWords (vigesimal 70-99)
    german   - GermanNumberWords (reversed, fused compounds)
    spanish  - SpanishNumberWords (contracted 16-29)
    italian  - ItalianNumberWords (elision and accented tre)
    dispatch - Language to formatter selection and registration

Python 3.13+.
"""

from spellout.numbers.base import NumberWords
from spellout.numbers.dispatch import (
    NumberWordsFactory,
    number_words_for,
    register_number_words,
    registered_languages,
)
from spellout.numbers.english import EnglishNumberWords
from spellout.numbers.french import FrenchNumberWords
from spellout.numbers.german import GermanNumberWords
from spellout.numbers.italian import ItalianNumberWords
from spellout.numbers.spanish import SpanishNumberWords

__all__ = [
    "EnglishNumberWords",
    "FrenchNumberWords",
    "GermanNumberWords",
    "ItalianNumberWords",
    "NumberWords",
    "NumberWordsFactory",
    "SpanishNumberWords",
    "number_words_for",
    "register_number_words",
    "registered_languages",
]
