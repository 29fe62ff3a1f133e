"""Enumerations for spellout type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so presentation modifiers taken
straight from a picture string ("W", "w", "Ww") compare equal to members.

Python 3.13+.
"""

from enum import StrEnum


class WordCase(StrEnum):
    """Letter case applied to spelled-out words.

    StrEnum provides automatic string conversion: WordCase("Ww") is WordCase.TITLE
    """

    UPPER = "W"
    """All capitals: TWENTY ONE"""

    LOWER = "w"
    """Words as the catalog spells them: twenty one"""

    TITLE = "Ww"
    """Capitalized words, minor words kept lowercase: One Hundred and Five"""


__all__ = [
    "WordCase",
]
