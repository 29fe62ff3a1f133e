"""Runtime package: the locale facade and width-constrained name selection.

Submodules:
    locale_words - LocaleWords bundle, per-locale cache, resolve()
    names        - select_by_width, pad_or_truncate

Python 3.13+.
"""

from spellout.runtime.locale_words import LocaleWords, resolve
from spellout.runtime.names import pad_or_truncate, select_by_width

__all__ = [
    "LocaleWords",
    "pad_or_truncate",
    "resolve",
    "select_by_width",
]
