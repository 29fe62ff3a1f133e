"""spellout - Locale-aware number, ordinal and calendar words.

Renders integers and calendar components as words for English (US and
British styles), French, German, Spanish and Italian. Words come from
per-locale catalogs; each language contributes its own number morphology
(vigesimal French tens, fused German compounds, Italian elision, ...).

Public API:
    LocaleWords - Per-locale bundle: month/day names, AM/PM, era, ordinal
                  suffixes, cardinal and ordinal words, word case
    resolve - Return the cached LocaleWords for a locale
    LocaleId - Language plus optional region identifier
    WordCase - Upper, lower and title word case presentations
    UNBOUNDED_WIDTH - "No maximum" width for month/day names

Exceptions:
    CatalogFormatError - Malformed catalog data (raised by loaders only)

Submodules:
    spellout.localization - Message catalogs and catalog loaders
    spellout.numbers - NumberWords variants and language dispatch
    spellout.runtime - Locale facade and width-based name selection

Example:
    >>> from spellout import resolve
    >>> resolve("en-GB").to_words(121)
    'one hundred and twenty one'
    >>> resolve("fr").to_words(80)
    'quatre-vingts'
"""

from .constants import UNBOUNDED_WIDTH
from .enums import WordCase
from .errors import CatalogFormatError
from .locale_utils import LocaleId
from .runtime import LocaleWords, resolve

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("spellout")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UNBOUNDED_WIDTH",
    "CatalogFormatError",
    "LocaleId",
    "LocaleWords",
    "WordCase",
    "__version__",
    "resolve",
]
