"""Tests for the LocaleWords facade: construction, cache and operations.

Python 3.13+.
"""

import logging
from pathlib import Path

import pytest
from babel import Locale
from hypothesis import given
from hypothesis import strategies as st

from spellout import UNBOUNDED_WIDTH, LocaleId, LocaleWords, WordCase, resolve
from spellout.constants import DEFAULT_MINOR_WORDS
from spellout.locale_utils import to_locale_id
from spellout.localization import PathCatalogLoader

_LOCALES = ["en", "en-US", "fr", "de", "es", "it"]


class DictLoader:
    """In-memory CatalogLoader for tests."""

    def __init__(self, catalogs: dict[str, dict[str, str]]) -> None:
        self.catalogs = catalogs

    def load(self, name: str) -> dict[str, str]:
        try:
            return self.catalogs[name]
        except KeyError:
            raise FileNotFoundError(name) from None


# ============================================================================
# CONSTRUCTION AND CACHE
# ============================================================================


class TestCreate:
    """Test LocaleWords.create and resolve."""

    def test_none_is_english(self) -> None:
        """None resolves to English."""
        assert LocaleWords.create().locale == LocaleId("en")

    def test_cached_identity(self) -> None:
        """Repeated resolution returns the same bundle."""
        assert LocaleWords.create("fr") is LocaleWords.create("fr")

    def test_equivalent_codes_share_entry(self) -> None:
        """BCP-47, POSIX and LocaleId inputs hit one cache entry."""
        first = LocaleWords.create("en-GB")
        assert LocaleWords.create("en_GB") is first
        assert LocaleWords.create(LocaleId("en", "GB")) is first
        assert LocaleWords.create(Locale("en", "GB")) is first
        assert LocaleWords.cache_size() == 1

    def test_resolve_uses_cache(self) -> None:
        """resolve() is the cached entry point."""
        assert resolve("de") is LocaleWords.create("de")

    def test_unknown_language_uses_english_catalog(self) -> None:
        """A language without a catalog gets English words."""
        words = LocaleWords.create("ja-JP")
        assert words.locale == LocaleId("ja", "JP")
        assert words.catalog.is_fallback
        assert words.month_name(1) == "January"
        assert words.to_words(101) == "one hundred and one"

    def test_malformed_code_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """A malformed code resolves to English with a warning."""
        with caplog.at_level(logging.WARNING):
            words = LocaleWords.create("!!")
        assert words.locale == LocaleId("en")
        assert "Invalid locale format" in caplog.text

    def test_custom_loader_not_cached(self) -> None:
        """Bundles from a custom loader bypass the cache."""
        loader = DictLoader({"en": {"month.1": "Jan-u-ary"}})
        words = LocaleWords.create("en", loader=loader)
        assert words.month_name(1) == "Jan-u-ary"
        assert LocaleWords.cache_size() == 0
        assert LocaleWords.create("en").month_name(1) == "January"

    def test_unsafe_catalog_name_falls_back(self) -> None:
        """A LocaleId that cannot name a catalog file still resolves."""
        words = LocaleWords.create(LocaleId(".."))
        assert words.catalog.is_fallback
        assert words.to_words(21) == "twenty one"

    def test_undecodable_catalog_falls_back(self, tmp_path: Path) -> None:
        """A catalog that is not UTF-8 is skipped in favor of English."""
        (tmp_path / "fr.json").write_bytes(b'{"month.1": "\xff\xfe"}')
        (tmp_path / "en.json").write_text('{"month.1": "January"}', encoding="utf-8")
        words = LocaleWords.create("fr", loader=PathCatalogLoader(tmp_path))
        assert words.month_name(1) == "January"
        assert words.catalog.sources == ("en",)


class TestCreateOrRaise:
    """Test strict construction."""

    def test_known_locale(self) -> None:
        """Known locales resolve through the cache."""
        words = LocaleWords.create_or_raise("it-IT")
        assert words is LocaleWords.create("it_IT")

    def test_unknown_locale(self) -> None:
        """Locales unknown to Babel raise ValueError."""
        with pytest.raises(ValueError, match="Unknown locale identifier"):
            LocaleWords.create_or_raise("xx")

    def test_malformed_locale(self) -> None:
        """Malformed codes raise ValueError."""
        with pytest.raises(ValueError):
            LocaleWords.create_or_raise("not a locale!")


class TestCacheManagement:
    """Test cache inspection and clearing."""

    def test_cache_info(self) -> None:
        """cache_info reports size and POSIX locale names."""
        LocaleWords.create("fr-CA")
        LocaleWords.create("de")
        info = LocaleWords.cache_info()
        assert info["size"] == 2
        assert set(info["locales"]) == {"fr_CA", "de"}

    def test_clear_cache(self) -> None:
        """clear_cache drops every bundle."""
        first = LocaleWords.create("es")
        LocaleWords.clear_cache()
        assert LocaleWords.cache_size() == 0
        assert LocaleWords.create("es") is not first

    @given(
        code=st.sampled_from(_LOCALES),
        value=st.integers(min_value=-(10**10), max_value=10**10),
        index=st.integers(min_value=-1, max_value=13),
        width=st.integers(min_value=0, max_value=10),
    )
    def test_cached_and_rebuilt_agree(self, code: str, value: int, index: int, width: int) -> None:
        """A cached bundle and a freshly built one give identical output."""
        cached = LocaleWords.create(code)
        rebuilt = LocaleWords.build(to_locale_id(code))
        assert cached.to_words(value) == rebuilt.to_words(value)
        assert cached.to_ordinal_words(value) == rebuilt.to_ordinal_words(value)
        assert cached.month_name(index, width, width) == rebuilt.month_name(index, width, width)
        assert cached.day_name(index) == rebuilt.day_name(index)
        assert cached.day_name(index, 0, width) == rebuilt.day_name(index, 0, width)

    def test_rebuilt_after_clear_agrees(self) -> None:
        """Resolution after clear_cache gives the same words as before."""
        before = LocaleWords.create("fr")
        LocaleWords.clear_cache()
        after = LocaleWords.create("fr")
        assert after is not before
        for value in (0, 1, 71, 80, 999, -21, 1_000_000):
            assert after.to_words(value) == before.to_words(value)
            assert after.to_ordinal_words(value) == before.to_ordinal_words(value)
        for month in range(1, 13):
            assert after.month_name(month, 3, 3) == before.month_name(month, 3, 3)
        for day in range(1, 8):
            assert after.day_name(day, 0, 4) == before.day_name(day, 0, 4)

    def test_bundle_immutable(self) -> None:
        """Bundles are frozen."""
        words = LocaleWords.create("en")
        with pytest.raises(AttributeError):
            words.locale = LocaleId("fr")  # type: ignore[misc]


# ============================================================================
# CALENDAR NAMES
# ============================================================================


class TestMonthName:
    """Test month_name."""

    def test_full_name(self) -> None:
        """Unbounded width gives the full name."""
        assert LocaleWords.create("en").month_name(1) == "January"
        assert LocaleWords.create("fr").month_name(8) == "août"
        assert LocaleWords.create("de").month_name(3) == "März"

    def test_exact_width_abbreviation(self) -> None:
        """An exact width of three gives the abbreviation."""
        assert LocaleWords.create("en").month_name(1, 3, 3) == "Jan"

    def test_max_width(self) -> None:
        """A max width below the full length gives the abbreviation."""
        assert LocaleWords.create("en").month_name(9, 0, 4) == "Sep"

    def test_exact_width_pads(self) -> None:
        """A full name shorter than an exact width is padded."""
        assert LocaleWords.create("en").month_name(5, 5, 5) == "May  "

    def test_none_max_width(self) -> None:
        """None is accepted as no maximum."""
        assert LocaleWords.create("en").month_name(12, 0, None) == "December"

    @pytest.mark.parametrize("code", _LOCALES)
    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_out_of_range(self, code: str, month: int) -> None:
        """Out-of-range months give an empty string in every locale."""
        assert LocaleWords.create(code).month_name(month) == ""
        assert LocaleWords.create(code).month_name(month, 3, 3) == ""


class TestDayName:
    """Test day_name."""

    def test_full_name(self) -> None:
        """Day 1 is Sunday."""
        words = LocaleWords.create("en")
        assert words.day_name(1) == "Sunday"
        assert words.day_name(7) == "Saturday"

    def test_three_letter(self) -> None:
        """An exact width of three gives the three-letter form."""
        assert LocaleWords.create("en").day_name(4, 3, 3) == "Wed"

    def test_four_letter(self) -> None:
        """A four-letter abbreviation is chosen for width four."""
        assert LocaleWords.create("en").day_name(4, 4, 4) == "Weds"

    def test_longest_fitting_abbreviation(self) -> None:
        """Later abbreviations replace earlier ones when they fit."""
        assert LocaleWords.create("en").day_name(5, 0, 5) == "Thurs"

    def test_first_abbreviation_when_none_fit(self) -> None:
        """The first abbreviation is kept, then truncated."""
        assert LocaleWords.create("en").day_name(2, 0, 2) == "Mo"

    def test_derived_abbreviation(self) -> None:
        """Without abbreviation entries, the first three letters are used."""
        loader = DictLoader({"en": {"day.1": "Sunday"}})
        words = LocaleWords.create("en", loader=loader)
        assert words.day_name(1, 3, 3) == "Sun"

    def test_localized(self) -> None:
        """Day names come from the locale's catalog."""
        assert LocaleWords.create("fr").day_name(2) == "lundi"
        assert LocaleWords.create("es").day_name(1) == "domingo"

    @pytest.mark.parametrize("code", _LOCALES)
    @pytest.mark.parametrize("day", [0, 8, -1])
    def test_out_of_range(self, code: str, day: int) -> None:
        """Out-of-range days give an empty string in every locale."""
        assert LocaleWords.create(code).day_name(day) == ""
        assert LocaleWords.create(code).day_name(day, 3, 3) == ""

    @given(
        day=st.integers(min_value=1, max_value=7),
        width=st.integers(min_value=1, max_value=12),
    )
    def test_exact_width_length(self, day: int, width: int) -> None:
        """An exact width always yields exactly that many characters."""
        assert len(LocaleWords.create("en").day_name(day, width, width)) == width


class TestAmPmAndEra:
    """Test am_pm and era."""

    @pytest.mark.parametrize(
        ("hour", "uppercase", "expected"),
        [(0, True, "AM"), (11, False, "am"), (12, True, "PM"), (23, False, "pm")],
    )
    def test_am_pm(self, hour: int, uppercase: bool, expected: str) -> None:
        """Hours before 12 are AM."""
        assert LocaleWords.create("en").am_pm(hour, uppercase) == expected

    @pytest.mark.parametrize(("year", "expected"), [(2024, "AD"), (1, "AD"), (0, "BC"), (-44, "BC")])
    def test_era(self, year: int, expected: str) -> None:
        """Positive years are AD."""
        assert LocaleWords.create("en").era(year) == expected

    def test_localized_era(self) -> None:
        """Era markers come from the catalog."""
        assert LocaleWords.create("fr").era(1) == "ap. J.-C."
        assert LocaleWords.create("de").era(-1) == "v. Chr."


# ============================================================================
# NUMBERS
# ============================================================================


class TestOrdinalSuffix:
    """Test ordinal_suffix and ordinal_number."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "th"),
            (1, "st"),
            (2, "nd"),
            (3, "rd"),
            (4, "th"),
            (11, "th"),
            (12, "th"),
            (13, "th"),
            (21, "st"),
            (22, "nd"),
            (101, "st"),
            (111, "th"),
            (112, "th"),
            (-1, "st"),
        ],
    )
    def test_english(self, value: int, expected: str) -> None:
        """Two-digit rule first, then last digit, then default."""
        assert LocaleWords.create("en").ordinal_suffix(value) == expected

    def test_french(self) -> None:
        """French distinguishes only premier, and only for exactly one."""
        words = LocaleWords.create("fr")
        assert words.ordinal_suffix(1) == "er"
        assert words.ordinal_suffix(-1) == "er"
        assert words.ordinal_suffix(2) == "e"
        assert words.ordinal_suffix(11) == "e"
        assert words.ordinal_suffix(21) == "e"
        assert words.ordinal_suffix(101) == "e"
        assert words.ordinal_suffix(1001) == "e"
        assert words.ordinal_number(101) == "101e"

    def test_german(self) -> None:
        """German ordinals use a trailing period."""
        assert LocaleWords.create("de").ordinal_suffix(3) == "."

    def test_ordinal_number(self) -> None:
        """Digits, zero padding and sign with the suffix."""
        words = LocaleWords.create("en")
        assert words.ordinal_number(21) == "21st"
        assert words.ordinal_number(5, 2) == "05th"
        assert words.ordinal_number(-3) == "-3rd"
        assert LocaleWords.create("fr").ordinal_number(1) == "1er"


class TestNumberWords:
    """Test to_words, to_ordinal_words and spell."""

    @pytest.mark.parametrize(
        ("code", "value", "expected"),
        [
            ("en-GB", 121, "one hundred and twenty one"),
            ("en-US", 121, "one hundred twenty one"),
            ("en", 121, "one hundred and twenty one"),
            ("fr", 80, "quatre-vingts"),
            ("de", 21, "einundzwanzig"),
            ("es", 31, "treinta y uno"),
            ("it", 23, "ventitré"),
        ],
    )
    def test_to_words(self, code: str, value: int, expected: str) -> None:
        """Cardinals dispatch on the locale's language."""
        assert LocaleWords.create(code).to_words(value) == expected

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("en", "first"), ("fr", "premier"), ("de", "erste"), ("es", "primero"), ("it", "primo")],
    )
    def test_to_ordinal_words(self, code: str, expected: str) -> None:
        """Ordinal of one in every language."""
        assert LocaleWords.create(code).to_ordinal_words(1) == expected

    def test_digit_fallback(self) -> None:
        """One billion and beyond are digits."""
        assert LocaleWords.create("en").to_words(-2_000_000_000) == "-2000000000"

    def test_spell_cases(self) -> None:
        """spell applies the requested word case."""
        words = LocaleWords.create("en-GB")
        assert words.spell(105) == "one hundred and five"
        assert words.spell(105, case=WordCase.UPPER) == "ONE HUNDRED AND FIVE"
        assert words.spell(105, case="Ww") == "One Hundred and Five"
        assert words.spell(21, ordinal=True, case=WordCase.TITLE) == "Twenty First"


# ============================================================================
# WORD CASE
# ============================================================================


class TestWordCase:
    """Test minor words and format_word_case."""

    def test_minor_words_from_catalog(self) -> None:
        """Minor words come from the catalog and ignore case."""
        words = LocaleWords.create("en")
        assert words.is_minor_word("and")
        assert words.is_minor_word("The")
        assert words.is_minor_word("OF")
        assert not words.is_minor_word("hundred")

    def test_localized_minor_words(self) -> None:
        """Each language has its own minor words."""
        assert LocaleWords.create("fr").is_minor_word("et")
        assert LocaleWords.create("de").is_minor_word("und")
        assert not LocaleWords.create("de").is_minor_word("and")

    def test_default_minor_words(self) -> None:
        """A catalog without minor words gets the defaults."""
        words = LocaleWords.create("en", loader=DictLoader({"en": {}}))
        assert words.minor_words == frozenset(DEFAULT_MINOR_WORDS)

    def test_upper_and_lower(self) -> None:
        """Upper case upper-cases everything; lower leaves text alone."""
        words = LocaleWords.create("en")
        assert words.format_word_case("twenty one", WordCase.UPPER) == "TWENTY ONE"
        assert words.format_word_case("twenty one", "w") == "twenty one"

    def test_title_keeps_minor_words_lowercase(self) -> None:
        """Minor words stay lowercase except at the start."""
        words = LocaleWords.create("en")
        assert words.format_word_case("the end of the line", "Ww") == "The End of the Line"

    def test_title_splits_on_hyphen(self) -> None:
        """Hyphenated parts are capitalized separately; minor words stay lowercase."""
        words = LocaleWords.create("fr")
        assert words.format_word_case("quatre-vingt-dix et un", "Ww") == "Quatre-Vingt-Dix et un"
        assert words.format_word_case("soixante-dix-sept", "Ww") == "Soixante-Dix-Sept"

    def test_title_preserves_spacing(self) -> None:
        """Runs of separators are kept as written."""
        words = LocaleWords.create("en")
        assert words.format_word_case("one  two", WordCase.TITLE) == "One  Two"

    def test_unknown_case_unchanged(self) -> None:
        """An unknown case string leaves the text unchanged."""
        assert LocaleWords.create("en").format_word_case("one", "x") == "one"

    @given(text=st.text(alphabet="abc -", max_size=30))
    def test_title_preserves_length(self, text: str) -> None:
        """Title case never changes the text length."""
        assert len(LocaleWords.create("en").format_word_case(text, WordCase.TITLE)) == len(text)


class TestUnboundedWidth:
    """Test the UNBOUNDED_WIDTH export."""

    def test_default_max_width(self) -> None:
        """Passing UNBOUNDED_WIDTH explicitly matches the default."""
        words = LocaleWords.create("it")
        assert words.month_name(9, 0, UNBOUNDED_WIDTH) == words.month_name(9)
