"""Tests for locale_utils.py.

Covers normalize_locale, babel_candidates, get_babel_locale and
language_display_name, including the fallback for codes CLDR does not know.

Python 3.13+.
"""

from collections.abc import Iterator

import pytest
from babel import Locale
from babel.core import UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from klhyphen import Language
from klhyphen import locale_utils
from klhyphen.locale_utils import (
    babel_candidates,
    clear_locale_cache,
    get_babel_locale,
    language_display_name,
    normalize_locale,
)


@pytest.fixture(autouse=True)
def _fresh_caches() -> Iterator[None]:
    language_display_name.cache_clear()
    clear_locale_cache()
    yield
    language_display_name.cache_clear()
    clear_locale_cache()


class TestNormalizeLocale:
    """BCP-47 to POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_single_subtag_unchanged(self) -> None:
        """Language-only codes pass through."""
        assert normalize_locale("fr") == "fr"

    @given(code=st.text(alphabet="abcdefgh-", min_size=1, max_size=12))
    def test_no_hyphens_remain(self, code: str) -> None:
        """PROPERTY: output never contains a hyphen."""
        event(f"had_hyphen={'-' in code}")
        assert "-" not in normalize_locale(code)


class TestBabelCandidates:
    """Reduction of hyph-utf8 codes to Babel identifiers."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-us", ("en_US", "en")),
            ("en-gb", ("en_GB", "en")),
            ("fr", ("fr",)),
            ("mn-cyrl", ("mn_Cyrl", "mn")),
            ("sh-latn", ("sh_Latn", "sh")),
            ("de-1996", ("de",)),
            ("de-ch-1901", ("de_CH", "de")),
            ("la-x-classic", ("la",)),
            ("el-monoton", ("el",)),
            ("zh-latn-pinyin", ("zh_Latn", "zh")),
            ("mul-ethi", ("mul_Ethi", "mul")),
        ],
    )
    def test_candidates(self, code: str, expected: tuple[str, ...]) -> None:
        assert babel_candidates(code) == expected


class TestGetBabelLocale:
    """Cached Babel Locale lookup."""

    def test_accepts_bcp47(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.territory == "US"

    def test_cached(self) -> None:
        assert get_babel_locale("fr") is get_babel_locale("fr")

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("qq")


class TestLanguageDisplayName:
    """English display names for diagnostics."""

    def test_with_territory(self) -> None:
        assert language_display_name(Language.ENGLISH_US) == "English (United States)"

    def test_language_only(self) -> None:
        assert language_display_name(Language.FRENCH) == "French"

    def test_orthography_subtag_dropped(self) -> None:
        assert language_display_name(Language.GERMAN_1996) == "German"

    def test_fallback_to_code(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def unknown(code: str) -> Locale:
            raise UnknownLocaleError(code)

        monkeypatch.setattr(locale_utils, "get_babel_locale", unknown)
        with caplog.at_level("DEBUG", logger="klhyphen.locale_utils"):
            assert language_display_name(Language.PIEDMONTESE) == "pms"
        assert "No CLDR display name for language 'pms'" in caplog.text

    def test_invalid_candidate_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        real = locale_utils.get_babel_locale

        def reject_territory(code: str) -> Locale:
            if "_" in code:
                msg = f"bad locale {code}"
                raise ValueError(msg)
            return real(code)

        monkeypatch.setattr(locale_utils, "get_babel_locale", reject_territory)
        assert language_display_name(Language.ENGLISH_GB) == "English"
