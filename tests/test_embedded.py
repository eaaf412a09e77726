"""Tests for the embedded dictionary registry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from klhyphen import (
    DeserializationError,
    DictionaryKind,
    EmbeddedDictionaries,
    Extended,
    Language,
    LanguageMismatchError,
    ResourceError,
    Standard,
    load_embedded,
)
from klhyphen.embedded import dictionary_filename


class TestDictionaryFilename:
    """Resource naming."""

    def test_standard(self) -> None:
        assert dictionary_filename(Language.ENGLISH_US, DictionaryKind.STANDARD) == (
            "en-us.standard.bincode"
        )

    def test_extended(self) -> None:
        assert dictionary_filename(Language.LATIN_CLASSIC, DictionaryKind.EXTENDED) == (
            "la-x-classic.extended.bincode"
        )


class TestRegistry:
    """Registry over a directory of dictionary files."""

    def test_load_standard(self, dictionary_dir: Path, standard_en_us: Standard) -> None:
        registry = EmbeddedDictionaries(dictionary_dir)
        assert registry.load(Language.ENGLISH_US, Standard) == standard_en_us

    def test_load_extended(self, dictionary_dir: Path, extended_de_1996: Extended) -> None:
        registry = EmbeddedDictionaries(dictionary_dir)
        assert registry.load(Language.GERMAN_1996, Extended) == extended_de_1996

    def test_locate(self, dictionary_dir: Path) -> None:
        resource = EmbeddedDictionaries(dictionary_dir).locate(Language.ENGLISH_US, Standard)
        assert resource == dictionary_dir / "en-us.standard.bincode"

    def test_missing_language(
        self, dictionary_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        registry = EmbeddedDictionaries(dictionary_dir)
        with (
            caplog.at_level(logging.DEBUG, logger="klhyphen.embedded"),
            pytest.raises(ResourceError) as exc_info,
        ):
            registry.load(Language.FRENCH, Standard)
        assert exc_info.value.language is Language.FRENCH
        assert exc_info.value.dictionary_kind is DictionaryKind.STANDARD
        assert exc_info.value.location == str(dictionary_dir / "fr.standard.bincode")
        assert "No embedded standard dictionary for 'fr'" in caplog.text

    def test_missing_variant(self, dictionary_dir: Path) -> None:
        with pytest.raises(ResourceError) as exc_info:
            EmbeddedDictionaries(dictionary_dir).load(Language.ENGLISH_US, Extended)
        assert exc_info.value.dictionary_kind is DictionaryKind.EXTENDED

    def test_misnamed_file_is_a_mismatch(
        self, dictionary_dir: Path, standard_bytes: bytes
    ) -> None:
        (dictionary_dir / "fr.standard.bincode").write_bytes(standard_bytes)
        with pytest.raises(LanguageMismatchError) as exc_info:
            EmbeddedDictionaries(dictionary_dir).load(Language.FRENCH, Standard)
        assert exc_info.value.expected is Language.FRENCH
        assert exc_info.value.found is Language.ENGLISH_US
        assert exc_info.value.location == str(dictionary_dir / "fr.standard.bincode")

    def test_corrupt_file(self, dictionary_dir: Path) -> None:
        (dictionary_dir / "pl.standard.bincode").write_bytes(b"\x01\x02")
        with pytest.raises(DeserializationError):
            EmbeddedDictionaries(dictionary_dir).load(Language.POLISH, Standard)

    def test_directory_named_like_a_dictionary(self, dictionary_dir: Path) -> None:
        (dictionary_dir / "it.standard.bincode").mkdir()
        with pytest.raises(ResourceError):
            EmbeddedDictionaries(dictionary_dir).locate(Language.ITALIAN, Standard)

    def test_available(self, dictionary_dir: Path) -> None:
        (dictionary_dir / "notes.txt").write_text("not a dictionary")
        (dictionary_dir / "af.standard.bincode").write_bytes(b"")
        registry = EmbeddedDictionaries(dictionary_dir)
        assert registry.available(Standard) == [Language.AFRIKAANS, Language.ENGLISH_US]
        assert registry.available(Extended) == [Language.GERMAN_1996]

    def test_available_without_root(self, tmp_path: Path) -> None:
        assert EmbeddedDictionaries(tmp_path / "absent").available(Standard) == []


class TestDefaultRegistry:
    """The package ships no dictionaries of its own."""

    def test_nothing_available(self) -> None:
        assert EmbeddedDictionaries().available(Standard) == []

    def test_load_embedded_reports_resource_error(self) -> None:
        with pytest.raises(ResourceError) as exc_info:
            load_embedded(Language.ENGLISH_US, Standard)
        assert exc_info.value.location is not None
        assert exc_info.value.location.endswith("en-us.standard.bincode")
