"""Enumerations for klhyphen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Language(StrEnum):
    """Languages for which hyphenation dictionaries exist.

    Values are hyph-utf8 pattern codes: str(Language.ENGLISH_US) == "en-us".

    WIRE FORMAT: declaration order is the u32 tag written into every encoded
    dictionary. Append new languages at the end; never reorder or remove.
    """

    AFRIKAANS = "af"
    ALBANIAN = "sq"
    ARMENIAN = "hy"
    ASSAMESE = "as"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE = "zh-latn-pinyin"
    COPTIC = "cop"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH_GB = "en-gb"
    ENGLISH_US = "en-us"
    ESPERANTO = "eo"
    ESTONIAN = "et"
    ETHIOPIC = "mul-ethi"
    FINNISH = "fi"
    FRENCH = "fr"
    FRIULAN = "fur"
    GALICIAN = "gl"
    GEORGIAN = "ka"
    GERMAN_1901 = "de-1901"
    GERMAN_1996 = "de-1996"
    GERMAN_SWISS = "de-ch-1901"
    GREEK_ANCIENT = "grc"
    GREEK_MONO = "el-monoton"
    GREEK_POLY = "el-polyton"
    GUJARATI = "gu"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    INTERLINGUA = "ia"
    IRISH = "ga"
    ITALIAN = "it"
    KANNADA = "kn"
    KURMANJI = "kmr"
    LATIN = "la"
    LATIN_CLASSIC = "la-x-classic"
    LATIN_LITURGICAL = "la-x-liturgic"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAYALAM = "ml"
    MARATHI = "mr"
    MONGOLIAN = "mn-cyrl"
    NORWEGIAN_BOKMAL = "nb"
    NORWEGIAN_NYNORSK = "nn"
    OCCITAN = "oc"
    ORIYA = "or"
    PANJABI = "pa"
    PIEDMONTESE = "pms"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    ROMANSH = "rm"
    RUSSIAN = "ru"
    SANSKRIT = "sa"
    SERBIAN_CYRILLIC = "sr-cyrl"
    SERBOCROATIAN_CYRILLIC = "sh-cyrl"
    SERBOCROATIAN_LATIN = "sh-latn"
    SLAVONIC_CHURCH = "cu"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    TURKMEN = "tk"
    UKRAINIAN = "uk"
    UPPERSORBIAN = "hsb"
    WELSH = "cy"

    @property
    def code(self) -> str:
        """hyph-utf8 code (alias for value, reads better at call sites)."""
        return self.value


class DictionaryKind(StrEnum):
    """Structural variant of a hyphenation dictionary.

    StrEnum provides automatic string conversion: str(DictionaryKind.STANDARD) == "standard"
    """

    STANDARD = "standard"
    """Plain Knuth-Liang patterns: break points only."""

    EXTENDED = "extended"
    """Patterns with subregion alterations (non-standard hyphenation, e.g. "ck" -> "k-k")."""


__all__ = [
    "DictionaryKind",
    "Language",
]
