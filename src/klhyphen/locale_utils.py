"""Locale utilities for hyph-utf8 codes and human-readable language names.

hyph-utf8 codes are BCP-47-like but carry private-use and orthography
subtags Babel does not understand ("de-1996", "la-x-classic"). This module
reduces them to the subset Babel can parse and renders display names for
diagnostics.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

    from klhyphen.enums import Language

__all__ = [
    "babel_candidates",
    "clear_locale_cache",
    "get_babel_locale",
    "language_display_name",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# Language used for display names in diagnostics.
_DISPLAY_LOCALE = "en"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def babel_candidates(code: str) -> tuple[str, ...]:
    """Reduce a hyph-utf8 code to Babel locale identifiers, most specific first.

    Keeps the primary language subtag plus a script (four letters, title
    cased) or territory (two letters, upper cased). Orthography years and
    private-use subtags are dropped.

    Example:
        >>> babel_candidates("en-us")
        ('en_US', 'en')
        >>> babel_candidates("mn-cyrl")
        ('mn_Cyrl', 'mn')
        >>> babel_candidates("la-x-classic")
        ('la',)
    """
    subtags = code.split("-")
    language = subtags[0].lower()
    qualifiers: list[str] = []
    for subtag in subtags[1:]:
        if subtag == "x":
            break
        if len(subtag) == 4 and subtag.isalpha():
            qualifiers.append(subtag.title())
        elif len(subtag) == 2 and subtag.isalpha():
            qualifiers.append(subtag.upper())
    if not qualifiers:
        return (language,)
    return (normalize_locale("-".join([language, *qualifiers])), language)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache."""
    get_babel_locale.cache_clear()


@functools.lru_cache(maxsize=128)
def language_display_name(language: Language) -> str:
    """Return the English display name of a language, e.g. "English (United States)".

    Falls back to the raw hyph-utf8 code when CLDR has no entry for any
    candidate (Piedmontese, Ethiopic script patterns, ...).

    Args:
        language: Language to describe

    Returns:
        Human-readable name
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    for candidate in babel_candidates(language.code):
        try:
            locale = get_babel_locale(candidate)
        except (UnknownLocaleError, ValueError):
            continue
        name = locale.get_display_name(_DISPLAY_LOCALE)
        if name:
            return name
    logger.debug("No CLDR display name for language '%s'", language.code)
    return language.code
