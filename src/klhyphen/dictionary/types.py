"""Hyphenation dictionary value types.

Two structural variants share the same outline (language, patterns,
exceptions, minima) and differ in what a pattern or exception carries:

- Standard: break-point scores only
- Extended: scores plus an optional Subregion describing how the word is
  altered around the break (German "Zucker" -> "Zuk-ker")

These are plain data holders; matching patterns against words belongs to the
hyphenation engine, not to this package.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar

from klhyphen.enums import DictionaryKind, Language

__all__ = [
    "Dictionary",
    "Extended",
    "ExtendedException",
    "ExtendedPattern",
    "Locus",
    "Standard",
    "Subregion",
]


@dataclass(frozen=True, slots=True)
class Locus:
    """Score contributed by a pattern at one position.

    Attributes:
        index: Offset of the inter-letter position inside the pattern (u8)
        value: Knuth-Liang score; odd values allow a break (u8)
    """

    index: int
    value: int


@dataclass(frozen=True, slots=True)
class Subregion:
    """Alteration applied to a word when breaking at a non-standard point.

    Attributes:
        left: Characters replaced before the break point
        right: Characters replaced after the break point
        substitution: Replacement text, including the hyphenated form
        breakpoint: Index of the break inside ``substitution``
    """

    left: int
    right: int
    substitution: str
    breakpoint: int


type ExtendedPattern = tuple[tuple[Locus, ...], Subregion | None]
"""Tally of an Extended pattern: scores plus optional alteration."""

type ExtendedException = tuple[tuple[int, ...], Subregion | None]
"""Exception entry of an Extended dictionary: break indices plus optional alteration."""


@dataclass(frozen=True, slots=True)
class Standard:
    """Dictionary for standard Knuth-Liang hyphenation.

    Attributes:
        language: Language the patterns were built for
        patterns: Pattern letters mapped to their scores
        exceptions: Whole words mapped to their break indices
        minima: Minimum characters before and after a break

    Compared by value. Not hashable: the pattern and exception tables are
    plain mappings.
    """

    KIND: ClassVar[DictionaryKind] = DictionaryKind.STANDARD

    language: Language
    patterns: Mapping[str, tuple[Locus, ...]] = field(default_factory=dict)
    exceptions: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    minima: tuple[int, int] = (2, 3)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class Extended:
    """Dictionary for non-standard hyphenation with subregion alterations.

    Attributes:
        language: Language the patterns were built for
        patterns: Pattern letters mapped to scores and optional alteration
        exceptions: Whole words mapped to break indices and optional alteration
        minima: Minimum characters before and after a break

    Compared by value. Not hashable: the pattern and exception tables are
    plain mappings.
    """

    KIND: ClassVar[DictionaryKind] = DictionaryKind.EXTENDED

    language: Language
    patterns: Mapping[str, ExtendedPattern] = field(default_factory=dict)
    exceptions: Mapping[str, ExtendedException] = field(default_factory=dict)
    minima: tuple[int, int] = (2, 3)

    __hash__ = None  # type: ignore[assignment]


type Dictionary = Standard | Extended
"""Any loadable dictionary variant."""
