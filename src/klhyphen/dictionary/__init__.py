"""Hyphenation dictionary value types (Standard and Extended variants).

Python 3.13+. Zero external dependencies.
"""

from .types import (
    Dictionary,
    Extended,
    ExtendedException,
    ExtendedPattern,
    Locus,
    Standard,
    Subregion,
)

__all__ = [
    "Dictionary",
    "Extended",
    "ExtendedException",
    "ExtendedPattern",
    "Locus",
    "Standard",
    "Subregion",
]
