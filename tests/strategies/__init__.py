"""Hypothesis strategies for klhyphen property-based testing.

Strategies are organized by domain:

- dictionary: languages, pattern tallies, subregions, Standard/Extended values

Usage:
    from tests.strategies import standard_dictionaries, languages
    from tests.strategies.dictionary import distinct_language_pairs
"""

from .dictionary import (
    distinct_language_pairs,
    extended_dictionaries,
    languages,
    loci,
    pattern_keys,
    standard_dictionaries,
    subregions,
)

__all__ = [
    "distinct_language_pairs",
    "extended_dictionaries",
    "languages",
    "loci",
    "pattern_keys",
    "standard_dictionaries",
    "subregions",
]
