"""Shared constants for klhyphen.

Centralized configuration constants used by the codec, the loaders and the
embedded dictionary registry. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Wire format: fixed widths of the binary encoding
- File naming: layout of dictionary files on disk and in package data

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_DICTIONARY_SIZE",
    # Wire format
    "LENGTH_PREFIX_SIZE",
    "TAG_SIZE",
    "MAX_U8",
    "MAX_U32",
    "MAX_U64",
    # File naming
    "DICTIONARY_EXTENSION",
    "EMBEDDED_PACKAGE",
    "EMBEDDED_DIRECTORY",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum number of bytes a single dictionary may occupy on the wire.
# Enforced by the byte reader while decoding: any read or declared length that
# would take the total past this ceiling fails before allocation.
# The largest hyph-utf8 dictionaries encode to roughly 1.5 MB.
MAX_DICTIONARY_SIZE: int = 5_000_000

# ============================================================================
# WIRE FORMAT
# ============================================================================

# Strings, sequences and maps are prefixed with a u64 little-endian count.
LENGTH_PREFIX_SIZE: int = 8

# Enum tags (Language) are encoded as u32 little-endian.
TAG_SIZE: int = 4

MAX_U8: int = 0xFF
MAX_U32: int = 0xFFFF_FFFF
MAX_U64: int = 0xFFFF_FFFF_FFFF_FFFF

# ============================================================================
# FILE NAMING
# ============================================================================

# Dictionary files are named "{language code}.{kind}.{extension}",
# e.g. "en-us.standard.bincode".
DICTIONARY_EXTENSION: str = "bincode"

# Location of embedded dictionaries inside the installed package.
EMBEDDED_PACKAGE: str = "klhyphen"
EMBEDDED_DIRECTORY: str = "dictionaries"
