"""Decoder for the binary dictionary format.

Wire layout. The primitives follow bincode 1 with fixed-width little-endian
integers; the struct layout (pattern string to scores maps) is klhyphen's own,
so automaton-based kl-hyphenate files do not decode:

    Language        u32 tag (declaration order of klhyphen.enums.Language)
    usize           u64
    str             u64 byte length, UTF-8 bytes
    sequence / map  u64 item count, items (map items are key then value)
    Option[T]       u8 0 (None) or 1 followed by T
    tuple / struct  fields in declaration order

    Standard / Extended = language, patterns, exceptions, minima

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable

from klhyphen.diagnostics.templates import ErrorTemplate
from klhyphen.dictionary import (
    Extended,
    ExtendedException,
    ExtendedPattern,
    Locus,
    Standard,
    Subregion,
)
from klhyphen.enums import Language

from .errors import MalformedDataError
from .reader import ByteReader

__all__ = [
    "LANGUAGE_BY_TAG",
    "decode_extended",
    "decode_language",
    "decode_standard",
    "decode_string",
]

LANGUAGE_BY_TAG: tuple[Language, ...] = tuple(Language)

# Smallest possible encoding of one item, used to reject impossible counts early.
_MIN_LOCUS = 2
_MIN_INDEX = 8
_MIN_STANDARD_ENTRY = 16  # key length prefix + tally length prefix
_MIN_EXTENDED_ENTRY = 17  # ... + option tag


def decode_language(reader: ByteReader) -> Language:
    """Decode a Language tag.

    Raises:
        MalformedDataError: If the tag is outside the enumeration
    """
    offset = reader.consumed
    tag = reader.read_u32()
    if tag >= len(LANGUAGE_BY_TAG):
        raise MalformedDataError(
            ErrorTemplate.unknown_language_tag(offset, tag, len(LANGUAGE_BY_TAG))
        )
    return LANGUAGE_BY_TAG[tag]


def decode_string(reader: ByteReader) -> str:
    """Decode a length-prefixed UTF-8 string.

    Raises:
        MalformedDataError: If the payload is not valid UTF-8
    """
    size = reader.read_length()
    offset = reader.consumed
    raw = reader.read_exact(size)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDataError(ErrorTemplate.invalid_utf8(offset, e.reason)) from e


def _decode_option[T](reader: ByteReader, decode_value: Callable[[ByteReader], T]) -> T | None:
    offset = reader.consumed
    tag = reader.read_u8()
    if tag == 0:
        return None
    if tag == 1:
        return decode_value(reader)
    raise MalformedDataError(ErrorTemplate.invalid_option_tag(offset, tag))


def _decode_loci(reader: ByteReader) -> tuple[Locus, ...]:
    count = reader.read_length(_MIN_LOCUS)
    return tuple(Locus(reader.read_u8(), reader.read_u8()) for _ in range(count))


def _decode_indices(reader: ByteReader) -> tuple[int, ...]:
    count = reader.read_length(_MIN_INDEX)
    return tuple(reader.read_u64() for _ in range(count))


def _decode_subregion(reader: ByteReader) -> Subregion:
    left = reader.read_u64()
    right = reader.read_u64()
    substitution = decode_string(reader)
    breakpoint_ = reader.read_u64()
    return Subregion(left, right, substitution, breakpoint_)


def _decode_minima(reader: ByteReader) -> tuple[int, int]:
    return (reader.read_u64(), reader.read_u64())


def _decode_map[V](
    reader: ByteReader, decode_value: Callable[[ByteReader], V], min_entry: int
) -> dict[str, V]:
    count = reader.read_length(min_entry)
    entries: dict[str, V] = {}
    for _ in range(count):
        key = decode_string(reader)
        entries[key] = decode_value(reader)
    return entries


def _decode_extended_pattern(reader: ByteReader) -> ExtendedPattern:
    loci = _decode_loci(reader)
    return (loci, _decode_option(reader, _decode_subregion))


def _decode_extended_exception(reader: ByteReader) -> ExtendedException:
    indices = _decode_indices(reader)
    return (indices, _decode_option(reader, _decode_subregion))


def decode_standard(reader: ByteReader) -> Standard:
    """Decode a Standard dictionary.

    Raises:
        DecodeError: On any wire format violation
        OSError: Propagated unchanged from the stream
        StreamReadError: The stream raised any other exception
    """
    language = decode_language(reader)
    patterns = _decode_map(reader, _decode_loci, _MIN_STANDARD_ENTRY)
    exceptions = _decode_map(reader, _decode_indices, _MIN_STANDARD_ENTRY)
    minima = _decode_minima(reader)
    return Standard(language, patterns, exceptions, minima)


def decode_extended(reader: ByteReader) -> Extended:
    """Decode an Extended dictionary.

    Raises:
        DecodeError: On any wire format violation
        OSError: Propagated unchanged from the stream
        StreamReadError: The stream raised any other exception
    """
    language = decode_language(reader)
    patterns = _decode_map(reader, _decode_extended_pattern, _MIN_EXTENDED_ENTRY)
    exceptions = _decode_map(reader, _decode_extended_exception, _MIN_EXTENDED_ENTRY)
    minima = _decode_minima(reader)
    return Extended(language, patterns, exceptions, minima)
