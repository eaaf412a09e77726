"""Encoder for the binary dictionary format.

Produces exactly the layout decoder.py reads. Map entries are written in
sorted key order so that equal dictionaries encode to identical bytes.

This is serialization of an existing value only; building dictionaries from
TeX patterns is out of scope.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Mapping
from typing import BinaryIO

from klhyphen.constants import MAX_U8, MAX_U64
from klhyphen.dictionary import (
    Dictionary,
    Extended,
    ExtendedException,
    ExtendedPattern,
    Locus,
    Standard,
    Subregion,
)
from klhyphen.enums import Language

from .decoder import LANGUAGE_BY_TAG

__all__ = [
    "dump",
    "encode",
    "encode_extended",
    "encode_standard",
]

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")

_TAG_BY_LANGUAGE: dict[Language, int] = {
    language: tag for tag, language in enumerate(LANGUAGE_BY_TAG)
}


class _Writer:
    """Accumulates encoded parts; joined once at the end."""

    __slots__ = ("parts",)

    def __init__(self) -> None:
        self.parts: list[bytes] = []

    def u8(self, value: int, name: str) -> None:
        if not 0 <= value <= MAX_U8:
            msg = f"{name} must fit in u8, got {value}"
            raise ValueError(msg)
        self.parts.append(bytes((value,)))

    def u64(self, value: int, name: str) -> None:
        if not 0 <= value <= MAX_U64:
            msg = f"{name} must fit in u64, got {value}"
            raise ValueError(msg)
        self.parts.append(_U64.pack(value))

    def language(self, language: Language) -> None:
        self.parts.append(_U32.pack(_TAG_BY_LANGUAGE[language]))

    def string(self, value: str) -> None:
        raw = value.encode("utf-8")
        self.u64(len(raw), "string length")
        self.parts.append(raw)

    def getvalue(self) -> bytes:
        return b"".join(self.parts)


def _write_loci(writer: _Writer, loci: tuple[Locus, ...]) -> None:
    writer.u64(len(loci), "tally length")
    for locus in loci:
        writer.u8(locus.index, "locus index")
        writer.u8(locus.value, "locus value")


def _write_indices(writer: _Writer, indices: tuple[int, ...]) -> None:
    writer.u64(len(indices), "exception length")
    for index in indices:
        writer.u64(index, "break index")


def _write_subregion(writer: _Writer, subregion: Subregion | None) -> None:
    if subregion is None:
        writer.u8(0, "option tag")
        return
    writer.u8(1, "option tag")
    writer.u64(subregion.left, "subregion left")
    writer.u64(subregion.right, "subregion right")
    writer.string(subregion.substitution)
    writer.u64(subregion.breakpoint, "subregion breakpoint")


def _write_map[V](
    writer: _Writer, entries: Mapping[str, V], write_value: Callable[[_Writer, V], None]
) -> None:
    writer.u64(len(entries), "map length")
    for key in sorted(entries):
        writer.string(key)
        write_value(writer, entries[key])


def _write_extended_pattern(writer: _Writer, pattern: ExtendedPattern) -> None:
    loci, subregion = pattern
    _write_loci(writer, loci)
    _write_subregion(writer, subregion)


def _write_extended_exception(writer: _Writer, exception: ExtendedException) -> None:
    indices, subregion = exception
    _write_indices(writer, indices)
    _write_subregion(writer, subregion)


def _write_minima(writer: _Writer, minima: tuple[int, int]) -> None:
    left, right = minima
    writer.u64(left, "left minimum")
    writer.u64(right, "right minimum")


def encode_standard(dictionary: Standard) -> bytes:
    """Encode a Standard dictionary.

    Raises:
        ValueError: If a numeric field does not fit its wire width
    """
    writer = _Writer()
    writer.language(dictionary.language)
    _write_map(writer, dictionary.patterns, _write_loci)
    _write_map(writer, dictionary.exceptions, _write_indices)
    _write_minima(writer, dictionary.minima)
    return writer.getvalue()


def encode_extended(dictionary: Extended) -> bytes:
    """Encode an Extended dictionary.

    Raises:
        ValueError: If a numeric field does not fit its wire width
    """
    writer = _Writer()
    writer.language(dictionary.language)
    _write_map(writer, dictionary.patterns, _write_extended_pattern)
    _write_map(writer, dictionary.exceptions, _write_extended_exception)
    _write_minima(writer, dictionary.minima)
    return writer.getvalue()


def encode(dictionary: Dictionary) -> bytes:
    """Encode either dictionary variant.

    Raises:
        TypeError: If ``dictionary`` is not a Standard or Extended
        ValueError: If a numeric field does not fit its wire width
    """
    match dictionary:
        case Standard():
            return encode_standard(dictionary)
        case Extended():
            return encode_extended(dictionary)
        case _:
            msg = f"Expected Standard or Extended, got {type(dictionary).__name__}"
            raise TypeError(msg)


def dump(dictionary: Dictionary, stream: BinaryIO) -> int:
    """Encode ``dictionary`` and write it to ``stream``.

    Returns:
        Number of bytes written
    """
    data = encode(dictionary)
    stream.write(data)
    return len(data)
