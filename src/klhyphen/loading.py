"""Reading and loading hyphenation dictionaries.

To hyphenate words in a given language, the relevant dictionary must first
be loaded into memory. This module deserializes dictionaries from byte
streams, usually file buffers, and checks that they belong to the language
the caller asked for.

Components:
    DictionaryLoader - Generic loader, one instance per dictionary variant
    STANDARD_LOADER / EXTENDED_LOADER - Default loaders (5,000,000 byte ceiling)
    load_verified / load_unverified / load_path - Functional shorthands

Example:
    >>> from klhyphen import Language, Standard, load_path, load_verified
    >>> with open("dictionaries/en-us.standard.bincode", "rb") as f:
    ...     en_us = load_verified(Language.ENGLISH_US, f, Standard)
    >>> en_us = load_path(Language.ENGLISH_US, "dictionaries/en-us.standard.bincode", Standard)

Every failure raises a LoadError subclass; nothing is retried and no partial
dictionary is ever returned.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from klhyphen.codec import (
    ByteReader,
    DecodeError,
    StreamReadError,
    decode_extended,
    decode_standard,
)
from klhyphen.constants import MAX_DICTIONARY_SIZE
from klhyphen.diagnostics import DeserializationError, DictionaryIOError, LanguageMismatchError
from klhyphen.dictionary import Extended, Standard

if TYPE_CHECKING:
    from klhyphen.codec import ByteStream
    from klhyphen.enums import DictionaryKind, Language

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Generic loader
    "DictionaryLoader",
    "EXTENDED_LOADER",
    "STANDARD_LOADER",
    "loader_for",
    # Functional API
    "load_path",
    "load_unverified",
    "load_verified",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DictionaryLoader[D: (Standard, Extended)]:
    """Loader for one dictionary variant.

    Stateless: every call wraps its stream in a fresh ByteReader, so one
    loader may be shared freely across threads.

    Attributes:
        variant: Dictionary class produced by this loader
        decode: Codec function reading one ``variant`` value
        max_size: Byte ceiling enforced while decoding
    """

    variant: type[D]
    decode: Callable[[ByteReader], D]
    max_size: int = MAX_DICTIONARY_SIZE

    def __post_init__(self) -> None:
        """Validate the byte ceiling.

        Raises:
            ValueError: If max_size is not positive
        """
        if self.max_size <= 0:
            msg = f"max_size must be positive, got {self.max_size}"
            raise ValueError(msg)

    @property
    def kind(self) -> DictionaryKind:
        """Variant produced by this loader."""
        return self.variant.KIND

    def with_max_size(self, max_size: int) -> DictionaryLoader[D]:
        """Return a copy of this loader with a different byte ceiling."""
        return dataclasses.replace(self, max_size=max_size)

    def any_from_reader(self, stream: ByteStream, *, location: str | None = None) -> D:
        """Deserialize a dictionary from ``stream`` without checking its language.

        For callers that learn the language from the data itself.

        Args:
            stream: Source of bytes, consumed sequentially
            location: Path or resource name for diagnostics

        Returns:
            Decoded dictionary, whatever its language

        Raises:
            DeserializationError: Malformed, truncated or oversized data
            DictionaryIOError: The stream failed while being read
        """
        reader = ByteReader(stream, self.max_size)
        try:
            dictionary = self.decode(reader)
        except DecodeError as e:
            logger.debug("Failed to decode %s dictionary: %s", self.kind, e)
            raise DeserializationError.from_decode_error(e, location=location) from e
        except OSError as e:
            logger.debug("Failed to read %s dictionary: %s", self.kind, e)
            raise DictionaryIOError.from_os_error(e, location=location) from e
        except StreamReadError as e:
            logger.debug("Failed to read %s dictionary: %s", self.kind, e)
            raise DictionaryIOError.from_stream_error(e, location=location) from e.original
        logger.debug(
            "Loaded %s dictionary for '%s' (%d bytes)",
            self.kind,
            dictionary.language,
            reader.consumed,
        )
        return dictionary

    def from_reader(
        self, language: Language, stream: ByteStream, *, location: str | None = None
    ) -> D:
        """Deserialize a dictionary from ``stream``, verifying its language.

        Args:
            language: Language the dictionary must belong to
            stream: Source of bytes, consumed sequentially
            location: Path or resource name for diagnostics

        Returns:
            Decoded dictionary; ``result.language == language``

        Raises:
            DeserializationError: Malformed, truncated or oversized data
            DictionaryIOError: The stream failed while being read
            LanguageMismatchError: The dictionary belongs to another language
        """
        dictionary = self.any_from_reader(stream, location=location)
        if dictionary.language != language:
            logger.warning(
                "Language mismatch: expected '%s', found '%s'", language, dictionary.language
            )
            raise LanguageMismatchError(language, dictionary.language, location=location)
        return dictionary

    def from_path(self, language: Language, path: str | os.PathLike[str]) -> D:
        """Read the dictionary file at ``path``, verifying its language.

        Raises:
            DictionaryIOError: The file could not be opened or read
            DeserializationError: Malformed, truncated or oversized data
            LanguageMismatchError: The dictionary belongs to another language
        """
        location = os.fspath(path)
        try:
            file = Path(path).open("rb")  # noqa: SIM115 - closed by the with below
        except OSError as e:
            logger.debug("Failed to open dictionary %s: %s", location, e)
            raise DictionaryIOError.from_os_error(e, location=location) from e
        with file:
            return self.from_reader(language, file, location=location)


STANDARD_LOADER: DictionaryLoader[Standard] = DictionaryLoader(Standard, decode_standard)
EXTENDED_LOADER: DictionaryLoader[Extended] = DictionaryLoader(Extended, decode_extended)

_LOADERS: dict[type, DictionaryLoader[Standard] | DictionaryLoader[Extended]] = {
    Standard: STANDARD_LOADER,
    Extended: EXTENDED_LOADER,
}


def loader_for[D: (Standard, Extended)](
    variant: type[D], *, max_size: int | None = None
) -> DictionaryLoader[D]:
    """Return the loader for a dictionary variant.

    Args:
        variant: Standard or Extended
        max_size: Byte ceiling override (default: MAX_DICTIONARY_SIZE)

    Raises:
        TypeError: If ``variant`` is not a known dictionary class
    """
    try:
        loader = cast("DictionaryLoader[D]", _LOADERS[variant])
    except KeyError:
        msg = f"No loader for {variant!r}; expected Standard or Extended"
        raise TypeError(msg) from None
    if max_size is not None and max_size != loader.max_size:
        return loader.with_max_size(max_size)
    return loader


def load_verified[D: (Standard, Extended)](
    expected_language: Language,
    stream: ByteStream,
    variant: type[D],
    *,
    max_size: int | None = None,
) -> D:
    """Load a ``variant`` dictionary from ``stream`` and check its language.

    See DictionaryLoader.from_reader.
    """
    return loader_for(variant, max_size=max_size).from_reader(expected_language, stream)


def load_unverified[D: (Standard, Extended)](
    stream: ByteStream,
    variant: type[D],
    *,
    max_size: int | None = None,
) -> D:
    """Load a ``variant`` dictionary from ``stream`` without a language check.

    See DictionaryLoader.any_from_reader.
    """
    return loader_for(variant, max_size=max_size).any_from_reader(stream)


def load_path[D: (Standard, Extended)](
    expected_language: Language,
    path: str | os.PathLike[str],
    variant: type[D],
    *,
    max_size: int | None = None,
) -> D:
    """Load a ``variant`` dictionary from the file at ``path`` and check its language.

    See DictionaryLoader.from_path.
    """
    return loader_for(variant, max_size=max_size).from_path(expected_language, path)
