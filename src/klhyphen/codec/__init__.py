"""Binary codec for hyphenation dictionaries.

Components:
    ByteReader - Sequential reader enforcing a byte ceiling
    decode_standard / decode_extended - Wire format to dictionary values
    encode / dump - Dictionary values to wire format
    DecodeError and subclasses - Raw decode failures
    StreamReadError - Non-OSError failure of the underlying stream

Python 3.13+. Zero external dependencies.
"""

from .decoder import LANGUAGE_BY_TAG, decode_extended, decode_language, decode_standard
from .encoder import dump, encode, encode_extended, encode_standard
from .errors import (
    DecodeError,
    MalformedDataError,
    SizeLimitExceededError,
    StreamReadError,
    TruncatedInputError,
)
from .reader import ByteReader, ByteStream

__all__ = [
    "LANGUAGE_BY_TAG",
    "ByteReader",
    "ByteStream",
    "DecodeError",
    "MalformedDataError",
    "SizeLimitExceededError",
    "StreamReadError",
    "TruncatedInputError",
    "decode_extended",
    "decode_language",
    "decode_standard",
    "dump",
    "encode",
    "encode_extended",
    "encode_standard",
]
