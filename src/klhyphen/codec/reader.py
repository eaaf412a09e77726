"""Bounded sequential byte reader.

Wraps any object with a ``read(n)`` method and enforces a byte budget while
decoding. The budget is checked BEFORE each read, and declared lengths are
checked against the remaining budget BEFORE anything is allocated, so an
oversized or hostile length prefix fails immediately instead of exhausting
memory.

Only ``read`` is used: no seek, tell or peek. Pipes, sockets and
decompression streams work as well as files and BytesIO. OSError from the
stream propagates unchanged; any other exception it raises is wrapped in
StreamReadError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import struct
from typing import Protocol

from klhyphen.constants import LENGTH_PREFIX_SIZE, MAX_DICTIONARY_SIZE, TAG_SIZE
from klhyphen.diagnostics.templates import ErrorTemplate

from .errors import SizeLimitExceededError, StreamReadError, TruncatedInputError

__all__ = ["ByteReader", "ByteStream"]

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


class ByteStream(Protocol):
    """Anything bytes can be pulled from sequentially."""

    def read(self, size: int = -1, /) -> bytes:
        """Read up to ``size`` bytes; return b"" at end of stream."""
        ...


class ByteReader:
    """Sequential reader with a hard byte ceiling.

    Not thread-safe; each decode call owns its own reader.

    Attributes:
        limit: Maximum number of bytes that may be consumed
        consumed: Number of bytes consumed so far
    """

    __slots__ = ("_stream", "consumed", "limit")

    def __init__(self, stream: ByteStream, limit: int = MAX_DICTIONARY_SIZE) -> None:
        """Initialize ByteReader.

        Args:
            stream: Source of bytes
            limit: Maximum number of bytes to consume

        Raises:
            ValueError: If limit is not positive
        """
        if limit <= 0:
            msg = f"limit must be positive, got {limit}"
            raise ValueError(msg)
        self._stream = stream
        self.limit = limit
        self.consumed = 0

    @property
    def remaining(self) -> int:
        """Bytes left in the budget."""
        return self.limit - self.consumed

    def reserve(self, size: int) -> None:
        """Fail unless ``size`` more bytes fit in the budget.

        Raises:
            SizeLimitExceededError: If consumed + size exceeds the limit
        """
        if size > self.remaining:
            raise SizeLimitExceededError(
                ErrorTemplate.size_limit_exceeded(self.consumed, size, self.limit),
                limit=self.limit,
            )

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Short reads are retried until the count is reached or the stream
        reports end of input.

        Raises:
            SizeLimitExceededError: If the read would exceed the budget
            TruncatedInputError: If the stream ends first
            OSError: Propagated unchanged from the stream
            StreamReadError: The stream raised any other exception
        """
        self.reserve(size)
        chunks: list[bytes] = []
        missing = size
        while missing > 0:
            chunk = self._read_chunk(missing, size - missing)
            if not chunk:
                break
            chunks.append(chunk)
            missing -= len(chunk)
        data = b"".join(chunks)
        if len(data) != size:
            raise TruncatedInputError(
                ErrorTemplate.unexpected_eof(self.consumed + len(data), size, len(data))
            )
        self.consumed += size
        return data

    def _read_chunk(self, size: int, received: int) -> bytes:
        try:
            return self._stream.read(size)
        except OSError:
            raise
        except Exception as e:
            offset = self.consumed + received
            raise StreamReadError(ErrorTemplate.stream_read_failed(offset, e), e) from e

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self.read_exact(1)[0]

    def read_u32(self) -> int:
        """Read a little-endian u32."""
        return int(_U32.unpack(self.read_exact(TAG_SIZE))[0])

    def read_u64(self) -> int:
        """Read a little-endian u64."""
        return int(_U64.unpack(self.read_exact(LENGTH_PREFIX_SIZE))[0])

    def read_length(self, min_item_size: int = 1) -> int:
        """Read a u64 length prefix and check it against the budget.

        Each announced item occupies at least ``min_item_size`` bytes on the
        wire, so a count whose minimum footprint exceeds the remaining budget
        is rejected before any item is decoded.

        Args:
            min_item_size: Lower bound on the encoded size of one item

        Returns:
            Announced item count

        Raises:
            SizeLimitExceededError: If the items cannot fit in the budget
        """
        count = self.read_u64()
        self.reserve(count * min_item_size)
        return count
