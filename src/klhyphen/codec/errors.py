"""Raw decode failures raised by the codec.

These are the primitive errors of the wire format. The loaders convert them
into DeserializationError (see DeserializationError.from_decode_error); code
that uses the codec directly catches DecodeError.

OSError raised by the underlying stream is never wrapped here: it propagates
unchanged so that I/O failures stay distinguishable from encoding failures.
Any other exception raised by the stream (EOFError from a truncated gzip
member, lzma.LZMAError, ValueError from a closed file) is wrapped in
StreamReadError, which is NOT a DecodeError: the loaders report it as an
I/O failure.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from typing import Any, final

from klhyphen.diagnostics.codes import Diagnostic

__all__ = [
    "DecodeError",
    "MalformedDataError",
    "SizeLimitExceededError",
    "StreamReadError",
    "TruncatedInputError",
]


class DecodeError(Exception):
    """Base exception for wire format violations.

    Attributes:
        diagnostic: Structured diagnostic information
        offset: Byte offset at which the violation was detected
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize DecodeError.

        Args:
            diagnostic: Diagnostic carrying message and byte offset
        """
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    def __reduce__(self) -> tuple[Any, ...]:
        """Pickle by diagnostic; args only holds the rendered message."""
        return (self.__class__, (self.diagnostic,))

    @property
    def offset(self) -> int | None:
        """Byte offset at which the violation was detected."""
        return self.diagnostic.offset


@final
class TruncatedInputError(DecodeError):
    """Stream ended before a complete value was read."""


@final
class SizeLimitExceededError(DecodeError):
    """Payload would exceed the configured byte ceiling.

    Attributes:
        limit: Configured ceiling in bytes
    """

    def __init__(self, diagnostic: Diagnostic, *, limit: int) -> None:
        """Initialize SizeLimitExceededError.

        Args:
            diagnostic: Diagnostic carrying message and byte offset
            limit: Configured ceiling in bytes
        """
        super().__init__(diagnostic)
        self.limit = limit

    def __reduce__(self) -> tuple[Any, ...]:
        """Pickle by diagnostic and limit."""
        return (functools.partial(SizeLimitExceededError, limit=self.limit), (self.diagnostic,))


@final
class MalformedDataError(DecodeError):
    """Bytes were read but do not form a valid value.

    Examples:
        - Language tag outside the enumeration
        - Option discriminant other than 0 or 1
        - String payload that is not valid UTF-8
    """


@final
class StreamReadError(Exception):
    """The stream raised something other than OSError while being read.

    Decompression wrappers and closed files report failures with their own
    exception types; this wrapper keeps the original so the loaders can
    report it as an I/O failure.

    Attributes:
        diagnostic: Structured diagnostic information
        original: Exception raised by the stream
    """

    def __init__(self, diagnostic: Diagnostic, original: Exception) -> None:
        """Initialize StreamReadError.

        Args:
            diagnostic: Diagnostic carrying message and byte offset
            original: Exception raised by the stream
        """
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.original = original
        self.__cause__ = original

    def __reduce__(self) -> tuple[Any, ...]:
        """Pickle by diagnostic and original exception."""
        return (self.__class__, (self.diagnostic, self.original))

    @property
    def offset(self) -> int | None:
        """Byte offset at which the stream failed."""
        return self.diagnostic.offset
