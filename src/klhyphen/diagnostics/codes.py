"""Diagnostic codes and data structures.

Defines error codes, error kinds, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "LoadErrorKind",
]


class LoadErrorKind(StrEnum):
    """Stage at which a dictionary load failed.

    Inherits from ``StrEnum`` so that ``str(kind)`` and direct string
    comparisons work without accessing ``.value``.

    Kinds:
        DESERIALIZATION: Encoded data malformed, truncated or over the size ceiling
        IO: Bytes could not be read (missing file, permission denied, read error)
        LANGUAGE_MISMATCH: Valid dictionary for a different language
        RESOURCE: Embedded dictionary could not be located
    """

    DESERIALIZATION = "deserialization"
    IO = "io"
    LANGUAGE_MISMATCH = "language_mismatch"
    RESOURCE = "resource"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        6000-6099: Load errors (one per LoadErrorKind)
        6100-6199: Decode errors (wire format violations)
    """

    # Load errors (6000-6099)
    DESERIALIZATION_FAILED = 6001
    IO_FAILED = 6002
    LANGUAGE_MISMATCH = 6003
    RESOURCE_MISSING = 6004

    # Decode errors (6100-6199)
    UNEXPECTED_EOF = 6101
    SIZE_LIMIT_EXCEEDED = 6102
    UNKNOWN_LANGUAGE_TAG = 6103
    INVALID_OPTION_TAG = 6104
    INVALID_UTF8 = 6105
    STREAM_READ_FAILED = 6106


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: File path or resource the bytes came from
        offset: Byte offset at which a decode error was detected
        expected: Expected value (language code, byte count)
        found: Actual value found
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    offset: int | None = None
    expected: str | None = None
    found: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[LANGUAGE_MISMATCH]: Language mismatch: attempted to load ...
              --> dictionaries/fr.standard.bincode
              = expected: en-us
              = found: fr
              = help: The stream holds a dictionary for French [fr] ...

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
