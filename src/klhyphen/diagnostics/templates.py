"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from klhyphen.locale_utils import language_display_name

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from klhyphen.enums import Language

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Load errors
    # ------------------------------------------------------------------

    @staticmethod
    def deserialization_failed(
        reason: str, *, offset: int | None = None, location: str | None = None
    ) -> Diagnostic:
        """Encoded dictionary could not be decoded.

        Args:
            reason: Message of the underlying decode error
            offset: Byte offset where decoding stopped
            location: Path or resource name, if known

        Returns:
            Diagnostic for DESERIALIZATION_FAILED
        """
        msg = f"Dictionary could not be deserialized: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DESERIALIZATION_FAILED,
            message=msg,
            hint="The data is not a complete dictionary of the requested kind; "
            "regenerate it or check that it was not truncated",
            location=location,
            offset=offset,
        )

    @staticmethod
    def io_failed(
        reason: str, *, offset: int | None = None, location: str | None = None
    ) -> Diagnostic:
        """Dictionary bytes could not be read.

        Args:
            reason: Message of the underlying stream failure
            offset: Byte offset at which the stream failed, if known
            location: Path or resource name, if known

        Returns:
            Diagnostic for IO_FAILED
        """
        msg = f"Dictionary could not be read: {reason}"
        return Diagnostic(
            code=DiagnosticCode.IO_FAILED,
            message=msg,
            hint="Check that the dictionary file exists and is readable",
            location=location,
            offset=offset,
        )

    @staticmethod
    def language_mismatch(
        expected: Language, found: Language, *, location: str | None = None
    ) -> Diagnostic:
        """Dictionary decoded fine but belongs to another language.

        Args:
            expected: Language the caller asked for
            found: Language embedded in the dictionary

        Returns:
            Diagnostic for LANGUAGE_MISMATCH
        """
        msg = (
            f"Language mismatch: attempted to load a dictionary for `{expected.code}`, "
            f"but found a dictionary for `{found.code}` instead."
        )
        hint = (
            f"The data holds a dictionary for {language_display_name(found)} [{found.code}]; "
            f"load the {language_display_name(expected)} [{expected.code}] dictionary instead"
        )
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_MISMATCH,
            message=msg,
            hint=hint,
            location=location,
            expected=expected.code,
            found=found.code,
        )

    @staticmethod
    def resource_missing(
        code: str, kind: str, *, location: str | None = None
    ) -> Diagnostic:
        """Embedded dictionary not present in the resource root.

        Args:
            code: Language code that was requested
            kind: Dictionary kind that was requested

        Returns:
            Diagnostic for RESOURCE_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_MISSING,
            message="The embedded dictionary could not be retrieved",
            hint=f"No {kind} dictionary for '{code}' is bundled; load it from a path instead",
            location=location,
            expected=f"{code}.{kind}",
        )

    # ------------------------------------------------------------------
    # Decode errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(offset: int, needed: int, available: int) -> Diagnostic:
        """Stream ended in the middle of a value.

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = (
            f"Unexpected end of input at byte {offset}: "
            f"needed {needed} byte(s), got {available}"
        )
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            offset=offset,
            expected=str(needed),
            found=str(available),
        )

    @staticmethod
    def size_limit_exceeded(offset: int, requested: int, limit: int) -> Diagnostic:
        """Reading would take the payload past the size ceiling.

        Returns:
            Diagnostic for SIZE_LIMIT_EXCEEDED
        """
        msg = (
            f"Size limit exceeded at byte {offset}: "
            f"{requested} more byte(s) requested, limit is {limit}"
        )
        return Diagnostic(
            code=DiagnosticCode.SIZE_LIMIT_EXCEEDED,
            message=msg,
            hint="Dictionaries larger than the limit are rejected to bound memory use",
            offset=offset,
            expected=f"<= {limit}",
            found=str(offset + requested),
        )

    @staticmethod
    def unknown_language_tag(offset: int, tag: int, known: int) -> Diagnostic:
        """Language tag outside the enumeration.

        Returns:
            Diagnostic for UNKNOWN_LANGUAGE_TAG
        """
        msg = f"Unknown language tag {tag} at byte {offset} (expected 0..{known - 1})"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LANGUAGE_TAG,
            message=msg,
            offset=offset,
            found=str(tag),
        )

    @staticmethod
    def invalid_option_tag(offset: int, tag: int) -> Diagnostic:
        """Option discriminant other than 0 or 1.

        Returns:
            Diagnostic for INVALID_OPTION_TAG
        """
        msg = f"Invalid option tag {tag} at byte {offset} (expected 0 or 1)"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPTION_TAG,
            message=msg,
            offset=offset,
            found=str(tag),
        )

    @staticmethod
    def invalid_utf8(offset: int, reason: str) -> Diagnostic:
        """String payload is not valid UTF-8.

        Returns:
            Diagnostic for INVALID_UTF8
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_UTF8,
            message=f"Invalid UTF-8 in string at byte {offset}: {reason}",
            offset=offset,
        )

    @staticmethod
    def stream_read_failed(offset: int, error: Exception) -> Diagnostic:
        """Stream raised a non-OSError exception while bytes were pulled from it.

        Returns:
            Diagnostic for STREAM_READ_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.STREAM_READ_FAILED,
            message=f"Stream failed at byte {offset}: {type(error).__name__}: {error}",
            offset=offset,
        )
