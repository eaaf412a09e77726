"""Dictionary load exception hierarchy with structured diagnostics.

Every failure of a load operation is raised as exactly one of four @final
subclasses of LoadError, one per LoadErrorKind. Callers can match on the
class or on ``error.kind``; both identify the stage that failed.

Hierarchy:
    LoadError (base)
    ├─ DeserializationError (malformed, truncated or oversized data)
    ├─ DictionaryIOError (stream could not be read)
    ├─ LanguageMismatchError (valid dictionary, wrong language)
    └─ ResourceError (embedded dictionary not found)

Errors are immutable after construction (see klhyphen.integrity).

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, final

from klhyphen.integrity import (
    PYTHON_EXCEPTION_ATTRS,
    ImmutabilityViolationError,
    IntegrityContext,
)

from .codes import Diagnostic, LoadErrorKind
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from klhyphen.codec.errors import DecodeError, StreamReadError
    from klhyphen.enums import DictionaryKind, Language

__all__ = [
    "DeserializationError",
    "DictionaryIOError",
    "LanguageMismatchError",
    "LoadError",
    "ResourceError",
]


class LoadError(Exception):
    """Base exception for all dictionary load failures.

    The exception message is the Rust-style rendering of the diagnostic, so
    ``str(error)`` is ready for display. Use ``error.message`` for the
    single-line summary.

    Attributes:
        kind: Stage that failed (class attribute)
        diagnostic: Structured diagnostic information
        cause: Underlying exception for I/O and decode failures, else None
    """

    __slots__ = ("_cause", "_diagnostic", "_frozen")

    kind: ClassVar[LoadErrorKind]

    _diagnostic: Diagnostic
    _cause: BaseException | None
    _frozen: bool

    def __init__(self, diagnostic: Diagnostic, *, cause: BaseException | None = None) -> None:
        """Initialize LoadError.

        Args:
            diagnostic: Diagnostic describing the failure
            cause: Underlying exception, chained as __cause__
        """
        super().__init__(diagnostic.format_error())
        object.__setattr__(self, "_diagnostic", diagnostic)
        object.__setattr__(self, "_cause", cause)
        if cause is not None:
            self.__cause__ = cause
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify load error attribute: {name}"
            raise ImmutabilityViolationError(msg, IntegrityContext("errors", "setattr", name))
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete load error attribute: {name}"
        raise ImmutabilityViolationError(msg, IntegrityContext("errors", "delattr", name))

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured diagnostic."""
        return self._diagnostic

    @property
    def cause(self) -> BaseException | None:
        """Underlying exception (stream failure or DecodeError), if any."""
        return self._cause

    @property
    def message(self) -> str:
        """Single-line summary of the failure."""
        return self._diagnostic.message

    @property
    def location(self) -> str | None:
        """Path or resource the bytes came from, if known."""
        return self._diagnostic.location

    def format_error(self) -> str:
        """Rust-style multi-line rendering (same as str(error))."""
        return self._diagnostic.format_error()

    def __reduce__(self) -> tuple[Any, ...]:
        """Pickle by diagnostic, cause and subclass fields.

        ``args`` only holds the rendered message, which the constructors
        cannot take back.
        """
        fields = {
            name: getattr(self, name)
            for klass in type(self).__mro__
            for name in klass.__dict__.get("__slots__", ())
            if name not in LoadError.__slots__
        }
        return (_restore_load_error, (type(self), self._diagnostic, self._cause, fields))

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, kind={self.kind.value!r})"


def _restore_load_error(
    cls: type[LoadError],
    diagnostic: Diagnostic,
    cause: BaseException | None,
    fields: dict[str, object],
) -> LoadError:
    error = cls.__new__(cls)
    for name, value in fields.items():
        object.__setattr__(error, name, value)
    LoadError.__init__(error, diagnostic, cause=cause)
    return error


@final
class DeserializationError(LoadError):
    """The dictionary could not be deserialized.

    Raised for malformed encodings, truncated streams and payloads that
    exceed the size ceiling. ``cause`` is the DecodeError.
    """

    __slots__ = ()

    kind = LoadErrorKind.DESERIALIZATION

    @classmethod
    def from_decode_error(
        cls, error: DecodeError, *, location: str | None = None
    ) -> DeserializationError:
        """Convert a raw decode failure, keeping it as the cause.

        Args:
            error: Decode error raised by the codec
            location: Path or resource name, if known

        Returns:
            DeserializationError chaining ``error``
        """
        diagnostic = ErrorTemplate.deserialization_failed(
            error.diagnostic.message, offset=error.offset, location=location
        )
        return cls(diagnostic, cause=error)


@final
class DictionaryIOError(LoadError):
    """The dictionary could not be read.

    Raised when opening the file fails or the stream raises while bytes are
    pulled from it. ``cause`` is the OSError, or the exception a
    decompression wrapper or closed stream raised instead.
    """

    __slots__ = ()

    kind = LoadErrorKind.IO

    @classmethod
    def from_os_error(
        cls, error: OSError, *, location: str | None = None
    ) -> DictionaryIOError:
        """Convert a raw I/O failure, keeping it as the cause.

        Args:
            error: OSError raised while opening or reading
            location: Path or resource name; defaults to ``error.filename``

        Returns:
            DictionaryIOError chaining ``error``
        """
        if location is None and error.filename is not None:
            location = str(error.filename)
        return cls(ErrorTemplate.io_failed(str(error), location=location), cause=error)

    @classmethod
    def from_stream_error(
        cls, error: StreamReadError, *, location: str | None = None
    ) -> DictionaryIOError:
        """Convert a non-OSError stream failure; the stream's exception becomes the cause.

        Args:
            error: Wrapper raised by ByteReader
            location: Path or resource name, if known

        Returns:
            DictionaryIOError chaining ``error.original``
        """
        diagnostic = ErrorTemplate.io_failed(
            error.diagnostic.message, offset=error.offset, location=location
        )
        return cls(diagnostic, cause=error.original)


@final
class LanguageMismatchError(LoadError):
    """The loaded dictionary is for the wrong language.

    Attributes:
        expected: Language the caller asked for
        found: Language embedded in the dictionary
    """

    __slots__ = ("_expected", "_found")

    kind = LoadErrorKind.LANGUAGE_MISMATCH

    _expected: Language
    _found: Language

    def __init__(
        self, expected: Language, found: Language, *, location: str | None = None
    ) -> None:
        """Initialize LanguageMismatchError.

        Args:
            expected: Language the caller asked for
            found: Language embedded in the dictionary
            location: Path or resource name, if known
        """
        # Must set these before calling super().__init__ which freezes
        object.__setattr__(self, "_expected", expected)
        object.__setattr__(self, "_found", found)
        super().__init__(ErrorTemplate.language_mismatch(expected, found, location=location))

    @property
    def expected(self) -> Language:
        """Language the caller asked for."""
        return self._expected

    @property
    def found(self) -> Language:
        """Language embedded in the dictionary."""
        return self._found

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"LanguageMismatchError(expected={self._expected.code!r}, "
            f"found={self._found.code!r})"
        )


@final
class ResourceError(LoadError):
    """The embedded dictionary could not be retrieved.

    Raised only by the embedded dictionary registry; stream and path loads
    never produce it.
    """

    __slots__ = ("_dictionary_kind", "_language")

    kind = LoadErrorKind.RESOURCE

    _language: Language
    _dictionary_kind: DictionaryKind

    def __init__(
        self,
        language: Language,
        dictionary_kind: DictionaryKind,
        *,
        location: str | None = None,
    ) -> None:
        """Initialize ResourceError.

        Args:
            language: Language that was requested
            dictionary_kind: Dictionary kind that was requested
            location: Resource path that was probed
        """
        object.__setattr__(self, "_language", language)
        object.__setattr__(self, "_dictionary_kind", dictionary_kind)
        super().__init__(
            ErrorTemplate.resource_missing(
                language.code, dictionary_kind.value, location=location
            )
        )

    @property
    def language(self) -> Language:
        """Language that was requested."""
        return self._language

    @property
    def dictionary_kind(self) -> DictionaryKind:
        """Dictionary kind that was requested."""
        return self._dictionary_kind
