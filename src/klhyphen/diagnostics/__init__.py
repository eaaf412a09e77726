"""Diagnostic system for dictionary load errors.

Provides structured error diagnostics with codes, hints, byte offsets and
the LoadError exception hierarchy. Inspired by Rust compiler diagnostics.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, LoadErrorKind
from .errors import (
    DeserializationError,
    DictionaryIOError,
    LanguageMismatchError,
    LoadError,
    ResourceError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DeserializationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DictionaryIOError",
    "ErrorTemplate",
    "LanguageMismatchError",
    "LoadError",
    "LoadErrorKind",
    "OutputFormat",
    "ResourceError",
]
