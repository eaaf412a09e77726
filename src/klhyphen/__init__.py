"""klhyphen - loading of Knuth-Liang hyphenation dictionaries.

Deserializes precomputed hyphenation dictionaries from byte streams into
in-memory values for a hyphenation engine, and verifies that each loaded
dictionary belongs to the language the caller asked for.

Public API:
    load_verified - Load from a stream, checking the embedded language
    load_unverified - Load from a stream without a language check
    load_path - Load from a file, checking the embedded language
    load_embedded - Load from the embedded dictionary registry
    DictionaryLoader - Per-variant loader (STANDARD_LOADER, EXTENDED_LOADER)
    Standard, Extended - Dictionary variants
    Language, DictionaryKind - Enumerations

Exceptions:
    LoadError - Base exception class
    DeserializationError - Malformed, truncated or oversized data
    DictionaryIOError - Data could not be read
    LanguageMismatchError - Dictionary for another language
    ResourceError - Embedded dictionary not found

Submodules:
    klhyphen.codec - Binary wire format (ByteReader, decode_*, encode, dump)
    klhyphen.diagnostics - Diagnostic codes, templates and formatting
    klhyphen.embedded - Embedded dictionary registry
"""

from .constants import MAX_DICTIONARY_SIZE
from .diagnostics import (
    DeserializationError,
    DictionaryIOError,
    LanguageMismatchError,
    LoadError,
    LoadErrorKind,
    ResourceError,
)
from .dictionary import Extended, Standard
from .embedded import EmbeddedDictionaries, load_embedded
from .enums import DictionaryKind, Language
from .loading import (
    EXTENDED_LOADER,
    STANDARD_LOADER,
    DictionaryLoader,
    load_path,
    load_unverified,
    load_verified,
    loader_for,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("klhyphen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EXTENDED_LOADER",
    "MAX_DICTIONARY_SIZE",
    "STANDARD_LOADER",
    "DeserializationError",
    "DictionaryIOError",
    "DictionaryKind",
    "DictionaryLoader",
    "EmbeddedDictionaries",
    "Extended",
    "Language",
    "LanguageMismatchError",
    "LoadError",
    "LoadErrorKind",
    "ResourceError",
    "Standard",
    "__version__",
    "load_embedded",
    "load_path",
    "load_unverified",
    "load_verified",
    "loader_for",
]
