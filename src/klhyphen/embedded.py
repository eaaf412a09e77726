"""Registry of dictionaries embedded as package resources.

Dictionaries may be shipped inside an installed package (by default
``klhyphen/dictionaries``) as ``{code}.{kind}.bincode`` files. The registry
resolves a language and variant to such a resource and performs a verified
load on it. It is the only component that raises ResourceError.

No dictionary files are bundled with klhyphen itself; applications point the
registry at their own resource directory or populate the default one.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from typing import TYPE_CHECKING

from klhyphen.constants import DICTIONARY_EXTENSION, EMBEDDED_DIRECTORY, EMBEDDED_PACKAGE
from klhyphen.diagnostics import DictionaryIOError, ResourceError
from klhyphen.enums import DictionaryKind, Language
from klhyphen.loading import loader_for

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from klhyphen.dictionary import Extended, Standard

__all__ = [
    "EmbeddedDictionaries",
    "dictionary_filename",
    "load_embedded",
]

logger = logging.getLogger(__name__)


def dictionary_filename(language: Language, kind: DictionaryKind) -> str:
    """File name of a dictionary, e.g. "en-us.standard.bincode"."""
    return f"{language.code}.{kind.value}.{DICTIONARY_EXTENSION}"


def _default_root() -> Traversable:
    return resources.files(EMBEDDED_PACKAGE).joinpath(EMBEDDED_DIRECTORY)


@dataclass(frozen=True, slots=True)
class EmbeddedDictionaries:
    """Lookup of dictionaries under a resource root.

    Attributes:
        root: Directory holding dictionary files (Traversable or Path).
              Defaults to the ``dictionaries`` directory of this package.
    """

    root: Traversable = field(default_factory=_default_root)

    def locate(self, language: Language, variant: type[Standard | Extended]) -> Traversable:
        """Return the resource holding the requested dictionary.

        Raises:
            ResourceError: If no such resource exists under the root
        """
        kind = variant.KIND
        resource = self.root.joinpath(dictionary_filename(language, kind))
        if not resource.is_file():
            logger.debug("No embedded %s dictionary for '%s' at %s", kind, language, resource)
            raise ResourceError(language, kind, location=str(resource))
        return resource

    def load[D: (Standard, Extended)](self, language: Language, variant: type[D]) -> D:
        """Load the embedded dictionary for ``language``, verifying its language.

        Raises:
            ResourceError: If the dictionary is not embedded
            DictionaryIOError: If the resource could not be read
            DeserializationError: If the resource is malformed
            LanguageMismatchError: If the resource holds another language
        """
        resource = self.locate(language, variant)
        location = str(resource)
        try:
            stream = resource.open("rb")
        except OSError as e:
            raise DictionaryIOError.from_os_error(e, location=location) from e
        with stream:
            return loader_for(variant).from_reader(language, stream, location=location)

    def available(self, variant: type[Standard | Extended]) -> list[Language]:
        """Languages for which a ``variant`` dictionary is present, in tag order."""
        if not self.root.is_dir():
            return []
        names = {entry.name for entry in self.root.iterdir() if entry.is_file()}
        return [
            language
            for language in Language
            if dictionary_filename(language, variant.KIND) in names
        ]


def load_embedded[D: (Standard, Extended)](language: Language, variant: type[D]) -> D:
    """Load a dictionary from the default embedded registry.

    See EmbeddedDictionaries.load.
    """
    return EmbeddedDictionaries().load(language, variant)
