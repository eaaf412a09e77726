"""Quickstart example for klhyphen.

This example demonstrates loading hyphenation dictionaries from streams and
files, and how each kind of load failure is reported.

Note: The dictionaries here are tiny hand-built samples. Real dictionaries are
compiled from hyph-utf8 TeX patterns by a separate build step.
"""

import io
import tempfile
from pathlib import Path

from klhyphen import (
    DeserializationError,
    DictionaryIOError,
    EmbeddedDictionaries,
    Extended,
    Language,
    LanguageMismatchError,
    LoadError,
    ResourceError,
    Standard,
    load_path,
    load_unverified,
    load_verified,
    loader_for,
)
from klhyphen.codec import encode
from klhyphen.dictionary import Locus, Subregion

# Example 1: Verified load from a stream
print("=" * 50)
print("Example 1: Verified Load")
print("=" * 50)

english = Standard(
    Language.ENGLISH_US,
    patterns={"hy3ph": (Locus(2, 3),), "he2n": (Locus(2, 2),)},
    exceptions={"project": (3,)},
    minima=(2, 3),
)
data = encode(english)

loaded = load_verified(Language.ENGLISH_US, io.BytesIO(data), Standard)
print(f"{loaded.language.code}: {len(loaded.patterns)} patterns, minima {loaded.minima}")
# Output: en-us: 2 patterns, minima (2, 3)

# Example 2: Wrong language
print("\n" + "=" * 50)
print("Example 2: Language Mismatch")
print("=" * 50)

try:
    load_verified(Language.FRENCH, io.BytesIO(data), Standard)
except LanguageMismatchError as e:
    print(f"expected={e.expected.code} found={e.found.code}")
    print(e)

# Example 3: Unverified load
print("\n" + "=" * 50)
print("Example 3: Unverified Load")
print("=" * 50)

anything = load_unverified(io.BytesIO(data), Standard)
print(f"Stream held a dictionary for {anything.language.code}")

# Example 4: Extended dictionaries and files
print("\n" + "=" * 50)
print("Example 4: Extended Dictionary From a File")
print("=" * 50)

german = Extended(
    Language.GERMAN_1901,
    patterns={"c1k": ((Locus(1, 1),), Subregion(1, 1, "kk", 1))},
    minima=(2, 2),
)

with tempfile.TemporaryDirectory() as tmpdir:
    path = Path(tmpdir) / "de-1901.extended.bincode"
    path.write_bytes(encode(german))
    print(load_path(Language.GERMAN_1901, path, Extended).patterns["c1k"])

    # The same directory works as a registry root
    registry = EmbeddedDictionaries(Path(tmpdir))
    print(f"Available extended: {[lang.code for lang in registry.available(Extended)]}")
    try:
        registry.load(Language.GERMAN_1996, Extended)
    except ResourceError as e:
        print(f"{e.kind}: {e.message}")

# Example 5: Failure kinds
print("\n" + "=" * 50)
print("Example 5: Failure Kinds")
print("=" * 50)

failures = [
    lambda: load_verified(Language.ENGLISH_US, io.BytesIO(data[:10]), Standard),
    lambda: load_verified(Language.ENGLISH_US, io.BytesIO(data), Extended),
    lambda: load_path(Language.ENGLISH_US, "/nonexistent/en-us.standard.bincode", Standard),
    lambda: loader_for(Standard, max_size=16).from_reader(Language.ENGLISH_US, io.BytesIO(data)),
]
for attempt in failures:
    try:
        attempt()
    except (DeserializationError, DictionaryIOError) as e:
        print(f"{type(e).__name__} [{e.kind}]: {e.message}")
    except LoadError as e:
        print(f"Unexpected: {e!r}")
