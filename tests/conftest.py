"""Pytest configuration for klhyphen test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from klhyphen import Extended, Language, Standard
from klhyphen.codec import encode
from klhyphen.dictionary import Locus, Subregion

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SAMPLE DICTIONARIES
# =============================================================================


@pytest.fixture
def standard_en_us() -> Standard:
    """Small English (US) dictionary with a couple of real hyph-utf8 patterns."""
    return Standard(
        language=Language.ENGLISH_US,
        patterns={
            "hy3ph": (Locus(2, 3),),
            "he2n": (Locus(2, 2),),
            "hena4": (Locus(4, 4),),
            "hen5at": (Locus(3, 5),),
            "1na": (Locus(0, 1),),
            "n2at": (Locus(1, 2),),
            "1tio": (Locus(0, 1),),
            "2io": (Locus(0, 2),),
            "o2n": (Locus(1, 2),),
        },
        exceptions={"project": (3,), "associate": (2, 5)},
        minima=(2, 3),
    )


@pytest.fixture
def extended_de_1996() -> Extended:
    """Small German dictionary with one subregion alteration ("ck" -> "k-k")."""
    return Extended(
        language=Language.GERMAN_1996,
        patterns={
            "c1k": ((Locus(1, 1),), Subregion(1, 1, "kk", 1)),
            "1ba": ((Locus(0, 1),), None),
        },
        exceptions={"zucker": ((3,), Subregion(1, 1, "kk", 1))},
        minima=(2, 2),
    )


@pytest.fixture
def standard_bytes(standard_en_us: Standard) -> bytes:
    """Encoded form of the English (US) sample."""
    return encode(standard_en_us)


@pytest.fixture
def extended_bytes(extended_de_1996: Extended) -> bytes:
    """Encoded form of the German sample."""
    return encode(extended_de_1996)


@pytest.fixture
def dictionary_dir(tmp_path: Path, standard_bytes: bytes, extended_bytes: bytes) -> Path:
    """Directory laid out like an embedded resource root."""
    (tmp_path / "en-us.standard.bincode").write_bytes(standard_bytes)
    (tmp_path / "de-1996.extended.bincode").write_bytes(extended_bytes)
    return tmp_path
