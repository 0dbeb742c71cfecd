"""Pytest configuration for the TransTree test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from transtree.tree import Section, parse_tree

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
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
    """Detect appropriate Hypothesis profile based on execution context."""
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
# SHARED FIXTURES
# =============================================================================


EN_DOCUMENT: dict[str, Any] = {
    "nav": {"home": "Home", "settings": "Settings"},
    "categories": {
        "title": "Categories",
        "actions": {"create": "Create category", "delete": "Delete"},
    },
    "common": {"save": "Save", "cancel": "Cancel"},
}

ES_DOCUMENT: dict[str, Any] = {
    "nav": {"home": "Inicio", "settings": "Ajustes"},
    "categories": {
        "title": "Categorías",
        "actions": {"create": "Crear categoría", "delete": "Eliminar"},
    },
    "common": {"save": "Guardar", "cancel": "Cancelar"},
}


@pytest.fixture
def en_tree() -> Section:
    return parse_tree(EN_DOCUMENT)


@pytest.fixture
def es_tree() -> Section:
    return parse_tree(ES_DOCUMENT)


@pytest.fixture
def bundle(en_tree: Section, es_tree: Section) -> dict[str, Section]:
    return {"en": en_tree, "es": es_tree}
