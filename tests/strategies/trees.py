"""Hypothesis strategies for translation trees and flat lists.

Provides reusable strategies for generating editing test data:
- Plain JSON-shaped translation documents
- Bundles of per-language trees sharing one key schema
- Language selections

Event-Emitting Strategies (HypoFuzz-Optimized):
- translation_documents: Emits tree_shape=flat|nested|empty
- shared_schema_bundles: Emits bundle_languages=N

Python 3.13+.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

from hypothesis import event
from hypothesis import strategies as st

from transtree.tree import Section, parse_tree

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

LANGUAGE_POOL = ["en", "es", "fr", "de", "lv", "ja", "pt-BR"]

# Keys never contain the path separator
_KEY_CHARS = string.ascii_letters + string.digits + "_-"

translation_keys: SearchStrategy[str] = st.text(alphabet=_KEY_CHARS, min_size=1, max_size=10)

translation_texts: SearchStrategy[str] = st.text(max_size=24)


@st.composite
def translation_documents(draw: DrawFn, max_leaves: int = 25) -> dict[str, Any]:
    """Generate nested dict/str documents as decoded from JSON.

    Events emitted:
    - tree_shape=flat|nested|empty
    """
    node = st.recursive(
        translation_texts,
        lambda children: st.dictionaries(translation_keys, children, max_size=4),
        max_leaves=max_leaves,
    )
    document = draw(st.dictionaries(translation_keys, node, max_size=5))
    if not document:
        shape = "empty"
    elif any(isinstance(value, dict) for value in document.values()):
        shape = "nested"
    else:
        shape = "flat"
    event(f"tree_shape={shape}")
    return document


@st.composite
def language_lists(draw: DrawFn, min_size: int = 1, max_size: int = 4) -> list[str]:
    """Generate unique, ordered language selections."""
    return draw(st.lists(st.sampled_from(LANGUAGE_POOL), min_size=min_size, max_size=max_size, unique=True))


def _relabel(draw: DrawFn, document: dict[str, Any]) -> dict[str, Any]:
    return {
        key: _relabel(draw, value) if isinstance(value, dict) else draw(translation_texts)
        for key, value in document.items()
    }


@st.composite
def shared_schema_bundles(
    draw: DrawFn,
    min_languages: int = 1,
    max_languages: int = 4,
) -> tuple[dict[str, Section], list[str]]:
    """Generate a bundle whose languages share one key schema.

    Leaf texts differ per language; keys and key order do not.

    Events emitted:
    - bundle_languages=N
    """
    schema = draw(translation_documents())
    languages = draw(language_lists(min_size=min_languages, max_size=max_languages))
    bundle = {lang: parse_tree(_relabel(draw, schema)) for lang in languages}
    event(f"bundle_languages={len(languages)}")
    return bundle, languages
