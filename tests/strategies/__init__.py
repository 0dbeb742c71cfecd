"""Hypothesis strategies and test doubles for TransTree tests.

- trees: translation documents, shared-schema bundles, language selections
- sources: in-memory TranslationAPI implementations

Usage:
    from tests.strategies.trees import shared_schema_bundles, translation_documents
    from tests.strategies.sources import FakeTranslationAPI
"""

from .sources import FakeTranslationAPI, GatedTranslationAPI
from .trees import (
    LANGUAGE_POOL,
    language_lists,
    shared_schema_bundles,
    translation_documents,
    translation_keys,
    translation_texts,
)

__all__ = [
    "LANGUAGE_POOL",
    "FakeTranslationAPI",
    "GatedTranslationAPI",
    "language_lists",
    "shared_schema_bundles",
    "translation_documents",
    "translation_keys",
    "translation_texts",
]
