"""Translation sources: remote API, bundled fallbacks, and the resolver.

Submodules:
    client   - TranslationAPI protocol and HttpTranslationAPI (httpx)
    loading  - FallbackLoader protocol, PathFallbackLoader, DictFallbackLoader,
               LanguageLoadResult, ResolveResult
    resolver - SourceResolver (remote-first, fallback-second)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .client import HttpTranslationAPI, TranslationAPI
from .loading import (
    DictFallbackLoader,
    FallbackLoader,
    LanguageLoadResult,
    PathFallbackLoader,
    ResolveResult,
)
from .resolver import SourceResolver

__all__ = [
    # Resolver
    "SourceResolver",
    # Remote
    "TranslationAPI",
    "HttpTranslationAPI",
    # Fallbacks
    "FallbackLoader",
    "PathFallbackLoader",
    "DictFallbackLoader",
    # Results
    "LanguageLoadResult",
    "ResolveResult",
]
