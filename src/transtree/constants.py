"""Shared constants for TransTree.

This module provides centralized configuration constants used across
the tree, editing, and source packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing/serialization
- Paths: Dot-path rendering
- Sources: Remote endpoint and fallback defaults
- Session: Status message lifetime

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Paths
    "PATH_SEPARATOR",
    # Sources
    "DEFAULT_LANGUAGES",
    "DEFAULT_FALLBACK_LANGUAGE",
    "DEFAULT_FALLBACK_PATH",
    "DEFAULT_TIMEOUT",
    "TRANSLATIONS_ENDPOINT",
    "LANGUAGES_ENDPOINT",
    # Session
    "STATUS_DISMISS_SECONDS",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of sections inside one translation tree.
# Real translation files rarely exceed 5 levels; anything beyond 100 is
# treated as malformed input and rejected at parse time.
MAX_DEPTH: int = 100

# ============================================================================
# PATHS
# ============================================================================

# Separator used to render a key chain as a dot-path ("categories.title").
# Keys containing the separator are rejected by parse_tree.
PATH_SEPARATOR: str = "."

# ============================================================================
# SOURCES
# ============================================================================

# Languages offered when the remote language list cannot be fetched.
DEFAULT_LANGUAGES: tuple[str, ...] = ("en", "es")

# Bundled document used for a language that ships no fallback of its own.
DEFAULT_FALLBACK_LANGUAGE: str = "en"

# Path template for bundled fallback documents.
DEFAULT_FALLBACK_PATH: str = "locales/{locale}/translation.json"

# HTTP timeout in seconds for the translation API client.
DEFAULT_TIMEOUT: float = 30.0

TRANSLATIONS_ENDPOINT: str = "/translations/{language}"
LANGUAGES_ENDPOINT: str = "/translations/languages"

# ============================================================================
# SESSION
# ============================================================================

# Seconds after which a status banner is considered dismissed.
STATUS_DISMISS_SECONDS: float = 5.0
