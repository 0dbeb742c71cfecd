"""Error types for TransTree.

Python 3.13+.
"""

from .errors import (
    LoadError,
    MalformedTreeError,
    PartialSaveError,
    TranslationAPIError,
    TranslationConnectionError,
    TranslationError,
    TreeDepthExceededError,
)

__all__ = [
    "LoadError",
    "MalformedTreeError",
    "PartialSaveError",
    "TranslationAPIError",
    "TranslationConnectionError",
    "TranslationError",
    "TreeDepthExceededError",
]
