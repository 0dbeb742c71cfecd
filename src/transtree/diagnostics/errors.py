"""TransTree exception hierarchy.

Hierarchy:
    TranslationError (base)
    ├─ MalformedTreeError (input cannot be modelled as a translation tree)
    │  └─ TreeDepthExceededError (nesting deeper than MAX_DEPTH)
    ├─ TranslationAPIError (remote answered with a non-success status)
    ├─ TranslationConnectionError (remote unreachable or timed out)
    ├─ LoadError (no tree obtainable for a language)
    └─ PartialSaveError (a save run stopped before every language was stored)

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transtree.saving.dispatcher import SaveSummary

__all__ = [
    "LoadError",
    "MalformedTreeError",
    "PartialSaveError",
    "TranslationAPIError",
    "TranslationConnectionError",
    "TranslationError",
    "TreeDepthExceededError",
]


class TranslationError(Exception):
    """Base exception for all TransTree errors."""


class MalformedTreeError(TranslationError):
    """Input cannot be represented as a translation tree.

    Raised at construction time for non-object roots, non-string keys,
    keys containing the path separator, duplicate keys, and cycles.

    Attributes:
        path: Dot-path of the offending node ("" for the root)
    """

    def __init__(self, message: str, path: str = "") -> None:
        """Initialize MalformedTreeError.

        Args:
            message: Human-readable error description
            path: Dot-path where the problem was detected
        """
        super().__init__(message)
        self.path = path


class TreeDepthExceededError(MalformedTreeError):
    """Raised when section nesting exceeds the configured depth limit."""


class TranslationAPIError(TranslationError):
    """Translation API answered with a non-success status.

    Attributes:
        status_code: HTTP status code (0 when not applicable)
        detail: Server-provided detail, if any
    """

    def __init__(self, message: str, status_code: int = 0, detail: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class TranslationConnectionError(TranslationError):
    """Translation API could not be reached or timed out."""


class LoadError(TranslationError):
    """No translation tree could be obtained for one or more languages.

    Attributes:
        languages: Languages that failed both remote and fallback resolution
    """

    def __init__(self, message: str, languages: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.languages = languages


class PartialSaveError(TranslationError):
    """A save run failed for one language.

    Languages stored before the failure remain stored; languages after it
    were not attempted. The per-language outcome is in ``summary``.

    Attributes:
        summary: SaveSummary with one result per requested language
    """

    def __init__(self, message: str, summary: SaveSummary) -> None:
        super().__init__(message)
        self.summary = summary
