"""Enumerations for TransTree type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Provenance(StrEnum):
    """Where a language's translation tree came from.

    StrEnum provides automatic string conversion: str(Provenance.REMOTE) == "remote"
    """

    REMOTE = "remote"
    """Fetched from the translation API."""

    FALLBACK = "fallback"
    """Read from the bundled local fallback document."""


class LoadStatus(StrEnum):
    """Outcome of resolving one language."""

    SUCCESS = "success"
    """Tree obtained (remote or fallback)."""

    ERROR = "error"
    """Neither remote nor fallback tree could be obtained."""


class SaveStatus(StrEnum):
    """Outcome of persisting one language."""

    SAVED = "saved"
    FAILED = "failed"
    SKIPPED = "skipped"
    """Not attempted because an earlier language failed."""


class StatusLevel(StrEnum):
    """Severity of a session status message."""

    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "LoadStatus",
    "Provenance",
    "SaveStatus",
    "StatusLevel",
]
