"""Bundled fallback documents and per-language load results.

Provides the protocol for local fallback loaders, a filesystem
implementation with path-traversal protection, an in-memory implementation,
and the immutable result types produced by the Source Resolver.

Components:
    FallbackLoader - Protocol for loading a bundled document for a language
    PathFallbackLoader - JSON files on disk addressed by a path template
    DictFallbackLoader - Documents held in memory (packaged data, tests)
    LanguageLoadResult - Outcome of resolving one language
    ResolveResult - Bundle plus per-language results of one resolve() call

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from transtree.enums import LoadStatus, Provenance
from transtree.tree.types import LanguageCode, Section

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "FallbackLoader",
    # Concrete loaders
    "PathFallbackLoader",
    "DictFallbackLoader",
    # Result types
    "LanguageLoadResult",
    "ResolveResult",
]


class FallbackLoader(Protocol):
    """Protocol for loading a bundled translation document.

    This is a Protocol (structural typing) rather than ABC so applications can
    serve fallback documents from package data, a database, or memory.

    Example:
        >>> class PackagedLoader:
        ...     def load(self, language: str) -> Any:
        ...         return json.loads(files("myapp.locales").joinpath(f"{language}.json").read_text())
    """

    def load(self, language: LanguageCode) -> Any:
        """Load the decoded JSON document for language.

        Raises:
            FileNotFoundError: If no document is bundled for this language
            OSError: If the document cannot be read
            ValueError: If the document is not valid JSON
        """


@dataclass(frozen=True, slots=True)
class PathFallbackLoader:
    """File system loader for bundled JSON translation documents.

    Uses a {locale} placeholder in the path template for language substitution.

    Security:
        Language codes containing path separators or ".." are rejected.
        Resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathFallbackLoader("locales/{locale}/translation.json")
        >>> tree_data = loader.load("es")
        # Reads: locales/es/translation.json

    Attributes:
        path_template: Path template with {locale} placeholder
        root_dir: Fixed root directory for traversal validation.
                  Defaults to the static prefix of path_template.
    """

    path_template: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If path_template does not contain {locale} placeholder
        """
        if "{locale}" not in self.path_template:
            msg = (
                f"path_template must contain '{{locale}}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.path_template.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_language(language: LanguageCode) -> None:
        if not language:
            msg = "Language code cannot be empty"
            raise ValueError(msg)
        if ".." in language:
            msg = f"Path traversal sequences not allowed in language: '{language}'"
            raise ValueError(msg)
        if "/" in language or "\\" in language:
            msg = f"Path separators not allowed in language: '{language}'"
            raise ValueError(msg)

    def describe_path(self, language: LanguageCode) -> str:
        """Return the path a language's document is read from."""
        return self.path_template.replace("{locale}", language)

    def load(self, language: LanguageCode) -> Any:
        """Read and decode the JSON document for language.

        Raises:
            ValueError: If language is unsafe, the path escapes root_dir, or
                        the file is not valid JSON
            FileNotFoundError: If the file doesn't exist
        """
        self._validate_language(language)
        full_path = Path(self.describe_path(language)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory. language='{language}'"
            raise ValueError(msg) from None
        return json.loads(full_path.read_text(encoding="utf-8"))


@dataclass(frozen=True, slots=True)
class DictFallbackLoader:
    """In-memory fallback documents keyed by language.

    Attributes:
        documents: Decoded JSON document per language
    """

    documents: Mapping[LanguageCode, Any]

    def load(self, language: LanguageCode) -> Any:
        """Return the document for language.

        Raises:
            FileNotFoundError: If no document is held for this language
        """
        try:
            return self.documents[language]
        except KeyError:
            msg = f"No bundled translations for language '{language}'"
            raise FileNotFoundError(msg) from None


@dataclass(frozen=True, slots=True)
class LanguageLoadResult:
    """Outcome of resolving one language.

    Attributes:
        language: Requested language
        status: SUCCESS if a tree was obtained, ERROR otherwise
        provenance: Where the tree came from (None on ERROR)
        remote_error: Why the remote fetch failed (None if remote succeeded)
        error: Why the fallback failed too (ERROR only)
        substitute: Language whose bundled document stood in, if different
    """

    language: LanguageCode
    status: LoadStatus
    provenance: Provenance | None = None
    remote_error: Exception | None = None
    error: Exception | None = None
    substitute: LanguageCode | None = None

    @property
    def is_success(self) -> bool:
        """Check if a tree was obtained."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_remote(self) -> bool:
        """Check if the tree came from the translation API."""
        return self.provenance == Provenance.REMOTE

    @property
    def is_fallback(self) -> bool:
        """Check if the tree came from a bundled document."""
        return self.provenance == Provenance.FALLBACK


@dataclass(frozen=True, slots=True)
class ResolveResult:
    """Bundle and diagnostics from one resolve() call.

    Languages whose resolution failed entirely are absent from ``bundle``.

    Attributes:
        bundle: Resolved tree per language, in request order
        results: One LanguageLoadResult per requested language
    """

    bundle: Mapping[LanguageCode, Section]
    results: tuple[LanguageLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"ResolveResult(languages={len(self.results)}, "
            f"remote={len(self.get_remote())}, "
            f"fallback={len(self.get_fallback())}, "
            f"errors={len(self.get_errors())})"
        )

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Requested languages in order."""
        return tuple(r.language for r in self.results)

    @property
    def provenance(self) -> dict[LanguageCode, Provenance]:
        """Provenance per successfully resolved language."""
        return {r.language: r.provenance for r in self.results if r.provenance is not None}

    @property
    def all_resolved(self) -> bool:
        """Check if every requested language has a tree."""
        return all(r.is_success for r in self.results)

    def get_errors(self) -> tuple[LanguageLoadResult, ...]:
        """Results for languages with no tree at all."""
        return tuple(r for r in self.results if not r.is_success)

    def get_remote(self) -> tuple[LanguageLoadResult, ...]:
        """Results for languages served by the translation API."""
        return tuple(r for r in self.results if r.is_remote)

    def get_fallback(self) -> tuple[LanguageLoadResult, ...]:
        """Results for languages served from bundled documents."""
        return tuple(r for r in self.results if r.is_fallback)
