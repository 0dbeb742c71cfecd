"""Live i18n runtime interface.

The Save Dispatcher hot-swaps the active language's text resources through
this interface instead of reaching into a process-wide singleton, so any
runtime (a web framework's translation registry, a GUI's string table) can
be adapted with two methods.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from transtree.tree.types import LanguageCode

__all__ = ["DictRuntime", "I18nRuntime"]

logger = logging.getLogger(__name__)


class I18nRuntime(Protocol):
    """Running application's translation resources."""

    def get_active_language(self) -> LanguageCode:
        """Language the UI is currently rendered in."""

    def add_or_replace_bundle(self, language: LanguageCode, tree_data: dict[str, Any]) -> None:
        """Replace the in-memory resources for language with tree_data."""


class DictRuntime:
    """In-memory I18nRuntime holding one nested dict per language.

    Example:
        >>> runtime = DictRuntime("en")
        >>> runtime.add_or_replace_bundle("en", {"nav": {"home": "Home"}})
        >>> runtime.lookup("nav.home")
        'Home'
    """

    def __init__(self, active_language: LanguageCode, bundles: dict[LanguageCode, dict[str, Any]] | None = None) -> None:
        self.active_language = active_language
        self.bundles: dict[LanguageCode, dict[str, Any]] = dict(bundles or {})
        self.swap_count = 0

    def get_active_language(self) -> LanguageCode:
        return self.active_language

    def add_or_replace_bundle(self, language: LanguageCode, tree_data: dict[str, Any]) -> None:
        self.bundles[language] = tree_data
        self.swap_count += 1
        logger.debug("Replaced runtime bundle for %s", language)

    def lookup(self, path: str, language: LanguageCode | None = None) -> str | None:
        """Return the string at a dot-path in a language's bundle, or None."""
        node: Any = self.bundles.get(language or self.active_language)
        for segment in path.split("."):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node if isinstance(node, str) else None
