"""Remote-first, fallback-second resolution of translation trees.

For every requested language the resolver awaits a remote fetch and parses
the payload. Any failure on that path (transport error, error status,
malformed payload) is logged as a warning and the language's bundled
fallback document is used instead. A language with no bundled document of
its own borrows the fallback language's document when one is configured.

resolve() never raises: a language for which even the fallback fails is
reported with LoadStatus.ERROR and left out of the bundle, so the caller can
decide whether a partial bundle is acceptable.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from transtree.constants import DEFAULT_FALLBACK_LANGUAGE, DEFAULT_LANGUAGES
from transtree.enums import LoadStatus, Provenance
from transtree.sources.client import TranslationAPI
from transtree.sources.loading import FallbackLoader, LanguageLoadResult, ResolveResult
from transtree.tree.parsing import parse_tree
from transtree.tree.types import LanguageCode, Section

__all__ = ["SourceResolver"]

logger = logging.getLogger(__name__)


class SourceResolver:
    """Obtains one translation tree per language.

    Example:
        >>> resolver = SourceResolver(
        ...     HttpTranslationAPI("https://admin.example.com/api"),
        ...     PathFallbackLoader("locales/{locale}/translation.json"),
        ... )
        >>> result = await resolver.resolve(["en", "es"])
        >>> result.provenance
        {'en': <Provenance.REMOTE: 'remote'>, 'es': <Provenance.FALLBACK: 'fallback'>}
    """

    __slots__ = ("_api", "_default_languages", "_fallback_language", "_fallback_loader")

    def __init__(
        self,
        api: TranslationAPI | None,
        fallback_loader: FallbackLoader,
        *,
        fallback_language: LanguageCode | None = DEFAULT_FALLBACK_LANGUAGE,
        default_languages: Iterable[LanguageCode] = DEFAULT_LANGUAGES,
    ) -> None:
        """Initialize the resolver.

        Args:
            api: Remote translation API; None resolves from fallbacks only
            fallback_loader: Source of bundled documents
            fallback_language: Language whose bundled document stands in for
                               languages that ship none (None disables)
            default_languages: Returned by available_languages() when the
                               remote list cannot be fetched
        """
        self._api = api
        self._fallback_loader = fallback_loader
        self._fallback_language = fallback_language
        self._default_languages = tuple(default_languages)

    @property
    def api(self) -> TranslationAPI | None:
        """Remote translation API, if any."""
        return self._api

    async def resolve(self, languages: Iterable[LanguageCode]) -> ResolveResult:
        """Resolve a tree for each language, sequentially and independently.

        Args:
            languages: Requested languages; duplicates are resolved once

        Returns:
            ResolveResult with the bundle and one result per language
        """
        bundle: dict[LanguageCode, Section] = {}
        results: list[LanguageLoadResult] = []
        for language in dict.fromkeys(languages):
            result, tree = await self._resolve_one(language)
            results.append(result)
            if tree is not None:
                bundle[language] = tree

        resolved = ResolveResult(bundle=bundle, results=tuple(results))
        logger.info("Resolved translations: %r", resolved)
        return resolved

    async def _resolve_one(self, language: LanguageCode) -> tuple[LanguageLoadResult, Section | None]:
        remote_error: Exception | None = None
        if self._api is not None:
            try:
                tree = parse_tree(await self._api.fetch(language))
            except Exception as e:  # noqa: BLE001 - any remote failure degrades to fallback
                remote_error = e
                logger.warning(
                    "Translation API not available for %s, using local translations: %s",
                    language,
                    e,
                )
            else:
                logger.debug("Loaded %s from translation API", language)
                return LanguageLoadResult(language, LoadStatus.SUCCESS, Provenance.REMOTE), tree

        candidates = [language]
        if self._fallback_language is not None and self._fallback_language != language:
            candidates.append(self._fallback_language)

        error: Exception | None = None
        for candidate in candidates:
            try:
                tree = parse_tree(self._fallback_loader.load(candidate))
            except FileNotFoundError as e:
                error = e
                logger.debug("No bundled translations for %s", candidate)
                continue
            except Exception as e:  # noqa: BLE001 - resolve() must never raise
                error = e
                break
            substitute = candidate if candidate != language else None
            if substitute is not None:
                logger.warning("Using bundled %s translations for %s", substitute, language)
            result = LanguageLoadResult(
                language,
                LoadStatus.SUCCESS,
                Provenance.FALLBACK,
                remote_error=remote_error,
                substitute=substitute,
            )
            return result, tree

        logger.error("No translations available for %s: %s", language, error)
        result = LanguageLoadResult(
            language, LoadStatus.ERROR, remote_error=remote_error, error=error
        )
        return result, None

    async def available_languages(self) -> tuple[LanguageCode, ...]:
        """Return the remote language list, or the defaults on any failure."""
        if self._api is None:
            return self._default_languages
        try:
            languages = await self._api.list_languages()
        except Exception as e:  # noqa: BLE001 - listing degrades to defaults
            logger.warning("Failed to load available languages, using defaults: %s", e)
            return self._default_languages
        return tuple(dict.fromkeys(languages)) or self._default_languages
