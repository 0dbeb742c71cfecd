"""Per-language persistence of rebuilt translation trees.

Languages are saved one after another. When the saved language is the
runtime's active language, its in-memory bundle is hot-swapped right after
the successful persist, so rendered text updates without a reload.

There is no cross-language transaction: the run stops at the first failure,
languages saved before it stay saved, and the ones after it are reported as
skipped. PartialSaveError carries the per-language outcome.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from transtree.diagnostics import PartialSaveError
from transtree.enums import SaveStatus
from transtree.saving.runtime import I18nRuntime
from transtree.sources.client import TranslationAPI
from transtree.tree.parsing import to_plain
from transtree.tree.types import LanguageCode, Section

__all__ = ["LanguageSaveResult", "SaveDispatcher", "SaveSummary"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LanguageSaveResult:
    """Outcome of persisting one language.

    Attributes:
        language: Language saved
        status: SAVED, FAILED, or SKIPPED
        message: Server confirmation (SAVED) or error text (FAILED)
        error: Exception raised by the persist or hot-swap step (FAILED only)
        hot_swapped: True if the runtime bundle was replaced
    """

    language: LanguageCode
    status: SaveStatus
    message: str = ""
    error: Exception | None = None
    hot_swapped: bool = False


@dataclass(frozen=True, slots=True)
class SaveSummary:
    """Per-language outcome of one save run.

    Attributes:
        results: One LanguageSaveResult per requested language, in order
    """

    results: tuple[LanguageSaveResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"SaveSummary(saved={len(self.saved)}, "
            f"failed={len(self.failed)}, "
            f"skipped={len(self.skipped)})"
        )

    @property
    def saved(self) -> tuple[LanguageCode, ...]:
        """Languages persisted successfully."""
        return tuple(r.language for r in self.results if r.status == SaveStatus.SAVED)

    @property
    def failed(self) -> tuple[LanguageCode, ...]:
        """Languages whose persist call failed."""
        return tuple(r.language for r in self.results if r.status == SaveStatus.FAILED)

    @property
    def skipped(self) -> tuple[LanguageCode, ...]:
        """Languages not attempted after a failure."""
        return tuple(r.language for r in self.results if r.status == SaveStatus.SKIPPED)

    @property
    def all_saved(self) -> bool:
        """Check if every requested language was persisted."""
        return all(r.status == SaveStatus.SAVED for r in self.results)


class SaveDispatcher:
    """Persists rebuilt trees and hot-swaps the active runtime language.

    Example:
        >>> dispatcher = SaveDispatcher(api, runtime=DictRuntime("en"))
        >>> summary = await dispatcher.save(unflatten(items, ["en", "es"]), ["en", "es"])
        >>> summary.saved
        ('en', 'es')
    """

    __slots__ = ("_api", "_runtime")

    def __init__(self, api: TranslationAPI, runtime: I18nRuntime | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            api: Translation API used to persist each language
            runtime: Live i18n runtime to hot-swap (None disables hot-swapping)
        """
        self._api = api
        self._runtime = runtime

    @property
    def runtime(self) -> I18nRuntime | None:
        """Live i18n runtime, if any."""
        return self._runtime

    async def save(
        self,
        bundle: Mapping[LanguageCode, Section],
        languages: Iterable[LanguageCode],
        active_language: LanguageCode | None = None,
    ) -> SaveSummary:
        """Persist each language's tree in order.

        Args:
            bundle: Rebuilt tree per language
            languages: Languages to persist; duplicates are saved once
            active_language: Language to hot-swap; defaults to the runtime's
                             active language

        Returns:
            SaveSummary with every language SAVED

        Raises:
            PartialSaveError: On the first failing language; the summary marks
                              earlier languages SAVED and later ones SKIPPED
        """
        if active_language is None and self._runtime is not None:
            active_language = self._runtime.get_active_language()

        ordered = tuple(dict.fromkeys(languages))
        results: list[LanguageSaveResult] = []
        for position, language in enumerate(ordered):
            try:
                result = await self._save_one(bundle, language, active_language)
            except Exception as e:  # noqa: BLE001 - any persist or hot-swap failure ends the run
                logger.error("Failed to save translations for %s: %s", language, e)
                results.append(LanguageSaveResult(language, SaveStatus.FAILED, str(e), error=e))
                results.extend(
                    LanguageSaveResult(rest, SaveStatus.SKIPPED) for rest in ordered[position + 1 :]
                )
                summary = SaveSummary(tuple(results))
                raise PartialSaveError(str(e) or f"Failed to save translations for {language}", summary) from e
            results.append(result)

        summary = SaveSummary(tuple(results))
        logger.info("Saved translations: %r", summary)
        return summary

    async def _save_one(
        self,
        bundle: Mapping[LanguageCode, Section],
        language: LanguageCode,
        active_language: LanguageCode | None,
    ) -> LanguageSaveResult:
        tree = bundle.get(language)
        if tree is None:
            msg = f"No translations to save for {language}"
            raise ValueError(msg)

        tree_data = to_plain(tree)
        message = await self._api.store(language, tree_data)

        hot_swapped = False
        if self._runtime is not None and language == active_language:
            self._runtime.add_or_replace_bundle(language, to_plain(tree))
            hot_swapped = True
            logger.info("Hot-swapped runtime bundle for active language %s", language)
        return LanguageSaveResult(language, SaveStatus.SAVED, message, hot_swapped=hot_swapped)
