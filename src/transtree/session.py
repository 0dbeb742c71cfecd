"""Single-editor translation editing session.

TranslationEditor ties the engine together the way an admin console's
translation page uses it: select languages, load (remote-first), edit the
flat list, watch change statistics, save, and surface transient status
messages. It holds the only mutable state; every engine call it makes is a
pure function returning a new snapshot.

Concurrency:
    One asyncio event loop, one editor. The loading/saving flags are exposed
    so callers can disable their triggers; save() itself is ignored while a
    save is running. Overlapping load() calls are tagged with a generation
    number and a response that is no longer the latest on arrival is
    discarded instead of overwriting newer state.

Python 3.13+.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace

from transtree.analysis import orphan_paths
from transtree.config import EditorConfig
from transtree.constants import DEFAULT_LANGUAGES, STATUS_DISMISS_SECONDS
from transtree.diagnostics import PartialSaveError, TranslationError
from transtree.editing import (
    ChangeStats,
    FlatItems,
    LeafItem,
    apply_edit,
    compute_stats,
    discard_changes,
    filter_items,
    flatten,
    has_any_changes,
    revert_item,
    unflatten,
)
from transtree.enums import Provenance, StatusLevel
from transtree.locale_utils import is_known_language, language_label
from transtree.saving import I18nRuntime, SaveDispatcher, SaveSummary
from transtree.sources import (
    HttpTranslationAPI,
    LanguageLoadResult,
    PathFallbackLoader,
    SourceResolver,
)
from transtree.tree.types import DotPath, LanguageCode, Section

__all__ = ["StatusMessage", "TranslationEditor"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StatusMessage:
    """Transient banner shown after a load or save.

    Attributes:
        level: SUCCESS or ERROR
        text: Message for the user
        created_at: time.monotonic() timestamp of creation
    """

    level: StatusLevel
    text: str
    created_at: float = field(default_factory=time.monotonic)

    def is_expired(self, lifetime: float, now: float | None = None) -> bool:
        """Check whether the message has outlived lifetime seconds."""
        current = time.monotonic() if now is None else now
        return current - self.created_at >= lifetime


class TranslationEditor:
    """Stateful editing session over the translation engine.

    Example:
        >>> editor = TranslationEditor.from_config(EditorConfig(api_base_url=url))
        >>> await editor.load(["en", "es"])
        >>> editor.edit("categories.title", "en", "My Categories")
        >>> editor.stats
        ChangeStats(total=1, modified=1, empty=0)
        >>> await editor.save()

    Attributes:
        languages: Selected languages; the first is the base (schema) language
        items: Current flat list
    """

    __slots__ = (
        "_available_languages",
        "_bundle",
        "_clock",
        "_dispatcher",
        "_generation",
        "_items",
        "_languages",
        "_load_results",
        "_loading",
        "_resolver",
        "_saving",
        "_status",
        "_status_lifetime",
    )

    def __init__(
        self,
        resolver: SourceResolver,
        dispatcher: SaveDispatcher | None = None,
        *,
        languages: Iterable[LanguageCode] = DEFAULT_LANGUAGES,
        status_dismiss_seconds: float = STATUS_DISMISS_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty (not yet loaded) session.

        Args:
            resolver: Source of per-language trees
            dispatcher: Persists saves; None makes the session read-only
            languages: Initially selected languages
            status_dismiss_seconds: Lifetime of status messages
            clock: Monotonic clock used for status expiry

        Raises:
            ValueError: If languages is empty
        """
        self._languages = _unique(languages)
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._status_lifetime = status_dismiss_seconds
        self._clock = clock

        self._available_languages: tuple[LanguageCode, ...] = self._languages
        self._bundle: Mapping[LanguageCode, Section] = {}
        self._items: FlatItems = ()
        self._load_results: tuple[LanguageLoadResult, ...] = ()
        self._loading = False
        self._saving = False
        self._status: StatusMessage | None = None
        self._generation = 0

    @classmethod
    def from_config(
        cls,
        config: EditorConfig,
        *,
        runtime: I18nRuntime | None = None,
        headers: dict[str, str] | None = None,
    ) -> TranslationEditor:
        """Build a session with an HTTP API client and on-disk fallbacks.

        Without ``config.api_base_url`` the session resolves from bundled
        documents only and cannot save.
        """
        api = (
            HttpTranslationAPI(config.api_base_url, timeout=config.timeout, headers=headers)
            if config.api_base_url
            else None
        )
        resolver = SourceResolver(
            api,
            PathFallbackLoader(config.fallback_path),
            fallback_language=config.fallback_language,
            default_languages=config.available_languages,
        )
        dispatcher = SaveDispatcher(api, runtime=runtime) if api is not None else None
        return cls(
            resolver,
            dispatcher,
            languages=config.languages,
            status_dismiss_seconds=config.status_dismiss_seconds,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        return self._languages

    @property
    def base_language(self) -> LanguageCode:
        return self._languages[0]

    @property
    def available_languages(self) -> tuple[LanguageCode, ...]:
        return self._available_languages

    @property
    def items(self) -> FlatItems:
        return self._items

    @property
    def bundle(self) -> Mapping[LanguageCode, Section]:
        """Trees as last loaded or saved."""
        return self._bundle

    @property
    def load_results(self) -> tuple[LanguageLoadResult, ...]:
        return self._load_results

    @property
    def provenance(self) -> dict[LanguageCode, Provenance]:
        """Where each loaded language came from."""
        return {r.language: r.provenance for r in self._load_results if r.provenance is not None}

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def saving(self) -> bool:
        return self._saving

    @property
    def stats(self) -> ChangeStats:
        return compute_stats(self._items, self._languages)

    @property
    def has_changes(self) -> bool:
        return has_any_changes(self._items, self._languages)

    @property
    def can_save(self) -> bool:
        """True when a save would do something."""
        return self._dispatcher is not None and not self._saving and self.has_changes

    @property
    def status(self) -> StatusMessage | None:
        """Current status message, or None once dismissed or expired."""
        if self._status is not None and self._status.is_expired(self._status_lifetime, self._clock()):
            self._status = None
        return self._status

    def clear_status(self) -> None:
        """Dismiss the current status message."""
        self._status = None

    def _set_status(self, level: StatusLevel, text: str) -> None:
        self._status = StatusMessage(level, text, created_at=self._clock())

    def language_label(self, language: LanguageCode) -> str:
        """Display name of a language in its own language."""
        return language_label(language)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, languages: Iterable[LanguageCode] | None = None) -> bool:
        """Resolve and flatten the selected languages.

        Pending edits are replaced by the freshly loaded values. On total
        failure (a language with neither remote nor bundled tree) the
        previous state is kept and an error status is set.

        Args:
            languages: New language selection (None reloads the current one)

        Returns:
            True if the loaded state was applied

        Raises:
            ValueError: If languages is given but empty
        """
        requested = _unique(languages) if languages is not None else self._languages
        self._generation += 1
        generation = self._generation
        self._loading = True
        self._status = None
        try:
            result = await self._resolver.resolve(requested)
        finally:
            if generation == self._generation:
                self._loading = False

        if generation != self._generation:
            logger.debug("Discarding stale load of %s (generation %d)", requested, generation)
            return False

        if not result.all_resolved:
            failed = ", ".join(r.language for r in result.get_errors())
            logger.error("Failed to load translations for %s", failed)
            self._set_status(StatusLevel.ERROR, "Failed to load translations. Please try again.")
            return False

        for lang, paths in orphan_paths(result.bundle, requested[0]).items():
            logger.warning(
                "%d key(s) in %s are missing from base language %s and will not be edited: %s",
                len(paths),
                lang,
                requested[0],
                ", ".join(paths[:5]),
            )

        self._languages = requested
        self._bundle = result.bundle
        self._load_results = result.results
        self._items = flatten(result.bundle, requested)
        logger.info("Loaded %d entries for %s", self.stats.total, ", ".join(requested))
        return True

    async def refresh_available_languages(self) -> tuple[LanguageCode, ...]:
        """Ask the API which languages exist (defaults on failure)."""
        self._available_languages = await self._resolver.available_languages()
        return self._available_languages

    async def create_language(self, language: LanguageCode, base_language: LanguageCode | None = None) -> bool:
        """Create a new language on the server, seeded from base_language.

        The code must be one Babel recognizes.

        Returns:
            True on success; on failure an error status is set
        """
        api = self._resolver.api
        if api is None:
            self._set_status(StatusLevel.ERROR, "No translation API configured")
            return False
        if not is_known_language(language):
            logger.warning("Refusing to create unknown language %r", language)
            self._set_status(StatusLevel.ERROR, f"Unknown language code: {language}")
            return False
        try:
            message = await api.create_language(language, base_language or self.base_language)
        except TranslationError as e:
            logger.error("Failed to create language %s: %s", language, e)
            self._set_status(StatusLevel.ERROR, str(e) or "Failed to create language")
            return False
        await self.refresh_available_languages()
        self._set_status(StatusLevel.SUCCESS, message)
        return True

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def edit(self, path: DotPath, language: LanguageCode, value: str) -> None:
        """Change one language's value of one entry.

        Raises:
            KeyError: If path is unknown or names a section
            ValueError: If language is not selected
        """
        if language not in self._languages:
            msg = f"Language '{language}' is not selected"
            raise ValueError(msg)
        self._items = apply_edit(self._items, path, language, value)

    def cancel(self, path: DotPath) -> None:
        """Restore one entry to its loaded values.

        Raises:
            KeyError: If path is unknown or names a section
        """
        self._items = revert_item(self._items, path)

    def discard(self) -> None:
        """Restore every entry to its loaded values."""
        self._items = discard_changes(self._items)

    def search(self, term: str) -> FlatItems:
        """Entries whose path or any selected value contains term."""
        return filter_items(self._items, term, self._languages)

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------

    async def save(self) -> SaveSummary | None:
        """Persist every selected language and reset change tracking.

        Returns:
            SaveSummary of the run, or None if nothing was attempted
            (no changes, a save already running, or no API configured).
            On failure the summary reports the failed language, and pending
            changes are kept so the save can be retried.
        """
        if self._dispatcher is None:
            self._set_status(StatusLevel.ERROR, "No translation API configured")
            return None
        if self._saving or not self.has_changes:
            return None

        snapshot = self._items
        languages = self._languages
        self._saving = True
        self._status = None
        try:
            bundle = unflatten(snapshot, languages)
            summary = await self._dispatcher.save(bundle, languages)
        except PartialSaveError as e:
            self._set_status(StatusLevel.ERROR, str(e) or "Failed to save translations. Please try again.")
            return e.summary
        finally:
            self._saving = False

        self._items = _rebase(self._items, snapshot)
        self._bundle = bundle
        names = ", ".join(language_label(lang) for lang in languages)
        self._set_status(StatusLevel.SUCCESS, f"Translations for {names} saved successfully!")
        return summary


def _unique(languages: Iterable[LanguageCode]) -> tuple[LanguageCode, ...]:
    result = tuple(dict.fromkeys(languages))
    if not result:
        msg = "At least one language is required"
        raise ValueError(msg)
    return result


def _rebase(items: FlatItems, saved: FlatItems) -> FlatItems:
    """Make the saved snapshot's values the originals of the current items.

    Edits made while the save was in flight stay pending.
    """
    saved_values = {item.path: item.current_values for item in saved if isinstance(item, LeafItem)}
    return tuple(
        replace(item, original_values=dict(saved_values[item.path]))
        if isinstance(item, LeafItem) and item.path in saved_values
        else item
        for item in items
    )
