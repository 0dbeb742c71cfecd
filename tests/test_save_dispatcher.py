"""Tests for saving/dispatcher.py and saving/runtime.py.

Sequential persistence, active-language hot-swap, and partial failure
reporting with SKIPPED languages.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from tests.conftest import EN_DOCUMENT, ES_DOCUMENT
from tests.strategies.sources import FakeTranslationAPI
from transtree.diagnostics import PartialSaveError, TranslationError
from transtree.enums import SaveStatus
from transtree.saving import DictRuntime, SaveDispatcher
from transtree.tree import Section, parse_tree


class TestSave:
    async def test_saves_every_language_in_order(self, bundle: dict[str, Section]) -> None:
        api = FakeTranslationAPI()
        dispatcher = SaveDispatcher(api)

        summary = await dispatcher.save(bundle, ["en", "es"])

        assert api.store_calls == ["en", "es"]
        assert api.documents == {"en": EN_DOCUMENT, "es": ES_DOCUMENT}
        assert summary.all_saved
        assert summary.saved == ("en", "es")
        assert summary.results[0].message == "Translations saved successfully"

    async def test_hot_swaps_only_active_language(self, bundle: dict[str, Section]) -> None:
        runtime = DictRuntime("es")
        dispatcher = SaveDispatcher(FakeTranslationAPI(), runtime=runtime)

        summary = await dispatcher.save(bundle, ["en", "es"])

        assert [r.hot_swapped for r in summary.results] == [False, True]
        assert list(runtime.bundles) == ["es"]
        assert runtime.swap_count == 1
        assert runtime.lookup("categories.title") == "Categorías"

    async def test_explicit_active_language_overrides_runtime(self, bundle: dict[str, Section]) -> None:
        runtime = DictRuntime("es")
        dispatcher = SaveDispatcher(FakeTranslationAPI(), runtime=runtime)

        await dispatcher.save(bundle, ["en", "es"], active_language="en")

        assert list(runtime.bundles) == ["en"]

    async def test_no_runtime_no_swap(self, bundle: dict[str, Section]) -> None:
        summary = await SaveDispatcher(FakeTranslationAPI()).save(bundle, ["en"])

        assert not summary.results[0].hot_swapped

    async def test_runtime_bundle_is_independent_copy(self, bundle: dict[str, Section]) -> None:
        api = FakeTranslationAPI()
        runtime = DictRuntime("en")

        await SaveDispatcher(api, runtime=runtime).save(bundle, ["en"])
        runtime.bundles["en"]["nav"]["home"] = "Changed"

        assert api.documents["en"]["nav"]["home"] == "Home"

    async def test_duplicates_saved_once(self, bundle: dict[str, Section]) -> None:
        api = FakeTranslationAPI()

        await SaveDispatcher(api).save(bundle, ["en", "en"])

        assert api.store_calls == ["en"]


class TestPartialFailure:
    async def test_stops_at_first_failure(
        self, bundle: dict[str, Section], caplog: pytest.LogCaptureFixture
    ) -> None:
        bundle["de"] = parse_tree({"ok": "OK"})
        api = FakeTranslationAPI(fail_store={"es"})
        runtime = DictRuntime("en")
        dispatcher = SaveDispatcher(api, runtime=runtime)

        with caplog.at_level(logging.ERROR, logger="transtree.saving.dispatcher"):
            with pytest.raises(PartialSaveError, match="Failed to save translations for es") as exc_info:
                await dispatcher.save(bundle, ["en", "es", "de"])

        summary = exc_info.value.summary
        assert [r.status for r in summary.results] == [
            SaveStatus.SAVED,
            SaveStatus.FAILED,
            SaveStatus.SKIPPED,
        ]
        assert summary.failed == ("es",)
        assert summary.skipped == ("de",)
        assert api.store_calls == ["en", "es"]
        assert runtime.swap_count == 1
        assert isinstance(summary.results[1].error, TranslationError)
        assert "Failed to save translations for es" in caplog.text

    async def test_failure_is_translation_error(self, bundle: dict[str, Section]) -> None:
        with pytest.raises(TranslationError):
            await SaveDispatcher(FakeTranslationAPI(fail_store={"en"})).save(bundle, ["en"])

    async def test_failed_active_language_not_swapped(self, bundle: dict[str, Section]) -> None:
        runtime = DictRuntime("en")

        with pytest.raises(PartialSaveError):
            await SaveDispatcher(FakeTranslationAPI(fail_store={"en"}), runtime=runtime).save(bundle, ["en"])

        assert runtime.bundles == {}

    async def test_missing_tree_fails(self, bundle: dict[str, Section]) -> None:
        with pytest.raises(PartialSaveError, match="No translations to save for fr") as exc_info:
            await SaveDispatcher(FakeTranslationAPI()).save(bundle, ["fr", "en"])

        assert exc_info.value.summary.skipped == ("en",)

    async def test_unexpected_runtime_failure(self, bundle: dict[str, Section]) -> None:
        class BrokenRuntime(DictRuntime):
            def add_or_replace_bundle(self, language: str, tree_data: dict[str, Any]) -> None:
                raise RuntimeError("swap exploded")

        api = FakeTranslationAPI()

        with pytest.raises(PartialSaveError, match="swap exploded") as exc_info:
            await SaveDispatcher(api, runtime=BrokenRuntime("en")).save(bundle, ["en", "es"])

        summary = exc_info.value.summary
        assert summary.failed == ("en",)
        assert summary.skipped == ("es",)
        assert isinstance(summary.results[0].error, RuntimeError)

    async def test_summary_repr(self, bundle: dict[str, Section]) -> None:
        with pytest.raises(PartialSaveError) as exc_info:
            await SaveDispatcher(FakeTranslationAPI(fail_store={"es"})).save(bundle, ["en", "es"])

        assert repr(exc_info.value.summary) == "SaveSummary(saved=1, failed=1, skipped=0)"


class TestDictRuntime:
    def test_lookup(self) -> None:
        runtime = DictRuntime("en", {"en": {"nav": {"home": "Home"}}, "es": {"nav": {"home": "Inicio"}}})

        assert runtime.lookup("nav.home") == "Home"
        assert runtime.lookup("nav.home", "es") == "Inicio"
        assert runtime.lookup("nav") is None
        assert runtime.lookup("nav.home.deeper") is None
        assert runtime.lookup("nav.home", "fr") is None
