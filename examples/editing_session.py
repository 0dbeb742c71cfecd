"""TranslationEditor Example - Editing Two Languages Side by Side.

Demonstrates a complete editing session without a running server: bundled
fallback documents are written to a temporary directory, an in-memory
translation API stands in for the remote backend, and the live runtime is
a DictRuntime.

Scenarios covered:
1. Flattening two languages into one editable list
2. Editing, statistics, and search
3. Saving with a hot-swap of the active language
4. Remote failure falling back to bundled documents

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import tempfile
from pathlib import Path
from typing import Any

from transtree import SaveDispatcher, SourceResolver, TranslationEditor
from transtree.editing import LeafItem, SectionMarker
from transtree.saving import DictRuntime
from transtree.sources import PathFallbackLoader

EN = {
    "categories": {"title": "Categories", "actions": {"create": "Create category"}},
    "common": {"save": "Save", "cancel": "Cancel"},
}
ES = {
    "categories": {"title": "Categorías", "actions": {"create": "Crear categoría"}},
    "common": {"save": "Guardar", "cancel": "Cancelar"},
}


class InMemoryAPI:
    """Minimal TranslationAPI; languages in offline raise on fetch."""

    def __init__(self, documents: dict[str, Any], offline: set[str] | None = None) -> None:
        self.documents = documents
        self.offline = offline or set()

    async def fetch(self, language: str) -> Any:
        if language in self.offline:
            raise ConnectionError(f"{language} backend offline")
        return self.documents[language]

    async def store(self, language: str, tree_data: dict[str, Any]) -> str:
        self.documents[language] = tree_data
        return "Translations saved successfully"

    async def list_languages(self) -> list[str]:
        return list(self.documents)

    async def create_language(self, language: str, base_language: str) -> str:
        self.documents[language] = self.documents[base_language]
        return f"Language {language} created successfully"


def print_items(editor: TranslationEditor) -> None:
    for item in editor.items:
        indent = "  " * item.level
        match item:
            case SectionMarker():
                print(f"{indent}[{item.path}]")
            case LeafItem():
                values = " | ".join(item.current(lang) for lang in editor.languages)
                print(f"{indent}{item.path}: {values}")


async def example_1_flatten(api: InMemoryAPI, locales: Path) -> TranslationEditor:
    """Example 1: Load and flatten en + es."""
    print("=" * 60)
    print("Example 1: Flattened editing list")
    print("=" * 60)

    runtime = DictRuntime("en")
    editor = TranslationEditor(
        SourceResolver(api, PathFallbackLoader(f"{locales}/{{locale}}/translation.json")),
        SaveDispatcher(api, runtime=runtime),
        languages=["en", "es"],
    )
    await editor.load()
    print_items(editor)
    print(f"Provenance: {editor.provenance}")
    return editor


async def example_2_edit(editor: TranslationEditor) -> None:
    """Example 2: Edit and inspect statistics."""
    print("\n" + "=" * 60)
    print("Example 2: Editing")
    print("=" * 60)

    editor.edit("categories.title", "en", "My Categories")
    editor.edit("common.cancel", "es", "")
    print(f"Stats: {editor.stats}")
    print(f"Search 'categor': {[item.path for item in editor.search('categor')]}")

    editor.cancel("common.cancel")
    print(f"After cancel: {editor.stats}")


async def example_3_save(editor: TranslationEditor, api: InMemoryAPI) -> None:
    """Example 3: Save both languages; English is hot-swapped."""
    print("\n" + "=" * 60)
    print("Example 3: Saving")
    print("=" * 60)

    summary = await editor.save()
    print(f"Summary: {summary!r}")
    print(f"Status: {editor.status.text if editor.status else None}")
    print(f"Stored en title: {api.documents['en']['categories']['title']}")


async def example_4_fallback(locales: Path) -> None:
    """Example 4: Spanish backend offline, bundled document used."""
    print("\n" + "=" * 60)
    print("Example 4: Remote failure with local fallback")
    print("=" * 60)

    api = InMemoryAPI({"en": EN, "es": ES}, offline={"es"})
    editor = TranslationEditor(
        SourceResolver(api, PathFallbackLoader(f"{locales}/{{locale}}/translation.json")),
        languages=["en", "es"],
    )
    await editor.load()
    print(f"Provenance: {editor.provenance}")


async def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        locales = Path(tmp)
        for language, document in (("en", EN), ("es", ES)):
            target = locales / language / "translation.json"
            target.parent.mkdir()
            target.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

        api = InMemoryAPI({"en": EN, "es": ES})
        editor = await example_1_flatten(api, locales)
        await example_2_edit(editor)
        await example_3_save(editor, api)
        await example_4_fallback(locales)


if __name__ == "__main__":
    asyncio.run(main())
