"""Change tracking over flat translation lists.

Pure functions: every statistic is recomputed from the item list, and every
edit returns a new tuple. Nothing here stores state of its own.

Dirty and empty are evaluated per language; an item is modified if any
considered language differs from its original, and empty if any considered
language is blank after whitespace stripping. When languages is None, every
language carried by the item is considered.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from transtree.editing.items import FlatItem, FlatItems, LeafItem, SectionMarker
from transtree.tree.types import DotPath, LanguageCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Statistics
    "ChangeStats",
    "compute_stats",
    "has_any_changes",
    "is_empty",
    "is_modified",
    "modified_paths",
    # Edits
    "apply_edit",
    "commit_changes",
    "discard_changes",
    "revert_item",
    # Search
    "filter_items",
]


@dataclass(frozen=True, slots=True)
class ChangeStats:
    """Aggregate counts over the leaves of a flat list.

    Attributes:
        total: Number of LeafItems
        modified: LeafItems with at least one changed language
        empty: LeafItems with at least one blank language
    """

    total: int = 0
    modified: int = 0
    empty: int = 0

    @property
    def unchanged(self) -> int:
        """Leaves with no pending change."""
        return self.total - self.modified


def _languages(item: LeafItem, languages: Sequence[LanguageCode] | None) -> Iterable[LanguageCode]:
    return item.languages if languages is None else languages


def is_modified(item: FlatItem, languages: Sequence[LanguageCode] | None = None) -> bool:
    """Check whether any language's current value differs from its original."""
    match item:
        case SectionMarker():
            return False
        case LeafItem():
            return any(item.current(lang) != item.original(lang) for lang in _languages(item, languages))


def is_empty(item: FlatItem, languages: Sequence[LanguageCode] | None = None) -> bool:
    """Check whether any language's current value is blank."""
    match item:
        case SectionMarker():
            return False
        case LeafItem():
            return any(not item.current(lang).strip() for lang in _languages(item, languages))


def compute_stats(
    items: Iterable[FlatItem],
    languages: Sequence[LanguageCode] | None = None,
) -> ChangeStats:
    """Count leaves, modified leaves, and empty leaves.

    Always satisfies 0 <= modified <= total and 0 <= empty <= total.
    """
    total = modified = empty = 0
    for item in items:
        if not isinstance(item, LeafItem):
            continue
        total += 1
        if is_modified(item, languages):
            modified += 1
        if is_empty(item, languages):
            empty += 1
    return ChangeStats(total=total, modified=modified, empty=empty)


def has_any_changes(
    items: Iterable[FlatItem],
    languages: Sequence[LanguageCode] | None = None,
) -> bool:
    """True if at least one leaf is modified (gates saving)."""
    return any(is_modified(item, languages) for item in items)


def modified_paths(
    items: Iterable[FlatItem],
    languages: Sequence[LanguageCode] | None = None,
) -> tuple[DotPath, ...]:
    """Paths of modified leaves, in list order."""
    return tuple(item.path for item in items if is_modified(item, languages))


def _leaf_index(items: FlatItems, path: DotPath) -> int:
    for index, item in enumerate(items):
        if item.path == path:
            if isinstance(item, LeafItem):
                return index
            msg = f"{path!r} is a section, not an editable entry"
            raise KeyError(msg)
    msg = f"No entry with path {path!r}"
    raise KeyError(msg)


def apply_edit(
    items: Sequence[FlatItem],
    path: DotPath,
    language: LanguageCode,
    value: str,
) -> FlatItems:
    """Replace one leaf's current value for one language.

    Original values and list order are untouched.

    Args:
        items: Current flat list
        path: Dot-path of the leaf to edit
        language: Language whose value changes
        value: New text

    Returns:
        New flat list

    Raises:
        KeyError: If path is unknown or names a section
    """
    snapshot = tuple(items)
    index = _leaf_index(snapshot, path)
    leaf = snapshot[index]
    assert isinstance(leaf, LeafItem)
    return (*snapshot[:index], leaf.with_value(language, value), *snapshot[index + 1 :])


def revert_item(items: Sequence[FlatItem], path: DotPath) -> FlatItems:
    """Restore one leaf's current values to its originals (cancel edit).

    Raises:
        KeyError: If path is unknown or names a section
    """
    snapshot = tuple(items)
    index = _leaf_index(snapshot, path)
    leaf = snapshot[index]
    assert isinstance(leaf, LeafItem)
    return (*snapshot[:index], leaf.reverted(), *snapshot[index + 1 :])


def discard_changes(items: Iterable[FlatItem]) -> FlatItems:
    """Restore every leaf to its original values."""
    return tuple(item.reverted() if isinstance(item, LeafItem) else item for item in items)


def commit_changes(items: Iterable[FlatItem]) -> FlatItems:
    """Make current values the new originals for every leaf (after a save)."""
    return tuple(item.committed() if isinstance(item, LeafItem) else item for item in items)


def filter_items(
    items: Iterable[FlatItem],
    term: str,
    languages: Sequence[LanguageCode] | None = None,
) -> FlatItems:
    """Select items whose path or any current value contains term.

    Matching is case-insensitive. Section markers match on path only.
    An empty term selects everything.
    """
    needle = term.casefold()
    if not needle:
        return tuple(items)

    def matches(item: FlatItem) -> bool:
        if needle in item.path.casefold():
            return True
        match item:
            case LeafItem():
                return any(needle in item.current(lang).casefold() for lang in _languages(item, languages))
            case _:
                return False

    return tuple(item for item in items if matches(item))
