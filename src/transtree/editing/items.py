"""Flat editing items produced by flattening translation trees.

Components:
    SectionMarker - Header for a section path (carries no values)
    LeafItem - One editable string path with a value per language
    FlatItem - Union of the two
    FlatItems - Immutable snapshot of an ordered flat list

Items are frozen: edits produce new items via LeafItem.with_value() and
friends, never mutate an existing one. original_values are only replaced by
explicit commit/discard operations.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from transtree.tree.types import DotPath, LanguageCode, split_path

__all__ = ["FlatItem", "FlatItems", "LeafItem", "SectionMarker"]


@dataclass(frozen=True, slots=True)
class SectionMarker:
    """Header emitted before the contents of a section.

    Attributes:
        path: Dot-path of the section
        level: Zero-based nesting depth
    """

    path: DotPath
    level: int = 0

    @property
    def segments(self) -> tuple[str, ...]:
        """Key chain of this section."""
        return split_path(self.path)


@dataclass(frozen=True, slots=True)
class LeafItem:
    """Editable translation entry with one value per language.

    Attributes:
        path: Dot-path of the leaf
        level: Zero-based nesting depth
        current_values: Values as currently edited, per language
        original_values: Values at load time, per language
    """

    path: DotPath
    level: int = 0
    current_values: dict[LanguageCode, str] = field(default_factory=dict)
    original_values: dict[LanguageCode, str] = field(default_factory=dict)

    @property
    def segments(self) -> tuple[str, ...]:
        """Key chain of this leaf."""
        return split_path(self.path)

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Languages carried by this item (current first, then original-only)."""
        return tuple(dict.fromkeys([*self.current_values, *self.original_values]))

    def current(self, language: LanguageCode) -> str:
        """Current value for language ('' if absent)."""
        return self.current_values.get(language, "")

    def original(self, language: LanguageCode) -> str:
        """Original value for language ('' if absent)."""
        return self.original_values.get(language, "")

    def with_value(self, language: LanguageCode, value: str) -> LeafItem:
        """Return a copy with one current value replaced."""
        return replace(self, current_values={**self.current_values, language: value})

    def reverted(self) -> LeafItem:
        """Return a copy whose current values equal the original values."""
        return replace(self, current_values=dict(self.original_values))

    def committed(self) -> LeafItem:
        """Return a copy whose original values equal the current values."""
        return replace(self, original_values=dict(self.current_values))


type FlatItem = SectionMarker | LeafItem
"""Any item of a flattened list."""

type FlatItems = tuple[FlatItem, ...]
"""Ordered, immutable flat list."""
