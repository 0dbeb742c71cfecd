"""Flat, change-tracked editing surface over translation trees.

Submodules:
    items     - SectionMarker, LeafItem, FlatItem
    flatten   - flatten(): trees -> ordered flat list
    unflatten - unflatten(): flat list -> trees
    tracker   - ChangeStats, dirty/empty checks, pure edit operations, search

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .flatten import flatten, iter_flat
from .items import FlatItem, FlatItems, LeafItem, SectionMarker
from .tracker import (
    ChangeStats,
    apply_edit,
    commit_changes,
    compute_stats,
    discard_changes,
    filter_items,
    has_any_changes,
    is_empty,
    is_modified,
    modified_paths,
    revert_item,
)
from .unflatten import unflatten

__all__ = [
    # Items
    "FlatItem",
    "FlatItems",
    "LeafItem",
    "SectionMarker",
    # Conversions
    "flatten",
    "iter_flat",
    "unflatten",
    # Tracking
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
    "filter_items",
]
