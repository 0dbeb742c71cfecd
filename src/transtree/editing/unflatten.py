"""Reconstruction of per-language translation trees from a flat list.

Inverse of flatten(). Each language gets an independent tree built from the
LeafItems' current values. Intermediate sections are created on first sight
and reused afterwards, so key order follows first appearance in the list.
SectionMarkers carry no values; they only materialise their section at its
position, which keeps empty sections and section order intact across a
flatten/unflatten round trip.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from transtree.editing.items import FlatItem, LeafItem, SectionMarker
from transtree.tree.types import LanguageCode, Leaf, Node, Section

__all__ = ["unflatten"]

logger = logging.getLogger(__name__)

# Mutable builder: nested dicts whose values are str (leaf) or dict (section).
type _Draft = dict[str, str | _Draft]


def unflatten(
    items: Iterable[FlatItem],
    languages: Sequence[LanguageCode],
) -> dict[LanguageCode, Section]:
    """Rebuild one translation tree per language from a flat list.

    A language absent from an item's current values produces an empty leaf,
    never an omitted key. An item whose path would pass through an existing
    leaf, replace an existing section, or contains an empty key segment is
    skipped with a warning. Sections are assembled without recursion, so
    arbitrarily deep paths are accepted.

    Args:
        items: Flat list (typically an edited result of flatten())
        languages: Languages to rebuild; duplicates are ignored

    Returns:
        Mapping of language to root Section, in the order of languages
    """
    langs = tuple(dict.fromkeys(languages))
    drafts: dict[LanguageCode, _Draft] = {lang: {} for lang in langs}
    if not langs:
        return {}

    for item in items:
        segments = item.segments
        if not all(segments):
            logger.warning("Skipping %r: path has an empty key segment", item.path)
            continue
        match item:
            case SectionMarker():
                for lang in langs:
                    if _walk(drafts[lang], segments, item.path) is None:
                        break
            case LeafItem():
                for lang in langs:
                    parent = _walk(drafts[lang], segments[:-1], item.path)
                    if parent is None:
                        break
                    if isinstance(parent.get(segments[-1]), dict):
                        logger.warning(
                            "Skipping leaf %r: path is already a section", item.path
                        )
                        break
                    parent[segments[-1]] = item.current(lang)

    return {lang: _freeze(drafts[lang]) for lang in langs}


def _walk(draft: _Draft, segments: Sequence[str], path: str) -> _Draft | None:
    """Descend through segments, creating sections as needed.

    Returns None (after logging) if a segment already holds a leaf.
    """
    node = draft
    for segment in segments:
        child = node.setdefault(segment, {})
        if not isinstance(child, dict):
            logger.warning("Skipping %r: %r is already a leaf", path, segment)
            return None
        node = child
    return node


def _freeze(draft: _Draft) -> Section:
    # Frame: (remaining draft entries, finished children, key in parent)
    stack: list[tuple[Iterator[tuple[str, str | _Draft]], list[tuple[str, Node]], str]] = [
        (iter(draft.items()), [], "")
    ]
    while True:
        entries, children, key = stack[-1]
        entry = next(entries, None)
        if entry is None:
            stack.pop()
            section = Section(tuple(children))
            if not stack:
                return section
            stack[-1][1].append((key, section))
            continue
        child_key, value = entry
        if isinstance(value, dict):
            stack.append((iter(value.items()), [], child_key))
        else:
            children.append((child_key, Leaf(value)))
