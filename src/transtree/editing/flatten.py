"""Flattening of per-language translation trees into one editable list.

The first requested language is the key-schema source. Its tree is walked
depth-first, pre-order, in key order; every other language is probed at the
same path. A language that lacks the path (or holds a section there) gets
the empty string, so every schema leaf appears exactly once.

Keys present only in non-schema languages are not visited. Use
transtree.analysis.orphan_paths() to report them.

The walk uses an explicit stack, so flatten() never raises for well-formed
trees regardless of depth.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from transtree.editing.items import FlatItem, FlatItems, LeafItem, SectionMarker
from transtree.tree.types import (
    DotPath,
    LanguageCode,
    Leaf,
    Node,
    Section,
    join_path,
)

__all__ = ["flatten", "iter_flat"]

logger = logging.getLogger(__name__)

# Walk frame: (peer section per language or None, path prefix, level, schema children)
type _Frame = tuple[dict[LanguageCode, Section | None], DotPath, int, Iterator[tuple[str, Node]]]


def flatten(
    bundle: Mapping[LanguageCode, Section],
    languages: Sequence[LanguageCode],
) -> FlatItems:
    """Flatten a translation bundle into an ordered list of items.

    Args:
        bundle: One tree per language
        languages: Languages to carry on each LeafItem; the first one is the
                   key-schema source. Duplicates are ignored.

    Returns:
        Tuple of SectionMarker and LeafItem in schema pre-order. Empty if no
        languages are given or the schema language has no tree.

    Example:
        >>> en = parse_tree({"categories": {"title": "Categories"}})
        >>> es = parse_tree({"categories": {"title": "Categorías"}})
        >>> flatten({"en": en, "es": es}, ["en", "es"])
        (SectionMarker(path='categories', level=0), LeafItem(path='categories.title', ...))
    """
    return tuple(iter_flat(bundle, languages))


def iter_flat(
    bundle: Mapping[LanguageCode, Section],
    languages: Sequence[LanguageCode],
) -> Iterator[FlatItem]:
    """Lazily yield the items flatten() would return."""
    langs = tuple(dict.fromkeys(languages))
    if not langs:
        return
    schema = bundle.get(langs[0])
    if schema is None:
        logger.warning("Schema language %r has no tree; nothing to flatten", langs[0])
        return

    missing = [lang for lang in langs[1:] if lang not in bundle]
    if missing:
        logger.debug("Languages without a tree will flatten to empty values: %s", missing)

    trees: dict[LanguageCode, Section | None] = {lang: bundle.get(lang) for lang in langs}
    stack: list[_Frame] = [(trees, "", 0, iter(schema.items()))]

    while stack:
        peers, prefix, level, children = stack[-1]
        entry = next(children, None)
        if entry is None:
            stack.pop()
            continue

        key, node = entry
        path = join_path(prefix, key)
        match node:
            case Section():
                yield SectionMarker(path=path, level=level)
                nested = {lang: _child_section(peer, key) for lang, peer in peers.items()}
                stack.append((nested, path, level + 1, iter(node.items())))
            case Leaf():
                values = {lang: _child_text(peer, key) for lang, peer in peers.items()}
                yield LeafItem(
                    path=path,
                    level=level,
                    current_values=values,
                    original_values=dict(values),
                )


def _child_section(section: Section | None, key: str) -> Section | None:
    if section is None:
        return None
    child = section.get(key)
    return child if isinstance(child, Section) else None


def _child_text(section: Section | None, key: str) -> str:
    if section is None:
        return ""
    child = section.get(key)
    return child.text if isinstance(child, Leaf) else ""
