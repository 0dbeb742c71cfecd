"""Conversion between JSON-shaped data and translation trees.

parse_tree() builds the tagged node structure once, at the boundary where
documents enter the engine (remote payloads, bundled fallback files).
to_plain() is its inverse and produces the nested dict/str data handed to
the translation API and the i18n runtime.

Value rules:
    - dict            -> Section (key order preserved)
    - str             -> Leaf
    - None            -> Leaf("")
    - list and other scalars -> Leaf holding compact JSON text
      (arrays are opaque leaves, never traversed as sections)

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from transtree.constants import MAX_DEPTH
from transtree.core import DepthGuard
from transtree.diagnostics import MalformedTreeError
from transtree.tree.types import DotPath, Leaf, Node, Section, join_path

__all__ = ["leaf_text", "parse_tree", "to_plain"]

logger = logging.getLogger(__name__)


def leaf_text(value: Any) -> str:
    """Render a non-object JSON value as leaf text.

    Example:
        >>> leaf_text(["a", "b"])
        '["a","b"]'
        >>> leaf_text(None)
        ''
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def parse_tree(data: Any, *, max_depth: int = MAX_DEPTH) -> Section:
    """Parse a JSON-shaped document into a translation tree.

    Args:
        data: Decoded JSON object (a Mapping at the root)
        max_depth: Maximum section nesting

    Returns:
        Root Section

    Raises:
        MalformedTreeError: If the root is not a mapping, a key is not a
            string, is empty or contains the path separator, or the data is
            cyclic
        TreeDepthExceededError: If nesting exceeds max_depth
    """
    if not isinstance(data, Mapping):
        msg = f"Translation document root must be an object, got {type(data).__name__}"
        raise MalformedTreeError(msg)
    return _parse_section(data, "", DepthGuard(max_depth=max_depth), set())


def _parse_section(
    data: Mapping[Any, Any],
    path: DotPath,
    guard: DepthGuard,
    active: set[int],
) -> Section:
    marker = id(data)
    if marker in active:
        msg = f"Cyclic reference detected at {path or '<root>'!r}"
        raise MalformedTreeError(msg, path=path)

    guard.path = path
    with guard:
        active.add(marker)
        try:
            children: list[tuple[str, Node]] = []
            for key, value in data.items():
                if not isinstance(key, str):
                    msg = f"Keys must be strings, got {type(key).__name__} at {path or '<root>'!r}"
                    raise MalformedTreeError(msg, path=path)
                child_path = join_path(path, key)
                if isinstance(value, Mapping):
                    children.append((key, _parse_section(value, child_path, guard, active)))
                else:
                    children.append((key, Leaf(leaf_text(value))))
            section = Section(tuple(children))
        finally:
            active.discard(marker)
    return section


def to_plain(tree: Section, *, max_depth: int = MAX_DEPTH) -> dict[str, Any]:
    """Serialize a translation tree to nested dicts of strings.

    Args:
        tree: Root Section
        max_depth: Maximum section nesting

    Returns:
        Nested dict in key order, suitable for JSON encoding

    Raises:
        TreeDepthExceededError: If nesting exceeds max_depth
    """
    return _plain_section(tree, DepthGuard(max_depth=max_depth))


def _plain_section(section: Section, guard: DepthGuard) -> dict[str, Any]:
    with guard:
        result: dict[str, Any] = {}
        for key, node in section.items():
            match node:
                case Leaf(text=text):
                    result[key] = text
                case Section():
                    result[key] = _plain_section(node, guard)
        return result
