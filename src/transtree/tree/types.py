"""Translation tree node types.

A translation tree is a tagged recursive structure: every node is either a
Leaf holding one localized string or a Section holding an ordered mapping of
keys to child nodes. Traversal code pattern-matches on the node class instead
of probing value shapes at each step.

Sections are immutable and compare order-sensitively, so two trees are equal
only if they hold the same keys in the same order.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from transtree.constants import PATH_SEPARATOR
from transtree.diagnostics import MalformedTreeError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LanguageCode",
    "DotPath",
    "Node",
    "TranslationBundle",
    # Nodes
    "Leaf",
    "Section",
    # Path helpers
    "join_path",
    "split_path",
]

type LanguageCode = str
"""Opaque language identifier (e.g., 'en', 'es', 'pt-BR')."""

type DotPath = str
"""Key chain from the root rendered as a dot-joined string (e.g., 'nav.home')."""


@dataclass(frozen=True, slots=True)
class Leaf:
    """Terminal node holding one localized string.

    Attributes:
        text: Localized text (may be empty)
    """

    text: str = ""


@dataclass(frozen=True, slots=True)
class Section:
    """Internal node holding ordered, uniquely keyed children.

    Children are stored as a tuple of ``(key, node)`` pairs so that equality
    and hashing respect insertion order. A private index provides O(1) key
    lookup.

    Example:
        >>> tree = Section((("categories", Section((("title", Leaf("Categories")),))),))
        >>> tree.find(("categories", "title"))
        Leaf(text='Categories')

    Attributes:
        children: Ordered (key, node) pairs

    Raises:
        MalformedTreeError: On duplicate, empty, or non-string keys, or keys
            containing the path separator
    """

    children: tuple[tuple[str, Node], ...] = ()
    _index: dict[str, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, Node] = {}
        for key, node in self.children:
            if not isinstance(key, str):
                msg = f"Section keys must be strings, got {type(key).__name__}: {key!r}"
                raise MalformedTreeError(msg)
            if not key:
                msg = "Section keys must not be empty"
                raise MalformedTreeError(msg)
            if PATH_SEPARATOR in key:
                msg = f"Section key {key!r} contains the path separator {PATH_SEPARATOR!r}"
                raise MalformedTreeError(msg, path=key)
            if key in index:
                msg = f"Duplicate key {key!r} in section"
                raise MalformedTreeError(msg, path=key)
            if not isinstance(node, (Leaf, Section)):
                msg = f"Child {key!r} must be a Leaf or Section, got {type(node).__name__}"
                raise MalformedTreeError(msg, path=key)
            index[key] = node
        object.__setattr__(self, "_index", index)

    @classmethod
    def of(cls, entries: Mapping[str, Node] | Iterable[tuple[str, Node]]) -> Section:
        """Build a Section from a mapping or an iterable of pairs."""
        items = entries.items() if isinstance(entries, Mapping) else entries
        return cls(tuple(items))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.children)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> tuple[str, ...]:
        """Child keys in insertion order."""
        return tuple(key for key, _ in self.children)

    def items(self) -> tuple[tuple[str, Node], ...]:
        """Child (key, node) pairs in insertion order."""
        return self.children

    def get(self, key: str) -> Node | None:
        """Return the child stored under key, or None."""
        return self._index.get(key)

    def find(self, segments: Sequence[str]) -> Node | None:
        """Walk a key chain from this section.

        Args:
            segments: Keys from this section downwards

        Returns:
            The node at the end of the chain, or None if any segment is
            missing or passes through a Leaf
        """
        node: Node = self
        for segment in segments:
            match node:
                case Section():
                    child = node.get(segment)
                    if child is None:
                        return None
                    node = child
                case Leaf():
                    return None
        return node


type Node = Leaf | Section
"""Any translation tree node."""

type TranslationBundle = Mapping[LanguageCode, Section]
"""One translation tree per language, all nominally sharing one key schema."""


def join_path(prefix: DotPath, key: str) -> DotPath:
    """Append key to a dot-path ('' prefix means root)."""
    return f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key


def split_path(path: DotPath) -> tuple[str, ...]:
    """Split a dot-path into its key segments."""
    return tuple(path.split(PATH_SEPARATOR))
