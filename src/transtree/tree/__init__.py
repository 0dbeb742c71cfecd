"""Translation tree data model.

Submodules:
    types   - Leaf, Section, and the LanguageCode/DotPath/TranslationBundle aliases
    parsing - parse_tree() and to_plain() conversions to and from JSON-shaped data

Python 3.13+.
"""

from .parsing import leaf_text, parse_tree, to_plain
from .types import (
    DotPath,
    LanguageCode,
    Leaf,
    Node,
    Section,
    TranslationBundle,
    join_path,
    split_path,
)

__all__ = [
    "DotPath",
    "LanguageCode",
    "Leaf",
    "Node",
    "Section",
    "TranslationBundle",
    "join_path",
    "leaf_text",
    "parse_tree",
    "split_path",
    "to_plain",
]
