"""TransTree - multi-locale translation editing engine.

Turns nested per-language translation trees into one flat, change-tracked
editing list and back, resolving each language remote-first with a bundled
local fallback and saving each language independently.

Public API:
    parse_tree / to_plain - JSON-shaped data <-> Leaf/Section trees
    flatten / unflatten - trees <-> ordered flat editing list
    compute_stats / is_modified / is_empty / apply_edit - change tracking
    SourceResolver - remote-first tree resolution with local fallback
    SaveDispatcher - per-language persistence and runtime hot-swap
    TranslationEditor - single-editor session tying the above together

Exceptions:
    TranslationError - Base exception class
    MalformedTreeError - Input cannot be modelled as a translation tree
    PartialSaveError - A save run stopped at a failing language

Submodules:
    transtree.tree - Node types and parsing
    transtree.editing - Flat items, flattening, change tracking
    transtree.sources - Translation API client, fallback loaders, resolver
    transtree.saving - Save dispatcher and i18n runtime interface
    transtree.analysis - Key coverage reports
"""

from .config import EditorConfig
from .diagnostics import (
    MalformedTreeError,
    PartialSaveError,
    TranslationError,
)
from .editing import (
    ChangeStats,
    LeafItem,
    SectionMarker,
    apply_edit,
    compute_stats,
    flatten,
    has_any_changes,
    is_empty,
    is_modified,
    unflatten,
)
from .saving import SaveDispatcher
from .session import TranslationEditor
from .sources import SourceResolver
from .tree import Leaf, Section, parse_tree, to_plain

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transtree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChangeStats",
    "EditorConfig",
    "Leaf",
    "LeafItem",
    "MalformedTreeError",
    "PartialSaveError",
    "SaveDispatcher",
    "Section",
    "SectionMarker",
    "SourceResolver",
    "TranslationEditor",
    "TranslationError",
    "__version__",
    "apply_edit",
    "compute_stats",
    "flatten",
    "has_any_changes",
    "is_empty",
    "is_modified",
    "parse_tree",
    "to_plain",
    "unflatten",
]
