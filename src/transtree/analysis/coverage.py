"""Key coverage across the languages of a translation bundle.

The union of leaf paths over all languages is the reference key set; each
language's coverage is the share of that set it defines. orphan_paths()
reports keys that flattening will not visit because the base language lacks
them.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from transtree.tree.types import DotPath, LanguageCode, Leaf, Section, join_path

__all__ = [
    "CoverageReport",
    "LanguageCoverage",
    "collect_paths",
    "coverage_report",
    "orphan_paths",
]


def _iter_leaf_paths(section: Section) -> Iterator[DotPath]:
    stack = [("", iter(section.items()))]
    while stack:
        prefix, children = stack[-1]
        entry = next(children, None)
        if entry is None:
            stack.pop()
            continue
        key, node = entry
        path = join_path(prefix, key)
        if isinstance(node, Leaf):
            yield path
        else:
            stack.append((path, iter(node.items())))


def collect_paths(tree: Section) -> tuple[DotPath, ...]:
    """Leaf paths of a tree in pre-order."""
    return tuple(_iter_leaf_paths(tree))


@dataclass(frozen=True, slots=True)
class LanguageCoverage:
    """Coverage of one language against the bundle's key union.

    Attributes:
        language: Language code
        present: Number of reference keys the language defines
        total: Size of the reference key set
        missing_paths: Reference keys the language lacks, in reference order
    """

    language: LanguageCode
    present: int
    total: int
    missing_paths: tuple[DotPath, ...] = ()

    @property
    def completeness(self) -> float:
        """Percentage of reference keys present (100.0 for an empty set)."""
        if self.total == 0:
            return 100.0
        return round(self.present / self.total * 100, 1)

    @property
    def is_complete(self) -> bool:
        return not self.missing_paths


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Coverage of every language in a bundle.

    Attributes:
        paths: Reference key set (union of leaf paths, first-seen order)
        languages: One LanguageCoverage per language, in bundle order
    """

    paths: tuple[DotPath, ...]
    languages: tuple[LanguageCoverage, ...]

    @property
    def complete_languages(self) -> tuple[LanguageCode, ...]:
        return tuple(c.language for c in self.languages if c.is_complete)

    @property
    def incomplete_languages(self) -> tuple[LanguageCode, ...]:
        return tuple(c.language for c in self.languages if not c.is_complete)

    def get(self, language: LanguageCode) -> LanguageCoverage | None:
        """Coverage entry for language, or None."""
        return next((c for c in self.languages if c.language == language), None)


def coverage_report(bundle: Mapping[LanguageCode, Section]) -> CoverageReport:
    """Compute per-language key coverage for a bundle.

    Example:
        >>> report = coverage_report({"en": en_tree, "de": de_tree})
        >>> report.get("de").completeness
        87.5
    """
    per_language = {lang: collect_paths(tree) for lang, tree in bundle.items()}
    reference = tuple(dict.fromkeys(path for paths in per_language.values() for path in paths))

    entries = []
    for lang, paths in per_language.items():
        own = set(paths)
        missing = tuple(path for path in reference if path not in own)
        entries.append(
            LanguageCoverage(
                language=lang,
                present=len(reference) - len(missing),
                total=len(reference),
                missing_paths=missing,
            )
        )
    return CoverageReport(paths=reference, languages=tuple(entries))


def orphan_paths(
    bundle: Mapping[LanguageCode, Section],
    base_language: LanguageCode,
) -> dict[LanguageCode, tuple[DotPath, ...]]:
    """Leaf paths each non-base language defines but the base lacks.

    Only languages with at least one orphan appear in the result. A missing
    base tree makes every path of every other language an orphan.
    """
    base = bundle.get(base_language)
    known = set(collect_paths(base)) if base is not None else set()
    orphans: dict[LanguageCode, tuple[DotPath, ...]] = {}
    for lang, tree in bundle.items():
        if lang == base_language:
            continue
        extra = tuple(path for path in collect_paths(tree) if path not in known)
        if extra:
            orphans[lang] = extra
    return orphans
