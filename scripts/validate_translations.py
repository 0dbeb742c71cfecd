#!/usr/bin/env python3
"""Validate translation key coverage across bundled locale files.

Reads <directory>/<language>/translation.json for each language, builds the
union of leaf keys, and reports per-language completeness with the first
few missing keys.

Usage:
    python scripts/validate_translations.py locales
    python scripts/validate_translations.py locales --languages en es de --strict

Exit Codes:
    0: Coverage reported (and, with --strict, every language complete)
    1: --strict and at least one language is incomplete
    3: A translation file could not be loaded or parsed

Python 3.13+.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from transtree.analysis import collect_paths, coverage_report
from transtree.diagnostics import LoadError, TranslationError
from transtree.sources import PathFallbackLoader
from transtree.tree import Section, parse_tree

if TYPE_CHECKING:
    from collections.abc import Sequence

MISSING_PREVIEW = 5


def discover_languages(directory: Path) -> list[str]:
    """Languages with a translation.json under directory, sorted."""
    return sorted(p.parent.name for p in directory.glob("*/translation.json"))


def load_bundle(directory: Path, languages: Sequence[str]) -> dict[str, Section]:
    """Load and parse every language's translation.json.

    Raises:
        LoadError: If any language fails; every language is still attempted
    """
    loader = PathFallbackLoader(f"{directory}/{{locale}}/translation.json", root_dir=str(directory))
    bundle: dict[str, Section] = {}
    failed: list[str] = []
    for language in languages:
        try:
            tree = parse_tree(loader.load(language))
        except (OSError, ValueError, TranslationError) as e:
            print(f"[FAIL] Failed to load {language}: {e}")
            failed.append(language)
            continue
        bundle[language] = tree
        print(f"[OK] Loaded {language}: {len(collect_paths(tree))} keys")

    if failed:
        msg = f"Could not load translations for: {', '.join(failed)}"
        raise LoadError(msg, languages=tuple(failed))
    return bundle


def report(bundle: dict[str, Section]) -> bool:
    """Print the coverage report; return True if every language is complete."""
    coverage = coverage_report(bundle)
    print(f"\nTotal unique keys: {len(coverage.paths)}\n")

    for entry in coverage.languages:
        print(
            f"{entry.language.upper()}: {entry.completeness:.1f}% complete "
            f"({entry.present}/{entry.total} keys)"
        )
        if entry.missing_paths:
            preview = ", ".join(entry.missing_paths[:MISSING_PREVIEW])
            more = "..." if len(entry.missing_paths) > MISSING_PREVIEW else ""
            print(f"  Missing keys: {preview}{more}")

    print("\nSummary:")
    print(f"  Languages with 100% coverage: {', '.join(coverage.complete_languages) or 'None'}")
    print(f"  Languages needing attention: {', '.join(coverage.incomplete_languages) or 'None'}")
    return not coverage.incomplete_languages


def main(argv: Sequence[str] | None = None) -> int:
    """Run the coverage check.

    Returns:
        Process exit code (see module docstring)
    """
    parser = argparse.ArgumentParser(description="Report translation key coverage per language")
    parser.add_argument("directory", type=Path, help="Directory holding <language>/translation.json")
    parser.add_argument(
        "--languages",
        nargs="+",
        help="Languages to check (default: every subdirectory with a translation.json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any language is missing keys",
    )
    args = parser.parse_args(argv)

    directory: Path = args.directory.resolve()
    languages = args.languages or discover_languages(directory)
    if not languages:
        print(f"[FAIL] No translation files found under {directory}")
        return 3

    try:
        bundle = load_bundle(directory, languages)
    except LoadError as e:
        print(f"\n[FAIL] {e}")
        return 3

    complete = report(bundle)
    if args.strict and not complete:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
