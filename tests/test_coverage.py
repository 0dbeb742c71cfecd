"""Tests for analysis/coverage.py.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import given, settings

from tests.strategies.trees import shared_schema_bundles
from transtree.analysis import collect_paths, coverage_report, orphan_paths
from transtree.tree import Section, parse_tree


class TestCollectPaths:
    def test_pre_order_leaf_paths(self, en_tree: Section) -> None:
        assert collect_paths(en_tree) == (
            "nav.home",
            "nav.settings",
            "categories.title",
            "categories.actions.create",
            "categories.actions.delete",
            "common.save",
            "common.cancel",
        )

    def test_empty_sections_contribute_nothing(self) -> None:
        assert collect_paths(parse_tree({"empty": {}, "x": "X"})) == ("x",)


class TestCoverageReport:
    def test_complete_bundle(self, bundle: dict[str, Section]) -> None:
        report = coverage_report(bundle)

        assert report.complete_languages == ("en", "es")
        assert report.incomplete_languages == ()
        assert report.get("es").completeness == 100.0  # type: ignore[union-attr]

    def test_missing_keys(self) -> None:
        report = coverage_report(
            {
                "en": parse_tree({"a": "A", "b": "B", "c": "C", "d": "D"}),
                "de": parse_tree({"a": "A", "c": "C", "e": "E"}),
            }
        )

        assert report.paths == ("a", "b", "c", "d", "e")
        en = report.get("en")
        de = report.get("de")
        assert en is not None and de is not None
        assert en.missing_paths == ("e",)
        assert de.missing_paths == ("b", "d")
        assert de.present == 3
        assert de.completeness == 60.0
        assert report.incomplete_languages == ("en", "de")

    def test_unknown_language(self, bundle: dict[str, Section]) -> None:
        assert coverage_report(bundle).get("fr") is None

    def test_empty_trees_are_complete(self) -> None:
        report = coverage_report({"en": Section()})

        assert report.get("en").completeness == 100.0  # type: ignore[union-attr]
        assert report.get("en").is_complete  # type: ignore[union-attr]

    @given(shared_schema_bundles())
    @settings(deadline=None)
    def test_shared_schema_is_complete(self, generated: tuple[dict[str, Section], list[str]]) -> None:
        bundle, languages = generated

        assert coverage_report(bundle).complete_languages == tuple(languages)


class TestOrphanPaths:
    def test_keys_missing_from_base(self) -> None:
        bundle = {
            "en": parse_tree({"a": "A"}),
            "de": parse_tree({"a": "A", "extra": {"x": "X"}}),
            "es": parse_tree({"a": "A"}),
        }

        assert orphan_paths(bundle, "en") == {"de": ("extra.x",)}

    def test_aligned_bundle_has_none(self, bundle: dict[str, Section]) -> None:
        assert orphan_paths(bundle, "en") == {}

    def test_missing_base_orphans_everything(self) -> None:
        bundle = {"de": parse_tree({"a": "A"})}

        assert orphan_paths(bundle, "en") == {"de": ("a",)}
