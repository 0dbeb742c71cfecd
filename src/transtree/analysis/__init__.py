"""Bundle analysis: key coverage and base-schema orphans.

Python 3.13+.
"""

from .coverage import (
    CoverageReport,
    LanguageCoverage,
    collect_paths,
    coverage_report,
    orphan_paths,
)

__all__ = [
    "CoverageReport",
    "LanguageCoverage",
    "collect_paths",
    "coverage_report",
    "orphan_paths",
]
