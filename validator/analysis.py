"""
validator/analysis.py — główny punkt wejścia analizy.

run_analysis(dataset) -> AnalysisReport

Etapy (stała kolejność, skany grafu najpierw — są tańsze i nie zależą od modelu):
  1 — Dead Facts
  2 — Undefined References
  3 — Contradictory Rules        (SAT)
  4 — Unreachable Questions      (SAT)
  5 — Unreachable Actions        (SAT)
  6 — Include/Exclude Overlap    (SAT)

Model SAT jest budowany od zera przy każdym wywołaniu i porzucany po nim.
"""

from __future__ import annotations

import logging

from data_model import Dataset
from solver import build_sat_model

from .checks import (
    check_contradictory_rules,
    check_dead_facts,
    check_include_exclude_overlap,
    check_undefined_refs,
    check_unreachable_actions,
    check_unreachable_questions,
)
from .types import AnalysisIssue, AnalysisReport, CheckResult, IssueSeverity

logger = logging.getLogger(__name__)


def run_analysis(dataset: Dataset) -> AnalysisReport:
    """
    Uruchamia wszystkie sprawdzenia na jednej migawce zbioru danych.

    Nie podnosi wyjątków dla poprawnie zbudowanego Dataset — błędne odwołania
    w danych trafiają do raportu jako problemy.
    """
    model = build_sat_model(dataset)

    checks: tuple[CheckResult, ...] = (
        check_dead_facts(dataset),
        check_undefined_refs(dataset),
        check_contradictory_rules(dataset, model),
        check_unreachable_questions(dataset, model),
        check_unreachable_actions(dataset, model),
        check_include_exclude_overlap(dataset, model),
    )

    error_count = 0
    warning_count = 0
    for check in checks:
        logger.debug("%s: %d problem(ów)", check.id, len(check.issues))
        for issue in check.issues:
            if issue.severity is IssueSeverity.ERROR:
                error_count += 1
            else:
                warning_count += 1

    return AnalysisReport(
        checks=checks,
        total_issues=error_count + warning_count,
        error_count=error_count,
        warning_count=warning_count,
    )


def build_entity_issue_index(report: AnalysisReport) -> dict[str, list[AnalysisIssue]]:
    """Indeks "typ:id" → problemy (do oznaczania encji w widokach list)."""
    index: dict[str, list[AnalysisIssue]] = {}
    for check in report.checks:
        for issue in check.issues:
            for ref in issue.refs:
                index.setdefault(ref.key, []).append(issue)
    return index
