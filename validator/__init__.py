"""
validator — analiza zbioru reguł biznesowych pod kątem defektów logicznych.

Interfejs publiczny:
  run_analysis(dataset)            — główny punkt wejścia, zwraca AnalysisReport
  build_entity_issue_index(report) — "typ:id" → lista problemów
  find_sourceless_facts(ids, ds)   — fakty bez żadnego źródła
  AnalysisReport, CheckResult, AnalysisIssue, IssueRef, IssueCondition — typy raportu
  CheckId, IssueSeverity, RefType, ConditionTag — stałe

Typowe użycie:
    from solver import load_dataset_json
    from validator import run_analysis

    report = run_analysis(load_dataset_json("dataset.json"))
    for check in report.checks:
        for issue in check.issues:
            print(check.id, issue.severity, issue.message)
"""

from .types import (
    AnalysisIssue,
    AnalysisReport,
    CheckId,
    CheckResult,
    ConditionTag,
    IssueCondition,
    IssueRef,
    IssueSeverity,
    RefType,
)
from .sourceless import condition_fact_ids, find_sourceless_facts
from .analysis import build_entity_issue_index, run_analysis

__all__ = [
    "AnalysisIssue",
    "AnalysisReport",
    "CheckId",
    "CheckResult",
    "ConditionTag",
    "IssueCondition",
    "IssueRef",
    "IssueSeverity",
    "RefType",
    "condition_fact_ids",
    "find_sourceless_facts",
    "build_entity_issue_index",
    "run_analysis",
]
