from __future__ import annotations

import json

import pytest

from data_model import Dataset
from validator import CheckId, IssueSeverity, RefType, build_entity_issue_index, run_analysis

from conftest import bool_fact, constants, enum_fact, make_dataset, question


@pytest.fixture
def messy_dataset() -> Dataset:
    """Zbiór danych z co najmniej jednym problemem w każdym sprawdzeniu."""
    return make_dataset(
        facts={
            "a": bool_fact(),
            "b": bool_fact(),
            "x": bool_fact(core=False),
            "orphan": bool_fact(),
            "unsourced": bool_fact(),
            "size": enum_fact("sizes"),
        },
        questions=[
            question("a"),
            question("b"),
            question("size", type="enum"),
            question(label="Follow-up", show_when={"unsourced": True}),
        ],
        rules=[
            {"sets": "x", "value": True, "when": {"a": True}},
            {"sets": "x", "value": False, "when": {"b": True, "typo_fact": True}},
            {"sets": "x", "value": False, "when": {"b": True}},
        ],
        action_conditions={
            "act-1": {"include_when": {"size": ["Small"]}, "exclude_when": {"size": ["Small", "Medium"]}},
            "act-2": {"include_when": {"unsourced": True}},
            "act-3": {"include_when": {}},
        },
        constant_groups={"sizes": constants("Small", "Medium")},
    )


def test_checks_run_in_fixed_order(messy_dataset) -> None:
    report = run_analysis(messy_dataset)

    assert [c.id for c in report.checks] == [
        CheckId.DEAD_FACTS,
        CheckId.UNDEFINED_REFS,
        CheckId.CONTRADICTORY_RULES,
        CheckId.UNREACHABLE_QUESTIONS,
        CheckId.UNREACHABLE_ACTIONS,
        CheckId.INCLUDE_EXCLUDE_OVERLAP,
    ]
    assert all(c.issues for c in report.checks)


def test_totals_match_issue_counts(messy_dataset) -> None:
    report = run_analysis(messy_dataset)
    issues = [i for c in report.checks for i in c.issues]

    assert report.total_issues == len(issues)
    assert report.error_count + report.warning_count == report.total_issues
    assert report.error_count == sum(1 for i in issues if i.severity is IssueSeverity.ERROR)


def test_contradictions_are_reported_per_pair(messy_dataset) -> None:
    report = run_analysis(messy_dataset)

    pairs = [
        tuple(r.id for r in issue.refs if r.type is RefType.RULE)
        for issue in report.check(CheckId.CONTRADICTORY_RULES).issues
    ]

    # reguła #1 odwołuje się do nieistniejącego faktu (FALSE), więc nie odpala nigdy
    assert pairs == [("0", "2")]


def test_report_is_idempotent(messy_dataset) -> None:
    first = json.dumps(run_analysis(messy_dataset).to_dict())
    second = json.dumps(run_analysis(messy_dataset).to_dict())

    assert first == second


def test_report_dict_uses_camel_case_keys(messy_dataset) -> None:
    out = run_analysis(messy_dataset).to_dict()

    assert set(out) == {"checks", "totalIssues", "errorCount", "warningCount"}
    assert out["checks"][0]["id"] == "dead-facts"
    assert out["checks"][0]["name"] == "Dead Facts"
    issue = out["checks"][0]["issues"][0]
    assert issue["severity"] == "warning"
    assert issue["refs"] == [{"type": "fact", "id": "orphan"}]


def test_clean_dataset_has_no_issues() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact()},
        questions=[question("a")],
        action_conditions={"act": {"include_when": {"a": True}}},
    )

    report = run_analysis(dataset)

    assert report.total_issues == 0
    assert all(c.issues == () for c in report.checks)


def test_empty_dataset_is_analysed() -> None:
    report = run_analysis(make_dataset())

    assert len(report.checks) == 6
    assert report.total_issues == 0


def test_issues_for_and_entity_index(messy_dataset) -> None:
    report = run_analysis(messy_dataset)
    index = build_entity_issue_index(report)

    assert report.issues_for(RefType.FACT, "orphan") == index["fact:orphan"]
    assert len(index["action:act-1"]) == 1
    assert "action:act-3" not in index
    # reguła #1: brakujący fakt w warunku
    assert any("typo_fact" in i.message for i in report.issues_for("rule", "1"))
