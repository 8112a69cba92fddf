"""Dead Facts — włączone fakty, do których nic się nie odwołuje (skan grafu, warning)."""

from __future__ import annotations

from data_model import Dataset, FactId

from ..sourceless import condition_fact_ids
from ..types import AnalysisIssue, CheckId, CheckResult, IssueRef, IssueSeverity, RefType


def referenced_facts(dataset: Dataset) -> set[FactId]:
    """Fakty, do których odwołuje się którekolwiek włączone pytanie, reguła lub akcja."""
    referenced: set[FactId] = set()

    for question in dataset.questions:
        if not question.enabled:
            continue
        if question.fact:
            referenced.add(question.fact)
        referenced.update(question.mapped_facts())
        referenced.update(condition_fact_ids(question.show_when))
        referenced.update(condition_fact_ids(question.hide_when))

    for rule in dataset.rules:
        if not rule.enabled:
            continue
        referenced.add(rule.sets)
        referenced.update(condition_fact_ids(rule.when))

    for action in dataset.action_conditions.values():
        if not action.enabled:
            continue
        referenced.update(condition_fact_ids(action.include_when))
        referenced.update(condition_fact_ids(action.exclude_when))

    return referenced


def check_dead_facts(dataset: Dataset) -> CheckResult:
    referenced = referenced_facts(dataset)

    issues = tuple(
        AnalysisIssue(
            severity=IssueSeverity.WARNING,
            message=f'Fact "{fact.id}" is never referenced by any question, rule, or action condition',
            suggestion=(
                "If this fact is no longer needed, disable it. "
                "If it's reserved for future use, this warning is safe to ignore."
            ),
            refs=(IssueRef(RefType.FACT, fact.id),),
        )
        for fact in dataset.enabled_facts()
        if fact.id not in referenced
    )

    return CheckResult(
        id=CheckId.DEAD_FACTS,
        name="Dead Facts",
        description="Facts that are defined but never referenced anywhere",
        issues=issues,
    )
