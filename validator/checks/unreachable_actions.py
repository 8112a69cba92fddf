"""Unreachable Actions — include_when, którego nie da się spełnić (SAT, warning)."""

from __future__ import annotations

from data_model import Dataset
from solver import SatModel, encode_condition

from ._sat import require_model
from ..sourceless import condition_fact_ids, find_sourceless_facts, sourceless_suggestion
from ..types import (
    AnalysisIssue,
    CheckId,
    CheckResult,
    ConditionTag,
    IssueCondition,
    IssueRef,
    IssueSeverity,
    RefType,
)


def check_unreachable_actions(dataset: Dataset, model: SatModel | None) -> CheckResult:
    model = require_model(model, "check_unreachable_actions")
    issues: list[AnalysisIssue] = []

    for action_id, action in dataset.action_conditions.items():
        # pusty include_when pasuje do wszystkich
        if not action.enabled or action.include_when.is_empty:
            continue

        formula = encode_condition(action.include_when, model)
        if formula is None or model.is_satisfiable(formula):
            continue

        sourceless = find_sourceless_facts(condition_fact_ids(action.include_when), dataset)
        if sourceless:
            suggestion = sourceless_suggestion("include_when", sourceless)
        else:
            suggestion = (
                "No combination of user answers can match this condition. The condition may "
                "reference values that conflict with each other, or facts that have no source. "
                "Review the include_when or disable this action condition."
            )

        issues.append(AnalysisIssue(
            severity=IssueSeverity.WARNING,
            message=f"Action {action_id} has an include_when condition that can never be satisfied",
            suggestion=suggestion,
            refs=(IssueRef(RefType.ACTION, action_id),),
            conditions=(
                IssueCondition(ConditionTag.INCLUDE_WHEN, action.include_when, tuple(sourceless)),
            ),
        ))

    return CheckResult(
        id=CheckId.UNREACHABLE_ACTIONS,
        name="Unreachable Actions",
        description="Actions whose include_when condition can never be satisfied",
        issues=tuple(issues),
    )
