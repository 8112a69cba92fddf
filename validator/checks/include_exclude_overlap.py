"""
Include/Exclude Overlap — akcje, dla których include_when i exclude_when
mogą być spełnione jednocześnie (SAT, warning).
"""

from __future__ import annotations

import z3

from data_model import Dataset
from solver import SatModel, encode_condition

from ._sat import require_model
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


def check_include_exclude_overlap(dataset: Dataset, model: SatModel | None) -> CheckResult:
    model = require_model(model, "check_include_exclude_overlap")
    issues: list[AnalysisIssue] = []

    for action_id, action in dataset.action_conditions.items():
        if not action.enabled:
            continue
        if action.include_when.is_empty or action.exclude_when.is_empty:
            continue

        include = encode_condition(action.include_when, model)
        exclude = encode_condition(action.exclude_when, model)
        if include is None or exclude is None:
            continue

        if not model.is_satisfiable(z3.And(include, exclude)):
            continue

        issues.append(AnalysisIssue(
            severity=IssueSeverity.WARNING,
            message="include_when and exclude_when conditions can both be true simultaneously",
            suggestion=(
                "Some users will match both conditions, making the result ambiguous. Narrow "
                "either the include_when or exclude_when so they don't overlap."
            ),
            refs=(IssueRef(RefType.ACTION, action_id),),
            conditions=(
                IssueCondition(ConditionTag.INCLUDE_WHEN, action.include_when),
                IssueCondition(ConditionTag.EXCLUDE_WHEN, action.exclude_when),
            ),
        ))

    return CheckResult(
        id=CheckId.INCLUDE_EXCLUDE_OVERLAP,
        name="Include/Exclude Overlap",
        description="Actions where include_when and exclude_when can both be true at the same time",
        issues=tuple(issues),
    )
