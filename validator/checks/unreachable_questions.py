"""
Unreachable Questions — pytania, które nigdy się nie wyświetlą (SAT, warning).

  show_when niepusty:            UNSAT(show_when)  → pytanie nieosiągalne
  hide_when bez show_when:       UNSAT(¬hide_when) → hide_when jest tautologią
"""

from __future__ import annotations

import z3

from data_model import Dataset, Question
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


def _unreachable_show(
    question: Question, dataset: Dataset, ref: IssueRef,
) -> AnalysisIssue:
    assert question.show_when is not None
    sourceless = find_sourceless_facts(condition_fact_ids(question.show_when), dataset)
    if sourceless:
        suggestion = sourceless_suggestion("show_when", sourceless)
    else:
        suggestion = (
            "The combination of conditions in show_when is impossible given the current rules "
            "and constraints. Review the condition or disable this question."
        )
    return AnalysisIssue(
        severity=IssueSeverity.WARNING,
        message=f'Question "{question.label}" has a show_when condition that can never be satisfied',
        suggestion=suggestion,
        refs=(ref,),
        conditions=(
            IssueCondition(ConditionTag.SHOW_WHEN, question.show_when, tuple(sourceless)),
        ),
    )


def check_unreachable_questions(dataset: Dataset, model: SatModel | None) -> CheckResult:
    model = require_model(model, "check_unreachable_questions")
    issues: list[AnalysisIssue] = []

    for i, question in enumerate(dataset.questions):
        if not question.enabled:
            continue
        ref = IssueRef(RefType.QUESTION, str(i), question.label)

        if question.show_when is not None and not question.show_when.is_empty:
            formula = encode_condition(question.show_when, model)
            if formula is not None and not model.is_satisfiable(formula):
                issues.append(_unreachable_show(question, dataset, ref))
            continue

        if question.hide_when is not None:
            formula = encode_condition(question.hide_when, model)
            if formula is None or model.is_satisfiable(z3.Not(formula)):
                continue
            issues.append(AnalysisIssue(
                severity=IssueSeverity.WARNING,
                message=(
                    f'Question "{question.label}" has a hide_when condition that is always true '
                    f"— question is always hidden"
                ),
                suggestion=(
                    "The hide_when condition is satisfied for every possible state. "
                    "Either update the condition or disable this question."
                ),
                refs=(ref,),
                conditions=(IssueCondition(ConditionTag.HIDE_WHEN, question.hide_when),),
            ))

    return CheckResult(
        id=CheckId.UNREACHABLE_QUESTIONS,
        name="Unreachable Questions",
        description="Questions whose show_when can never be satisfied or hide_when is always true",
        issues=tuple(issues),
    )
