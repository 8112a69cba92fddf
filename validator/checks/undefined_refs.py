"""
Undefined References — odwołania do nieistniejących faktów lub wartości (skan grafu, error).

Etapy dla każdego włączonego pytania / reguły / akcji:
  A — pola typu "sets" (question.fact, klucze mapowań facts, rule.sets)
  B — klucze warunków i cele any_of
  C — wartości stałych (nazwy i numeryczne id) względem grupy values_ref faktu
"""

from __future__ import annotations

from data_model import (
    NOT_APPLICABLE,
    AnyOfEntry,
    Condition,
    ConstantRef,
    Dataset,
    FactEntry,
    FactId,
    iter_entries,
)
from solver import ConstantIndex

from ..types import AnalysisIssue, CheckId, CheckResult, IssueRef, IssueSeverity, RefType


class _RefChecker:
    """Zbiera problemy dla jednego zbioru danych."""

    def __init__(self, dataset: Dataset) -> None:
        self._dataset = dataset
        self._index = ConstantIndex(dataset)
        self.issues: list[AnalysisIssue] = []

    # ------------------------------------------------------------------
    # Pomocnicze
    # ------------------------------------------------------------------

    def _error(self, message: str, suggestion: str, ref: IssueRef) -> None:
        self.issues.append(AnalysisIssue(
            severity=IssueSeverity.ERROR,
            message=message,
            suggestion=suggestion,
            refs=(ref,),
        ))

    def _missing_fact_suggestion(self, fact_id: FactId) -> str:
        if fact_id in self._dataset.facts:
            return f'Fact "{fact_id}" exists but is disabled. Re-enable it or update the condition.'
        return f'Check for typos in the fact name. No fact called "{fact_id}" exists in the dataset.'

    def _fact_problem(self, fact_id: FactId) -> str | None:
        """None gdy fakt istnieje i jest włączony, w przeciwnym razie "undefined" / "disabled"."""
        fact = self._dataset.facts.get(fact_id)
        if fact is None:
            return "undefined"
        if not fact.enabled:
            return "disabled"
        return None

    # ------------------------------------------------------------------
    # Etap A: pola "sets"
    # ------------------------------------------------------------------

    def check_sets(self, fact_id: FactId, context: str, ref: IssueRef, fix: str) -> None:
        problem = self._fact_problem(fact_id)
        if problem is None:
            return
        suggestion = fix
        if problem == "disabled":
            suggestion = f'Fact "{fact_id}" exists but is disabled. Re-enable it or {fix[0].lower()}{fix[1:]}'
        self._error(f'{context} sets {problem} fact "{fact_id}"', suggestion, ref)

    # ------------------------------------------------------------------
    # Etap B + C: warunki
    # ------------------------------------------------------------------

    def check_condition(self, condition: Condition | None, context: str, ref: IssueRef) -> None:
        if condition is None:
            return
        for entry in iter_entries(condition):
            match entry:
                case AnyOfEntry(fact_ids=fact_ids):
                    for fact_id in fact_ids:
                        problem = self._fact_problem(fact_id)
                        if problem is not None:
                            self._error(
                                f'{context} references {problem} fact "{fact_id}" in any_of',
                                self._missing_fact_suggestion(fact_id),
                                ref,
                            )
                case FactEntry(fact_id=fact_id, value=value):
                    problem = self._fact_problem(fact_id)
                    if problem is not None:
                        self._error(
                            f'{context} references {problem} fact "{fact_id}"',
                            self._missing_fact_suggestion(fact_id),
                            ref,
                        )
                        continue
                    self.check_values(fact_id, value, context, ref)

    def check_values(self, fact_id: FactId, value: object, context: str, ref: IssueRef) -> None:
        group = self._index.group_name(fact_id)
        if group is None:
            return

        match value:
            case bool():
                return
            case str() as text if text == NOT_APPLICABLE:
                return
            case str() | int():
                values: tuple[ConstantRef, ...] = (value,)
            case tuple():
                values = value
            case _:
                return

        for raw in values:
            if self._index.is_valid_ref(fact_id, raw):
                continue
            if not self._index.has_group(fact_id):
                suggestion = (
                    f'Fact "{fact_id}" points at constants group "{group}", which does not exist. '
                    f"Create the group or fix the fact's values_ref."
                )
            elif isinstance(raw, int):
                suggestion = (
                    f'This value doesn\'t match any name or ID in the "{group}" constants group. '
                    f"It may have been removed, renamed or disabled."
                )
            else:
                suggestion = (
                    f'This value doesn\'t match any enabled constant in the "{group}" group. '
                    f"Check for typos or add the missing constant."
                )
            self._error(
                f'{context} references unknown value "{raw}" for fact "{fact_id}"',
                suggestion,
                ref,
            )


def check_undefined_refs(dataset: Dataset) -> CheckResult:
    checker = _RefChecker(dataset)

    for i, question in enumerate(dataset.questions):
        if not question.enabled:
            continue
        ref = IssueRef(RefType.QUESTION, str(i), question.label)
        context = f'Question "{question.label}"'
        if question.fact:
            checker.check_sets(
                question.fact, context, ref,
                f'Create the fact "{question.fact}" or update this question to point to an existing fact.',
            )
        for fact_id in question.mapped_facts():
            checker.check_sets(
                fact_id, f"{context} option mapping", ref,
                f'Create the fact "{fact_id}" or remove it from the option mappings.',
            )
        checker.check_condition(question.show_when, f"{context} show_when", ref)
        checker.check_condition(question.hide_when, f"{context} hide_when", ref)

    for i, rule in enumerate(dataset.rules):
        if not rule.enabled:
            continue
        ref = IssueRef(RefType.RULE, str(i), f"Rule #{i} (sets {rule.sets})")
        checker.check_sets(
            rule.sets, f"Rule #{i}", ref,
            f'Create the fact "{rule.sets}" or disable this rule.',
        )
        if dataset.is_enabled_fact(rule.sets):
            checker.check_values(rule.sets, rule.value, f"Rule #{i} value", ref)
        checker.check_condition(rule.when, f"Rule #{i}", ref)

    for action_id, action in dataset.action_conditions.items():
        if not action.enabled:
            continue
        ref = IssueRef(RefType.ACTION, action_id)
        checker.check_condition(action.include_when, f"Action {action_id} include_when", ref)
        checker.check_condition(action.exclude_when, f"Action {action_id} exclude_when", ref)

    return CheckResult(
        id=CheckId.UNDEFINED_REFS,
        name="Undefined References",
        description="Conditions that reference non-existent facts or values",
        issues=tuple(checker.issues),
    )
