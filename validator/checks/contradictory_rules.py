"""
Contradictory Rules — reguły tego samego faktu z różnymi wartościami,
których warunki mogą być spełnione jednocześnie (SAT, error).

Zapytanie dla pary (A, B): SAT(when_A ∧ when_B) przy wyłączonych implikacjach
wszystkich reguł ustawiających ten fakt — inaczej sprzeczne efekty samych
reguł czyniłyby każdą parę niespełnialną. Pusty warunek = TRUE.
"""

from __future__ import annotations

import z3

from data_model import Dataset, Rule, format_value
from solver import SatModel, encode_condition
from solver.types import TRUE

from ._sat import require_model
from ..types import AnalysisIssue, CheckId, CheckResult, IssueRef, IssueSeverity, RefType


def _group_by_fact(dataset: Dataset) -> dict[str, list[tuple[int, Rule]]]:
    groups: dict[str, list[tuple[int, Rule]]] = {}
    for i, rule in enumerate(dataset.rules):
        if not rule.enabled or not dataset.is_enabled_fact(rule.sets):
            continue
        groups.setdefault(rule.sets, []).append((i, rule))
    return groups


def _same_value(a: Rule, b: Rule) -> bool:
    return type(a.value) is type(b.value) and a.value == b.value


def check_contradictory_rules(dataset: Dataset, model: SatModel | None) -> CheckResult:
    model = require_model(model, "check_contradictory_rules")
    issues: list[AnalysisIssue] = []

    for fact_id, rules in _group_by_fact(dataset).items():
        excluded = model.rules_setting(fact_id)
        encoded = [encode_condition(rule.when, model) for _, rule in rules]

        for x in range(len(rules)):
            for y in range(x + 1, len(rules)):
                (ia, a), (ib, b) = rules[x], rules[y]
                if _same_value(a, b):
                    continue

                cond_a = encoded[x] if encoded[x] is not None else TRUE
                cond_b = encoded[y] if encoded[y] is not None else TRUE
                if not model.is_satisfiable(z3.And(cond_a, cond_b), exclude_rules=excluded):
                    continue

                issues.append(AnalysisIssue(
                    severity=IssueSeverity.ERROR,
                    message=(
                        f'Rules #{ia} and #{ib} can both fire for "{fact_id}" with different values '
                        f"({format_value(a.value)} vs {format_value(b.value)})"
                    ),
                    suggestion=(
                        "Make the conditions mutually exclusive so only one can fire, or disable "
                        "one of the rules. Review both rules' \"when\" conditions to add a "
                        "distinguishing constraint."
                    ),
                    refs=(
                        IssueRef(RefType.RULE, str(ia), f"Rule #{ia}"),
                        IssueRef(RefType.RULE, str(ib), f"Rule #{ib}"),
                        IssueRef(RefType.FACT, fact_id),
                    ),
                ))

    return CheckResult(
        id=CheckId.CONTRADICTORY_RULES,
        name="Contradictory Rules",
        description="Rules that set the same fact to different values under overlapping conditions",
        issues=tuple(issues),
    )
