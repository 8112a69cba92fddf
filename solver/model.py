"""
solver/model.py — budowa modelu SAT dla jednego przebiegu analizy.

build_sat_model(dataset) -> SatModel

Kroki:
  1. deklaracja zmiennych i ograniczeń strukturalnych każdego włączonego faktu
  2. zbiór faktów ze źródłem (pytania, potem reguły)
  3. implikacje reguł: guard_i ⇒ (when_i ⇒ efekt_i); pusty when = efekt bezwarunkowy
  4. zakazy wartości dodatnich dla faktów bez źródła
"""

from __future__ import annotations

import logging

import z3

from data_model import NOT_APPLICABLE, Dataset, FactId, Rule

from .encoding import ConstantIndex, declare_fact, encode_condition, forbid_positive
from .types import SatModel, na_var, true_var, val_var

logger = logging.getLogger(__name__)


def facts_with_source(dataset: Dataset) -> set[FactId]:
    """
    Fakty, które może ustawić włączone pytanie albo włączona reguła
    nadająca wartość dodatnią (True lub konkretną stałą).
    """
    sourced: set[FactId] = set()

    for question in dataset.questions:
        if not question.enabled:
            continue
        if question.fact:
            sourced.add(question.fact)
        sourced.update(question.mapped_facts())

    for rule in dataset.rules:
        if not rule.enabled or not dataset.is_enabled_fact(rule.sets):
            continue
        if rule.sets_positive:
            sourced.add(rule.sets)

    return sourced


def _rule_effect(rule: Rule, model: SatModel) -> z3.BoolRef | None:
    """Efekt reguły; None gdy wartość wskazuje niezadeklarowaną propozycję."""
    match rule.value:
        case True:
            name = true_var(rule.sets)
        case False:
            name = true_var(rule.sets)
            if not model.is_declared(name):
                return None
            return z3.Not(model.var(name))
        case str() as value if value == NOT_APPLICABLE:
            name = na_var(rule.sets)
        case value:
            name = val_var(rule.sets, model.index.resolve_or_raw(rule.sets, value))

    if not model.is_declared(name):
        return None
    return model.var(name)


def build_sat_model(dataset: Dataset) -> SatModel:
    """Buduje świeży SatModel z dataset (bez cache między wywołaniami)."""
    model = SatModel(solver=z3.Solver(), index=ConstantIndex(dataset))

    # 1. Fakty
    value_names: dict[FactId, list[str]] = {}
    for fact in dataset.enabled_facts():
        names = dataset.enabled_constant_names(fact.id) if fact.has_values else []
        value_names[fact.id] = names
        declare_fact(model, fact, names)

    # 2. Źródła
    sourced = facts_with_source(dataset)

    # 3. Reguły
    skipped = 0
    for i, rule in enumerate(dataset.rules):
        if not rule.enabled or not dataset.is_enabled_fact(rule.sets):
            continue

        effect = _rule_effect(rule, model)
        if effect is None:
            skipped += 1
            logger.debug("Reguła #%d: wartość %r nie istnieje w modelu — pominięta", i, rule.value)
            continue

        when = encode_condition(rule.when, model)
        implication = effect if when is None else z3.Implies(when, effect)

        guard = z3.Bool(f"rule:{i}")
        model.guards[i] = guard
        model.rule_fact[i] = rule.sets
        model.solver.add(z3.Implies(guard, implication))

    # 4. Fakty bez źródła
    sourceless = 0
    for fact in dataset.enabled_facts():
        if fact.id in sourced:
            continue
        sourceless += 1
        forbid_positive(model, fact, value_names[fact.id])

    logger.debug(
        "Model SAT: %d zmiennych, %d reguł, %d pominiętych, %d faktów bez źródła",
        len(model.vars), len(model.guards), skipped, sourceless,
    )
    return model
