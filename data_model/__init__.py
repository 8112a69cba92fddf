"""
data_model — struktury danych zbioru reguł biznesowych.

Użycie:
  from data_model import Dataset, Fact, Rule, Question, dataset_from_dict, ...

Moduły:
  common     — FactId, ConstantRef, RuleValue, NOT_APPLICABLE, ANY_OF_KEY
  conditions — SimpleCondition, AnyCondition, FactEntry, AnyOfEntry, parse_condition
  facts      — Fact, FactType, ConstantValue
  rules      — Rule, RuleSource
  questions  — Question, ActionCondition, DismissOption
  dataset    — Dataset, dataset_from_dict

Mapowanie na format DatasetData:
  facts             → dict[FactId, Fact]
  questions         → tuple[Question, ...]
  rules             → tuple[Rule, ...]
  action_conditions → dict[str, ActionCondition]
  constants         → dict[str, tuple[ConstantValue, ...]]
"""

from .common import (
    ANY_KEY,
    ANY_OF_KEY,
    NOT_APPLICABLE,
    ConstantRef,
    FactId,
    RuleValue,
    format_value,
)
from .conditions import (
    EMPTY_CONDITION,
    AnyCondition,
    AnyOfEntry,
    Condition,
    ConditionEntry,
    FactEntry,
    SimpleCondition,
    iter_entries,
    iter_simple,
    parse_condition,
    referenced_fact_ids,
)
from .facts import ConstantValue, Fact, FactType
from .rules import Rule, RuleSource
from .questions import ActionCondition, DismissOption, Question
from .dataset import Dataset, dataset_from_dict

__all__ = [
    # common
    "ANY_KEY",
    "ANY_OF_KEY",
    "NOT_APPLICABLE",
    "ConstantRef",
    "FactId",
    "RuleValue",
    "format_value",
    # conditions
    "EMPTY_CONDITION",
    "AnyCondition",
    "AnyOfEntry",
    "Condition",
    "ConditionEntry",
    "FactEntry",
    "SimpleCondition",
    "iter_entries",
    "iter_simple",
    "parse_condition",
    "referenced_fact_ids",
    # facts
    "ConstantValue",
    "Fact",
    "FactType",
    # rules
    "Rule",
    "RuleSource",
    # questions
    "ActionCondition",
    "DismissOption",
    "Question",
    # dataset
    "Dataset",
    "dataset_from_dict",
]
