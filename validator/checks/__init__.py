"""
validator.checks — sześć sprawdzeń zbioru danych.

Skany grafu (bez solvera):
  check_dead_facts(dataset)
  check_undefined_refs(dataset)

Zapytania SAT (wymagają SatModel):
  check_contradictory_rules(dataset, model)
  check_unreachable_questions(dataset, model)
  check_unreachable_actions(dataset, model)
  check_include_exclude_overlap(dataset, model)
"""

from .contradictory_rules import check_contradictory_rules
from .dead_facts import check_dead_facts, referenced_facts
from .include_exclude_overlap import check_include_exclude_overlap
from .undefined_refs import check_undefined_refs
from .unreachable_actions import check_unreachable_actions
from .unreachable_questions import check_unreachable_questions

__all__ = [
    "check_contradictory_rules",
    "check_dead_facts",
    "check_include_exclude_overlap",
    "check_undefined_refs",
    "check_unreachable_actions",
    "check_unreachable_questions",
    "referenced_facts",
]
