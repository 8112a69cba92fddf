"""
solver/types.py — model SAT jednego przebiegu analizy.

SatModel trzyma solver z3 z ograniczeniami strukturalnymi i regułami,
tabelę zadeklarowanych zmiennych zdaniowych oraz ConstantIndex.
Model jest budowany raz na przebieg i używany przez wszystkie sprawdzenia
wyłącznie do odczytu (solve_assuming nie zmienia zbioru ograniczeń).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import z3

if TYPE_CHECKING:
    from .encoding import ConstantIndex

logger = logging.getLogger(__name__)

TRUE = z3.BoolVal(True)
FALSE = z3.BoolVal(False)


def fact_var(fact_id: str, suffix: str) -> str:
    """Nazwa zmiennej zdaniowej: fact:{id}:true | fact:{id}:na | fact:{id}:val:{name}."""
    return f"fact:{fact_id}:{suffix}"


def true_var(fact_id: str) -> str:
    return fact_var(fact_id, "true")


def na_var(fact_id: str) -> str:
    return fact_var(fact_id, "na")


def val_var(fact_id: str, name: str) -> str:
    return fact_var(fact_id, f"val:{name}")


@dataclass
class SatModel:
    """
    Model SAT zbudowany z jednego Dataset.

    - solver:   z3.Solver z ograniczeniami strukturalnymi, regułami i zakazami
    - vars:     nazwa zmiennej → z3.Bool (tylko zadeklarowane propozycje)
    - index:    rozwiązywanie numerycznych id stałych na nazwy
    - guards:   indeks reguły → literał strażnika jej implikacji
    - rule_fact: indeks reguły → ustawiany fakt (dla wyłączania grup reguł)
    """
    solver: z3.Solver
    index: ConstantIndex
    vars: dict[str, z3.BoolRef] = field(default_factory=dict)
    guards: dict[int, z3.BoolRef] = field(default_factory=dict)
    rule_fact: dict[int, str] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Zmienne
    # ------------------------------------------------------------------

    def declare(self, name: str) -> z3.BoolRef:
        var = self.vars.get(name)
        if var is None:
            var = z3.Bool(name)
            self.vars[name] = var
        return var

    def var(self, name: str) -> z3.BoolRef:
        """
        Zmienna zadeklarowana pod nazwą name; dla niezadeklarowanej — FALSE.

        Odwołanie do wyłączonego / nieistniejącego faktu lub wyłączonej stałej
        nigdy nie jest spełnione (i nigdy nie tworzy wolnej zmiennej).
        """
        return self.vars.get(name, FALSE)

    def is_declared(self, name: str) -> bool:
        return name in self.vars

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def solve_assuming(
        self,
        formula: z3.BoolRef,
        exclude_rules: Iterable[int] = (),
    ) -> z3.ModelRef | None:
        """
        Sprawdza spełnialność formula przy wszystkich ograniczeniach modelu.

        Implikacje reguł z exclude_rules są wyłączone na czas zapytania.
        Zwraca model z3 albo None (niespełnialne). Ograniczenia modelu
        po zapytaniu są identyczne jak przed nim.
        """
        excluded = set(exclude_rules)
        assumptions = [g for i, g in self.guards.items() if i not in excluded]

        self.solver.push()
        try:
            self.solver.add(formula)
            result = self.solver.check(*assumptions)
            if result == z3.sat:
                return self.solver.model()
            if result == z3.unknown:
                logger.warning(
                    "z3 zwrócił 'unknown' (%s) — zapytanie traktowane jako niespełnialne",
                    self.solver.reason_unknown(),
                )
            return None
        finally:
            self.solver.pop()

    def is_satisfiable(self, formula: z3.BoolRef, exclude_rules: Iterable[int] = ()) -> bool:
        return self.solve_assuming(formula, exclude_rules) is not None

    def rules_setting(self, fact_id: str) -> list[int]:
        """Indeksy zakodowanych reguł ustawiających fact_id."""
        return [i for i, f in self.rule_fact.items() if f == fact_id]
