"""
Struktury danych dla pytań i warunków akcji.

Pytanie jest źródłem faktu, jeśli ustawia go bezpośrednio (fact) albo mapuje
przez którąkolwiek opcję (facts: {"defaults": {...}, "<opcja>": {...}}).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import FactId
from .conditions import EMPTY_CONDITION, Condition


@dataclass(frozen=True, slots=True)
class Question:
    """
    Pytanie zadawane użytkownikowi.

    - fact:      fakt ustawiany bezpośrednio odpowiedzią
    - facts:     mapowanie opcja → {fakt: wartość} (w tym "defaults")
    - show_when: pytanie widoczne tylko gdy warunek spełniony
    - hide_when: pytanie ukryte gdy warunek spełniony
    """
    label: str = ""
    type: str = "boolean_state"
    fact: FactId | None = None
    facts: dict[str, dict[FactId, Any]] = field(default_factory=dict)
    show_when: Condition | None = None
    hide_when: Condition | None = None
    enabled: bool = True

    def mapped_facts(self) -> list[FactId]:
        """Fakty ustawiane przez mapowania opcji (bez duplikatów, w kolejności)."""
        seen: dict[FactId, None] = {}
        for mapping in self.facts.values():
            for fact_id in mapping:
                seen.setdefault(fact_id, None)
        return list(seen)

    def sets_fact(self, fact_id: FactId) -> bool:
        """Czy pytanie jest źródłem faktu fact_id."""
        if self.fact == fact_id:
            return True
        return any(fact_id in mapping for mapping in self.facts.values())


@dataclass(frozen=True, slots=True)
class DismissOption:
    label: str
    sets: dict[FactId, Any] | None = None


@dataclass(frozen=True, slots=True)
class ActionCondition:
    """
    Warunki akcji (kluczowane id akcji w Dataset.action_conditions).

    - include_when: akcja dotyczy użytkownika gdy spełnione (pusty = wszyscy)
    - exclude_when: akcja wykluczona gdy spełnione
    """
    include_when: Condition = field(default=EMPTY_CONDITION)
    exclude_when: Condition = field(default=EMPTY_CONDITION)
    enabled: bool = True
    dismiss_options: tuple[DismissOption, ...] = ()
