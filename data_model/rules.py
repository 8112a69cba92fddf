"""
Struktury danych dla reguł wyprowadzających fakty.

Reguła: gdy `when` jest spełnione, fakt `sets` przyjmuje wartość `value`.
Poza analizą reguły są wykonywane w kolejności tablicy ("ostatnia wygrywa");
analiza traktuje wszystkie włączone reguły faktu jako obowiązujące jednocześnie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .common import NOT_APPLICABLE, FactId, RuleValue
from .conditions import EMPTY_CONDITION, Condition


class RuleSource(StrEnum):
    """Pochodzenie reguły."""
    GENERAL = "general"
    HOTSPOT = "hotspot"


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Reguła: when ⇒ sets := value.

    - sets:    identyfikator ustawianego faktu
    - value:   True / False / "not_applicable" / nazwa stałej
    - source:  RuleSource
    - when:    warunek (pusty = reguła zawsze odpala)
    - enabled: wyłączone reguły są ignorowane przez analizę
    """
    sets: FactId
    value: RuleValue
    source: RuleSource = RuleSource.GENERAL
    when: Condition = field(default=EMPTY_CONDITION)
    enabled: bool = True

    @property
    def sets_positive(self) -> bool:
        """True gdy reguła nadaje faktowi wartość dodatnią (True lub konkretną stałą)."""
        if isinstance(self.value, bool):
            return self.value
        return self.value != NOT_APPLICABLE
