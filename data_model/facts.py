"""
Struktury danych dla faktów i grup stałych.

Fakt jest trójwartościowy (true / false / not_applicable) albo wyliczeniowy:
  boolean_state — prawda / fałsz / nie dotyczy
  enum          — dokładnie jedna wartość z grupy stałych (lub nie dotyczy)
  array         — dowolny podzbiór wartości z grupy stałych (lub nie dotyczy)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .common import FactId


# ---------------------------------------------------------------------------
# Enumeracje
# ---------------------------------------------------------------------------

class FactType(StrEnum):
    """Typ faktu."""
    BOOLEAN_STATE = "boolean_state"
    ENUM          = "enum"
    ARRAY         = "array"


# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConstantValue:
    """
    Pojedyncza wartość w grupie stałych.

    - id:      numeryczny identyfikator (stabilny przy zmianie nazwy)
    - name:    nazwa kanoniczna używana w warunkach i regułach
    - enabled: wyłączona wartość jest traktowana jak nieistniejąca
    - label:   opcjonalna etykieta do wyświetlania
    """
    id: int
    name: str
    enabled: bool = True
    label: str | None = None
    description: str | None = None


# ---------------------------------------------------------------------------
# Fakt
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Fact:
    """
    Definicja faktu.

    - id:         klucz w słowniku facts
    - type:       FactType
    - core:       fakty core ustawiają wyłącznie pytania, pochodne — reguły
    - values_ref: nazwa grupy stałych (enum / array)
    - enabled:    wyłączony fakt jest niewidoczny dla modelu SAT
    """
    id: FactId
    type: FactType
    core: bool = False
    values_ref: str | None = None
    enabled: bool = True
    category: str | None = None

    @property
    def has_values(self) -> bool:
        """True dla enum / array — fakty z wartościami z grupy stałych."""
        return self.type is not FactType.BOOLEAN_STATE
