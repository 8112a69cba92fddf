"""
Wspólne typy pierwotne używane przez conditions, facts, rules i questions.

Mapowanie na format zbioru danych (DatasetData):
  FactId, ConstantRef, RuleValue, NOT_APPLICABLE
"""

from __future__ import annotations

from typing import TypeAlias

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Klucz w słowniku facts, np. "has_employees"
FactId: TypeAlias = str

# Odwołanie do stałej: nazwa ("Small") albo numeryczne id (3)
ConstantRef: TypeAlias = str | int

# Wartość ustawiana przez regułę: True / False / "not_applicable" / nazwa stałej
RuleValue: TypeAlias = bool | str


# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Jawny stan "nie dotyczy", dozwolony dla każdego typu faktu
NOT_APPLICABLE = "not_applicable"

# Specjalny klucz warunku prostego: "co najmniej jeden z faktów jest prawdziwy"
ANY_OF_KEY = "any_of"

# Klucz warunku złożonego (OR)
ANY_KEY = "any"


def format_value(value: object) -> str:
    """Wartość w formie do komunikatów: bool bez cudzysłowu, reszta w cudzysłowie."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return f'"{value}"'
