"""
Struktury danych dla warunków (conditions).

Warunek to suma rozłączna:
  SimpleCondition — koniunkcja wpisów {fakt: wartość} (+ opcjonalny any_of)
  AnyCondition    — alternatywa {"any": [SimpleCondition, ...]}

Wpis warunku prostego:
  FactEntry  — fakt → True/False, "not_applicable", nazwa/id stałej, lista stałych
  AnyOfEntry — "any_of": [fakt, ...] — co najmniej jeden z faktów boolowskich jest prawdziwy

Pusty warunek ({} lub {"any": []}) oznacza "pasuje do wszystkich" — każdy
konsument musi go pominąć zamiast kodować (is_empty).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from .common import ANY_KEY, ANY_OF_KEY, ConstantRef, FactId

# Wartość wpisu FactEntry po normalizacji (listy → krotki)
EntryValue: TypeAlias = bool | str | int | tuple[ConstantRef, ...]


# ---------------------------------------------------------------------------
# Wpisy warunku prostego
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FactEntry:
    """
    Wymaganie wartości jednego faktu.

    - fact_id: identyfikator faktu (klucz w warunku)
    - value:   True/False, "not_applicable", nazwa lub id stałej,
               albo krotka stałych ("zawiera" dla array, "jedna z" dla enum)
    """
    fact_id: FactId
    value: EntryValue


@dataclass(frozen=True, slots=True)
class AnyOfEntry:
    """Klucz any_of: co najmniej jeden z wymienionych faktów jest prawdziwy."""
    fact_ids: tuple[FactId, ...]


ConditionEntry: TypeAlias = FactEntry | AnyOfEntry


# ---------------------------------------------------------------------------
# Warunki
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SimpleCondition:
    """Koniunkcja wpisów (kolejność jak w źródłowym JSON)."""
    entries: tuple[ConditionEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for entry in self.entries:
            match entry:
                case AnyOfEntry(fact_ids=fact_ids):
                    out[ANY_OF_KEY] = list(fact_ids)
                case FactEntry(fact_id=fact_id, value=tuple() as values):
                    out[fact_id] = list(values)
                case FactEntry(fact_id=fact_id, value=value):
                    out[fact_id] = value
        return out


@dataclass(frozen=True, slots=True)
class AnyCondition:
    """Alternatywa warunków prostych."""
    alternatives: tuple[SimpleCondition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.alternatives

    def to_dict(self) -> dict[str, Any]:
        return {ANY_KEY: [alt.to_dict() for alt in self.alternatives]}


Condition: TypeAlias = SimpleCondition | AnyCondition

EMPTY_CONDITION = SimpleCondition()


# ---------------------------------------------------------------------------
# Parsowanie z JSON
# ---------------------------------------------------------------------------

def parse_condition(raw: Any) -> Condition:
    """
    Buduje Condition z surowego słownika JSON.

    None i {} → pusty SimpleCondition. Słownik z kluczem "any" → AnyCondition.

    Raises:
        ValueError gdy raw nie jest słownikiem lub "any" nie jest listą słowników.
    """
    if raw is None:
        return EMPTY_CONDITION
    if not isinstance(raw, dict):
        raise ValueError(f"Warunek musi być obiektem JSON, otrzymano: {type(raw).__name__}")

    if ANY_KEY in raw:
        alternatives = raw[ANY_KEY]
        if not isinstance(alternatives, list):
            raise ValueError("Pole 'any' warunku musi być listą.")
        return AnyCondition(tuple(_parse_simple(alt) for alt in alternatives))

    return _parse_simple(raw)


def _parse_simple(raw: Any) -> SimpleCondition:
    if not isinstance(raw, dict):
        raise ValueError(f"Warunek prosty musi być obiektem JSON, otrzymano: {type(raw).__name__}")

    entries: list[ConditionEntry] = []
    for key, value in raw.items():
        if key == ANY_OF_KEY and isinstance(value, list):
            entries.append(AnyOfEntry(tuple(str(f) for f in value)))
        elif isinstance(value, list):
            entries.append(FactEntry(key, tuple(value)))
        else:
            entries.append(FactEntry(key, value))
    return SimpleCondition(tuple(entries))


# ---------------------------------------------------------------------------
# Przeglądanie
# ---------------------------------------------------------------------------

def iter_simple(condition: Condition) -> tuple[SimpleCondition, ...]:
    """Zwraca warunki proste składające się na condition (dla Any — alternatywy)."""
    match condition:
        case AnyCondition(alternatives=alternatives):
            return alternatives
        case SimpleCondition():
            return (condition,)


def iter_entries(condition: Condition) -> list[ConditionEntry]:
    """Wszystkie wpisy warunku, spłaszczone przez alternatywy."""
    return [entry for simple in iter_simple(condition) for entry in simple.entries]


def referenced_fact_ids(condition: Condition) -> list[FactId]:
    """
    Identyfikatory faktów, do których odwołuje się warunek (z celami any_of),
    bez duplikatów, w kolejności wystąpienia.
    """
    seen: dict[FactId, None] = {}
    for entry in iter_entries(condition):
        match entry:
            case AnyOfEntry(fact_ids=fact_ids):
                for fact_id in fact_ids:
                    seen.setdefault(fact_id, None)
            case FactEntry(fact_id=fact_id):
                seen.setdefault(fact_id, None)
    return list(seen)
