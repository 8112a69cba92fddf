"""
solver/encoding.py — kodowanie faktów i warunków do formuł z3.

Zawiera:
  ConstantIndex       — numeryczne id stałej → nazwa kanoniczna (per fakt)
  declare_fact()      — zmienne zdaniowe faktu + ograniczenia wzajemnego wykluczania
  forbid_positive()   — zakaz wartości dodatnich dla faktu bez źródła
  encode_condition()  — Condition → z3.BoolRef | None (None = "pasuje do wszystkich")

Semantyka trójwartościowa:
  boolean_state: atMostOne(true, na); "false" = brak obu
  enum:          atMostOne(val:v1, ..., val:vn, na)
  array:         na ⇒ ¬(val:v1 ∨ ... ∨ val:vn)
"""

from __future__ import annotations

import z3

from data_model import (
    NOT_APPLICABLE,
    AnyCondition,
    AnyOfEntry,
    Condition,
    ConstantRef,
    Dataset,
    Fact,
    FactEntry,
    FactId,
    FactType,
    SimpleCondition,
)

from .types import SatModel, na_var, true_var, val_var


# ---------------------------------------------------------------------------
# ConstantIndex
# ---------------------------------------------------------------------------

class ConstantIndex:
    """
    Indeks włączonych stałych per fakt, budowany raz na przebieg analizy.

    Atrybuty wewnętrzne:
      _names: fact_id → {id_stałej: nazwa}  (tylko włączone stałe)
      _groups: fact_id → nazwa grupy (values_ref), także dla brakujących grup
    """

    def __init__(self, dataset: Dataset) -> None:
        self._names: dict[FactId, dict[int, str]] = {}
        self._groups: dict[FactId, str] = {}

        for fact_id, fact in dataset.facts.items():
            if not fact.values_ref:
                continue
            self._groups[fact_id] = fact.values_ref
            group = dataset.constants.get(fact.values_ref)
            if group is None:
                continue
            self._names[fact_id] = {c.id: c.name for c in group if c.enabled}

    def resolve(self, fact_id: FactId, raw: ConstantRef) -> str | None:
        """
        Nazwa kanoniczna dla raw: nazwa zostaje nazwą, numeryczne id jest
        tłumaczone przez grupę faktu. None gdy id nie istnieje / stała wyłączona.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return self._names.get(fact_id, {}).get(raw)
        return str(raw)

    def resolve_or_raw(self, fact_id: FactId, raw: ConstantRef) -> str:
        """Jak resolve(), ale nierozwiązane id wraca jako str(raw) (dla kodera)."""
        name = self.resolve(fact_id, raw)
        return name if name is not None else str(raw)

    def group_name(self, fact_id: FactId) -> str | None:
        return self._groups.get(fact_id)

    def has_group(self, fact_id: FactId) -> bool:
        return fact_id in self._names

    def identifiers(self, fact_id: FactId) -> set[str]:
        """Wszystkie poprawne odwołania: nazwy i str(id) włączonych stałych."""
        names = self._names.get(fact_id, {})
        return {*names.values(), *(str(i) for i in names)}

    def is_valid_ref(self, fact_id: FactId, raw: ConstantRef) -> bool:
        return str(raw) in self.identifiers(fact_id)


# ---------------------------------------------------------------------------
# Fakty
# ---------------------------------------------------------------------------

def declare_fact(model: SatModel, fact: Fact, value_names: list[str]) -> None:
    """Deklaruje zmienne faktu i dodaje jego ograniczenia strukturalne."""
    t = model.declare(true_var(fact.id))
    na = model.declare(na_var(fact.id))

    match fact.type:
        case FactType.BOOLEAN_STATE:
            model.solver.add(z3.AtMost(t, na, 1))
        case FactType.ENUM:
            vals = [model.declare(val_var(fact.id, name)) for name in value_names]
            model.solver.add(z3.AtMost(*vals, na, 1))
        case FactType.ARRAY:
            vals = [model.declare(val_var(fact.id, name)) for name in value_names]
            if vals:
                model.solver.add(z3.Implies(na, z3.Not(z3.Or(*vals))))


def forbid_positive(model: SatModel, fact: Fact, value_names: list[str]) -> None:
    """Fakt bez źródła nie może przyjąć wartości dodatniej."""
    if fact.type is FactType.BOOLEAN_STATE:
        model.solver.add(z3.Not(model.var(true_var(fact.id))))
        return
    for name in value_names:
        model.solver.add(z3.Not(model.var(val_var(fact.id, name))))


# ---------------------------------------------------------------------------
# Warunki
# ---------------------------------------------------------------------------

def _or(parts: list[z3.BoolRef]) -> z3.BoolRef:
    return parts[0] if len(parts) == 1 else z3.Or(*parts)


def _and(parts: list[z3.BoolRef]) -> z3.BoolRef:
    return parts[0] if len(parts) == 1 else z3.And(*parts)


def encode_condition(condition: Condition | None, model: SatModel) -> z3.BoolRef | None:
    """
    Koduje warunek do formuły z3.

    Zwraca None dla warunku pustego ({} / {"any": []}) — wywołujący musi
    traktować None jako "pasuje do wszystkich" i nie przekazywać go dalej
    do operatorów logicznych.
    """
    match condition:
        case None:
            return None
        case AnyCondition(alternatives=alternatives):
            subs = [f for f in (_encode_simple(s, model) for s in alternatives) if f is not None]
            return _or(subs) if subs else None
        case SimpleCondition():
            return _encode_simple(condition, model)


def _encode_simple(condition: SimpleCondition, model: SatModel) -> z3.BoolRef | None:
    parts: list[z3.BoolRef] = []
    for entry in condition.entries:
        match entry:
            case AnyOfEntry(fact_ids=fact_ids):
                if fact_ids:
                    parts.append(_or([model.var(true_var(f)) for f in fact_ids]))
            case FactEntry():
                encoded = _encode_entry(entry, model)
                if encoded is not None:
                    parts.append(encoded)
    return _and(parts) if parts else None


def _encode_entry(entry: FactEntry, model: SatModel) -> z3.BoolRef | None:
    key = entry.fact_id
    match entry.value:
        case bool() as flag:
            var = model.var(true_var(key))
            return var if flag else z3.Not(var)
        case str() as text if text == NOT_APPLICABLE:
            return model.var(na_var(key))
        case str() | int() as single:
            return model.var(val_var(key, model.index.resolve_or_raw(key, single)))
        case tuple() as values:
            if not values:
                return None
            return _or([
                model.var(val_var(key, model.index.resolve_or_raw(key, v))) for v in values
            ])
    return None
