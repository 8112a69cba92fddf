"""
Dataset — pojedyncza, niemutowalna migawka zbioru danych (jedyne wejście analizy).

dataset_from_dict():
  - Przyjmuje surowy DatasetData (po json.loads).
  - Wypełnia pola domyślne (enabled=True, puste listy / słowniki).
  - Nie zmienia treści merytorycznej — błędne odwołania zostają i są
    raportowane przez analizę, nie przez parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import FactId
from .conditions import parse_condition
from .facts import ConstantValue, Fact, FactType
from .questions import ActionCondition, DismissOption, Question
from .rules import Rule, RuleSource


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    Zbiór danych reguł biznesowych.

    - facts:             id → Fact (kolejność wstawiania zachowana)
    - questions:         pytania w kolejności tablicy (indeks = id w raporcie)
    - rules:             reguły w kolejności tablicy (indeks = id w raporcie)
    - action_conditions: id akcji → ActionCondition
    - constants:         nazwa grupy → uporządkowana lista ConstantValue
    """
    facts: dict[FactId, Fact] = field(default_factory=dict)
    questions: tuple[Question, ...] = ()
    rules: tuple[Rule, ...] = ()
    action_conditions: dict[str, ActionCondition] = field(default_factory=dict)
    constants: dict[str, tuple[ConstantValue, ...]] = field(default_factory=dict)

    def is_enabled_fact(self, fact_id: FactId) -> bool:
        fact = self.facts.get(fact_id)
        return fact is not None and fact.enabled

    def enabled_facts(self) -> list[Fact]:
        return [fact for fact in self.facts.values() if fact.enabled]

    def constant_group(self, fact_id: FactId) -> tuple[ConstantValue, ...] | None:
        """Grupa stałych faktu (None gdy fakt nie ma values_ref lub grupa nie istnieje)."""
        fact = self.facts.get(fact_id)
        if fact is None or not fact.values_ref:
            return None
        return self.constants.get(fact.values_ref)

    def enabled_constant_names(self, fact_id: FactId) -> list[str]:
        group = self.constant_group(fact_id) or ()
        return [c.name for c in group if c.enabled]


# ---------------------------------------------------------------------------
# Parsowanie z JSON
# ---------------------------------------------------------------------------

def _require(raw: Any, kind: type, what: str) -> Any:
    if not isinstance(raw, kind):
        raise ValueError(f"{what}: oczekiwano {kind.__name__}, otrzymano {type(raw).__name__}")
    return raw


def _fact_from_dict(fact_id: str, raw: dict[str, Any]) -> Fact:
    _require(raw, dict, f"facts.{fact_id}")
    try:
        fact_type = FactType(raw.get("type", FactType.BOOLEAN_STATE))
    except ValueError:
        raise ValueError(f"facts.{fact_id}: nieznany typ faktu {raw.get('type')!r}") from None
    return Fact(
        id=fact_id,
        type=fact_type,
        core=bool(raw.get("core", False)),
        values_ref=raw.get("values_ref") or None,
        enabled=bool(raw.get("enabled", True)),
        category=raw.get("category"),
    )


def _constant_from_dict(raw: dict[str, Any]) -> ConstantValue:
    return ConstantValue(
        id=int(raw["id"]),
        name=str(raw["name"]),
        enabled=bool(raw.get("enabled", True)),
        label=raw.get("label"),
        description=raw.get("description"),
    )


def _question_from_dict(raw: dict[str, Any]) -> Question:
    show_when = raw.get("show_when")
    hide_when = raw.get("hide_when")
    facts = raw.get("facts") or {}
    return Question(
        label=str(raw.get("label", "")),
        type=str(raw.get("type", "boolean_state")),
        fact=raw.get("fact") or None,
        facts={str(k): dict(v or {}) for k, v in facts.items()},
        show_when=parse_condition(show_when) if show_when is not None else None,
        hide_when=parse_condition(hide_when) if hide_when is not None else None,
        enabled=bool(raw.get("enabled", True)),
    )


def _rule_from_dict(raw: dict[str, Any]) -> Rule:
    try:
        source = RuleSource(raw.get("source", RuleSource.GENERAL))
    except ValueError:
        source = RuleSource.GENERAL
    return Rule(
        sets=str(raw["sets"]),
        value=raw.get("value", True),
        source=source,
        when=parse_condition(raw.get("when")),
        enabled=bool(raw.get("enabled", True)),
    )


def _action_from_dict(raw: dict[str, Any]) -> ActionCondition:
    dismiss = tuple(
        DismissOption(label=str(d.get("label", "")), sets=d.get("sets"))
        for d in raw.get("dismiss_options") or []
    )
    return ActionCondition(
        include_when=parse_condition(raw.get("include_when")),
        exclude_when=parse_condition(raw.get("exclude_when")),
        enabled=bool(raw.get("enabled", True)),
        dismiss_options=dismiss,
    )


def dataset_from_dict(raw: dict[str, Any]) -> Dataset:
    """
    Buduje Dataset z surowego DatasetData.

    Raises:
        ValueError gdy struktura najwyższego poziomu ma zły typ
        lub brakuje pól wymaganych (rule.sets, constant.id / name).
    """
    _require(raw, dict, "dataset")

    facts_raw = _require(raw.get("facts") or {}, dict, "facts")
    questions_raw = _require(raw.get("questions") or [], list, "questions")
    rules_raw = _require(raw.get("rules") or [], list, "rules")
    actions_raw = _require(raw.get("action_conditions") or {}, dict, "action_conditions")
    constants_raw = _require(raw.get("constants") or {}, dict, "constants")

    try:
        return Dataset(
            facts={fid: _fact_from_dict(fid, f) for fid, f in facts_raw.items()},
            questions=tuple(_question_from_dict(q) for q in questions_raw),
            rules=tuple(_rule_from_dict(r) for r in rules_raw),
            action_conditions={
                aid: _action_from_dict(a) for aid, a in actions_raw.items()
            },
            constants={
                name: tuple(_constant_from_dict(c) for c in group)
                for name, group in constants_raw.items()
            },
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Nieprawidłowa struktura zbioru danych: {exc!r}") from exc
