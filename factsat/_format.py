"""Tekstowa postać warunków i wartości do tabel rich."""

from __future__ import annotations

from data_model import (
    NOT_APPLICABLE,
    AnyCondition,
    AnyOfEntry,
    Condition,
    FactEntry,
    SimpleCondition,
)


def _fmt_entry(entry: FactEntry | AnyOfEntry, highlight: frozenset[str]) -> str:
    def name(fact_id: str) -> str:
        return f"[bold red]{fact_id}[/bold red]" if fact_id in highlight else fact_id

    match entry:
        case AnyOfEntry(fact_ids=fact_ids):
            return f"any_of({', '.join(name(f) for f in fact_ids)})"
        case FactEntry(fact_id=fact_id, value=bool() as flag):
            return f"{name(fact_id)} = {'true' if flag else 'false'}"
        case FactEntry(fact_id=fact_id, value=str() as text) if text == NOT_APPLICABLE:
            return f"{name(fact_id)} = n/a"
        case FactEntry(fact_id=fact_id, value=tuple() as values):
            return f"{name(fact_id)} ∈ [{', '.join(str(v) for v in values)}]"
        case FactEntry(fact_id=fact_id, value=value):
            return f"{name(fact_id)} = {value}"
    return "?"


def _fmt_simple(condition: SimpleCondition, highlight: frozenset[str]) -> str:
    if condition.is_empty:
        return "[dim](zawsze)[/dim]"
    return " AND ".join(_fmt_entry(e, highlight) for e in condition.entries)


def fmt_condition(condition: Condition, highlight: frozenset[str] = frozenset()) -> str:
    """Warunek jako tekst z markupem rich; fakty z highlight są wyróżnione."""
    match condition:
        case AnyCondition(alternatives=alternatives):
            if not alternatives:
                return "[dim](zawsze)[/dim]"
            return " OR ".join(f"({_fmt_simple(a, highlight)})" for a in alternatives)
        case SimpleCondition():
            return _fmt_simple(condition, highlight)
    return "?"
