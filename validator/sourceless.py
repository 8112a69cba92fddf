"""
validator/sourceless.py — fakty bez źródła (do treści diagnostyk).

Fakt jest bez źródła, gdy żadne włączone pytanie go nie ustawia i żadna
włączona reguła nie wyprowadza go do wartości innej niż False.
Wynik służy wyłącznie do lepszych podpowiedzi — nie zmienia wyniku
sprawdzeń (model SAT koduje zakazy niezależnie).
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model import Condition, Dataset, FactId, referenced_fact_ids


def condition_fact_ids(condition: Condition | None) -> list[FactId]:
    """Fakty, od których zależy warunek (z celami any_of)."""
    if condition is None:
        return []
    return referenced_fact_ids(condition)


def _has_source(fact_id: FactId, dataset: Dataset) -> bool:
    for question in dataset.questions:
        if question.enabled and question.sets_fact(fact_id):
            return True
    for rule in dataset.rules:
        if rule.enabled and rule.sets == fact_id and rule.value is not False:
            return True
    return False


def find_sourceless_facts(fact_ids: Iterable[FactId], dataset: Dataset) -> list[FactId]:
    """Podzbiór włączonych faktów z fact_ids bez żadnego źródła (kolejność zachowana)."""
    return [
        fact_id
        for fact_id in fact_ids
        if dataset.is_enabled_fact(fact_id) and not _has_source(fact_id, dataset)
    ]


def quote_list(fact_ids: Iterable[FactId]) -> str:
    return ", ".join(f'"{f}"' for f in fact_ids)


def sourceless_suggestion(kind: str, sourceless: list[FactId]) -> str:
    """Podpowiedź dla warunku zależnego od faktów bez źródła."""
    one = len(sourceless) == 1
    return (
        f"The {kind} depends on {quote_list(sourceless)} which "
        f"{'has' if one else 'have'} no source — no enabled question or rule sets "
        f"{'it' if one else 'them'}. Enable the relevant question or update the condition."
    )
