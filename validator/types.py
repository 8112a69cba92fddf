"""
validator/types.py — typy raportu analizy.

AnalysisIssue — pojedynczy problem: waga, komunikat, podpowiedź naprawy,
    odwołania do encji i (opcjonalnie) warunki do wyświetlenia.
CheckResult — wynik jednego sprawdzenia.
AnalysisReport — komplet wyników z licznikami błędów i ostrzeżeń.

to_dict() zwraca kształt JSON, na którym opierają się zewnętrzne UI
(klucze camelCase: totalIssues, errorCount, warningCount, sourcelessFacts).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from data_model import Condition


class IssueSeverity(StrEnum):
    ERROR   = "error"
    WARNING = "warning"


class RefType(StrEnum):
    FACT     = "fact"
    QUESTION = "question"
    RULE     = "rule"
    ACTION   = "action"
    CONSTANT = "constant"


class CheckId(StrEnum):
    """Stałe identyfikatory sprawdzeń (stabilne API dla linków i odznak w UI)."""

    # skany grafu odwołań
    DEAD_FACTS              = "dead-facts"
    UNDEFINED_REFS          = "undefined-refs"

    # zapytania SAT
    CONTRADICTORY_RULES     = "contradictory-rules"
    UNREACHABLE_QUESTIONS   = "unreachable-questions"
    UNREACHABLE_ACTIONS     = "unreachable-actions"
    INCLUDE_EXCLUDE_OVERLAP = "include-exclude-overlap"


class ConditionTag(StrEnum):
    SHOW_WHEN    = "show_when"
    HIDE_WHEN    = "hide_when"
    INCLUDE_WHEN = "include_when"
    EXCLUDE_WHEN = "exclude_when"


@dataclass(frozen=True, slots=True)
class IssueRef:
    """Odwołanie do encji zbioru danych (pytania / reguły: id = indeks w tablicy)."""

    type: RefType
    id: str
    label: str | None = None

    @property
    def key(self) -> str:
        return f"{self.type}:{self.id}"

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": str(self.type), "id": self.id}
        if self.label is not None:
            out["label"] = self.label
        return out


@dataclass(frozen=True, slots=True)
class IssueCondition:
    """Warunek dołączony do problemu (np. do wyróżnienia faktów bez źródła)."""

    tag: ConditionTag
    condition: Condition
    sourceless_facts: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"tag": str(self.tag), "condition": self.condition.to_dict()}
        if self.sourceless_facts:
            out["sourcelessFacts"] = list(self.sourceless_facts)
        return out


@dataclass(frozen=True, slots=True)
class AnalysisIssue:
    """
    Pojedynczy problem wykryty w zbiorze danych.

    - severity:   IssueSeverity
    - message:    czytelny opis problemu
    - suggestion: co zrobić, żeby go usunąć (opcjonalnie)
    - refs:       encje, których dotyczy
    - conditions: warunki do wyświetlenia obok problemu
    """

    severity: IssueSeverity
    message: str
    refs: tuple[IssueRef, ...] = ()
    suggestion: str | None = None
    conditions: tuple[IssueCondition, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"severity": str(self.severity), "message": self.message}
        if self.suggestion is not None:
            out["suggestion"] = self.suggestion
        out["refs"] = [ref.to_dict() for ref in self.refs]
        if self.conditions:
            out["conditions"] = [c.to_dict() for c in self.conditions]
        return out


@dataclass(frozen=True, slots=True)
class CheckResult:
    id: CheckId
    name: str
    description: str
    issues: tuple[AnalysisIssue, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """
    Wynik pełnej analizy.

    - checks:        wyniki sześciu sprawdzeń w stałej kolejności
    - total_issues:  error_count + warning_count
    - error_count:   liczba problemów o wadze error
    - warning_count: liczba problemów o wadze warning
    """

    checks: tuple[CheckResult, ...] = field(default_factory=tuple)
    total_issues: int = 0
    error_count: int = 0
    warning_count: int = 0

    def check(self, check_id: CheckId | str) -> CheckResult | None:
        for result in self.checks:
            if result.id == check_id:
                return result
        return None

    def issues_for(self, ref_type: RefType | str, ref_id: str) -> list[AnalysisIssue]:
        """Problemy odwołujące się do encji (ref_type, ref_id)."""
        key = f"{ref_type}:{ref_id}"
        return [
            issue
            for result in self.checks
            for issue in result.issues
            if any(ref.key == key for ref in issue.refs)
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "checks": [c.to_dict() for c in self.checks],
            "totalIssues": self.total_issues,
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
        }
