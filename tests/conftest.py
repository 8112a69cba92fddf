"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from data_model import Dataset, dataset_from_dict


def bool_fact(**extra: Any) -> dict[str, Any]:
    return {"type": "boolean_state", "core": True, "enabled": True, **extra}


def enum_fact(values_ref: str, **extra: Any) -> dict[str, Any]:
    return {"type": "enum", "core": True, "enabled": True, "values_ref": values_ref, **extra}


def array_fact(values_ref: str, **extra: Any) -> dict[str, Any]:
    return {"type": "array", "core": True, "enabled": True, "values_ref": values_ref, **extra}


def constants(*names: str, disabled: tuple[str, ...] = ()) -> list[dict[str, Any]]:
    """Grupa stałych z kolejnymi id od 1."""
    return [
        {"id": i, "name": name, "enabled": name not in disabled}
        for i, name in enumerate(names, start=1)
    ]


def question(fact: str | None = None, label: str | None = None, **extra: Any) -> dict[str, Any]:
    out: dict[str, Any] = {"label": label or f"Q {fact}", "type": "boolean_state", "enabled": True}
    if fact is not None:
        out["fact"] = fact
    out.update(extra)
    return out


def make_dataset(
    facts: dict[str, Any] | None = None,
    questions: list[dict[str, Any]] | None = None,
    rules: list[dict[str, Any]] | None = None,
    action_conditions: dict[str, Any] | None = None,
    constant_groups: dict[str, Any] | None = None,
) -> Dataset:
    return dataset_from_dict({
        "facts": facts or {},
        "questions": questions or [],
        "rules": rules or [],
        "action_conditions": action_conditions or {},
        "constants": constant_groups or {},
    })


@pytest.fixture
def sizes_dataset() -> Dataset:
    """Fakt enum "size" (Small / Medium / Large) ustawiany pytaniem."""
    return make_dataset(
        facts={"size": enum_fact("sizes")},
        questions=[question("size", label="Company size", type="enum")],
        constant_groups={"sizes": constants("Small", "Medium", "Large")},
    )


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Zapisuje surowy DatasetData do pliku JSON w tmp_path."""

    def _write(raw: dict[str, Any], name: str = "dataset.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(raw), encoding="utf-8")
        return path

    return _write
