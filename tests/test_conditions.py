from __future__ import annotations

import pytest

from data_model import (
    AnyCondition,
    AnyOfEntry,
    FactEntry,
    SimpleCondition,
    iter_entries,
    parse_condition,
    referenced_fact_ids,
)


def test_none_and_empty_dict_parse_to_empty_simple_condition() -> None:
    for raw in (None, {}):
        condition = parse_condition(raw)
        assert isinstance(condition, SimpleCondition)
        assert condition.is_empty


def test_simple_condition_keeps_entry_order_and_normalizes_lists() -> None:
    condition = parse_condition({"a": True, "size": ["Small", 2], "b": "not_applicable"})

    assert condition == SimpleCondition((
        FactEntry("a", True),
        FactEntry("size", ("Small", 2)),
        FactEntry("b", "not_applicable"),
    ))


def test_any_of_key_is_a_list_of_facts_not_values() -> None:
    condition = parse_condition({"any_of": ["a", "b"], "c": False})

    assert condition.entries[0] == AnyOfEntry(("a", "b"))
    assert condition.entries[1] == FactEntry("c", False)


def test_any_condition_parses_alternatives() -> None:
    condition = parse_condition({"any": [{"a": True}, {"b": True, "c": "X"}]})

    assert isinstance(condition, AnyCondition)
    assert len(condition.alternatives) == 2
    assert [e.fact_id for e in iter_entries(condition)] == ["a", "b", "c"]


def test_empty_any_is_empty() -> None:
    assert parse_condition({"any": []}).is_empty


@pytest.mark.parametrize("raw", [["a"], "a", {"any": {"a": True}}, {"any": ["a"]}])
def test_malformed_condition_raises_value_error(raw) -> None:
    with pytest.raises(ValueError):
        parse_condition(raw)


def test_referenced_fact_ids_include_any_of_targets_without_duplicates() -> None:
    condition = parse_condition({"any": [{"a": True, "any_of": ["b", "a"]}, {"c": ["X"], "b": False}]})

    assert referenced_fact_ids(condition) == ["a", "b", "c"]


def test_to_dict_restores_json_shape() -> None:
    raw = {"any": [{"a": True, "size": ["Small", "Medium"]}, {"any_of": ["x", "y"]}]}

    assert parse_condition(raw).to_dict() == raw
