from __future__ import annotations

import pytest

from data_model import FactType, RuleSource, dataset_from_dict

from conftest import bool_fact, constants, enum_fact, make_dataset, question


def test_defaults_are_filled_in() -> None:
    dataset = dataset_from_dict({
        "facts": {"a": {"type": "boolean_state"}},
        "rules": [{"sets": "a"}],
    })

    fact = dataset.facts["a"]
    assert fact.enabled and not fact.core
    assert fact.type is FactType.BOOLEAN_STATE
    rule = dataset.rules[0]
    assert rule.value is True
    assert rule.source is RuleSource.GENERAL
    assert rule.when.is_empty
    assert dataset.questions == ()
    assert dataset.action_conditions == {}


def test_question_without_show_when_keeps_none() -> None:
    dataset = make_dataset(questions=[question("a")])

    assert dataset.questions[0].show_when is None
    assert dataset.questions[0].hide_when is None


def test_question_option_mappings_are_sources() -> None:
    dataset = make_dataset(questions=[question(
        facts={"defaults": {"a": False}, "yes": {"a": True, "b": "X"}},
    )])

    q = dataset.questions[0]
    assert q.mapped_facts() == ["a", "b"]
    assert q.sets_fact("b")
    assert not q.sets_fact("c")


def test_enabled_constant_names_skip_disabled_values() -> None:
    dataset = make_dataset(
        facts={"size": enum_fact("sizes"), "flag": bool_fact()},
        constant_groups={"sizes": constants("Small", "Medium", disabled=("Medium",))},
    )

    assert dataset.enabled_constant_names("size") == ["Small"]
    assert dataset.enabled_constant_names("flag") == []
    assert dataset.constant_group("missing") is None


def test_rule_sets_positive() -> None:
    dataset = make_dataset(rules=[
        {"sets": "a", "value": True},
        {"sets": "a", "value": False},
        {"sets": "a", "value": "not_applicable"},
        {"sets": "a", "value": "Small"},
    ])

    assert [r.sets_positive for r in dataset.rules] == [True, False, False, True]


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"facts": ["a"]},
        {"rules": {"a": {"sets": "a"}}},
        {"facts": {"a": {"type": "matrix"}}},
        {"rules": [{"value": True}]},
        {"constants": {"g": [{"name": "X"}]}},
    ],
)
def test_malformed_dataset_raises_value_error(raw) -> None:
    with pytest.raises(ValueError):
        dataset_from_dict(raw)
