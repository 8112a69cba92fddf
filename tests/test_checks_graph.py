from __future__ import annotations

from validator import CheckId, IssueSeverity, RefType
from validator.checks import check_dead_facts, check_undefined_refs

from conftest import bool_fact, constants, enum_fact, make_dataset, question


# ---------------------------------------------------------------------------
# Dead Facts
# ---------------------------------------------------------------------------

def test_orphan_fact_is_reported_once() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact(), "orphan": bool_fact()},
        questions=[question("a")],
    )

    result = check_dead_facts(dataset)

    assert result.id == CheckId.DEAD_FACTS
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.severity is IssueSeverity.WARNING
    assert issue.refs[0].type is RefType.FACT
    assert issue.refs[0].id == "orphan"
    assert '"orphan"' in issue.message


def test_disabled_fact_is_never_dead() -> None:
    dataset = make_dataset(facts={"old": bool_fact(enabled=False)})

    assert check_dead_facts(dataset).issues == ()


def test_references_from_every_kind_of_entity_count() -> None:
    dataset = make_dataset(
        facts={name: bool_fact() for name in ("q", "mapped", "shown", "derived", "cond", "inc", "any")},
        questions=[question("q", show_when={"shown": True}, facts={"yes": {"mapped": True}})],
        rules=[{"sets": "derived", "when": {"cond": True}}],
        action_conditions={"act": {"include_when": {"inc": True}, "exclude_when": {"any_of": ["any"]}}},
    )

    assert check_dead_facts(dataset).issues == ()


def test_reference_from_disabled_entity_does_not_count() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact(), "b": bool_fact()},
        questions=[question("a", enabled=False)],
        rules=[{"sets": "b", "enabled": False}],
    )

    dead = [issue.refs[0].id for issue in check_dead_facts(dataset).issues]

    assert dead == ["a", "b"]


# ---------------------------------------------------------------------------
# Undefined References
# ---------------------------------------------------------------------------

def test_typo_in_rule_condition_is_one_error_on_the_rule() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact()},
        rules=[{"sets": "a", "value": True, "when": {"typo_fact": True}}],
    )

    result = check_undefined_refs(dataset)

    assert result.id == CheckId.UNDEFINED_REFS
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.severity is IssueSeverity.ERROR
    assert [(r.type, r.id) for r in issue.refs] == [(RefType.RULE, "0")]
    assert '"typo_fact"' in issue.message
    assert "typos" in issue.suggestion


def test_disabled_fact_gets_its_own_suggestion() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact(), "b": bool_fact(enabled=False)},
        questions=[question("a", show_when={"b": True})],
    )

    (issue,) = check_undefined_refs(dataset).issues

    assert "disabled fact" in issue.message
    assert "disabled" in issue.suggestion
    assert issue.refs[0].type is RefType.QUESTION


def test_any_of_targets_are_checked_as_facts() -> None:
    dataset = make_dataset(
        facts={"a": bool_fact()},
        action_conditions={"act": {"include_when": {"any_of": ["a", "ghost"]}}},
    )

    (issue,) = check_undefined_refs(dataset).issues

    assert "any_of" in issue.message
    assert '"ghost"' in issue.message
    assert issue.refs[0].key == "action:act"


def test_constant_names_and_ids_are_validated() -> None:
    dataset = make_dataset(
        facts={"size": enum_fact("sizes")},
        questions=[question("size")],
        action_conditions={"act": {"include_when": {"size": ["Small", "Huge", 2, 99]}}},
        constant_groups={"sizes": constants("Small", "Medium", "Large")},
    )

    messages = [issue.message for issue in check_undefined_refs(dataset).issues]

    assert len(messages) == 2
    assert '"Huge"' in messages[0]
    assert '"99"' in messages[1]


def test_disabled_constant_is_undefined() -> None:
    dataset = make_dataset(
        facts={"size": enum_fact("sizes")},
        questions=[question("size", show_when={"size": "Medium"})],
        constant_groups={"sizes": constants("Small", "Medium", disabled=("Medium",))},
    )

    (issue,) = check_undefined_refs(dataset).issues

    assert 'unknown value "Medium"' in issue.message


def test_missing_constants_group_is_reported() -> None:
    dataset = make_dataset(
        facts={"size": enum_fact("nope")},
        questions=[question("size", hide_when={"size": "Small"})],
    )

    (issue,) = check_undefined_refs(dataset).issues

    assert "does not exist" in issue.suggestion


def test_question_fact_is_a_sets_reference() -> None:
    dataset = make_dataset(questions=[question("ghost", label="Ghost question")])

    (issue,) = check_undefined_refs(dataset).issues

    assert issue.message == 'Question "Ghost question" sets undefined fact "ghost"'


def test_rule_value_is_checked_against_constants() -> None:
    dataset = make_dataset(
        facts={"size": enum_fact("sizes")},
        rules=[{"sets": "size", "value": "Huge"}, {"sets": "size", "value": "not_applicable"}],
        constant_groups={"sizes": constants("Small")},
    )

    (issue,) = check_undefined_refs(dataset).issues

    assert issue.message.startswith("Rule #0 value")
    assert issue.refs[0].id == "0"


def test_disabled_entities_are_not_scanned() -> None:
    dataset = make_dataset(
        questions=[question("ghost", enabled=False)],
        rules=[{"sets": "ghost", "enabled": False}],
        action_conditions={"act": {"include_when": {"ghost": True}, "enabled": False}},
    )

    assert check_undefined_refs(dataset).issues == ()
