from __future__ import annotations

import json

import pytest

from factsat.cli import main

CLEAN = {
    "facts": {"a": {"type": "boolean_state", "core": True}},
    "questions": [{"label": "A?", "fact": "a"}],
    "action_conditions": {"act": {"include_when": {"a": True}}},
}

WARNINGS_ONLY = {
    "facts": {
        "a": {"type": "boolean_state", "core": True},
        "orphan": {"type": "boolean_state", "core": True},
    },
    "questions": [{"label": "A?", "fact": "a"}],
}

WITH_ERRORS = {
    "facts": {"a": {"type": "boolean_state", "core": True}},
    "questions": [{"label": "A?", "fact": "a"}],
    "rules": [{"sets": "a", "value": True, "when": {"typo_fact": True}}],
}


def test_clean_dataset_exits_normally(write_dataset, capsys) -> None:
    main(["analyze", str(write_dataset(CLEAN))])

    assert "Brak problemów" in capsys.readouterr().out


def test_errors_exit_with_code_one(write_dataset) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(write_dataset(WITH_ERRORS))])

    assert exc.value.code == 1


def test_warnings_fail_only_in_strict_mode(write_dataset, capsys) -> None:
    path = str(write_dataset(WARNINGS_ONLY))

    main(["analyze", path])
    assert "orphan" in capsys.readouterr().out

    with pytest.raises(SystemExit) as exc:
        main(["analyze", path, "--strict"])
    assert exc.value.code == 1


def test_json_output(write_dataset, capsys) -> None:
    main(["analyze", str(write_dataset({"data": WARNINGS_ONLY})), "--json-output"])

    out = json.loads(capsys.readouterr().out)
    assert out["totalIssues"] == 1
    assert out["warningCount"] == 1
    assert [c["id"] for c in out["checks"]][0] == "dead-facts"


def test_check_filter_recounts_totals(write_dataset, capsys) -> None:
    path = str(write_dataset(WITH_ERRORS))

    main(["analyze", path, "--json-output", "--check", "dead-facts", "--check", "unreachable-actions"])

    out = json.loads(capsys.readouterr().out)
    assert [c["id"] for c in out["checks"]] == ["dead-facts", "unreachable-actions"]
    assert out["errorCount"] == 0


def test_missing_file_exits_with_code_one(tmp_path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(tmp_path / "nope.json")])

    assert exc.value.code == 1


def test_dataset_source_is_required() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["analyze"])

    assert exc.value.code == 1


def test_unknown_check_id_is_rejected_by_argparse(write_dataset) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["analyze", str(write_dataset(CLEAN)), "--check", "nope"])

    assert exc.value.code == 2


def test_sources_lists_sourceless_facts(write_dataset, capsys) -> None:
    main(["sources", str(write_dataset(WARNINGS_ONLY)), "--sourceless-only"])

    out = capsys.readouterr().out
    assert "orphan" in out
    assert "brak źródła" in out


def test_sources_lists_questions_and_rules(write_dataset, capsys) -> None:
    raw = {
        "facts": {
            "a": {"type": "boolean_state", "core": True},
            "x": {"type": "boolean_state"},
        },
        "questions": [{"label": "A?", "fact": "a"}],
        "rules": [{"sets": "x", "value": True, "when": {"a": True}}],
    }

    main(["sources", str(write_dataset(raw))])

    out = capsys.readouterr().out
    assert "pytanie #0 (A?)" in out
    assert "reguła #0 = true" in out
