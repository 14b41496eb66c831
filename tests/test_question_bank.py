from __future__ import annotations

import json

import pytest

from readiness_core.errors import BankError
from readiness_core.question_bank import DIMENSIONS, load_bank, load_banks


def test_bundled_bank_shapes():
    banks = load_banks()
    assert [len(banks[s]) for s in ("psychometric", "aptitude", "wiscar")] == [8, 6, 8]
    psych = banks["psychometric"][0]
    assert [o.value for o in psych.options] == ["1", "2", "3", "4", "5"]
    assert psych.options[-1].label == "Strongly Agree"
    assert all(q.correct_option() is not None for q in banks["aptitude"])
    assert {q.tag for q in banks["wiscar"]} == set(DIMENSIONS)


def test_load_bank_returns_a_copy():
    first = load_bank("aptitude")
    first.clear()
    assert len(load_bank("aptitude")) == 6
    with pytest.raises(KeyError):
        load_bank("intro")


def test_custom_bank_file(tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps({
        "likert": [{"value": "1", "label": "no"}, {"value": "5", "label": "yes"}],
        "psychometric": [{"id": "x", "tag": "interest", "text": "t"}],
        "aptitude": [],
        "wiscar": [],
    }), encoding="utf-8")
    banks = load_banks(str(path))
    assert [o.label for o in banks["psychometric"][0].options] == ["no", "yes"]
    assert banks["aptitude"] == []


def test_malformed_bank_raises(tmp_path):
    missing_section = tmp_path / "a.json"
    missing_section.write_text(json.dumps({"psychometric": [], "aptitude": []}), encoding="utf-8")
    with pytest.raises(BankError):
        load_banks(str(missing_section))

    missing_field = tmp_path / "b.json"
    missing_field.write_text(json.dumps({
        "psychometric": [{"id": "x", "tag": "interest"}], "aptitude": [], "wiscar": [],
    }), encoding="utf-8")
    with pytest.raises(BankError):
        load_banks(str(missing_field))

    not_json = tmp_path / "c.json"
    not_json.write_text("{", encoding="utf-8")
    with pytest.raises(BankError):
        load_banks(str(not_json))


def _write_bank(tmp_path, name, payload) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_malformed_options_raise_bank_error(tmp_path):
    base = {"likert": [{"value": "1", "label": "no"}], "psychometric": [], "aptitude": [], "wiscar": []}

    option_without_value = dict(base, aptitude=[{"id": "a", "tag": "math", "text": "t", "options": [{"label": "x"}]}])
    with pytest.raises(BankError, match="missing field 'value'"):
        load_banks(_write_bank(tmp_path, "opt.json", option_without_value))

    likert_without_label = dict(base, likert=[{"value": "1"}])
    with pytest.raises(BankError, match="missing field 'label'"):
        load_banks(_write_bank(tmp_path, "likert.json", likert_without_label))

    options_not_a_list = dict(base, aptitude=[{"id": "a", "tag": "math", "text": "t", "options": "abc"}])
    with pytest.raises(BankError):
        load_banks(_write_bank(tmp_path, "optstr.json", options_not_a_list))

    section_not_a_list = dict(base, wiscar={"will1": {}})
    with pytest.raises(BankError, match="must be a list"):
        load_banks(_write_bank(tmp_path, "section.json", section_not_a_list))

    question_not_an_object = dict(base, psychometric=["q1"])
    with pytest.raises(BankError):
        load_banks(_write_bank(tmp_path, "question.json", question_not_an_object))
