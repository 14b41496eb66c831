from __future__ import annotations

import pytest

from readiness_core.engine import (
    AssessmentSession,
    AssessmentState,
    Back,
    Complete,
    Retake,
    Start,
    STEPS,
    reduce,
)
from readiness_core.errors import StepError
from readiness_core.types import AssessmentResult, WiscarScores

from tests.conftest import complete_section, correct_value, wrong_value


def test_reducer_walks_steps_linearly():
    state = AssessmentState()
    assert state.step_name == "intro"
    state = reduce(state, Start())
    assert state.step_name == "psychometric"
    assert reduce(state, Start()) == state, "start only applies at intro"

    state = reduce(state, Complete({"psychometric_fit": 70}))
    assert state.step_name == "aptitude"
    assert state.result.psychometric_fit == 70


def test_reducer_clamps_step_index():
    assert reduce(AssessmentState(), Back()).step == 0
    at_results = AssessmentState(step=len(STEPS) - 1)
    assert reduce(at_results, Complete({"psychometric_fit": 10})) == at_results
    assert reduce(at_results, Back()).step == 3


def test_reducer_does_not_touch_previous_state():
    before = AssessmentState(step=1)
    after = reduce(before, Complete({"psychometric_fit": 55}))
    assert before.result.psychometric_fit == 0
    assert after.result.psychometric_fit == 55


def test_wiscar_update_replaces_whole_record():
    first = WiscarScores(will=40, interest=40, skill=40)
    state = AssessmentState(step=3, result=AssessmentResult(psychometric_fit=60, wiscar=first))
    nxt = reduce(state, Complete({"wiscar": {"will": 100}}))
    assert nxt.result.wiscar == WiscarScores(will=100)
    assert nxt.result.psychometric_fit == 60, "shallow merge keeps other fields"


def test_retake_resets_everything():
    state = AssessmentState(step=4, result=AssessmentResult(psychometric_fit=90, technical_readiness=50))
    assert reduce(state, Retake()) == AssessmentState()


def test_full_run_matches_reference_scenario():
    wiscar_values = {"will1": "4", "will2": "4", "interest1": "5", "skill1": "3", "skill2": "3",
                     "cognitive1": "4", "learn1": "5", "realworld1": "3"}
    sess = AssessmentSession()
    sess.start()
    complete_section(sess, lambda q: "4")
    assert sess.result.psychometric_fit == 80

    seen = []

    def four_of_six(q):
        seen.append(q.id)
        return correct_value(q) if len(seen) <= 4 else wrong_value(q)

    complete_section(sess, four_of_six)
    assert sess.result.technical_readiness == 67

    complete_section(sess, lambda q: wiscar_values[q.id])
    assert sess.state.step_name == "results"
    assert sess.result.wiscar == WiscarScores(
        will=80, interest=100, skill=60, cognitive_readiness=80,
        ability_to_learn=100, real_world_alignment=60,
    )

    report = sess.report()
    assert report["wiscar_average"] == 80
    assert report["confidence_score"] == 76
    assert report["recommendation"] == "Yes"


def test_back_from_first_question_keeps_merged_results(banks):
    sess = AssessmentSession()
    sess.start()
    complete_section(sess, lambda q: "5")
    assert sess.state.step_name == "aptitude"
    merged = sess.result

    first = sess.runner.current
    sess.select_answer(first.id, correct_value(first))
    sess.advance()
    sess.retreat()
    assert sess.state.step_name == "aptitude", "retreat inside a section moves one question back"

    assert sess.retreat() is True
    assert sess.state.step_name == "psychometric"
    assert sess.result == merged
    assert sess.runner.index == 0
    assert sess.runner.answer_for(banks["psychometric"][0].id) is None, "re-entered section starts fresh"


def test_back_from_results_reopens_wiscar(synthetic_banks):
    sess = AssessmentSession(banks=synthetic_banks)
    sess.start()
    complete_section(sess, lambda q: "3")
    complete_section(sess, correct_value)
    complete_section(sess, lambda q: "2")
    result = sess.result
    assert sess.runner is None
    assert sess.retreat() is True
    assert sess.state.step_name == "wiscar"
    assert sess.runner is not None and sess.runner.section == "wiscar"
    assert sess.result == result


def test_retake_from_results(synthetic_banks):
    sess = AssessmentSession(banks=synthetic_banks)
    sess.start()
    for pick in (lambda q: "5", correct_value, lambda q: "5"):
        complete_section(sess, pick)
    assert sess.report()["confidence_score"] == 100
    sess.retake()
    assert sess.step == 0
    assert sess.result == AssessmentResult()
    assert sess.runner is None


def test_intro_and_results_guard_operations(synthetic_banks):
    sess = AssessmentSession(banks=synthetic_banks)
    assert sess.retreat() is False
    with pytest.raises(StepError):
        sess.select_answer("p0", "1")
    with pytest.raises(StepError):
        sess.report()
    assert sess.advance() is True
    assert sess.state.step_name == "psychometric"
    assert sess.advance() is False, "next stays disabled until answered"


def test_view_describes_current_question(synthetic_banks):
    sess = AssessmentSession(banks=synthetic_banks)
    view = sess.view()
    assert view["step_name"] == "intro" and view["progress"] == 20
    assert "section" not in view

    sess.start()
    sess.advance()
    view = sess.view()
    sec = view["section"]
    assert view["title"] == "Psychometric Assessment"
    assert sec["question"]["id"] == "p0"
    assert sec["can_advance"] is False
    assert [o["value"] for o in sec["question"]["options"]] == ["1", "2", "3", "4", "5"]
