# autoplay.py
from __future__ import annotations
import argparse
from typing import Any, Dict
from readiness_core.engine import AssessmentSession
from readiness_core.reporting import render_text, to_json
from readiness_core.types import Question

# Likert strength per section for each scripted profile
LIKERT_BY_PROFILE: Dict[str, Dict[str, str]] = {
    "strong": {"psychometric": "5", "wiscar": "5"},
    "mixed":  {"psychometric": "4", "wiscar": "3"},
    "weak":   {"psychometric": "1", "wiscar": "1"},
}
# how many aptitude questions each profile gets right, in bank order
CORRECT_BY_PROFILE: Dict[str, int] = {"strong": 6, "mixed": 4, "weak": 0}

def _wrong_value(q: Question) -> str:
    return next(o.value for o in q.options if not o.correct)

def _answer_for(section: str, q: Question, position: int, profile: str) -> str:
    if section == "aptitude":
        key = q.correct_option()
        if key is not None and position < CORRECT_BY_PROFILE[profile]:
            return key.value
        return _wrong_value(q)
    return LIKERT_BY_PROFILE[profile][section]

def run(profile: str) -> Dict[str, Any]:
    sess = AssessmentSession()
    sess.start()
    answered = 0
    while sess.runner is not None:
        r = sess.runner
        q = r.current
        sess.select_answer(q.id, _answer_for(r.section, q, r.index, profile)); answered += 1
        sess.advance()
    if answered <= 0: raise RuntimeError("Driver answered 0 questions.")
    return sess.report()

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--profile", choices=sorted(LIKERT_BY_PROFILE), default="strong")
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    a = ap.parse_args(argv)
    report = run(a.profile)
    print(to_json(report) if a.json else render_text(report))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
