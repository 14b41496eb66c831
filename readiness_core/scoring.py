from __future__ import annotations
import math
from typing import Any, Dict, Mapping, Optional, Sequence
from .config import LIKERT_MAX
from .question_bank import DIMENSIONS
from .types import Question, WiscarScores

def round_half_up(x: float) -> int:
    """Round to the nearest integer with .5 going up (never banker's rounding)."""
    return int(math.floor(float(x) + 0.5))

def clamp_pct(x: float) -> int:
    v = round_half_up(x)
    if v < 0: return 0
    if v > 100: return 100
    return v

def _likert(value: Any) -> Optional[int]:
    try:
        v = int(value)
    except (TypeError, ValueError):
        return None
    return v if 1 <= v <= LIKERT_MAX else None

def psychometric_fit(questions: Sequence[Question], answers: Mapping[str, str]) -> int:
    max_total = len(questions) * LIKERT_MAX
    if max_total == 0:
        return 0
    total = 0
    for q in questions:
        v = _likert(answers.get(q.id))
        if v is not None:
            total += v
    return clamp_pct(total / max_total * 100)

def technical_readiness(questions: Sequence[Question], answers: Mapping[str, str]) -> int:
    if not questions:
        return 0
    correct = 0
    for q in questions:
        key = q.correct_option()
        if key is not None and answers.get(q.id) == key.value:
            correct += 1
    return clamp_pct(correct / len(questions) * 100)

def wiscar_scores(questions: Sequence[Question], answers: Mapping[str, str]) -> WiscarScores:
    """
    Per dimension: sum of answered Likert values over (answered count * 5).
    A dimension with nothing answered scores 0.
    """
    totals: Dict[str, int] = {d: 0 for d in DIMENSIONS}
    counts: Dict[str, int] = {d: 0 for d in DIMENSIONS}
    for q in questions:
        if q.tag not in totals:
            continue
        v = _likert(answers.get(q.id))
        if v is None:
            continue
        totals[q.tag] += v
        counts[q.tag] += 1
    out = {d: (clamp_pct(totals[d] / (counts[d] * LIKERT_MAX) * 100) if counts[d] else 0) for d in DIMENSIONS}
    return WiscarScores(**out)

def score_section(section: str, questions: Sequence[Question], answers: Mapping[str, str]) -> Dict[str, Any]:
    """
    Returns the partial result update produced by one finished section:
      psychometric -> {"psychometric_fit": int}
      aptitude     -> {"technical_readiness": int}
      wiscar       -> {"wiscar": WiscarScores}
    """
    if section == "psychometric":
        return {"psychometric_fit": psychometric_fit(questions, answers)}
    if section == "aptitude":
        return {"technical_readiness": technical_readiness(questions, answers)}
    if section == "wiscar":
        return {"wiscar": wiscar_scores(questions, answers)}
    raise KeyError(section)
