from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Sequence

from . import config as cfg
from .question_bank import DIMENSIONS, DIMENSION_LABELS
from .scoring import clamp_pct, round_half_up
from .types import AssessmentResult, Recommendation, WiscarScores

log = logging.getLogger(__name__)


_CAREER_PATHS: Sequence[Dict[str, Any]] = (
    {
        "title": "Process Engineer",
        "description": "Design and optimize manufacturing processes",
        "salary": "$75,000 - $95,000",
        "growth": "High",
        "match": lambda r: max(r.technical_readiness, r.wiscar.skill),
    },
    {
        "title": "R&D Engineer",
        "description": "Research and develop new chemical products",
        "salary": "$80,000 - $110,000",
        "growth": "Very High",
        "match": lambda r: max(r.psychometric_fit, r.wiscar.interest),
    },
    {
        "title": "Environmental Engineer",
        "description": "Develop solutions for environmental challenges",
        "salary": "$70,000 - $90,000",
        "growth": "High",
        "match": lambda r: r.wiscar.real_world_alignment,
    },
    {
        "title": "Quality Assurance Specialist",
        "description": "Ensure product quality and regulatory compliance",
        "salary": "$65,000 - $85,000",
        "growth": "Moderate",
        "match": lambda r: max(r.technical_readiness, r.wiscar.cognitive_readiness),
    },
)

_LEARNING_PATH: Sequence[Dict[str, Any]] = (
    {"phase": "Phase 1", "title": "Foundations", "duration": "3-4 weeks",
     "topics": ["Chemistry Basics", "Math Review", "Introduction to Engineering"]},
    {"phase": "Phase 2", "title": "Core Concepts", "duration": "6-8 weeks",
     "topics": ["Thermodynamics", "Fluid Mechanics", "Mass Transfer"]},
    {"phase": "Phase 3", "title": "Applications", "duration": "8-10 weeks",
     "topics": ["Process Design", "Reaction Engineering", "Control Systems"]},
    {"phase": "Phase 4", "title": "Practice", "duration": "12+ weeks",
     "topics": ["Internships", "Projects", "Industry Exposure"]},
)

_HEADLINES: Dict[str, str] = {
    "Yes": "Start Learning",
    "Maybe": "Explore Further",
    "No": "Consider Alternatives",
}


def _messages(field: str) -> Dict[str, str]:
    return {
        "Yes": f"{field} is an excellent fit for you! You show strong alignment across all key areas.",
        "Maybe": f"{field} could be a good fit with some preparation. Focus on strengthening key areas.",
        "No": "You might be better suited for a related field. Consider exploring alternative paths.",
    }


def wiscar_average(wiscar: WiscarScores) -> float:
    vals = [getattr(wiscar, d) for d in DIMENSIONS]
    return sum(vals) / len(vals)


def confidence_score(result: AssessmentResult) -> int:
    """Weighted blend of the three instruments, rounded half up and kept within 0..100."""

    blended = (
        result.psychometric_fit * cfg.WEIGHT_PSYCHOMETRIC
        + result.technical_readiness * cfg.WEIGHT_TECHNICAL
        + wiscar_average(result.wiscar) * cfg.WEIGHT_WISCAR
    )
    return clamp_pct(blended)


def recommendation(score: int) -> Recommendation:
    if score >= cfg.YES_THRESHOLD:
        return "Yes"
    if score <= cfg.NO_THRESHOLD:
        return "No"
    return "Maybe"


def career_paths(result: AssessmentResult) -> List[Dict[str, Any]]:
    """Fixed career entries ranked by match, highest first (ties keep listing order)."""

    rows: List[Dict[str, Any]] = []
    for entry in _CAREER_PATHS:
        match: Callable[[AssessmentResult], int] = entry["match"]
        row = {k: v for k, v in entry.items() if k != "match"}
        row["match"] = int(match(result))
        rows.append(row)
    return sorted(rows, key=lambda r: r["match"], reverse=True)


def learning_path(rec: Recommendation) -> List[Dict[str, Any]]:
    if rec == "No":
        return []
    return [dict(phase, topics=list(phase["topics"])) for phase in _LEARNING_PATH]


def build_report(result: AssessmentResult) -> Dict[str, Any]:
    avg = wiscar_average(result.wiscar)
    score = confidence_score(result)
    rec = recommendation(score)
    log.info("report confidence=%d recommendation=%s", score, rec)
    return {
        "field": cfg.FIELD_NAME,
        "confidence_score": score,
        "recommendation": rec,
        "headline": _HEADLINES[rec],
        "message": _messages(cfg.FIELD_NAME)[rec],
        "next_action": "Start Learning Path" if rec == "Yes" else "Explore Alternatives",
        "psychometric_fit": result.psychometric_fit,
        "technical_readiness": result.technical_readiness,
        "wiscar": result.wiscar.as_dict(),
        "wiscar_average": round_half_up(avg),
        "wiscar_breakdown": [
            {"key": d, "label": DIMENSION_LABELS[d], "score": getattr(result.wiscar, d)}
            for d in DIMENSIONS
        ],
        "career_paths": career_paths(result),
        "learning_path": learning_path(rec),
    }
