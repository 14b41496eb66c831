# readiness_core/reporting.py
from __future__ import annotations
import json
from typing import Any, Dict, List
from .scoring import round_half_up

def _bar(score: Any, width: int = 20) -> str:
    try:
        s = max(0, min(100, int(score)))
    except (TypeError, ValueError):
        s = 0
    filled = round_half_up(s / 100 * width)
    return "#" * filled + "." * (width - filled)

def render_text(report: Dict[str, Any]) -> str:
    """Plain-text rendering of a built report for terminal output."""
    lines: List[str] = []
    lines.append(f"=== {report.get('field', '')} Readiness Results ===")
    lines.append(f"Confidence score: {report.get('confidence_score')}%")
    lines.append(f"Recommendation: {report.get('headline')} ({report.get('recommendation')})")
    lines.append(f"  {report.get('message', '')}")
    lines.append("")
    lines.append(f"Psychometric fit     {_bar(report.get('psychometric_fit'))} {report.get('psychometric_fit')}%")
    lines.append(f"Technical readiness  {_bar(report.get('technical_readiness'))} {report.get('technical_readiness')}%")
    lines.append(f"WISCAR average       {_bar(report.get('wiscar_average'))} {report.get('wiscar_average')}%")
    lines.append("")
    lines.append("WISCAR breakdown:")
    for row in report.get("wiscar_breakdown") or []:
        lines.append(f"  {row['label']:<22} {_bar(row['score'])} {row['score']}%")
    lines.append("")
    lines.append("Career opportunities ranked by fit:")
    for i, c in enumerate(report.get("career_paths") or [], start=1):
        lines.append(f"  {i}. {c['title']} - {c['match']}% match ({c['salary']}, {c['growth']} growth)")
        lines.append(f"     {c['description']}")
    path = report.get("learning_path") or []
    if path:
        lines.append("")
        lines.append("Recommended learning pathway:")
        for phase in path:
            lines.append(f"  {phase['phase']}: {phase['title']} ({phase['duration']}) - {', '.join(phase['topics'])}")
    lines.append("")
    lines.append(f"Next: {report.get('next_action')}")
    return "\n".join(lines)

def to_json(report: Dict[str, Any]) -> str:
    return json.dumps(report, ensure_ascii=False, indent=2)
