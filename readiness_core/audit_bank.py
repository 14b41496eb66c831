from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Iterable, Mapping

from . import config
from .question_bank import CATEGORIES, SECTIONS, load_banks
from .types import Question

LIKERT_SECTIONS: tuple[str, ...] = ("psychometric", "wiscar")
DEFAULT_SUMMARY_PATH = Path(tempfile.gettempdir()) / "bank_audit.json"


def _blank_section(section: str) -> dict[str, object]:
    return {
        "tags": {tag: 0 for tag in CATEGORIES.get(section, [])},
        "questions": 0,
    }


def _audit_section(section: str, questions: Iterable[Question], warnings: list[str]) -> dict[str, object]:
    data = _blank_section(section)
    tags: dict[str, int] = data["tags"]  # type: ignore[assignment]
    known = set(CATEGORIES.get(section, []))
    seen: set[str] = set()

    for q in questions:
        data["questions"] += 1  # type: ignore[operator]
        if q.id in seen:
            warnings.append(f"{section} question id {q.id!r} is duplicated")
        seen.add(q.id)

        if q.tag not in known:
            warnings.append(f"{section} question {q.id!r} has unknown tag {q.tag!r}")
        tags[q.tag] = tags.get(q.tag, 0) + 1

        values = [o.value for o in q.options]
        if len(set(values)) != len(values):
            warnings.append(f"{section} question {q.id!r} repeats an option value")

        if section == "aptitude":
            n_correct = sum(1 for o in q.options if o.correct)
            if n_correct != 1:
                warnings.append(f"aptitude question {q.id!r} has {n_correct} correct options (expected 1)")
        elif section in LIKERT_SECTIONS:
            for v in values:
                try:
                    iv = int(v)
                except ValueError:
                    iv = 0
                if not 1 <= iv <= config.LIKERT_MAX:
                    warnings.append(f"{section} question {q.id!r} option {v!r} is not 1..{config.LIKERT_MAX}")

    if not data["questions"]:
        warnings.append(f"{section} has no questions")
    if section == "wiscar":
        for tag, count in tags.items():
            if tag in known and count == 0:
                warnings.append(f"wiscar dimension {tag} has no questions and will always score 0")
    return data


def audit_banks(banks: Mapping[str, Iterable[Question]]) -> dict[str, object]:
    coverage: dict[str, dict[str, object]] = {}
    warnings: list[str] = []
    for section in SECTIONS:
        coverage[section] = _audit_section(section, banks.get(section, []), warnings)
    totals = {section: coverage[section]["questions"] for section in SECTIONS}
    return {"coverage": coverage, "warnings": warnings, "totals": totals}


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, object]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Bank Coverage ===")
    for section in SECTIONS:
        data = coverage[section]
        print(f"\nSection: {section} ({data['questions']} questions)")
        tags: dict[str, int] = data["tags"]  # type: ignore[assignment]
        print("  " + "  ".join(f"{tag}:{count:2d}" for tag, count in tags.items()))

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path = DEFAULT_SUMMARY_PATH) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    bank_path = argv[0] if argv else None
    summary = audit_banks(load_banks(bank_path))
    print_report(summary)
    write_summary(summary, path=DEFAULT_SUMMARY_PATH)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
