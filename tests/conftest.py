from __future__ import annotations

import pytest

from readiness_core.question_bank import DIMENSIONS, load_banks
from readiness_core.types import Option, Question

LIKERT = tuple(Option(value=str(v), label=f"L{v}") for v in range(1, 6))


def build_synthetic_banks(
    *,
    psychometric: int = 4,
    aptitude: int = 3,
    dimensions: list[str] | None = None,
    per_dimension: int = 1,
) -> dict[str, list[Question]]:
    """Create deterministic small banks for tests."""

    banks: dict[str, list[Question]] = {"psychometric": [], "aptitude": [], "wiscar": []}
    for idx in range(psychometric):
        banks["psychometric"].append(
            Question(id=f"p{idx}", text=f"Statement {idx}", tag="interest", options=LIKERT)
        )
    for idx in range(aptitude):
        banks["aptitude"].append(
            Question(
                id=f"a{idx}",
                text=f"Quiz {idx}",
                tag="math",
                options=(
                    Option(value="a", label="right", correct=True),
                    Option(value="b", label="wrong"),
                ),
                explanation=f"because {idx}",
            )
        )
    for dim in (DIMENSIONS if dimensions is None else dimensions):
        for idx in range(per_dimension):
            banks["wiscar"].append(
                Question(id=f"{dim}_{idx}", text=f"{dim} #{idx}", tag=dim, options=LIKERT)
            )
    return banks


def complete_section(session, value_for) -> None:
    """Answer and advance through the running section; value_for(question) picks the value."""

    runner = session.runner
    assert runner is not None
    while session.runner is runner:
        q = runner.current
        session.select_answer(q.id, value_for(q))
        session.advance()


def correct_value(q: Question) -> str:
    return q.correct_option().value


def wrong_value(q: Question) -> str:
    return next(o.value for o in q.options if not o.correct)


@pytest.fixture
def banks() -> dict[str, list[Question]]:
    return load_banks()


@pytest.fixture
def synthetic_banks() -> dict[str, list[Question]]:
    return build_synthetic_banks()
