from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from .errors import InvalidAnswer
from .scoring import round_half_up, score_section
from .types import AnswerSet, Question

log = logging.getLogger(__name__)


class SectionRunner:
    """Walks one section's bank a question at a time and scores it on completion.

    The answer set lives only inside the runner; callers only ever see the
    partial result update returned by :meth:`advance` on the last question.
    """

    def __init__(self, section: str, questions: Sequence[Question]):
        self.section = section
        self.questions: List[Question] = list(questions)
        self.index = 0
        self._answers: AnswerSet = {}
        self._by_id: Dict[str, Question] = {q.id: q for q in self.questions}

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current(self) -> Optional[Question]:
        if not self.questions:
            return None
        return self.questions[self.index]

    @property
    def progress(self) -> int:
        if not self.questions:
            return 100
        return round_half_up((self.index + 1) / self.total * 100)

    @property
    def is_last(self) -> bool:
        return self.index >= self.total - 1

    @property
    def can_advance(self) -> bool:
        q = self.current
        return q is None or q.id in self._answers

    def answer_for(self, question_id: str) -> Optional[str]:
        return self._answers.get(question_id)

    def select_answer(self, question_id: str, value: str) -> None:
        q = self._by_id.get(question_id)
        if q is None:
            raise InvalidAnswer(f"{self.section} has no question {question_id!r}")
        value = str(value)
        if q.option(value) is None:
            raise InvalidAnswer(f"{value!r} is not an option for {question_id!r}")
        self._answers[question_id] = value

    def feedback(self) -> Optional[Dict[str, Any]]:
        # only the aptitude quiz has a key to reveal
        q = self.current
        if q is None or self.section != "aptitude":
            return None
        chosen = self._answers.get(q.id)
        key = q.correct_option()
        if chosen is None or key is None:
            return None
        return {
            "correct": chosen == key.value,
            "correct_value": key.value,
            "explanation": q.explanation or "",
        }

    def advance(self) -> Optional[Dict[str, Any]]:
        """Move forward one question; on the last one, finalize and return the update."""
        if not self.can_advance:
            return None
        if not self.is_last:
            self.index += 1
            return None
        return self.finalize()

    def retreat(self) -> bool:
        """Move back one question. Returns True when already at the first question."""
        if self.index == 0:
            return True
        self.index -= 1
        return False

    def finalize(self) -> Dict[str, Any]:
        update = score_section(self.section, self.questions, self._answers)
        log.info("section %s finalized answered=%d/%d update=%s",
                 self.section, len(self._answers), self.total, update)
        return update
