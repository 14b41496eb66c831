# readiness_core/engine.py
from __future__ import annotations
from dataclasses import dataclass, field, replace, fields
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from .types import AssessmentResult, WiscarScores
from .question_bank import load_bank, SECTIONS
from .section import SectionRunner
from .scoring import round_half_up
from .results import build_report
from .errors import StepError
from .config import DEBUG_TRACE, TRACE_FIELDS


log = logging.getLogger(__name__)

STEPS: List[str] = ["intro", "psychometric", "aptitude", "wiscar", "results"]
STEP_TITLES: Dict[str, str] = {
    "intro": "Introduction",
    "psychometric": "Psychometric Assessment",
    "aptitude": "Technical Readiness",
    "wiscar": "WISCAR Framework",
    "results": "Results & Recommendations",
}
FIRST_STEP = 0
LAST_STEP = len(STEPS) - 1

_RESULT_FIELDS = {f.name for f in fields(AssessmentResult)}


def _emit_trace(**values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = []
    for key in TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(str(val) for val in ordered))


# ---- Actions ----
@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Complete:
    update: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Back:
    pass


@dataclass(frozen=True)
class Retake:
    pass


Action = Union[Start, Complete, Back, Retake]


@dataclass(frozen=True)
class AssessmentState:
    step: int = FIRST_STEP
    result: AssessmentResult = field(default_factory=AssessmentResult)

    @property
    def step_name(self) -> str:
        return STEPS[self.step]


def _clamp_step(step: int) -> int:
    return max(FIRST_STEP, min(LAST_STEP, int(step)))


def merge_update(result: AssessmentResult, update: Mapping[str, Any]) -> AssessmentResult:
    """Shallow-merge a section's partial update; ``wiscar`` is replaced whole."""

    changes: Dict[str, Any] = {}
    for key, val in update.items():
        if key not in _RESULT_FIELDS:
            log.warning("ignoring unknown result field %r", key)
            continue
        if key == "wiscar" and isinstance(val, Mapping):
            val = WiscarScores(**val)
        changes[key] = val
    return replace(result, **changes)


def reduce(state: AssessmentState, action: Action) -> AssessmentState:
    """Pure step transition: current state + action -> next state."""

    before = state.step
    if isinstance(action, Start):
        nxt = replace(state, step=_clamp_step(before + 1)) if state.step_name == "intro" else state
    elif isinstance(action, Complete):
        if state.step_name in SECTIONS:
            nxt = AssessmentState(
                step=_clamp_step(before + 1),
                result=merge_update(state.result, action.update),
            )
        else:
            nxt = state
    elif isinstance(action, Back):
        nxt = replace(state, step=_clamp_step(before - 1))
    elif isinstance(action, Retake):
        nxt = AssessmentState()
    else:
        raise TypeError(f"unknown action {action!r}")
    _emit_trace(
        action=type(action).__name__,
        step_before=before,
        step_after=nxt.step,
        update=dict(getattr(action, "update", {}) or {}),
    )
    return nxt


class AssessmentSession:
    """Sequences intro -> three sections -> results around the pure reducer.

    The session owns the running :class:`SectionRunner` for the current step;
    leaving a section drops the runner and whatever it had collected.
    """

    def __init__(self, banks: Optional[Dict[str, list]] = None):
        self._banks = banks
        self.state = AssessmentState()
        self.runner: Optional[SectionRunner] = None

    # ---- internals ----
    def _bank(self, section: str) -> list:
        if self._banks is not None:
            return list(self._banks[section])
        return load_bank(section)

    def _dispatch(self, action: Action) -> None:
        self.state = reduce(self.state, action)
        name = self.state.step_name
        self.runner = SectionRunner(name, self._bank(name)) if name in SECTIONS else None

    def _require_runner(self) -> SectionRunner:
        if self.runner is None:
            raise StepError(f"no section is running at step {self.state.step_name!r}")
        return self.runner

    # ---- public ----
    @property
    def step(self) -> int:
        return self.state.step

    @property
    def result(self) -> AssessmentResult:
        return self.state.result

    @property
    def progress(self) -> int:
        return round_half_up((self.state.step + 1) / len(STEPS) * 100)

    def start(self) -> None:
        if self.state.step_name != "intro":
            return
        self._dispatch(Start())

    def select_answer(self, question_id: str, value: str) -> None:
        self._require_runner().select_answer(question_id, value)

    def advance(self) -> bool:
        """Next/Complete. Returns True when the step changed."""
        name = self.state.step_name
        if name == "intro":
            self.start()
            return True
        if self.runner is None:
            return False
        update = self.runner.advance()
        if update is None:
            return False
        self._dispatch(Complete(update))
        return True

    def retreat(self) -> bool:
        """Previous/Back. Returns True when the step changed."""
        if self.state.step == FIRST_STEP:
            return False
        if self.runner is not None and not self.runner.retreat():
            return False
        self._dispatch(Back())
        return True

    def retake(self) -> None:
        self._dispatch(Retake())

    def report(self) -> Dict[str, Any]:
        if self.state.step_name != "results":
            raise StepError("report is only available once all sections are complete")
        return build_report(self.state.result)

    def view(self) -> Dict[str, Any]:
        name = self.state.step_name
        out: Dict[str, Any] = {
            "step": self.state.step,
            "step_name": name,
            "title": STEP_TITLES[name],
            "total_steps": len(STEPS),
            "progress": self.progress,
            "result": {
                "psychometric_fit": self.result.psychometric_fit,
                "technical_readiness": self.result.technical_readiness,
                "wiscar": self.result.wiscar.as_dict(),
            },
        }
        r = self.runner
        if r is not None and r.current is not None:
            q = r.current
            out["section"] = {
                "name": r.section,
                "index": r.index,
                "total": r.total,
                "progress": r.progress,
                "is_last": r.is_last,
                "can_advance": r.can_advance,
                "question": {
                    "id": q.id,
                    "text": q.text,
                    "tag": q.tag,
                    "options": [{"value": o.value, "label": o.label} for o in q.options],
                },
                "answer": r.answer_for(q.id),
                "feedback": r.feedback(),
            }
        return out
