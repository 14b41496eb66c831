from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Literal
SectionName = Literal["psychometric","aptitude","wiscar"]
Recommendation = Literal["Yes","Maybe","No"]
AnswerSet = Dict[str, str]
@dataclass(frozen=True)
class Option:
    value: str; label: str
    correct: bool = False
@dataclass(frozen=True)
class Question:
    id: str; text: str; tag: str
    options: Tuple[Option, ...] = ()
    explanation: Optional[str] = None
    def option(self, value: str) -> Optional[Option]:
        return next((o for o in self.options if o.value == value), None)
    def correct_option(self) -> Optional[Option]:
        return next((o for o in self.options if o.correct), None)
@dataclass(frozen=True)
class WiscarScores:
    will: int = 0
    interest: int = 0
    skill: int = 0
    cognitive_readiness: int = 0
    ability_to_learn: int = 0
    real_world_alignment: int = 0
    def as_dict(self) -> Dict[str, int]:
        return dict(self.__dict__)
@dataclass(frozen=True)
class AssessmentResult:
    psychometric_fit: int = 0
    technical_readiness: int = 0
    wiscar: WiscarScores = field(default_factory=WiscarScores)
