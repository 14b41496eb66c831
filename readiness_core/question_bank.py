from __future__ import annotations
import json, importlib.resources as ir
from pathlib import Path
from typing import Dict, List, Optional
from . import config
from .errors import BankError
from .types import Option, Question
SECTIONS = ["psychometric","aptitude","wiscar"]
DIMENSIONS = ["will","interest","skill","cognitive_readiness","ability_to_learn","real_world_alignment"]
DIMENSION_LABELS = {
    "will": "Will & Perseverance",
    "interest": "Interest & Curiosity",
    "skill": "Current Skills",
    "cognitive_readiness": "Cognitive Readiness",
    "ability_to_learn": "Ability to Learn",
    "real_world_alignment": "Real-World Alignment",
}
CATEGORIES = {
    "psychometric": ["interest","personality","motivation"],
    "aptitude": ["math","chemistry","physics"],
    "wiscar": DIMENSIONS,
}
_BANKS_CACHE: Optional[Dict[str, List[Question]]] = None
def _read_raw(path: Optional[str] = None) -> dict:
    p = path or config.BANK_PATH
    if p:
        data = Path(p).read_text(encoding="utf-8")
    else:
        data = ir.files(__package__).joinpath("data/banks.json").read_text(encoding="utf-8")
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise BankError(f"bank file is not valid JSON: {e}") from e
def _parse_option(where: str, raw: dict) -> Option:
    if not isinstance(raw, dict):
        raise BankError(f"{where} option is not an object: {raw!r}")
    try:
        return Option(value=str(raw["value"]), label=str(raw["label"]), correct=bool(raw.get("correct", False)))
    except KeyError as e:
        raise BankError(f"{where} option missing field {e.args[0]!r}: {raw!r}") from e
def _parse_question(section: str, raw: dict, likert: List[Option]) -> Question:
    if not isinstance(raw, dict):
        raise BankError(f"{section} question is not an object: {raw!r}")
    try:
        qid = str(raw["id"]); text = str(raw["text"]); tag = str(raw["tag"])
    except KeyError as e:
        raise BankError(f"{section} question missing field {e.args[0]!r}: {raw!r}") from e
    raw_opts = raw.get("options")
    if raw_opts is None:
        opts = tuple(likert)
    elif isinstance(raw_opts, list):
        opts = tuple(_parse_option(f"{section} question {qid!r}", o) for o in raw_opts)
    else:
        raise BankError(f"{section} question {qid!r} options must be a list")
    if not opts:
        raise BankError(f"{section} question {qid!r} has no options")
    return Question(id=qid, text=text, tag=tag, options=opts, explanation=raw.get("explanation"))
def parse_banks(raw: dict) -> Dict[str, List[Question]]:
    if not isinstance(raw, dict):
        raise BankError("bank file must hold a JSON object")
    raw_likert = raw.get("likert", [])
    if not isinstance(raw_likert, list):
        raise BankError("likert scale must be a list")
    likert = [_parse_option("likert", o) for o in raw_likert]
    banks: Dict[str, List[Question]] = {}
    for section in SECTIONS:
        if section not in raw:
            raise BankError(f"bank file has no {section!r} section")
        if not isinstance(raw[section], list):
            raise BankError(f"{section!r} section must be a list of questions")
        banks[section] = [_parse_question(section, q, likert) for q in raw[section]]
    return banks
def load_banks(path: Optional[str] = None) -> Dict[str, List[Question]]:
    global _BANKS_CACHE
    if path is not None:
        return parse_banks(_read_raw(path))
    if _BANKS_CACHE is None:
        _BANKS_CACHE = parse_banks(_read_raw())
    return _BANKS_CACHE
def load_bank(section: str) -> List[Question]:
    if section not in SECTIONS:
        raise KeyError(section)
    return list(load_banks()[section])
