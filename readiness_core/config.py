from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


FIELD_NAME: str = "Chemical Engineering"
LIKERT_MAX: int = 5

WEIGHT_PSYCHOMETRIC: float = 0.3
WEIGHT_TECHNICAL: float = 0.3
WEIGHT_WISCAR: float = 0.4

YES_THRESHOLD: int = 75
NO_THRESHOLD: int = 45

BANK_PATH: str | None = None

DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "action",
    "step_before",
    "step_after",
    "section",
    "question_id",
    "update",
)

ALLOWED_ORIGINS: list[str] = [
    "http://localhost:3000",
    "http://localhost:5173",
]

# // env overrides for staging/ops; defaults remain the published weights.
FIELD_NAME = os.getenv("FIELD_NAME", FIELD_NAME)
WEIGHT_PSYCHOMETRIC = _env_float("WEIGHT_PSYCHOMETRIC", WEIGHT_PSYCHOMETRIC)
WEIGHT_TECHNICAL = _env_float("WEIGHT_TECHNICAL", WEIGHT_TECHNICAL)
WEIGHT_WISCAR = _env_float("WEIGHT_WISCAR", WEIGHT_WISCAR)
YES_THRESHOLD = _env_int("YES_THRESHOLD", YES_THRESHOLD)
NO_THRESHOLD = _env_int("NO_THRESHOLD", NO_THRESHOLD)
BANK_PATH = os.getenv("BANK_PATH") or None
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)
if os.getenv("ALLOWED_ORIGINS"):
    ALLOWED_ORIGINS = [o.strip() for o in os.environ["ALLOWED_ORIGINS"].split(",") if o.strip()]
