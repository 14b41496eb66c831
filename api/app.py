from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import logging, uuid, typing as t

# ---- Engine imports ----
from readiness_core.engine import AssessmentSession
from readiness_core.errors import InvalidAnswer, StepError
from readiness_core.intro import intro_content
from readiness_core import config

log = logging.getLogger(__name__)

# in-process only; sessions are lost on restart
SESS: dict[str, AssessmentSession] = {}

app = FastAPI(title="Career Readiness Assessment API")


@app.get("/")
def root():
    return {"status": "ok", "service": "readiness-assessment-api"}


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class AnswerReq(BaseModel):
    question_id: str
    value: int | str

# ---- Helpers ----
def _session(sid: str) -> AssessmentSession:
    sess = SESS.get(sid)
    if not sess:
        raise HTTPException(404, "session not found")
    return sess

# ---- Health ----
@app.get("/health")
def health():
    return {
        "field": config.FIELD_NAME,
        "weights": {
            "psychometric": config.WEIGHT_PSYCHOMETRIC,
            "technical": config.WEIGHT_TECHNICAL,
            "wiscar": config.WEIGHT_WISCAR,
        },
        "thresholds": {"yes": config.YES_THRESHOLD, "no": config.NO_THRESHOLD},
        "custom_bank": bool(config.BANK_PATH),
        "debug_trace": config.DEBUG_TRACE,
        "active_sessions": len(SESS),
    }


@app.get("/intro")
def intro():
    return intro_content()

# ---- Session endpoints ----
@app.post("/session/start")
def start():
    sid = str(uuid.uuid4())
    SESS[sid] = AssessmentSession()
    log.info("session %s started", sid)
    return {"session_id": sid, "view": SESS[sid].view()}


@app.get("/session/{sid}")
def get_view(sid: str):
    return _session(sid).view()


@app.post("/session/{sid}/begin")
def begin(sid: str):
    sess = _session(sid)
    sess.start()
    return sess.view()


@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerReq):
    sess = _session(sid)
    try:
        sess.select_answer(req.question_id, str(req.value))
    except StepError as e:
        raise HTTPException(409, str(e))
    except InvalidAnswer as e:
        raise HTTPException(400, str(e))
    return sess.view()


@app.post("/session/{sid}/next")
def next_step(sid: str):
    sess = _session(sid)
    sess.advance()
    return sess.view()


@app.post("/session/{sid}/prev")
def prev_step(sid: str):
    sess = _session(sid)
    sess.retreat()
    return sess.view()


@app.post("/session/{sid}/retake")
def retake(sid: str):
    sess = _session(sid)
    sess.retake()
    return sess.view()


@app.get("/session/{sid}/report")
def report(sid: str) -> dict[str, t.Any]:
    sess = _session(sid)
    try:
        return sess.report()
    except StepError as e:
        raise HTTPException(409, str(e))


@app.delete("/session/{sid}")
def delete_session(sid: str):
    if SESS.pop(sid, None) is None:
        raise HTTPException(404, "session not found")
    return {"ok": True}
