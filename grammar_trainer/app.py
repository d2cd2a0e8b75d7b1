"""FastAPI application with all routes."""
from __future__ import annotations

import logging
import uuid

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from grammar_trainer.config import LOG_LEVELS, Settings, load_settings, save_settings
from grammar_trainer.filters import (
    ALL_LABELS,
    filter_questions,
    parse_category,
    parse_difficulty,
)
from grammar_trainer.models import ALL, Difficulty, GrammarCategory
from grammar_trainer.session import QuizSession, question_to_dict
from grammar_trainer.store import QuestionStore, load_store

app = FastAPI(title="Grammar Trainer")

_log = logging.getLogger("grammar_trainer.app")

# Global state (initialized in startup)
_store: QuestionStore | None = None
_settings: Settings | None = None
_active_sessions: dict[str, QuizSession] = {}  # session_id -> session


def get_store() -> QuestionStore:
    assert _store is not None
    return _store


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def _apply_log_level(level) -> None:
    name = str(level).upper()
    if name not in LOG_LEVELS:
        _log.warning("Unknown log_level %r in config, using INFO", level)
        name = "INFO"
    logging.getLogger("grammar_trainer").setLevel(name)


@app.on_event("startup")
async def startup():
    global _store, _settings
    if _store is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _apply_log_level(_settings.log_level)
    # A malformed question raises QuestionValidationError and aborts startup
    _store = load_store()


@app.on_event("shutdown")
async def shutdown():
    if _active_sessions:
        _log.info("Discarding %d active sessions", len(_active_sessions))
    _active_sessions.clear()


async def _json_body(request: Request) -> dict:
    try:
        body = await request.json() if await request.body() else {}
    except ValueError:
        raise HTTPException(400, "Invalid JSON body")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _parse_filters(category, difficulty) -> tuple:
    try:
        return parse_category(category), parse_difficulty(difficulty)
    except ValueError as e:
        raise HTTPException(400, str(e))


def _get_session(session_id: str) -> QuizSession:
    session = _active_sessions.get(session_id)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


def _session_response(session_id: str, session: QuizSession) -> dict:
    return {"session_id": session_id, **session.snapshot()}


# ── API: Question bank ───────────────────────────────────────────────────

@app.get("/api/filters")
async def api_filters():
    counts = get_store().counts()
    return {
        "category": [{"value": ALL, "label": ALL_LABELS[GrammarCategory], "count": counts["total"]}] + [
            {"value": c.value, "label": c.label, "count": counts["by_category"][c.value]}
            for c in GrammarCategory
        ],
        "difficulty": [{"value": ALL, "label": ALL_LABELS[Difficulty], "count": counts["total"]}] + [
            {"value": d.value, "label": d.label, "count": counts["by_difficulty"][d.value]}
            for d in Difficulty
        ],
    }


@app.get("/api/questions")
async def api_questions(request: Request):
    category, difficulty = _parse_filters(
        request.query_params.get("category"),
        request.query_params.get("difficulty"),
    )
    questions = filter_questions(get_store(), category, difficulty)
    return {
        "total": len(questions),
        "questions": [question_to_dict(q) for q in questions],
    }


# ── API: Session management ──────────────────────────────────────────────

@app.post("/api/session/start")
async def api_session_start(request: Request):
    body = await _json_body(request)
    s = get_settings()
    category, difficulty = _parse_filters(
        body.get("category", s.default_category),
        body.get("difficulty", s.default_difficulty),
    )
    session = QuizSession(get_store(), category, difficulty)
    # Registry is insertion-ordered: evict the oldest sessions beyond the cap
    while _active_sessions and len(_active_sessions) >= max(s.max_sessions, 1):
        oldest = next(iter(_active_sessions))
        del _active_sessions[oldest]
        _log.info("Session %s evicted (limit %d)", oldest, s.max_sessions)
    session_id = uuid.uuid4().hex
    _active_sessions[session_id] = session
    _log.info("Session %s started: %s, %d questions", session_id, session.state, session.total)
    return _session_response(session_id, session)


@app.get("/api/session/{session_id}")
async def api_session_get(session_id: str):
    return _session_response(session_id, _get_session(session_id))


@app.delete("/api/session/{session_id}")
async def api_session_delete(session_id: str):
    _get_session(session_id)
    del _active_sessions[session_id]
    return {"session_id": session_id, "deleted": True}


@app.post("/api/session/{session_id}/select")
async def api_session_select(session_id: str, request: Request):
    session = _get_session(session_id)
    body = await _json_body(request)
    option = body.get("option")
    if not isinstance(option, str):
        raise HTTPException(400, "No option provided")
    session.select_option(option)
    return _session_response(session_id, session)


@app.post("/api/session/{session_id}/submit")
async def api_session_submit(session_id: str):
    session = _get_session(session_id)
    session.submit()
    return _session_response(session_id, session)


@app.post("/api/session/{session_id}/advance")
async def api_session_advance(session_id: str):
    session = _get_session(session_id)
    session.advance()
    return _session_response(session_id, session)


@app.post("/api/session/{session_id}/reset")
async def api_session_reset(session_id: str):
    session = _get_session(session_id)
    session.reset()
    return _session_response(session_id, session)


@app.post("/api/session/{session_id}/filter")
async def api_session_filter(session_id: str, request: Request):
    session = _get_session(session_id)
    body = await _json_body(request)
    category, difficulty = _parse_filters(body.get("category"), body.get("difficulty"))
    session.change_filter(category, difficulty)
    return _session_response(session_id, session)


@app.post("/api/session/{session_id}/reset-filters")
async def api_session_reset_filters(session_id: str):
    session = _get_session(session_id)
    session.reset_filters()
    return _session_response(session_id, session)


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await _json_body(request)
    s = get_settings()
    if "default_category" in body or "default_difficulty" in body:
        category, difficulty = _parse_filters(
            body.get("default_category", s.default_category),
            body.get("default_difficulty", s.default_difficulty),
        )
        body["default_category"] = getattr(category, "value", category)
        body["default_difficulty"] = getattr(difficulty, "value", difficulty)
    if "log_level" in body:
        level = body["log_level"]
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise HTTPException(400, f"log_level must be one of {', '.join(LOG_LEVELS)}")
        body["log_level"] = level.upper()
    for k, low, high in (("port", 1, 65535), ("max_sessions", 1, None)):
        if k in body:
            v = body[k]
            if not isinstance(v, int) or isinstance(v, bool) or v < low or (high and v > high):
                raise HTTPException(400, f"{k} must be an integer >= {low}" + (f" and <= {high}" if high else ""))
    if "host" in body and (not isinstance(body["host"], str) or not body["host"].strip()):
        raise HTTPException(400, "host must be a non-empty string")
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    _apply_log_level(s.log_level)
    return s.to_dict()
