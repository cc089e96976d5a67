from __future__ import annotations
import logging
from fastapi import FastAPI, Depends, Header, Query
from fastapi.responses import JSONResponse
from campus_ai.api.error_handlers import register_error_handlers
from campus_ai.logging_conf import setup_logging
from campus_ai.config import settings
from campus_ai.models import (
    DeleteResponse,
    ErrorResponse,
    ParseScheduleResponse,
    ScheduleCreateResponse,
    ScheduleEventCreate,
    ScheduleListResponse,
    ScheduleParseBody,
    TranslateRequest,
    TranslateResponse,
)
from campus_ai.deps import get_schedule_parser, get_store, get_translator

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Campus AI", version="0.1.0")
register_error_handlers(app)

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
_AUTH_ERRORS = {401: {"model": ErrorResponse}, **_ERRORS}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}

@app.post("/api/schedule/parse", response_model=ParseScheduleResponse, responses=_ERRORS)
def schedule_parse(body: ScheduleParseBody, parser = Depends(get_schedule_parser)):
    outcome = parser.run(body.text, body.locale)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_response())

@app.post("/api/chat/translate", response_model=TranslateResponse, responses=_ERRORS)
def chat_translate(req: TranslateRequest, translator = Depends(get_translator)):
    # ValidationError / GenerationError are rendered by the registered handler
    return translator.translate(req)

# Identity comes from the auth proxy in front of this service
@app.get("/api/schedule", response_model=ScheduleListResponse, responses=_AUTH_ERRORS)
def schedule_list(
    x_user_id: str | None = Header(default=None),
    store = Depends(get_store),
):
    if not x_user_id:
        return _error(401, "Unauthorized")
    try:
        events = store.list_events(x_user_id)
    except Exception:
        logger.exception("Schedule fetch error")
        return _error(500, "Failed to fetch schedules")
    return ScheduleListResponse(events=events)

@app.post("/api/schedule", response_model=ScheduleCreateResponse, responses=_AUTH_ERRORS)
def schedule_create(
    body: ScheduleEventCreate,
    x_user_id: str | None = Header(default=None),
    store = Depends(get_store),
):
    if not x_user_id:
        return _error(401, "Unauthorized")
    if not body.title or not body.datetime:
        return _error(400, "Title and datetime are required")
    try:
        event = store.create_event(x_user_id, body)
    except ValueError as exc:
        logger.warning("Rejected schedule event: %s", exc)
        return _error(400, "Invalid datetime")
    except Exception:
        logger.exception("Schedule create error")
        return _error(500, "Failed to create schedule")
    return ScheduleCreateResponse(event=event)

@app.delete("/api/schedule", response_model=DeleteResponse, responses=_AUTH_ERRORS)
def schedule_delete(
    id: str | None = Query(default=None),
    x_user_id: str | None = Header(default=None),
    store = Depends(get_store),
):
    if not x_user_id:
        return _error(401, "Unauthorized")
    if not id:
        return _error(400, "Event ID is required")
    try:
        store.delete_event(x_user_id, id)
    except Exception:
        logger.exception("Schedule delete error")
        return _error(500, "Failed to delete schedule")
    return DeleteResponse(success=True)
