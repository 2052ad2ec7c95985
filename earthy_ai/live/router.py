"""Chat API. Body: { "input": "...", "history": [{"author": "user"|"ai", "text": "..."}] }."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from earthy_ai.errors import InvalidInput
from earthy_ai.live.reply import APOLOGY_REPLY, INVALID_INPUT_REPLY, echo_history
from earthy_ai.schemas import ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def _respond(status_code: int, reply: str, history: list) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ChatResponse(reply=reply, history=history).model_dump(mode="json"),
    )


@router.post("/chat", response_model=ChatResponse)
def chat(request: Request, body: Any = Body(None)):
    """
    200 with the reply and history + one assistant turn; 400 for empty input; 502 when the
    completion provider fails; 500 for anything unexpected. Errors echo the history as sent.
    """
    if not isinstance(body, dict):
        body = {}
    raw_history = body.get("history", [])
    service = request.app.state.chat_service
    try:
        outcome = service.turn(body.get("input"), raw_history)
    except InvalidInput:
        return _respond(400, INVALID_INPUT_REPLY, echo_history(raw_history))
    except Exception:
        logger.exception("[chat] unexpected failure")
        return _respond(500, APOLOGY_REPLY, echo_history(raw_history))
    return _respond(outcome.status_code, outcome.reply, outcome.history)
