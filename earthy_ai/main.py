"""
Earthy AI: chat router and lead capture API entrypoint.
Run with: uvicorn earthy_ai.main:app
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from earthy_ai import __version__
from earthy_ai.config import Settings, load_settings
from earthy_ai.leads import create_dispatcher
from earthy_ai.leads import router as lead_router
from earthy_ai.live import ChatService, CompletionGateway, PromptPolicy, create_gateway, default_policy
from earthy_ai.live.reply import INVALID_INPUT_REPLY
from earthy_ai.live.router import router as chat_router

logger = logging.getLogger("earthy_ai")

LIVENESS_TEXT = "Earthy AI backend running"

_UNSET = object()


def create_app(
    settings: Settings | None = None,
    gateway: CompletionGateway | None = None,
    dispatcher=_UNSET,
    policy: PromptPolicy | None = None,
) -> FastAPI:
    """
    Build the app. Collaborators are constructed here once and shared by every request.
    Pass `dispatcher=None` explicitly to disable lead capture.
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    gateway = gateway or create_gateway(settings)
    if dispatcher is _UNSET:
        dispatcher = create_dispatcher(settings)
    policy = policy or default_policy(settings)

    app = FastAPI(
        title="Earthy AI",
        description="Conversational assistant for service businesses: chat → prompt policy → completion; lead capture → email",
        version=__version__,
    )
    app.state.settings = settings
    app.state.chat_service = ChatService(policy=policy, gateway=gateway)
    app.state.lead_dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(chat_router)
    app.include_router(lead_router)

    @app.exception_handler(RequestValidationError)
    async def unreadable_body(request: Request, exc: RequestValidationError):
        # Malformed JSON still answers in each endpoint's own response shape
        if request.url.path == "/chat":
            return JSONResponse(status_code=400, content={"reply": INVALID_INPUT_REPLY, "history": []})
        if request.url.path == "/api/lead":
            return JSONResponse(status_code=400, content={"success": False})
        return await request_validation_exception_handler(request, exc)

    @app.get("/", response_class=PlainTextResponse)
    def liveness():
        return LIVENESS_TEXT

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "completion_configured": settings.completion_configured,
            "lead_capture_configured": app.state.lead_dispatcher is not None,
        }

    logger.info(
        f"[startup] model={gateway.model} lead_capture={'on' if dispatcher is not None else 'off'}"
    )
    return app


app = create_app()
