"""
Process-wide settings, read once at startup from the environment (.env via python-dotenv).
Immutable after load; request handlers only read them.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_MODEL = "gpt-4.1-nano"
DEFAULT_FROM_EMAIL = "Earthy AI <onboarding@resend.dev>"


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_MODEL
    max_tokens: int = 150
    temperature: float = 0.6
    openai_timeout: float = 20.0
    openai_max_retries: int = 0
    resend_api_key: str | None = None
    lead_to_email: str | None = None
    lead_from_email: str = DEFAULT_FROM_EMAIL
    resend_timeout: float = 10.0
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    lead_min_user_turns: int = 3

    @property
    def completion_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def lead_capture_configured(self) -> bool:
        return bool(self.resend_api_key and self.lead_to_email)


def _str(env: Mapping[str, str], key: str) -> str | None:
    value = (env.get(key) or "").strip()
    return value or None


def _number(env: Mapping[str, str], key: str, default, cast):
    raw = _str(env, key)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"[config] {key}={raw!r} is not a valid {cast.__name__}; using {default}")
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ after loading .env)."""
    if environ is None:
        load_dotenv(PROJECT_ROOT / ".env")
        environ = os.environ
    origins = _str(environ, "CORS_ORIGINS") or "*"
    return Settings(
        openai_api_key=_str(environ, "OPENAI_API_KEY"),
        openai_model=_str(environ, "OPENAI_MODEL") or DEFAULT_MODEL,
        max_tokens=_number(environ, "OPENAI_MAX_TOKENS", 150, int),
        temperature=_number(environ, "OPENAI_TEMPERATURE", 0.6, float),
        openai_timeout=_number(environ, "OPENAI_TIMEOUT_SECONDS", 20.0, float),
        openai_max_retries=_number(environ, "OPENAI_MAX_RETRIES", 0, int),
        resend_api_key=_str(environ, "RESEND_API_KEY"),
        lead_to_email=_str(environ, "LEAD_TO_EMAIL"),
        lead_from_email=_str(environ, "LEAD_FROM_EMAIL") or DEFAULT_FROM_EMAIL,
        resend_timeout=_number(environ, "RESEND_TIMEOUT_SECONDS", 10.0, float),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        log_level=(_str(environ, "LOG_LEVEL") or "INFO").upper(),
        lead_min_user_turns=_number(environ, "LEAD_MIN_USER_TURNS", 3, int),
    )
