"""
Completion gateway: send the assembled message sequence to the chat model (LangChain
ChatOpenAI) and return CompletionText or CompletionFault. Built once at startup and
shared by every request; no caching and no retries here.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from earthy_ai.config import Settings
from earthy_ai.schemas import Message, Role

logger = logging.getLogger(__name__)


class FaultKind(str, Enum):
    TRANSPORT = "transport_fault"
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True)
class CompletionText:
    text: str


@dataclass(frozen=True)
class CompletionFault:
    kind: FaultKind
    reason: str


CompletionResult = CompletionText | CompletionFault


class CompletionGateway(Protocol):
    model: str

    def complete(self, messages: list[Message]) -> CompletionResult:
        ...


def to_langchain_messages(messages: list[Message]) -> list[BaseMessage]:
    out: list[BaseMessage] = []
    for m in messages:
        if m.role == Role.SYSTEM:
            out.append(SystemMessage(content=m.content))
        elif m.role == Role.USER:
            out.append(HumanMessage(content=m.content))
        else:
            out.append(AIMessage(content=m.content))
    return out


def decode_completion(response: Any) -> CompletionResult:
    """
    Map a chat-model response to a CompletionResult. `content` is either a string or a
    list of content blocks (strings or {"type": "text", "text": ...}). Any other shape
    is EMPTY_RESULT, never an exception.
    """
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return CompletionText(content)
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str):
                parts.append(block["text"])
        if parts:
            return CompletionText("".join(parts))
        return CompletionFault(FaultKind.EMPTY_RESULT, "response carried no text blocks")
    return CompletionFault(
        FaultKind.EMPTY_RESULT,
        f"unexpected response shape: {type(response).__name__} (content={type(content).__name__})",
    )


class LangChainGateway:
    """Wraps any LangChain chat model exposing .invoke(messages)."""

    def __init__(self, chat: Any, model: str):
        self._chat = chat
        self.model = model

    def complete(self, messages: list[Message]) -> CompletionResult:
        try:
            response = self._chat.invoke(to_langchain_messages(messages))
        except Exception as e:
            # Network errors, timeouts, auth and non-2xx statuses all land here.
            logger.error(f"[llm] {self.model} call failed: {type(e).__name__}: {e}")
            return CompletionFault(FaultKind.TRANSPORT, f"{type(e).__name__}: {e}")
        result = decode_completion(response)
        if isinstance(result, CompletionFault):
            logger.warning(f"[llm] {self.model} returned no usable text: {result.reason}")
        return result


class UnconfiguredGateway:
    """Stands in when OPENAI_API_KEY is missing so the process still serves requests."""

    def __init__(self, model: str):
        self.model = model

    def complete(self, messages: list[Message]) -> CompletionResult:
        return CompletionFault(FaultKind.TRANSPORT, "completion provider not configured (OPENAI_API_KEY not set)")


def create_gateway(settings: Settings) -> CompletionGateway:
    if not settings.openai_api_key:
        logger.warning("[llm] OPENAI_API_KEY not set; /chat will answer 502 until configured")
        return UnconfiguredGateway(settings.openai_model)
    chat = ChatOpenAI(
        model=settings.openai_model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.openai_timeout,
        max_retries=settings.openai_max_retries,
        api_key=settings.openai_api_key,
    )
    return LangChainGateway(chat, settings.openai_model)
