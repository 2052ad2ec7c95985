"""
One chat turn, end to end: normalize history → assemble prompt → completion gateway →
normalize reply → updated history. Stateless: the client sends and receives the full
history each call; nothing is kept between requests.
"""

import logging
from dataclasses import dataclass
from typing import Any

from earthy_ai.live.history import normalize_history
from earthy_ai.live.llm_chat import CompletionFault, CompletionGateway
from earthy_ai.live.prompt import CompletionRequest, PromptPolicy, assemble_messages
from earthy_ai.live.reply import echo_history, normalize_reply, updated_history

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatOutcome:
    reply: str
    history: list
    status_code: int = 200


class ChatService:
    """Holds the process-wide policy and gateway handle; shared read-only by all requests."""

    def __init__(self, policy: PromptPolicy, gateway: CompletionGateway):
        self.policy = policy
        self.gateway = gateway

    def turn(self, raw_input: Any, raw_history: Any) -> ChatOutcome:
        """
        Raises InvalidInput (before any outbound call) when the input is empty.
        Provider faults come back as a 502 outcome with the apology reply and the
        client's history unchanged.
        """
        conversation = normalize_history(raw_history)
        messages = assemble_messages(CompletionRequest(self.policy, conversation, raw_input))
        result = self.gateway.complete(messages)
        reply = normalize_reply(result)
        if isinstance(result, CompletionFault):
            logger.error(f"[chat] completion fault ({result.kind.value}) from {self.gateway.model}: {result.reason}")
            return ChatOutcome(reply=reply, history=echo_history(raw_history), status_code=502)
        return ChatOutcome(reply=reply, history=updated_history(raw_history, reply))
