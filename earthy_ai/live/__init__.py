from earthy_ai.live.history import normalize_history
from earthy_ai.live.llm_chat import (
    CompletionFault,
    CompletionGateway,
    CompletionText,
    FaultKind,
    create_gateway,
)
from earthy_ai.live.prompt import CompletionRequest, PromptPolicy, assemble_messages, default_policy
from earthy_ai.live.reply import normalize_reply, updated_history
from earthy_ai.live.session import ChatOutcome, ChatService

__all__ = [
    "normalize_history",
    "CompletionFault",
    "CompletionGateway",
    "CompletionText",
    "FaultKind",
    "create_gateway",
    "CompletionRequest",
    "PromptPolicy",
    "assemble_messages",
    "default_policy",
    "normalize_reply",
    "updated_history",
    "ChatOutcome",
    "ChatService",
]
