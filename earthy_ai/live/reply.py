"""Reply normalizer and conversation state updater (history convention: append the assistant turn only)."""

from typing import Any

from earthy_ai.live.llm_chat import CompletionFault, CompletionResult
from earthy_ai.nlp import sanitize_reply
from earthy_ai.schemas import Speaker, Turn

CLARIFY_FALLBACK = "Sorry, I didn't quite catch that. Could you tell me a bit more about what you're looking for?"
APOLOGY_REPLY = "Sorry, I'm having trouble answering right now. Please try again in a moment."
INVALID_INPUT_REPLY = "Please type a message so I can help."


def normalize_reply(result: CompletionResult) -> str:
    """Always a non-empty display string. Fault details stay server-side."""
    if isinstance(result, CompletionFault):
        return APOLOGY_REPLY
    text = sanitize_reply(result.text)
    return text or CLARIFY_FALLBACK


def echo_history(raw_history: Any) -> list:
    """Client history as sent (copied); a non-list becomes []."""
    if isinstance(raw_history, (list, tuple)):
        return list(raw_history)
    return []


def updated_history(raw_history: Any, reply: str) -> list:
    """Exactly one new turn: the assistant reply. The client already holds its own user turn."""
    history = echo_history(raw_history)
    history.append(Turn(speaker=Speaker.ASSISTANT, text=reply).to_wire())
    return history
