"""
History normalizer: client-supplied prior turns → canonical Conversation.
Malformed elements are dropped, never fatal; order is preserved; no truncation.
"""

from collections.abc import Mapping
from typing import Any

from earthy_ai.schemas import Speaker, Turn

USER_AUTHORS = ("user", "human")


def speaker_for(author: Any) -> Speaker:
    """Anything not recognised as the user is treated as the assistant's own prior output."""
    if isinstance(author, str) and author.strip().lower() in USER_AUTHORS:
        return Speaker.USER
    return Speaker.ASSISTANT


def normalize_turn(item: Any) -> Turn | None:
    if not isinstance(item, Mapping) or "author" not in item:
        return None
    text = item.get("text")
    if not isinstance(text, str) or not text.strip():
        return None
    return Turn(speaker=speaker_for(item["author"]), text=text.strip())


def normalize_history(raw: Any) -> list[Turn]:
    if not isinstance(raw, (list, tuple)):
        return []
    turns = []
    for item in raw:
        turn = normalize_turn(item)
        if turn is not None:
            turns.append(turn)
    return turns
