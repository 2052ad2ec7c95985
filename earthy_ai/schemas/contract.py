"""
Shapes shared by the chat and lead paths: turns, outbound messages, request/response bodies.
Wire turns are what the browser widget stores: {"author": "user" | "ai", "text": "..."}.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Speaker(str, Enum):
    USER = "user"
    ASSISTANT = "ai"


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """One stored message of a Conversation. `text` is already trimmed and non-empty."""

    model_config = ConfigDict(frozen=True)

    speaker: Speaker
    text: str = Field(..., min_length=1)

    def to_wire(self) -> dict[str, str]:
        return {"author": self.speaker.value, "text": self.text}


class Message(BaseModel):
    """Provider-neutral outbound message."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatResponse(BaseModel):
    reply: str
    history: list[Any] = Field(default_factory=list)


class LeadRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    business_name: str
    website: str
    email: str
    phone: str | None = None
    message: str | None = None


class LeadResponse(BaseModel):
    success: bool
