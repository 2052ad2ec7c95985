from .contract import (
    ChatResponse,
    LeadRecord,
    LeadResponse,
    Message,
    Role,
    Speaker,
    Turn,
)

__all__ = [
    "ChatResponse",
    "LeadRecord",
    "LeadResponse",
    "Message",
    "Role",
    "Speaker",
    "Turn",
]
