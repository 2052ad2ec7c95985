from earthy_ai.nlp.preprocessing import normalize_text, sanitize_reply
from earthy_ai.nlp.signals import (
    TurnSignals,
    asks_for_contact,
    detect_user_signals,
    has_buying_intent,
    has_pricing_interest,
    shares_contact,
)

__all__ = [
    "normalize_text",
    "sanitize_reply",
    "TurnSignals",
    "asks_for_contact",
    "detect_user_signals",
    "has_buying_intent",
    "has_pricing_interest",
    "shares_contact",
]
