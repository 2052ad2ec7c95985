"""
Lead signals: pricing interest, buying intent, contact details shared / requested.
Regex only, explainable and adjustable, same as the rest of the NLP layer.
"""

import re
from dataclasses import dataclass

PRICING_SIGNALS = [
    r"\bhow\s+much\b",
    r"\b(price|prices|pricing|priced)\b",
    r"\b(cost|costs|costing)\b",
    r"\b(charge|charges|fee|fees|rate|rates)\b",
    r"\b(quote|quotation|estimate)\b",
    r"\bbudget\b",
    r"\b(packages?|subscriptions?)\b",
    r"\b(afford|expensive|cheap)\b",
]

BUYING_SIGNALS = [
    r"\b(get|getting)\s+started\b",
    r"\bsign\s*(me\s+)?up\b",
    r"\b(book|schedule)\s+(a\s+|an\s+)?(call|demo|meeting|consultation)\b",
    r"\b(demo|trial)\b",
    r"\b(call|email|contact|reach)\s+(me|us)\b",
    r"\bget\s+in\s+touch\b",
    r"\b(hire|hiring)\s+you\b",
    r"\bwork\s+with\s+you\b",
    r"\bready\s+to\s+(buy|start|go|move\s+forward)\b",
    r"\binterested\s+in\s+(your|the)\s+(service|services|offer|plan)\b",
]

# Assistant turns that already asked the visitor for contact details
CONTACT_REQUEST_SIGNALS = [
    r"\byour\s+(email|e-mail)(\s+address)?\b",
    r"\byour\s+(phone|mobile|cell)(\s+number)?\b",
    r"\byour\s+contact\s+(details|info|information)\b",
    r"\b(share|leave|send|drop)\s+(me\s+|us\s+)?your\b",
    r"\bbest\s+way\s+to\s+reach\s+you\b",
]

EMAIL_PATTERN = re.compile(r"\b[^\s@<>()\[\],;:\"]+@[^\s@<>()\[\],;:\"]+\.[A-Za-z]{2,}\b")
# International "+" form, or digit groups split by separators; bare digit runs are not phones
PHONE_PATTERN = re.compile(
    r"(?<![\w+])(?:\+\d{8,15}|(?:\+\d{1,3}[\s.-]?)?(?:\(\d{2,4}\)\s?|\d{2,4}[\s.-])\d{3,4}[\s.-]?\d{4})(?!\w)"
)

_PRICING = [re.compile(p, re.I) for p in PRICING_SIGNALS]
_BUYING = [re.compile(p, re.I) for p in BUYING_SIGNALS]
_CONTACT_REQUEST = [re.compile(p, re.I) for p in CONTACT_REQUEST_SIGNALS]


@dataclass(frozen=True)
class TurnSignals:
    pricing_interest: bool = False
    buying_intent: bool = False
    contact_shared: bool = False


def has_pricing_interest(text: str) -> bool:
    return bool(text) and any(p.search(text) for p in _PRICING)


def has_buying_intent(text: str) -> bool:
    return bool(text) and any(p.search(text) for p in _BUYING)


def shares_contact(text: str) -> bool:
    """True if the text contains an email address or a phone-like number."""
    if not text:
        return False
    return bool(EMAIL_PATTERN.search(text) or PHONE_PATTERN.search(text))


def asks_for_contact(text: str) -> bool:
    return bool(text) and any(p.search(text) for p in _CONTACT_REQUEST)


def detect_user_signals(text: str) -> TurnSignals:
    return TurnSignals(
        pricing_interest=has_pricing_interest(text),
        buying_intent=has_buying_intent(text),
        contact_shared=shares_contact(text),
    )
