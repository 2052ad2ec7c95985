"""
Lead-capture gating: decide in code whether the assistant may ask for contact details
this turn, and whether pricing may be discussed proactively. The result is rendered
into the policy directive as a structured block; the model is not asked to count turns.

Eligible when contact details were not shared yet AND any of:
  user turns (including the new input) >= min_user_turns,
  buying intent detected,
  pricing interest detected after pricing_after_user_turns user turns.
"""

from dataclasses import dataclass

from earthy_ai.nlp.signals import asks_for_contact, detect_user_signals
from earthy_ai.schemas import Speaker, Turn


@dataclass(frozen=True)
class LeadTriggerPolicy:
    min_user_turns: int = 3
    pricing_after_user_turns: int = 2


@dataclass(frozen=True)
class LeadGate:
    user_turns: int
    pricing_interest: bool
    buying_intent: bool
    contact_shared: bool
    contact_requested: bool
    eligible: bool
    pricing_allowed: bool

    def render(self) -> str:
        lines = [
            f"lead_capture_gate: {'eligible' if self.eligible else 'not-eligible'}",
            f"pricing_disclosure: {'allowed' if self.pricing_allowed else 'on-request'}",
            f"user_turns: {self.user_turns}",
        ]
        if self.contact_shared:
            lines.append("contact_details: already-shared")
        elif self.contact_requested:
            lines.append("contact_details: already-requested")
        return "\n".join(lines)


def evaluate_lead_gate(
    policy: LeadTriggerPolicy,
    conversation: list[Turn],
    new_input: str,
) -> LeadGate:
    """Pure function of the normalized Conversation and the new input."""
    user_texts = [t.text for t in conversation if t.speaker == Speaker.USER]
    user_texts.append(new_input)
    assistant_texts = [t.text for t in conversation if t.speaker == Speaker.ASSISTANT]

    pricing = buying = shared = False
    for text in user_texts:
        s = detect_user_signals(text)
        pricing = pricing or s.pricing_interest
        buying = buying or s.buying_intent
        shared = shared or s.contact_shared
    requested = any(asks_for_contact(text) for text in assistant_texts)

    user_turns = len(user_texts)
    if shared:
        eligible = False
    else:
        eligible = (
            user_turns >= policy.min_user_turns
            or buying
            or (pricing and user_turns >= policy.pricing_after_user_turns)
        )
    return LeadGate(
        user_turns=user_turns,
        pricing_interest=pricing,
        buying_intent=buying,
        contact_shared=shared,
        contact_requested=requested,
        eligible=eligible,
        pricing_allowed=pricing,
    )
