from earthy_ai.qualification.lead_trigger import (
    LeadGate,
    LeadTriggerPolicy,
    evaluate_lead_gate,
)

__all__ = [
    "LeadGate",
    "LeadTriggerPolicy",
    "evaluate_lead_gate",
]
