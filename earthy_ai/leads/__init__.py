from .dispatch import LeadDispatcher, ResendDispatcher, create_dispatcher
from .payloads import is_plausible_email, parse_lead
from .router import router, submit_lead

__all__ = [
    "LeadDispatcher",
    "ResendDispatcher",
    "create_dispatcher",
    "is_plausible_email",
    "parse_lead",
    "router",
    "submit_lead",
]
