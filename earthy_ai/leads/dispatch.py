"""
Lead notification email via the Resend HTTP API.

Configuration (see config.Settings):
    RESEND_API_KEY          Resend credential
    LEAD_TO_EMAIL           where lead notifications go
    LEAD_FROM_EMAIL         sender (default: Earthy AI <onboarding@resend.dev>)
    RESEND_TIMEOUT_SECONDS  per-call timeout

One POST per lead, explicit timeout, no retries. Any failure is a DispatchFault.
"""

import html
import logging
from typing import Protocol

import requests

from earthy_ai.config import Settings
from earthy_ai.errors import DispatchFault
from earthy_ai.schemas import LeadRecord

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class LeadDispatcher(Protocol):
    def send(self, lead: LeadRecord) -> None:
        ...


# ---------------------------------------------------------------------------
# Email template
# ---------------------------------------------------------------------------

def lead_subject(lead: LeadRecord) -> str:
    return f"New lead: {lead.business_name}"


def lead_text_body(lead: LeadRecord) -> str:
    return f"""New lead from the Earthy AI website assistant

Business: {lead.business_name}
Website:  {lead.website}
Email:    {lead.email}
Phone:    {lead.phone or "-"}

Message:
{lead.message or "-"}
"""


def lead_html_body(lead: LeadRecord) -> str:
    e = html.escape
    message = e(lead.message).replace("\n", "<br>") if lead.message else "-"
    return f"""
    <div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 560px; padding: 20px;">
        <h2 style="color: #2f4f3a; margin-top: 0;">New lead from Earthy AI</h2>
        <p><strong>Business:</strong> {e(lead.business_name)}</p>
        <p><strong>Website:</strong> {e(lead.website)}</p>
        <p><strong>Email:</strong> {e(lead.email)}</p>
        <p><strong>Phone:</strong> {e(lead.phone or "-")}</p>
        <p><strong>Message:</strong><br>{message}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class ResendDispatcher:
    def __init__(self, api_key: str, to_email: str, from_email: str, timeout: float = 10.0):
        self.api_key = api_key
        self.to_email = to_email
        self.from_email = from_email
        self.timeout = timeout

    def payload(self, lead: LeadRecord) -> dict:
        return {
            "from": self.from_email,
            "to": [self.to_email],
            "reply_to": lead.email,
            "subject": lead_subject(lead),
            "text": lead_text_body(lead),
            "html": lead_html_body(lead),
        }

    def send(self, lead: LeadRecord) -> None:
        try:
            r = requests.post(
                RESEND_API_URL,
                json=self.payload(lead),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"[email] Lead notification failed for {lead.business_name}: {type(e).__name__}: {e}")
            raise DispatchFault(f"email provider unreachable: {type(e).__name__}") from e
        if not r.ok:
            logger.error(f"[email] Resend answered {r.status_code} for {lead.business_name}: {r.text[:500]}")
            raise DispatchFault(f"email provider returned {r.status_code}")
        logger.info(f"[email] Lead notification sent to {self.to_email}: {lead.business_name}")


def create_dispatcher(settings: Settings) -> LeadDispatcher | None:
    """None when RESEND_API_KEY or LEAD_TO_EMAIL is missing; /api/lead then answers 503."""
    if not settings.lead_capture_configured:
        logger.info("[email] RESEND_API_KEY / LEAD_TO_EMAIL not set; lead capture disabled")
        return None
    return ResendDispatcher(
        api_key=settings.resend_api_key,
        to_email=settings.lead_to_email,
        from_email=settings.lead_from_email,
        timeout=settings.resend_timeout,
    )
