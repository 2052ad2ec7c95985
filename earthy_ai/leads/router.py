"""Lead capture API: validate the form, forward it by email. Response: { "success": bool }."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from earthy_ai.errors import DispatchFault, LeadCaptureUnavailable, ValidationFault
from earthy_ai.leads.payloads import parse_lead
from earthy_ai.schemas import LeadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["leads"])


def submit_lead(dispatcher, body: Any) -> None:
    """Raises LeadCaptureUnavailable, ValidationFault or DispatchFault."""
    if dispatcher is None:
        raise LeadCaptureUnavailable("lead capture is not configured")
    lead = parse_lead(body)
    dispatcher.send(lead)


@router.post("/lead", response_model=LeadResponse)
def capture_lead(request: Request, body: Any = Body(None)):
    """400 invalid form, 503 email not configured, 500 dispatch failure, 200 sent."""
    try:
        submit_lead(request.app.state.lead_dispatcher, body)
    except ValidationFault as e:
        logger.info(f"[lead] rejected, fields: {', '.join(e.fields)}")
        return JSONResponse(status_code=e.http_status, content={"success": False})
    except (LeadCaptureUnavailable, DispatchFault) as e:
        return JSONResponse(status_code=e.http_status, content={"success": False})
    except Exception:
        logger.exception("[lead] unexpected failure")
        return JSONResponse(status_code=500, content={"success": False})
    return {"success": True}
