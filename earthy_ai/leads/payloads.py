"""Lead form → LeadRecord. Validation happens here, before any email call."""

import re
from collections.abc import Mapping
from typing import Any

from earthy_ai.errors import ValidationFault
from earthy_ai.nlp import normalize_text
from earthy_ai.schemas import LeadRecord

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")
REQUIRED_FIELDS = ("business_name", "website", "email")
OPTIONAL_FIELDS = ("phone", "message")


def is_plausible_email(value: str) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.match(value))


def _field(body: Mapping[str, Any], name: str) -> str:
    value = body.get(name)
    if value is None:
        return ""
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        return ""
    return str(value)


def parse_lead(body: Any) -> LeadRecord:
    if not isinstance(body, Mapping):
        raise ValidationFault("lead body must be a JSON object", fields=list(REQUIRED_FIELDS))
    values = {name: normalize_text(_field(body, name)) for name in REQUIRED_FIELDS + ("phone",)}
    # Free-text message keeps its line breaks
    values["message"] = _field(body, "message").strip()

    bad = [name for name in REQUIRED_FIELDS if not values[name]]
    if values["email"] and not is_plausible_email(values["email"]):
        bad.append("email")
    if bad:
        raise ValidationFault(f"missing or invalid lead fields: {', '.join(bad)}", fields=bad)
    return LeadRecord(
        business_name=values["business_name"],
        website=values["website"],
        email=values["email"],
        phone=values["phone"] or None,
        message=values["message"] or None,
    )
