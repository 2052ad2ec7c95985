"""
Request-level faults. Each carries the HTTP status the routers answer with.
Completion-provider faults are not here: the gateway returns them as values (see live.llm_chat).
"""


class EarthyError(Exception):
    http_status = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(EarthyError):
    """Chat input empty after trimming, or not text at all."""

    http_status = 400


class ValidationFault(EarthyError):
    """Lead form missing required fields or carrying an implausible email."""

    http_status = 400

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []


class LeadCaptureUnavailable(EarthyError):
    http_status = 503


class DispatchFault(EarthyError):
    """Email collaborator failed (transport error, timeout or non-2xx status)."""

    http_status = 500
