"""Error hierarchy for RSVP operations.

Every error is terminal for the request that raised it; nothing is retried.
The JSON handler in main.py renders any ReceptionError as {ok: false, message}.
"""
from typing import Optional

from fastapi import status

from reception.services.validation import ValidationReason


class ReceptionError(Exception):
    """Base class. Subclasses set http_status and a client-facing message."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Something went wrong. Please try again."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def client_message(self, production: bool) -> str:
        return self.message


class NotConfigured(ReceptionError):
    message = "Server is not configured yet. Please try again later."


class MalformedBody(ReceptionError):
    http_status = status.HTTP_400_BAD_REQUEST
    message = "Invalid JSON body."


class RSVPValidationError(ReceptionError):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: ValidationReason):
        self.reason = reason
        super().__init__(reason.message)


class StorageUnavailable(ReceptionError):
    """The store was unreachable or rejected the request.

    detail holds whatever the store said; it is only shown to clients
    outside production.
    """

    message = "Could not reach the RSVP database."

    def __init__(self, detail: str = "", message: Optional[str] = None, detail_prefix: Optional[str] = None):
        self.detail = detail
        super().__init__(message)
        self.detail_prefix = detail_prefix or self.message.rstrip(".")

    def client_message(self, production: bool) -> str:
        if not production and self.detail:
            return f"{self.detail_prefix}: {self.detail}"
        return self.message


class Unauthorized(ReceptionError):
    """Listing access denied. Rendered inline on the page, never sent as an HTTP status."""

    message = "Not authorized."
