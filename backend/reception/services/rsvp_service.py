"""RSVP service — submission and admin listing on top of the REST store."""
import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

import pytz

from reception.errors import RSVPValidationError, StorageUnavailable, Unauthorized
from reception.models.rsvp import RSVPStatus
from reception.schemas.rsvp import RSVPResult, RSVPRow
from reception.services.validation import Err, validate
from reception.store import RsvpStore

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGES = {
    RSVPStatus.accept: "You're confirmed. See you there!",
    RSVPStatus.decline: "Thanks for letting us know.",
}

STORE_NOT_CONFIGURED = "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY."


def submit_rsvp(store: RsvpStore, candidate: Mapping[str, Any]) -> RSVPResult:
    """Validate a candidate and insert it. Raises a ReceptionError on failure.

    Resubmitting creates another row; there is no dedup.
    """
    result = validate(candidate)
    if isinstance(result, Err):
        logger.warning("Rejected RSVP: %s", result.reason.value)
        raise RSVPValidationError(result.reason)

    record = result.record
    try:
        store.insert_rsvp(record)
    except StorageUnavailable as exc:
        raise StorageUnavailable(
            exc.detail,
            message="Could not save RSVP. Please try again.",
            detail_prefix="Could not save RSVP",
        ) from exc

    logger.info("Saved RSVP status=%s party_size=%s", record.status.value, record.party_size)
    return RSVPResult(ok=True, message=CONFIRMATION_MESSAGES[record.status])


def check_admin_token(provided: Optional[str], admin_token: str) -> None:
    """Raise Unauthorized unless provided matches admin_token. No token configured means open."""
    if not admin_token:
        return
    candidate = (provided or "").strip()
    if not candidate or not secrets.compare_digest(candidate.encode(), admin_token.encode()):
        raise Unauthorized()


def format_created_at(value: str, tz_name: str) -> str:
    """Render a store timestamp like 'Sep 26, 2026, 03:00 PM' in tz_name.

    Unparsable values come back unchanged. Naive timestamps are read as UTC.
    """
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        tz = pytz.timezone(tz_name)
    except (ValueError, TypeError, AttributeError, pytz.UnknownTimeZoneError):
        return value
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(tz).strftime("%b %d, %Y, %I:%M %p")


@dataclass
class ListingView:
    """What the admin page renders: either an error or rows (possibly empty)."""

    authorized: bool = True
    error: Optional[str] = None
    rows: list[RSVPRow] = field(default_factory=list)


def load_listing(
    store: Optional[RsvpStore],
    token: Optional[str],
    admin_token: str,
    production: bool,
) -> ListingView:
    """Gate on the admin token, then fetch every RSVP newest first.

    Failures are returned as an inline error rather than raised.
    """
    try:
        check_admin_token(token, admin_token)
    except Unauthorized:
        logger.warning("Rejected RSVP listing request with missing or wrong token")
        return ListingView(authorized=False, error=Unauthorized.message)

    if store is None:
        return ListingView(error=STORE_NOT_CONFIGURED)

    try:
        rows = store.list_rsvps()
    except StorageUnavailable as exc:
        if exc.message != StorageUnavailable.message:
            return ListingView(error=exc.message)
        listing_error = StorageUnavailable(exc.detail, message="Could not load RSVPs.")
        return ListingView(error=listing_error.client_message(production))
    return ListingView(rows=rows)
