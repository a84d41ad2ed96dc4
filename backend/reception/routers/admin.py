"""Admin RSVP listing page."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from reception.config import settings
from reception.services import rsvp_service
from reception.store import RsvpStore, get_optional_store
from reception.templating import no_cache, templates

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/rsvps", response_class=HTMLResponse)
def list_rsvps(
    request: Request,
    token: Optional[str] = Query(None),
    store: Optional[RsvpStore] = Depends(get_optional_store),
):
    """Render every RSVP newest first. Auth and store failures render inline with 200."""
    listing = rsvp_service.load_listing(
        store,
        token=token,
        admin_token=settings.RSVP_ADMIN_TOKEN,
        production=settings.is_production,
    )
    if listing.error:
        logger.info("RSVP listing rendered with error: %s", listing.error)
    else:
        logger.info("RSVP listing rendered %d rows", len(listing.rows))
    response = templates.TemplateResponse(
        request,
        "rsvps.html",
        {
            "listing": listing,
            "host": request.headers.get("host", ""),
        },
    )
    return no_cache(response)
