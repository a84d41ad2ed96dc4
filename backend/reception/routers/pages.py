"""Public pages — the reception home page and its no-JavaScript RSVP form."""
import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from reception.config import settings
from reception.errors import NotConfigured, ReceptionError
from reception.services import rsvp_service
from reception.services.lightbox import build_gallery, lightbox_from_query
from reception.services.validation import validation_rules
from reception.services.venue import preferred_maps_url
from reception.store import RsvpStore, get_optional_store
from reception.templating import no_cache, templates

logger = logging.getLogger(__name__)
router = APIRouter()

FORM_FIELDS = ("name", "email", "status", "partySize", "notes")


def _render_home(
    request: Request,
    photo: Optional[str] = None,
    form: Optional[dict[str, Any]] = None,
    submit_state: str = "idle",
    submit_message: str = "",
    status_code: int = status.HTTP_200_OK,
):
    gallery = build_gallery(settings.GALLERY_PHOTO_COUNT, settings.COUPLE_NAMES)
    lightbox = lightbox_from_query(len(gallery), photo)
    venue = f"{settings.VENUE_NAME} {settings.VENUE_ADDRESS}"
    response = templates.TemplateResponse(
        request,
        "home.html",
        {
            "gallery": gallery,
            "lightbox": lightbox,
            "maps_url": preferred_maps_url(venue, request.headers.get("user-agent", "")),
            "rules_json": json.dumps(validation_rules()),
            "form": form or {"partySize": "1"},
            "submit_state": submit_state,
            "submit_message": submit_message,
        },
        status_code=status_code,
    )
    return no_cache(response)


@router.get("/", response_class=HTMLResponse)
def home(request: Request, photo: Optional[str] = Query(None)):
    """Home page. ?photo=<index> renders the gallery viewer open on that photo."""
    return _render_home(request, photo=photo)


@router.post("/rsvp", response_class=HTMLResponse)
async def submit_rsvp_form(
    request: Request,
    store: Optional[RsvpStore] = Depends(get_optional_store),
):
    """Form-encoded RSVP for browsers without JavaScript; same rules as the JSON API."""
    submitted = await request.form()
    form = {key: submitted.get(key, "") for key in FORM_FIELDS}
    try:
        if store is None:
            raise NotConfigured()
        result = await run_in_threadpool(rsvp_service.submit_rsvp, store, form)
    except ReceptionError as exc:
        logger.warning("RSVP form rejected: %s", exc.message)
        return _render_home(
            request,
            form=form,
            submit_state="error",
            submit_message=exc.client_message(settings.is_production),
            status_code=exc.http_status,
        )
    return _render_home(request, submit_state="success", submit_message=result.message)
