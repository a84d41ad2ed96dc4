"""RSVP JSON API routes — submission and health check."""
import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from reception.config import settings
from reception.errors import MalformedBody
from reception.schemas.rsvp import HealthOut, RSVPResult
from reception.services import rsvp_service
from reception.store import RsvpStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()


async def read_candidate(request: Request) -> dict[str, Any]:
    """Decode the raw body into a JSON object, or raise MalformedBody."""
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError):
        raise MalformedBody()
    if not isinstance(body, dict):
        raise MalformedBody()
    return body


@router.post("", response_model=RSVPResult, status_code=status.HTTP_200_OK)
def submit_rsvp(
    store: RsvpStore = Depends(get_store),
    candidate: dict[str, Any] = Depends(read_candidate),
):
    """Validate and save one RSVP. Configuration is checked before the body is read."""
    return rsvp_service.submit_rsvp(store, candidate)


@router.get("/health", response_model=HealthOut)
def health_check():
    """Report whether the store credentials are configured. Does not contact the store."""
    if not settings.store_configured:
        logger.warning("Health check: RSVP store is not configured")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=HealthOut(
                ok=False,
                configured=False,
                message=rsvp_service.STORE_NOT_CONFIGURED,
            ).model_dump(),
        )
    return HealthOut(ok=True, configured=True, message="Supabase env vars are set.")
