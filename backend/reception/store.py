"""REST client for the hosted RSVP table, plus the request-scoped dependency.

The store is a PostgREST endpoint (Supabase). This module only knows how to
insert one row and select all rows; schema and durability belong to the store.
"""
import logging
from typing import Generator, Optional

import httpx
from fastapi import Depends
from pydantic import ValidationError

from reception.config import settings
from reception.errors import NotConfigured, StorageUnavailable
from reception.models.rsvp import RSVP_COLUMNS
from reception.schemas.rsvp import RSVPCreate, RSVPRow

logger = logging.getLogger(__name__)

RSVP_TABLE = "rsvps"


class RsvpStore:
    """Insert/select access to the rsvps table over one httpx.Client."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.table_url = f"{base_url.rstrip('/')}/rest/v1/{RSVP_TABLE}"
        self._client = httpx.Client(
            headers={
                "apikey": service_key,
                "Authorization": f"Bearer {service_key}",
            },
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, self.table_url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("RSVP store %s request failed: %s", method, exc)
            raise StorageUnavailable(str(exc)) from exc
        if response.is_error:
            logger.error("RSVP store %s returned %s: %s", method, response.status_code, response.text)
            raise StorageUnavailable(response.text)
        return response

    def insert_rsvp(self, record: RSVPCreate) -> None:
        """Create one row. The store assigns id and created_at."""
        self._send(
            "POST",
            json=record.to_store_payload(),
            headers={"Prefer": "return=minimal"},
        )

    def list_rsvps(self) -> list[RSVPRow]:
        """Return every row, newest first."""
        response = self._send(
            "GET",
            params={"select": ",".join(RSVP_COLUMNS), "order": "created_at.desc"},
        )
        try:
            rows = response.json()
        except ValueError as exc:
            raise StorageUnavailable(message="Unexpected response from database.") from exc
        if not isinstance(rows, list):
            raise StorageUnavailable(message="Unexpected response from database.")
        try:
            return [RSVPRow.model_validate(row) for row in rows]
        except ValidationError as exc:
            logger.error("RSVP store returned malformed rows: %s", exc)
            raise StorageUnavailable(message="Unexpected response from database.") from exc


def get_optional_store() -> Generator[Optional[RsvpStore], None, None]:
    """Yield a store for this request, or None when the store is not configured."""
    if not settings.store_configured:
        yield None
        return
    store = RsvpStore(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        timeout=settings.STORE_TIMEOUT_SECONDS,
    )
    try:
        yield store
    finally:
        store.close()


def get_store(store: Optional[RsvpStore] = Depends(get_optional_store)) -> RsvpStore:
    """Like get_optional_store, but an unconfigured store is a NotConfigured error."""
    if store is None:
        raise NotConfigured()
    return store
