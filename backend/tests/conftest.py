"""Pytest fixtures — in-memory RSVP store standing in for the hosted REST table."""
import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from reception.config import settings
from reception.errors import StorageUnavailable
from reception.main import app
from reception.schemas.rsvp import RSVPCreate, RSVPRow
from reception.store import get_optional_store

BASE_TIME = datetime(2026, 9, 26, 19, 0, tzinfo=timezone.utc)


class FakeStore:
    """Mimics RsvpStore: the store assigns id and created_at, lists newest first."""

    def __init__(self):
        self.rows: list[dict] = []
        self.fail_with: str | None = None
        self._ids = itertools.count(1)

    def insert_rsvp(self, record: RSVPCreate) -> None:
        if self.fail_with is not None:
            raise StorageUnavailable(self.fail_with)
        row_id = next(self._ids)
        self.rows.append({
            "id": str(row_id),
            **record.to_store_payload(),
            "created_at": (BASE_TIME + timedelta(minutes=row_id)).isoformat(),
        })

    def list_rsvps(self) -> list[RSVPRow]:
        if self.fail_with is not None:
            raise StorageUnavailable(self.fail_with)
        ordered = sorted(self.rows, key=lambda r: r["created_at"], reverse=True)
        return [RSVPRow.model_validate(r) for r in ordered]


@pytest.fixture(autouse=True)
def configured_settings(monkeypatch):
    """Every test starts with a configured store, no admin token, development mode."""
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://example.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "service-key")
    monkeypatch.setattr(settings, "RSVP_ADMIN_TOKEN", "")
    monkeypatch.setattr(settings, "APP_ENV", "development")
    monkeypatch.setattr(settings, "EVENT_TIMEZONE", "America/New_York")
    return settings


@pytest.fixture(scope="function")
def store():
    return FakeStore()


@pytest.fixture(scope="function")
def client(store):
    """FastAPI TestClient with the store dependency overridden to use FakeStore."""
    app.dependency_overrides[get_optional_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unconfigured_client(monkeypatch):
    """TestClient for a deployment missing its store settings."""
    monkeypatch.setattr(settings, "SUPABASE_URL", "")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "")
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Helper: submit an RSVP via the API, returns the response
# ---------------------------------------------------------------------------
def post_rsvp(client: TestClient, **fields):
    """Helper — POST /api/rsvp with an accept for one guest unless overridden."""
    payload = {"name": "Jane Doe", "status": "accept", "partySize": 1}
    payload.update(fields)
    return client.post("/api/rsvp", json=payload)
