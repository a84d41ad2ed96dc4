"""Pydantic schemas for RSVPs."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel

from reception.models.rsvp import RSVPStatus


class RSVPCreate(BaseModel):
    """Normalized record sent to the store. Only produced by validation.validate()."""

    name: str
    email: Optional[str] = None
    status: RSVPStatus
    party_size: Optional[int] = None
    notes: Optional[str] = None

    def to_store_payload(self) -> dict:
        return self.model_dump(mode="json")


class RSVPRow(BaseModel):
    id: Optional[str] = None
    name: str
    email: Optional[str] = None
    status: str
    party_size: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


class RSVPResult(BaseModel):
    ok: bool
    message: str


class HealthOut(BaseModel):
    ok: bool
    configured: bool
    message: str
