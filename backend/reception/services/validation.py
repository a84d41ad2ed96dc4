"""RSVP validation rules, shared by the JSON API, the HTML form and the browser mirror.

validate() is pure: it takes an untrusted mapping (a decoded JSON body or
form fields) and returns either Ok(RSVPCreate) or Err(ValidationReason).
Rules are evaluated in a fixed order and the first failure wins:

1. name:      trimmed, required, at most NAME_MAX_LENGTH characters
2. email:     trimmed, optional, at most EMAIL_MAX_LENGTH, must look like a@b.c
3. status:    exactly "accept" or "decline"
4. partySize: whole number in [PARTY_SIZE_MIN, PARTY_SIZE_MAX] on accept;
              always dropped on decline
5. notes:     trimmed, optional, at most NOTES_MAX_LENGTH characters
"""
from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from reception.models.rsvp import RSVPStatus
from reception.schemas.rsvp import RSVPCreate

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 254
NOTES_MAX_LENGTH = 1000
PARTY_SIZE_MIN = 1
PARTY_SIZE_MAX = 10
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

_EMAIL_RE = re.compile(EMAIL_PATTERN)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class ValidationReason(str, enum.Enum):
    name_required = "NameRequired"
    name_too_long = "NameTooLong"
    email_too_long = "EmailTooLong"
    email_invalid = "EmailInvalid"
    status_invalid = "StatusInvalid"
    party_size_invalid = "PartySizeInvalid"
    party_size_too_small = "PartySizeTooSmall"
    party_size_too_large = "PartySizeTooLarge"
    notes_too_long = "NotesTooLong"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ValidationReason.name_required: "Name is required.",
    ValidationReason.name_too_long: "Name is too long.",
    ValidationReason.email_too_long: "Email is too long.",
    ValidationReason.email_invalid: "Please provide a valid email (or leave blank).",
    ValidationReason.status_invalid: "Status must be accept or decline.",
    ValidationReason.party_size_invalid: "Party size must be a whole number.",
    ValidationReason.party_size_too_small: f"Party size must be at least {PARTY_SIZE_MIN}.",
    ValidationReason.party_size_too_large: f"Party size must be {PARTY_SIZE_MAX} or less.",
    ValidationReason.notes_too_long: "Anything else? is too long.",
}


@dataclass(frozen=True)
class Ok:
    record: RSVPCreate


@dataclass(frozen=True)
class Err:
    reason: ValidationReason

    @property
    def message(self) -> str:
        return self.reason.message


ValidationResult = Union[Ok, Err]


def _trimmed(value: Any) -> str:
    """Strings are stripped; anything else counts as empty."""
    return value.strip() if isinstance(value, str) else ""


def parse_party_size(value: Any) -> Optional[int]:
    """Return the whole number a party-size field holds, or None.

    Strings are read up to the first non-digit ("3 guests" -> 3), the way
    browsers read a number input. Floats must be finite and whole.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # past the interpreter's digit limit; far outside any party size
                return None
    return None


def validate(candidate: Mapping[str, Any]) -> ValidationResult:
    """Check an untrusted RSVP candidate and normalize it into an RSVPCreate."""
    name = _trimmed(candidate.get("name"))
    if not name:
        return Err(ValidationReason.name_required)
    if len(name) > NAME_MAX_LENGTH:
        return Err(ValidationReason.name_too_long)

    email = _trimmed(candidate.get("email")) or None
    if email is not None:
        if len(email) > EMAIL_MAX_LENGTH:
            return Err(ValidationReason.email_too_long)
        if not _EMAIL_RE.fullmatch(email):
            return Err(ValidationReason.email_invalid)

    raw_status = candidate.get("status")
    if not isinstance(raw_status, str) or raw_status not in (RSVPStatus.accept.value, RSVPStatus.decline.value):
        return Err(ValidationReason.status_invalid)
    status = RSVPStatus(raw_status)

    party_size = None
    if status == RSVPStatus.accept:
        party_size = parse_party_size(candidate.get("partySize"))
        if party_size is None:
            return Err(ValidationReason.party_size_invalid)
        if party_size < PARTY_SIZE_MIN:
            return Err(ValidationReason.party_size_too_small)
        if party_size > PARTY_SIZE_MAX:
            return Err(ValidationReason.party_size_too_large)

    notes = _trimmed(candidate.get("notes")) or None
    if notes is not None and len(notes) > NOTES_MAX_LENGTH:
        return Err(ValidationReason.notes_too_long)

    return Ok(RSVPCreate(
        name=name,
        email=email,
        status=status,
        party_size=party_size,
        notes=notes,
    ))


def validation_rules() -> dict[str, Any]:
    """Limits and messages handed to the browser so its checks match these."""
    return {
        "nameMaxLength": NAME_MAX_LENGTH,
        "emailMaxLength": EMAIL_MAX_LENGTH,
        "notesMaxLength": NOTES_MAX_LENGTH,
        "partySizeMin": PARTY_SIZE_MIN,
        "partySizeMax": PARTY_SIZE_MAX,
        "emailPattern": EMAIL_PATTERN,
        "messages": {reason.value: reason.message for reason in ValidationReason},
    }
