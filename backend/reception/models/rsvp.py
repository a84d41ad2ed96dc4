"""RSVP domain types."""
import enum


class RSVPStatus(str, enum.Enum):
    accept = "accept"
    decline = "decline"


# Columns the listing view selects from the store, in display order.
RSVP_COLUMNS = ("id", "name", "email", "status", "party_size", "notes", "created_at")
