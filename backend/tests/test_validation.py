"""Tests for the shared RSVP validation rules.

Covers:
- Rule order (first failing rule wins)
- Name / email / notes trimming and limits
- Party size parsing and bounds on accept
- Party size dropped on decline
- Rules exported to the browser
"""
import pytest

from reception.models.rsvp import RSVPStatus
from reception.services.validation import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NOTES_MAX_LENGTH,
    Err,
    Ok,
    ValidationReason,
    parse_party_size,
    validate,
    validation_rules,
)


def _candidate(**overrides):
    candidate = {"name": "Jane Doe", "status": "accept", "partySize": 2}
    candidate.update(overrides)
    return candidate


def _reason(candidate):
    result = validate(candidate)
    assert isinstance(result, Err), result
    return result.reason


def _record(candidate):
    result = validate(candidate)
    assert isinstance(result, Ok), result
    return result.record


class TestName:

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None, 42])
    def test_missing_or_blank_name(self, name):
        assert _reason(_candidate(name=name)) == ValidationReason.name_required

    def test_name_at_limit_is_accepted(self):
        record = _record(_candidate(name="x" * NAME_MAX_LENGTH))
        assert len(record.name) == NAME_MAX_LENGTH

    def test_name_over_limit(self):
        assert _reason(_candidate(name="x" * (NAME_MAX_LENGTH + 1))) == ValidationReason.name_too_long

    def test_name_is_trimmed_before_length_check(self):
        record = _record(_candidate(name="  " + "x" * NAME_MAX_LENGTH + "  "))
        assert record.name == "x" * NAME_MAX_LENGTH


class TestEmail:

    def test_minimal_email_is_valid(self):
        assert _record(_candidate(email="a@b.c")).email == "a@b.c"

    def test_not_an_email(self):
        assert _reason(_candidate(email="not-an-email")) == ValidationReason.email_invalid

    @pytest.mark.parametrize("email", ["a b@c.d", "a@b", "@b.c", "a@@b.c"])
    def test_malformed_emails(self, email):
        assert _reason(_candidate(email=email)) == ValidationReason.email_invalid

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_empty_email_normalizes_to_absent(self, email):
        assert _record(_candidate(email=email)).email is None

    def test_email_is_trimmed(self):
        assert _record(_candidate(email="  jane@example.com ")).email == "jane@example.com"

    def test_long_email_checked_before_shape(self):
        email = "x" * (EMAIL_MAX_LENGTH + 1)  # no @ at all, but length wins
        assert _reason(_candidate(email=email)) == ValidationReason.email_too_long


class TestStatus:

    @pytest.mark.parametrize("status", ["maybe", "ACCEPT", " accept", "", None, 1, ["accept"]])
    def test_invalid_status(self, status):
        assert _reason(_candidate(status=status)) == ValidationReason.status_invalid

    def test_email_checked_before_status(self):
        assert _reason(_candidate(email="nope", status="maybe")) == ValidationReason.email_invalid


class TestPartySize:

    @pytest.mark.parametrize("size", [1, 10, "1", "10", 3.0])
    def test_bounds_accepted(self, size):
        assert _record(_candidate(partySize=size)).party_size == int(size)

    def test_zero_is_too_small(self):
        assert _reason(_candidate(partySize=0)) == ValidationReason.party_size_too_small

    def test_negative_is_too_small(self):
        assert _reason(_candidate(partySize="-2")) == ValidationReason.party_size_too_small

    def test_eleven_is_too_large(self):
        assert _reason(_candidate(partySize=11)) == ValidationReason.party_size_too_large

    @pytest.mark.parametrize("size", [None, "", "abc", 2.5, float("nan"), float("inf"), True, [3], {"n": 3}, "1" * 5000])
    def test_not_a_whole_number(self, size):
        assert _reason(_candidate(partySize=size)) == ValidationReason.party_size_invalid

    def test_missing_party_size_on_accept(self):
        candidate = _candidate()
        del candidate["partySize"]
        assert _reason(candidate) == ValidationReason.party_size_invalid

    def test_string_reads_leading_integer(self):
        assert parse_party_size(" 4 guests") == 4
        assert parse_party_size("guests: 4") is None

    @pytest.mark.parametrize("size", [3, 0, 99, "junk", None])
    def test_decline_never_carries_party_size(self, size):
        record = _record(_candidate(status="decline", partySize=size))
        assert record.status == RSVPStatus.decline
        assert record.party_size is None


class TestNotes:

    def test_notes_trimmed(self):
        assert _record(_candidate(notes="  Vegetarian  ")).notes == "Vegetarian"

    def test_blank_notes_absent(self):
        assert _record(_candidate(notes="   ")).notes is None

    def test_notes_at_limit(self):
        assert len(_record(_candidate(notes="n" * NOTES_MAX_LENGTH)).notes) == NOTES_MAX_LENGTH

    def test_notes_over_limit(self):
        assert _reason(_candidate(notes="n" * (NOTES_MAX_LENGTH + 1))) == ValidationReason.notes_too_long

    def test_party_size_checked_before_notes(self):
        candidate = _candidate(partySize=0, notes="n" * (NOTES_MAX_LENGTH + 1))
        assert _reason(candidate) == ValidationReason.party_size_too_small


class TestNormalizedRecord:

    def test_full_accept(self):
        record = _record({
            "name": " Jane Doe ",
            "email": "jane@example.com",
            "status": "accept",
            "partySize": 3,
            "notes": "Vegetarian",
        })
        assert record.to_store_payload() == {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "status": "accept",
            "party_size": 3,
            "notes": "Vegetarian",
        }

    def test_unknown_fields_are_ignored(self):
        record = _record(_candidate(created_at="1999-01-01", id="abc"))
        assert "created_at" not in record.to_store_payload()

    def test_every_reason_has_a_message(self):
        for reason in ValidationReason:
            assert reason.message.endswith(".")


class TestBrowserRules:

    def test_rules_carry_limits_and_messages(self):
        rules = validation_rules()
        assert rules["nameMaxLength"] == NAME_MAX_LENGTH
        assert rules["partySizeMin"] == 1
        assert rules["partySizeMax"] == 10
        assert rules["messages"]["NameRequired"] == "Name is required."
        assert set(rules["messages"]) == {r.value for r in ValidationReason}
