"""Unit tests for contact validation and booking assembly."""

from __future__ import annotations

import pytest

from appointment_scheduler.calendar_date import CalendarDate
from appointment_scheduler.exceptions import (
    IncompleteFieldsError,
    InvalidEmailError,
    InvalidPhoneError,
    ValidationError,
)
from appointment_scheduler.models import DraftBooking
from appointment_scheduler.validation import (
    assemble_booking,
    booking_from_payload,
    normalize_phone,
    validate_email,
    validate_phone,
)


def _draft(**overrides) -> DraftBooking:
    fields = dict(
        date=CalendarDate.parse("2024-16-06"),
        slot=2,
        first_name="Jane",
        last_name="Doe",
        email="jane@doe.com",
        phone="(555) 123-4567",
    )
    fields.update(overrides)
    return DraftBooking(**fields)


def test_validate_email():
    assert validate_email("a@b.com")
    assert validate_email("First.Last@Example.CO.uk")
    assert not validate_email("a@b")
    assert not validate_email("not-an-email")
    assert not validate_email("a@b.c")
    assert not validate_email("")
    assert not validate_email(None)


def test_validate_phone():
    assert validate_phone("(888) 888-8888")
    assert validate_phone("18888888888")
    assert validate_phone("888-888-8888")
    assert validate_phone("1 888 888 8888")
    assert not validate_phone("12345")
    assert not validate_phone("888-888-888")
    assert not validate_phone("")


def test_normalize_phone():
    assert normalize_phone("(888) 888-8888") == "8888888888"
    assert normalize_phone("1 888 888 8888") == "18888888888"


def test_assemble_booking():
    record = assemble_booking(_draft())
    assert record.to_dict() == {
        "date": "2024-16-06",
        "slot": 2,
        "name": "Jane Doe",
        "email": "jane@doe.com",
        "phone": "5551234567",
    }


def test_assemble_booking_slot_zero_is_not_missing():
    assert assemble_booking(_draft(slot=0)).slot == 0


def test_assemble_booking_reports_every_missing_field():
    with pytest.raises(IncompleteFieldsError) as excinfo:
        assemble_booking(_draft(slot=None, last_name="  ", phone=None))
    assert excinfo.value.missing == ["slot", "last_name", "phone"]


def test_assemble_booking_invalid_contact():
    with pytest.raises(InvalidEmailError):
        assemble_booking(_draft(email="jane@doe"))
    with pytest.raises(InvalidPhoneError):
        assemble_booking(_draft(phone="555-1234"))


def test_booking_from_payload_with_split_name():
    record = booking_from_payload({
        "date": "2024-16-06",
        "slot": "2",
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@doe.com",
        "phone": "(555) 123-4567",
    })
    assert record.name == "Jane Doe"
    assert record.slot == 2
    assert record.phone == "5551234567"
    assert record.date == CalendarDate.parse("2024-16-06")


def test_booking_from_payload_errors():
    base = {"date": "2024-16-06", "slot": 2, "name": "Jane Doe", "email": "jane@doe.com", "phone": "5551234567"}

    with pytest.raises(IncompleteFieldsError) as excinfo:
        booking_from_payload({**base, "name": ""})
    assert excinfo.value.missing == ["name"]

    # ISO order is not the wire format
    with pytest.raises(ValidationError):
        booking_from_payload({**base, "date": "2024-06-16"})
    with pytest.raises(ValidationError):
        booking_from_payload({**base, "slot": 9})
    with pytest.raises(InvalidEmailError):
        booking_from_payload({**base, "email": "nope"})
    with pytest.raises(InvalidPhoneError):
        booking_from_payload({**base, "phone": "12345"})
    with pytest.raises(ValidationError):
        booking_from_payload(["not", "a", "dict"])


def test_booking_from_payload_rejects_non_string_names():
    base = {"date": "2024-16-06", "slot": 2, "email": "jane@doe.com", "phone": "5551234567"}
    for names in ({"first_name": 123, "last_name": "Doe"}, {"first_name": "Jane", "last_name": ["Doe"]}, {"name": 42}):
        with pytest.raises(ValidationError):
            booking_from_payload({**base, **names})
