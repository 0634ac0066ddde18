"""Unit tests for confirmation text, SMS body and admin labels."""

from __future__ import annotations

from appointment_scheduler.calendar_date import CalendarDate
from appointment_scheduler.formatting import (
    admin_date_label,
    confirmation_details,
    confirmation_sentence,
    ordinal,
    sms_body,
)
from appointment_scheduler.models import BookingRecord, DraftBooking


def test_ordinal():
    assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 30)] == [
        "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "23rd", "30th",
    ]


def test_confirmation_sentence_reveals_only_chosen_fields():
    draft = DraftBooking()
    assert confirmation_sentence(draft) == "Scheduling a 1 hour appointment"

    draft.date = CalendarDate.parse("2023-01-06")
    assert confirmation_sentence(draft) == "Scheduling a 1 hour appointment on Thursday, June 1st"

    draft.slot = 5
    assert confirmation_sentence(draft) == "Scheduling a 1 hour appointment on Thursday, June 1st at 2:00 pm"


def test_sms_body():
    record = BookingRecord(date="2024-16-06", slot=2, name="Jane Doe", email="jane@doe.com", phone="5551234567")
    assert sms_body(record) == (
        "Jane Doe, this message is to confirm your appointment at 11:00 am on Sunday June 16th, 2024."
    )


def test_confirmation_details():
    record = BookingRecord(date="2024-16-06", slot=7, name="Jane Doe", email="jane@doe.com", phone="5551234567")
    details = confirmation_details(record)
    assert details.to_dict() == {
        "name": "Jane Doe",
        "phone": "5551234567",
        "email": "jane@doe.com",
        "date": "Sunday, June 16th, 2024",
        "time": "4:00 pm - 5:00 pm",
    }


def test_admin_date_label():
    assert admin_date_label(CalendarDate.parse("2024-05-01")) == "1/5/2024"
