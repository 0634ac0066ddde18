"""Unit tests for the admin listing and deletion."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from appointment_scheduler import admin
from appointment_scheduler.availability import is_day_selectable, is_slot_taken
from appointment_scheduler.calendar_date import CalendarDate
from appointment_scheduler.exceptions import DeleteFailedError
from appointment_scheduler.models import BookingRecord
from appointment_scheduler.schedule import build_schedule

TODAY = CalendarDate.parse("2024-15-06")


def _record(booking_id: str, day: str, slot: int, name: str = "Jane Doe") -> BookingRecord:
    return BookingRecord(date=day, slot=slot, name=name, email="jane@doe.com", phone="5551234567", booking_id=booking_id)


RECORDS = [
    _record("c", "2024-20-06", 4, "Carl Cole"),
    _record("a", "2024-16-06", 5, "Ann Able"),
    _record("b", "2024-16-06", 1, "Bob Baker"),
]


def test_group_by_date_sorts_days_and_slots():
    grouped = admin.group_by_date(RECORDS)
    assert list(grouped) == [CalendarDate.parse("2024-16-06"), CalendarDate.parse("2024-20-06")]
    assert [r.booking_id for r in grouped[CalendarDate.parse("2024-16-06")]] == ["b", "a"]


def test_booked_dates():
    assert admin.booked_dates(RECORDS) == [CalendarDate.parse("2024-16-06"), CalendarDate.parse("2024-20-06")]


def test_admin_rows_list_all():
    rows = admin.admin_rows(RECORDS)
    assert [(row.index, row.booking_id) for row in rows] == [(0, "b"), (1, "a"), (2, "c")]
    assert rows[0].date_label == "6/16/2024"
    assert rows[0].time_label == "10:00 am"
    assert rows[1].time_label == "2:00 pm"
    assert rows[0].to_dict()["id"] == "b"


def test_admin_rows_filtered_by_day():
    rows = admin.admin_rows(RECORDS, day="2024-20-06")
    assert [row.booking_id for row in rows] == ["c"]
    assert admin.admin_rows(RECORDS, day="2024-21-06") == []


@patch("appointment_scheduler.store.delete_booking")
def test_delete_bookings(mock_delete):
    assert admin.delete_bookings(["a", "b", "a"]) == ["a", "b"]
    assert [call.args[0] for call in mock_delete.call_args_list] == ["a", "b"]


@patch("appointment_scheduler.store.delete_booking")
def test_delete_bookings_tries_every_id(mock_delete):
    def _delete(booking_id):
        if booking_id == "a":
            raise DeleteFailedError([booking_id])

    mock_delete.side_effect = _delete
    with pytest.raises(DeleteFailedError) as excinfo:
        admin.delete_bookings(["a", "b"])
    assert excinfo.value.failed_ids == ["a"]
    assert mock_delete.call_count == 2


@patch("appointment_scheduler.store.delete_booking")
@patch("appointment_scheduler.store.list_bookings")
def test_deleted_booking_frees_the_day(mock_list, mock_delete):
    booked = _record("only", "2024-16-06", 2)
    mock_list.return_value = [booked]
    before = build_schedule(admin.store.list_bookings(), TODAY)
    assert is_slot_taken(before, "2024-16-06", 2)

    admin.delete_bookings([admin.admin_rows([booked])[0].booking_id])
    mock_delete.assert_called_once_with("only")

    mock_list.return_value = []
    after = build_schedule(admin.store.list_bookings(), TODAY)
    assert after.entry("2024-16-06") is None
    assert not any(is_slot_taken(after, "2024-16-06", slot) for slot in range(8))
    assert is_day_selectable(after, "2024-16-06")
