"""Unit tests for slot arithmetic and the YYYY-DD-MM calendar date."""

from __future__ import annotations

from datetime import date, time

import pytest

from appointment_scheduler.calendar_date import CalendarDate, as_calendar_date
from appointment_scheduler.models import Meridiem
from appointment_scheduler.slots import (
    SLOT_COUNT,
    format_clock,
    meridiem_of,
    slot_end,
    slot_label,
    slot_start,
    validate_slot,
)


def test_slot_start_and_end_for_every_slot():
    for s in range(SLOT_COUNT):
        assert slot_start(s) == time(9 + s, 0)
        assert slot_end(s) == slot_start(s + 1)


def test_first_and_last_slot():
    assert (slot_start(0), slot_end(0)) == (time(9, 0), time(10, 0))
    assert (slot_start(7), slot_end(7)) == (time(16, 0), time(17, 0))
    assert meridiem_of(0) is Meridiem.AM
    assert meridiem_of(7) is Meridiem.PM


def test_meridiem_boundary():
    # 11:00-12:00 is a morning slot, 12:00-13:00 is afternoon
    assert meridiem_of(2) is Meridiem.AM
    assert meridiem_of(3) is Meridiem.PM


def test_slot_out_of_range():
    with pytest.raises(ValueError):
        slot_start(9)
    with pytest.raises(ValueError):
        slot_end(8)
    with pytest.raises(ValueError):
        meridiem_of(-1)


def test_validate_slot_coerces_numeric_input():
    assert validate_slot("3") == 3
    assert validate_slot(0) == 0
    for bad in ("x", 8, -1, 2.5, None, True):
        with pytest.raises(ValueError):
            validate_slot(bad)


def test_format_clock_and_label():
    assert format_clock(time(9, 0)) == "9:00 am"
    assert format_clock(time(12, 0)) == "12:00 pm"
    assert format_clock(time(14, 0)) == "2:00 pm"
    assert slot_label(2) == "11:00 am - 12:00 pm"
    assert slot_label(7) == "4:00 pm - 5:00 pm"


def test_calendar_date_wire_format_is_day_before_month():
    day = CalendarDate.parse("2024-16-06")
    assert day.value == date(2024, 6, 16)
    assert day.format() == "2024-16-06"
    assert str(CalendarDate(date(2024, 1, 2))) == "2024-02-01"


def test_calendar_date_compares_by_date_not_string():
    # As strings "2024-02-03" > "2024-01-04", but March 2nd is before April 1st
    assert CalendarDate.parse("2024-02-03") < CalendarDate.parse("2024-01-04")


def test_calendar_date_rejects_iso_only_values():
    with pytest.raises(ValueError):
        CalendarDate.parse("2024-06-16")
    with pytest.raises(ValueError):
        CalendarDate.parse("not a date")


def test_as_calendar_date():
    day = CalendarDate(date(2024, 6, 16))
    assert as_calendar_date(day) is day
    assert as_calendar_date(date(2024, 6, 16)) == day
    assert as_calendar_date("2024-16-06") == day
