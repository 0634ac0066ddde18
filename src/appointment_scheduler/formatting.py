"""Human-readable strings for the booking page, the review screen, the admin table and SMS."""

from __future__ import annotations

from dataclasses import dataclass

from .calendar_date import CalendarDate
from .models import BookingRecord, DraftBooking
from .slots import format_clock, slot_label, slot_start


@dataclass(frozen=True)
class DisplayRecord:
    """What the visitor reviews before confirming."""
    name: str
    phone: str
    email: str
    date: str
    time: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "phone": self.phone, "email": self.email, "date": self.date, "time": self.time}


def ordinal(n: int) -> str:
    """1st, 2nd, 3rd, 4th ... 11th, 12th, 13th ... 21st."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def short_date(day: CalendarDate) -> str:
    """'Thursday, June 1st'"""
    d = day.value
    return f"{d:%A}, {d:%B} {ordinal(d.day)}"


def long_date(day: CalendarDate) -> str:
    """'Sunday, June 16th, 2024'"""
    return f"{short_date(day)}, {day.value.year}"


def sms_date(day: CalendarDate) -> str:
    """'Sunday June 16th, 2024'"""
    d = day.value
    return f"{d:%A} {d:%B} {ordinal(d.day)}, {d.year}"


def admin_date_label(day: CalendarDate) -> str:
    """'6/16/2024'"""
    d = day.value
    return f"{d.month}/{d.day}/{d.year}"


def start_time_label(slot: int) -> str:
    return format_clock(slot_start(slot))


def confirmation_sentence(draft: DraftBooking) -> str:
    """Grows with the draft: a clause per chosen field, nothing for fields not chosen yet."""
    parts = ["Scheduling a 1 hour appointment"]
    if draft.date is not None:
        parts.append(f"on {short_date(draft.date)}")
    if draft.slot is not None:
        parts.append(f"at {start_time_label(draft.slot)}")
    return " ".join(parts)


def sms_body(record: BookingRecord) -> str:
    return (
        f"{record.name}, this message is to confirm your appointment at "
        f"{start_time_label(record.slot)} on {sms_date(record.date)}."
    )


def confirmation_details(record: BookingRecord) -> DisplayRecord:
    return DisplayRecord(
        name=record.name,
        phone=record.phone,
        email=record.email,
        date=long_date(record.date),
        time=slot_label(record.slot),
    )
