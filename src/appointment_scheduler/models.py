"""Booking record, draft booking and the AM/PM filter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .calendar_date import CalendarDate, as_calendar_date


class Meridiem(str, Enum):
    AM = "AM"
    PM = "PM"

    @classmethod
    def parse(cls, value: "str | Meridiem") -> "Meridiem":
        """Accept 'AM'/'PM' in any case. Raises ValueError otherwise."""
        if isinstance(value, Meridiem):
            return value
        return cls(str(value).strip().upper())


@dataclass(frozen=True)
class BookingRecord:
    """A persisted appointment. booking_id is the store's identifier, None until written."""
    date: CalendarDate
    slot: int
    name: str
    email: str
    phone: str
    booking_id: str | None = None

    def __post_init__(self) -> None:
        # Imported here: slots imports Meridiem from this module.
        from .slots import validate_slot

        object.__setattr__(self, "date", as_calendar_date(self.date))
        object.__setattr__(self, "slot", validate_slot(self.slot))

    def to_dict(self) -> dict[str, Any]:
        """Wire form: date as YYYY-DD-MM, id only when known."""
        out: dict[str, Any] = {
            "date": self.date.format(),
            "slot": self.slot,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }
        if self.booking_id is not None:
            out["id"] = self.booking_id
        return out

    def to_public_dict(self) -> dict[str, Any]:
        """Only what the booking page needs to compute availability; no contact details."""
        return {"date": self.date.format(), "slot": self.slot}


@dataclass
class DraftBooking:
    """In-progress selection built up across the booking wizard's steps."""
    date: CalendarDate | None = None
    slot: int | None = None
    meridiem: Meridiem = Meridiem.AM
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    email_valid: bool = True
    phone: str | None = None
    phone_valid: bool = True
