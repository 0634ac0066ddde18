"""Availability questions answered against a Schedule snapshot.

Every function here is pure: the same Schedule always gives the same answers.
The snapshot can go stale once another client books, so a slot reported free
here may already be taken in the store. Writes are not conditional on the slot
still being free.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .calendar_date import DateLike, as_calendar_date
from .models import BookingRecord, Meridiem
from .schedule import FULLY_BOOKED, Schedule, is_fully_booked
from .slots import all_slots, meridiem_of, slot_label, validate_slot


@dataclass(frozen=True)
class SlotOption:
    """One time choice for a day, as shown on the booking page."""
    slot: int
    label: str
    meridiem: Meridiem
    taken: bool
    selectable: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "slot": self.slot,
            "label": self.label,
            "meridiem": self.meridiem.value,
            "taken": self.taken,
            "selectable": self.selectable,
        }


def is_day_selectable(schedule: Schedule, day: DateLike) -> bool:
    """False for days before today and for fully booked days (today included)."""
    day = as_calendar_date(day)
    if day < schedule.today:
        return False
    return not is_fully_booked(schedule.entry(day))


def is_slot_taken(schedule: Schedule, day: DateLike, slot: int) -> bool:
    slot = validate_slot(slot)
    entry = schedule.entry(day)
    if entry is None:
        return False
    if entry is FULLY_BOOKED:
        return True
    return bool(entry[slot])


def is_slot_selectable(schedule: Schedule, day: DateLike, slot: int, meridiem: Meridiem | str) -> bool:
    """A slot is selectable when it falls in the active AM/PM filter and is not taken."""
    if meridiem_of(slot) is not Meridiem.parse(meridiem):
        return False
    return not is_slot_taken(schedule, day, slot)


def is_booking_free(schedule: Schedule, record: BookingRecord) -> bool:
    """Best-effort check just before submitting. Only as fresh as the snapshot it is given."""
    return is_day_selectable(schedule, record.date) and not is_slot_taken(schedule, record.date, record.slot)


def slot_options(schedule: Schedule, day: DateLike, meridiem: Meridiem | str) -> list[SlotOption]:
    meridiem = Meridiem.parse(meridiem)
    day_open = is_day_selectable(schedule, day)
    options = []
    for slot in all_slots():
        taken = is_slot_taken(schedule, day, slot)
        options.append(SlotOption(
            slot=slot,
            label=slot_label(slot),
            meridiem=meridiem_of(slot),
            taken=taken,
            selectable=day_open and is_slot_selectable(schedule, day, slot, meridiem),
        ))
    return options
