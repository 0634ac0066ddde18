"""Fixed one-hour slots: 8 per day starting at 9 AM. Slot s spans [9:00 + s h, 10:00 + s h)."""

from __future__ import annotations

from datetime import time, timedelta

from .models import Meridiem

DAY_START_HOUR = 9
SLOT_COUNT = 8
SLOT_DURATION = timedelta(hours=1)


def validate_slot(value: int | str) -> int:
    """Return value as a slot index. Raises ValueError unless it is an integer in 0..SLOT_COUNT-1."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid slot: {value!r}")
    try:
        slot = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid slot: {value!r}") from None
    if not isinstance(value, str) and value != slot:
        raise ValueError(f"Invalid slot: {value!r}")
    if not 0 <= slot < SLOT_COUNT:
        raise ValueError(f"Slot must be between 0 and {SLOT_COUNT - 1}, got {slot}")
    return slot


def slot_start(slot: int) -> time:
    """Start time of slot. slot == SLOT_COUNT gives closing time (end of the last slot)."""
    if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot <= SLOT_COUNT:
        raise ValueError(f"Slot must be between 0 and {SLOT_COUNT}, got {slot!r}")
    minutes = DAY_START_HOUR * 60 + slot * int(SLOT_DURATION.total_seconds() // 60)
    return time(hour=minutes // 60, minute=minutes % 60)


def slot_end(slot: int) -> time:
    return slot_start(validate_slot(slot) + 1)


def meridiem_of(slot: int) -> Meridiem:
    return Meridiem.AM if slot_start(validate_slot(slot)).hour < 12 else Meridiem.PM


def format_clock(value: time) -> str:
    """'h:mm am' style, e.g. 9:00 am, 12:00 pm, 4:00 pm."""
    hour = value.hour % 12 or 12
    suffix = "am" if value.hour < 12 else "pm"
    return f"{hour}:{value.minute:02d} {suffix}"


def slot_label(slot: int) -> str:
    """Display range for a slot, e.g. '11:00 am - 12:00 pm'."""
    return f"{format_clock(slot_start(validate_slot(slot)))} - {format_clock(slot_end(slot))}"


def all_slots() -> range:
    return range(SLOT_COUNT)
