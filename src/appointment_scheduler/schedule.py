"""Fold booking records into a per-day availability schedule.

A day maps to one of:
- absent: open, nothing booked
- FULLY_BOOKED: every slot taken (today is always seeded this way)
- an 8-tuple of bools: slot i is taken when bitmap[i] is True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import reduce
from types import MappingProxyType
from typing import Any, Tuple, Union

from .calendar_date import CalendarDate, DateLike, as_calendar_date
from .models import BookingRecord
from .slots import SLOT_COUNT

FULLY_BOOKED = True

Bitmap = Tuple[bool, ...]
ScheduleEntry = Union[bool, Bitmap]


class Schedule(Mapping):
    """Read-only mapping of CalendarDate -> ScheduleEntry, built for a given 'today'."""

    def __init__(self, entries: Mapping[CalendarDate, ScheduleEntry], today: CalendarDate):
        self._entries = MappingProxyType(dict(entries))
        self.today = today

    def __getitem__(self, day: DateLike) -> ScheduleEntry:
        try:
            key = as_calendar_date(day)
        except ValueError:
            raise KeyError(day) from None
        return self._entries[key]

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, day: object) -> bool:
        try:
            return as_calendar_date(day) in self._entries  # type: ignore[arg-type]
        except ValueError:
            return False

    def entry(self, day: DateLike) -> ScheduleEntry | None:
        """Entry for day, or None when the day is open."""
        return self._entries.get(as_calendar_date(day))

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly form keyed by YYYY-DD-MM: true for fully booked days, else the bitmap."""
        return {
            day.format(): entry if entry is FULLY_BOOKED else list(entry)
            for day, entry in sorted(self._entries.items())
        }

    def __repr__(self) -> str:
        return f"Schedule(today={self.today}, entries={self.to_dict()!r})"


def is_fully_booked(entry: ScheduleEntry | None) -> bool:
    """FULLY_BOOKED and an all-True bitmap mean the same thing."""
    if entry is None:
        return False
    if entry is FULLY_BOOKED:
        return True
    return isinstance(entry, tuple) and len(entry) == SLOT_COUNT and all(entry)


def _mark_taken(
    taken: dict[CalendarDate, set[int]], record: BookingRecord
) -> dict[CalendarDate, set[int]]:
    taken.setdefault(record.date, set()).add(record.slot)
    return taken


def _freeze(slots: set[int]) -> Bitmap:
    return tuple(slot in slots for slot in range(SLOT_COUNT))


def _collapse(entries: Mapping[CalendarDate, ScheduleEntry]) -> dict[CalendarDate, ScheduleEntry]:
    return {day: FULLY_BOOKED if is_fully_booked(entry) else entry for day, entry in entries.items()}


def build_schedule(records: Iterable[BookingRecord], today: DateLike) -> Schedule:
    """
    Build the availability schedule from every known booking.

    Today is seeded as fully booked so same-day appointments are never offered.
    Duplicate (date, slot) records are harmless; the same bit is simply set twice.
    """
    today = as_calendar_date(today)
    # Local accumulator; records are never mutated and the result is frozen once.
    taken = reduce(_mark_taken, records, {})
    entries: dict[CalendarDate, ScheduleEntry] = {day: _freeze(slots) for day, slots in taken.items()}
    entries[today] = FULLY_BOOKED
    return Schedule(_collapse(entries), today=today)
