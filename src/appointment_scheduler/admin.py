"""Admin listing: bookings grouped and filtered by day, and deletion by store id."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from . import store
from .calendar_date import CalendarDate, DateLike, as_calendar_date
from .exceptions import DeleteFailedError
from .formatting import admin_date_label, start_time_label
from .models import BookingRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminRow:
    """One table row. booking_id comes from the store so deletes never depend on displayed text."""
    index: int
    booking_id: str | None
    name: str
    email: str
    phone: str
    date: CalendarDate
    date_label: str
    time_label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "id": self.booking_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "date": self.date.format(),
            "date_label": self.date_label,
            "time_label": self.time_label,
        }


def group_by_date(records: Iterable[BookingRecord]) -> dict[CalendarDate, list[BookingRecord]]:
    """Bookings per day, days in ascending order, each day's bookings sorted by slot."""
    grouped: dict[CalendarDate, list[BookingRecord]] = {}
    for record in records:
        grouped.setdefault(record.date, []).append(record)
    return {day: sorted(grouped[day], key=lambda r: r.slot) for day in sorted(grouped)}


def booked_dates(records: Iterable[BookingRecord]) -> list[CalendarDate]:
    """Days with at least one booking; the only days the admin date filter offers."""
    return sorted({record.date for record in records})


def admin_rows(records: Iterable[BookingRecord], day: DateLike | None = None) -> list[AdminRow]:
    grouped = group_by_date(records)
    if day is not None:
        day = as_calendar_date(day)
        grouped = {day: grouped.get(day, [])}
    rows: list[AdminRow] = []
    for bookings in grouped.values():
        for record in bookings:
            rows.append(AdminRow(
                index=len(rows),
                booking_id=record.booking_id,
                name=record.name,
                email=record.email,
                phone=record.phone,
                date=record.date,
                date_label=admin_date_label(record.date),
                time_label=start_time_label(record.slot),
            ))
    return rows


def delete_bookings(booking_ids: Iterable[str]) -> list[str]:
    """
    Delete each booking. Every id is attempted even if an earlier one fails.

    Returns the deleted ids; raises DeleteFailedError naming the ids that failed.
    """
    deleted: list[str] = []
    failed: list[str] = []
    for booking_id in dict.fromkeys(booking_ids):
        try:
            store.delete_booking(booking_id)
        except DeleteFailedError:
            failed.append(booking_id)
            continue
        deleted.append(booking_id)
    if failed:
        logger.error("Failed to delete %d of %d appointments", len(failed), len(failed) + len(deleted))
        raise DeleteFailedError(failed)
    return deleted
