"""Load the schedule and submit bookings: store + availability + SMS wired together."""

from __future__ import annotations

import logging
from dataclasses import replace

from . import config, notifications, store
from .availability import is_booking_free
from .calendar_date import CalendarDate, DateLike, as_calendar_date
from .config import SiteConfig
from .exceptions import SlotUnavailableError
from .models import BookingRecord
from .schedule import Schedule, build_schedule

logger = logging.getLogger(__name__)


def current_day() -> CalendarDate:
    return CalendarDate.today(config.local_tz())


def fetch_bookings() -> list[BookingRecord]:
    """All bookings in the store. Raises FetchFailedError."""
    return store.list_bookings()


def load_schedule(today: DateLike | None = None, records: list[BookingRecord] | None = None) -> Schedule:
    if records is None:
        records = fetch_bookings()
    return build_schedule(records, as_calendar_date(today) if today is not None else current_day())


def fetch_context(today: DateLike | None = None) -> tuple[SiteConfig, Schedule]:
    """Site config and schedule; both must load before a booking can start."""
    site = config.get_site_config()
    schedule = load_schedule(today)
    return site, schedule


def ensure_bookable(schedule: Schedule, record: BookingRecord) -> None:
    if not is_booking_free(schedule, record):
        raise SlotUnavailableError(
            f"{record.date} slot {record.slot} is no longer available. Please choose another time."
        )


def submit_booking(record: BookingRecord) -> BookingRecord:
    """
    Save the booking, then send the confirmation SMS.

    Raises SubmitFailedError if the store write fails. The SMS is sent only
    after a successful write and its failure never undoes the booking.
    """
    booking_id = store.create_booking(record)
    saved = replace(record, booking_id=booking_id)
    if not notifications.notify_booking_confirmed(saved):
        logger.warning("Booking %s saved but confirmation SMS was not delivered", booking_id)
    return saved
