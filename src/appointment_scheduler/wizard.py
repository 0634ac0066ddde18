"""Three-step booking wizard: pick a day, pick a time, enter contact details, confirm."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from . import service
from .availability import is_day_selectable, is_slot_selectable
from .calendar_date import CalendarDate, DateLike, as_calendar_date
from .exceptions import FetchFailedError, SubmitFailedError, ValidationError, WizardStateError
from .formatting import DisplayRecord, confirmation_details, confirmation_sentence
from .models import BookingRecord, DraftBooking, Meridiem
from .schedule import Schedule
from .slots import validate_slot
from .validation import assemble_booking, validate_email, validate_phone

logger = logging.getLogger(__name__)


class WizardState(str, Enum):
    SELECTING_DAY = "selecting_day"
    SELECTING_SLOT = "selecting_slot"
    ENTERING_CONTACT = "entering_contact"
    CONFIRMING = "confirming"
    SUBMITTED = "submitted"


_STEP_ORDER = [WizardState.SELECTING_DAY, WizardState.SELECTING_SLOT, WizardState.ENTERING_CONTACT]


class BookingWizard:
    """
    Drives a DraftBooking through the booking steps against one Schedule snapshot.

    submit is called with the assembled BookingRecord and must return the saved
    record or raise SubmitFailedError. It defaults to service.submit_booking.
    load_schedule is called with the snapshot's today right before submit to
    re-check the slot against fresh bookings. It defaults to service.load_schedule.
    """

    def __init__(
        self,
        schedule: Schedule,
        submit: Callable[[BookingRecord], BookingRecord] | None = None,
        load_schedule: Callable[[CalendarDate], Schedule] | None = None,
    ):
        self.schedule = schedule
        self.draft = DraftBooking()
        self.state = WizardState.SELECTING_DAY
        self.record: BookingRecord | None = None
        self.error: str | None = None
        self._submit = submit or service.submit_booking
        self._load_schedule = load_schedule or service.load_schedule

    def _require(self, *states: WizardState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise WizardStateError(f"Not allowed while {self.state.value} (expected {allowed})")

    # Step 1
    def select_day(self, day: DateLike) -> None:
        self._require(WizardState.SELECTING_DAY)
        day = as_calendar_date(day)
        if not is_day_selectable(self.schedule, day):
            raise ValidationError(f"{day} is not available")
        if day != self.draft.date:
            self.draft.slot = None
        self.draft.date = day
        self.state = WizardState.SELECTING_SLOT

    # Step 2
    def set_meridiem(self, meridiem: Meridiem | str) -> None:
        self._require(WizardState.SELECTING_SLOT)
        self.draft.meridiem = Meridiem.parse(meridiem)

    def select_slot(self, slot: int) -> None:
        self._require(WizardState.SELECTING_SLOT)
        slot = validate_slot(slot)
        if not is_slot_selectable(self.schedule, self.draft.date, slot, self.draft.meridiem):
            raise ValidationError(f"Slot {slot} is not available")
        self.draft.slot = slot
        self.state = WizardState.ENTERING_CONTACT

    # Step 3
    def set_first_name(self, value: str) -> None:
        self._require(WizardState.ENTERING_CONTACT)
        self.draft.first_name = value

    def set_last_name(self, value: str) -> None:
        self._require(WizardState.ENTERING_CONTACT)
        self.draft.last_name = value

    def set_email(self, value: str) -> bool:
        self._require(WizardState.ENTERING_CONTACT)
        self.draft.email = value
        self.draft.email_valid = validate_email(value)
        return self.draft.email_valid

    def set_phone(self, value: str) -> bool:
        self._require(WizardState.ENTERING_CONTACT)
        self.draft.phone = value
        self.draft.phone_valid = validate_phone(value)
        return self.draft.phone_valid

    @property
    def contact_form_filled(self) -> bool:
        d = self.draft
        return bool(
            d.first_name and d.last_name and d.email and d.phone
            and d.email_valid and d.phone_valid
        )

    @property
    def confirmation_sentence(self) -> str:
        return confirmation_sentence(self.draft)

    def go_to(self, state: WizardState) -> None:
        """Revisit an earlier step. Later steps need the earlier choices to already be made."""
        self._require(*_STEP_ORDER)
        if state not in _STEP_ORDER:
            raise WizardStateError(f"Cannot jump to {state.value}")
        if state is WizardState.SELECTING_SLOT and self.draft.date is None:
            raise WizardStateError("Choose a day first")
        if state is WizardState.ENTERING_CONTACT and self.draft.slot is None:
            raise WizardStateError("Choose a time first")
        self.state = state

    def request_confirmation(self) -> DisplayRecord:
        """Move to the review step. Raises the validation error that blocks it, if any."""
        self._require(WizardState.ENTERING_CONTACT)
        record = assemble_booking(self.draft)
        self.state = WizardState.CONFIRMING
        self.error = None
        return confirmation_details(record)

    def cancel_confirmation(self) -> None:
        self._require(WizardState.CONFIRMING)
        self.state = WizardState.ENTERING_CONTACT

    def submit(self) -> bool:
        """
        Save the booking. Returns True once submitted.

        Bookings are reloaded first and the slot re-checked; this narrows the
        window for a double booking but does not close it. On SubmitFailedError
        (slot taken, store write failed) or FetchFailedError the wizard stays in
        CONFIRMING with error set, so the visitor can try again. Nothing is
        retried automatically.
        """
        self._require(WizardState.CONFIRMING)
        record = assemble_booking(self.draft)
        try:
            fresh = self._load_schedule(self.schedule.today)
            service.ensure_bookable(fresh, record)
            saved = self._submit(record)
        except (SubmitFailedError, FetchFailedError) as e:
            logger.warning("Booking submission failed: %s", e)
            self.error = str(e)
            return False
        self.record = saved
        self.error = None
        self.state = WizardState.SUBMITTED
        return True
