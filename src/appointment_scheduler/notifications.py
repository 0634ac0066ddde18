"""Confirmation SMS to the visitor once a booking is saved."""

from __future__ import annotations

import logging

from . import twilio_handler
from .formatting import sms_body
from .models import BookingRecord

logger = logging.getLogger(__name__)


def _to_e164(phone_digits: str) -> str:
    """'+1' plus the 10 national digits; a leading country code 1 is not doubled."""
    if len(phone_digits) == 11 and phone_digits.startswith("1"):
        phone_digits = phone_digits[1:]
    return "+1" + phone_digits


def notify_booking_confirmed(record: BookingRecord) -> bool:
    """Send the confirmation SMS. Best-effort: returns False on failure and never raises."""
    if not record.phone:
        logger.warning("Booking %s has no phone number; skipping confirmation SMS", record.booking_id)
        return False
    sid = twilio_handler.send_sms(_to_e164(record.phone), sms_body(record))
    if sid:
        logger.info("Confirmation SMS sent for booking %s (SID %s)", record.booking_id, sid)
    else:
        logger.warning("Confirmation SMS for booking %s was not sent", record.booking_id)
    return sid is not None
