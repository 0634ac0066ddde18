"""Contact field validation and assembly of the final booking record."""

from __future__ import annotations

import re
from typing import Any

from .calendar_date import as_calendar_date
from .exceptions import IncompleteFieldsError, InvalidEmailError, InvalidPhoneError, ValidationError
from .models import BookingRecord, DraftBooking
from .slots import validate_slot

EMAIL_RE = re.compile(
    r'^(([^<>()\[\]\.,;:\s@"]+(\.[^<>()\[\]\.,;:\s@"]+)*)|(".+"))'
    r'@(([^<>()\[\]\.,;:\s@"]+\.)+[^<>()\[\]\.,;:\s@"]{2,})$',
    re.IGNORECASE,
)
# 10 digits, optional leading 1, optional (area code), optional '-' or ' ' between groups.
PHONE_RE = re.compile(r"^(1\s|1|)?((\(\d{3}\))|\d{3})(-|\s)?(\d{3})(-|\s)?(\d{4})$")
NON_DIGIT_RE = re.compile(r"\D")


def validate_email(value: str | None) -> bool:
    return bool(value) and EMAIL_RE.match(value) is not None


def validate_phone(value: str | None) -> bool:
    return bool(value) and PHONE_RE.match(value) is not None


def normalize_phone(value: str) -> str:
    """Digits only. Applied when the booking is submitted, not for display."""
    return NON_DIGIT_RE.sub("", value)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def assemble_booking(draft: DraftBooking) -> BookingRecord:
    """
    Turn a completed draft into a BookingRecord.

    Raises IncompleteFieldsError naming every missing field, then
    InvalidEmailError / InvalidPhoneError if a stored value does not validate.
    """
    required = {
        "date": draft.date,
        "slot": draft.slot,
        "first_name": draft.first_name,
        "last_name": draft.last_name,
        "email": draft.email,
        "phone": draft.phone,
    }
    missing = [field for field, value in required.items() if _blank(value)]
    if missing:
        raise IncompleteFieldsError(missing)
    if not validate_email(draft.email):
        raise InvalidEmailError(f"Invalid email address: {draft.email!r}")
    if not validate_phone(draft.phone):
        raise InvalidPhoneError(f"Invalid phone number: {draft.phone!r}")

    return BookingRecord(
        date=draft.date,
        slot=draft.slot,
        name=f"{draft.first_name.strip()} {draft.last_name.strip()}",
        email=draft.email.strip(),
        phone=normalize_phone(draft.phone),
    )


def booking_from_payload(payload: dict[str, Any]) -> BookingRecord:
    """
    Build a BookingRecord from a submitted JSON body.

    Accepts either "name" or "first_name"/"last_name". Date must be YYYY-DD-MM.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Booking payload must be a JSON object")

    for field in ("name", "first_name", "last_name"):
        if payload.get(field) is not None and not isinstance(payload[field], str):
            raise ValidationError(f"{field} must be a string")

    name = payload.get("name")
    first = payload.get("first_name")
    last = payload.get("last_name")
    if _blank(name) and not (_blank(first) or _blank(last)):
        name = f"{first.strip()} {last.strip()}"

    required = {
        "date": payload.get("date"),
        "slot": payload.get("slot"),
        "name": name,
        "email": payload.get("email"),
        "phone": payload.get("phone"),
    }
    missing = [field for field, value in required.items() if _blank(value)]
    if missing:
        raise IncompleteFieldsError(missing)

    try:
        day = as_calendar_date(str(payload["date"]))
        slot = validate_slot(payload["slot"])
    except ValueError as e:
        raise ValidationError(str(e)) from e

    email = str(payload["email"]).strip()
    phone = str(payload["phone"]).strip()
    if not validate_email(email):
        raise InvalidEmailError(f"Invalid email address: {email!r}")
    if not validate_phone(phone):
        raise InvalidPhoneError(f"Invalid phone number: {phone!r}")

    return BookingRecord(date=day, slot=slot, name=str(name).strip(), email=email, phone=normalize_phone(phone))
