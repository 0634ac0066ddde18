"""FastAPI app: public booking endpoints, admin listing/deletion, health check."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load .env when running locally (repo root .env / .env.local)
_repo_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_repo_root / ".env")
load_dotenv(_repo_root / ".env.local")

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import admin, config, service
from .availability import is_day_selectable, slot_options
from .calendar_date import as_calendar_date
from .exceptions import (
    DeleteFailedError,
    FetchFailedError,
    IncompleteFieldsError,
    SlotUnavailableError,
    SubmitFailedError,
    ValidationError,
)
from .formatting import confirmation_details, sms_body
from .models import Meridiem
from .validation import booking_from_payload

logging.basicConfig(level=config.log_level(), format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title="Appointment Scheduler", version="0.1.0")


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"data": "error", "message": message, **extra})


@app.exception_handler(FetchFailedError)
async def fetch_failed(request: Request, exc: FetchFailedError) -> JSONResponse:
    return _error(502, str(exc))


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/config")
def get_config() -> dict[str, Any]:
    return {"data": config.get_site_config().to_dict()}


@app.get("/api/appointments")
def list_appointments() -> dict[str, Any]:
    """Booked (date, slot) pairs only; contact details stay private."""
    return {"data": [record.to_public_dict() for record in service.fetch_bookings()]}


@app.get("/api/schedule")
def get_schedule() -> dict[str, Any]:
    schedule = service.load_schedule()
    return {"data": {"today": schedule.today.format(), "schedule": schedule.to_dict()}}


@app.get("/api/schedule/{day}")
def get_day(day: str, meridiem: str = "AM") -> Any:
    try:
        calendar_day = as_calendar_date(day)
        meridiem_filter = Meridiem.parse(meridiem)
    except ValueError as e:
        return _error(422, str(e))
    schedule = service.load_schedule()
    return {
        "data": {
            "date": calendar_day.format(),
            "selectable": is_day_selectable(schedule, calendar_day),
            "meridiem": meridiem_filter.value,
            "slots": [option.to_dict() for option in slot_options(schedule, calendar_day, meridiem_filter)],
        }
    }


@app.post("/api/appointments")
async def create_appointment(request: Request) -> JSONResponse:
    """JSON body: date (YYYY-DD-MM), slot, name or first_name/last_name, email, phone."""
    try:
        payload = await request.json()
    except ValueError:
        return _error(400, "Body must be JSON")

    try:
        record = booking_from_payload(payload)
    except IncompleteFieldsError as e:
        return _error(422, str(e), missing=e.missing)
    except ValidationError as e:
        return _error(422, str(e))

    # Best-effort re-check against a fresh snapshot; not a lock.
    try:
        service.ensure_bookable(service.load_schedule(), record)
        saved = service.submit_booking(record)
    except SlotUnavailableError as e:
        return _error(409, str(e))
    except SubmitFailedError as e:
        return _error(502, str(e))

    return JSONResponse(
        status_code=201,
        content={
            "data": {
                **saved.to_dict(),
                "confirmation": confirmation_details(saved).to_dict(),
                "sms": sms_body(saved),
            }
        },
    )


@app.get("/api/admin/appointments")
def admin_list(date: str | None = None) -> Any:
    records = service.fetch_bookings()
    try:
        rows = admin.admin_rows(records, day=date)
    except ValueError as e:
        return _error(422, str(e))
    return {
        "data": {
            "rows": [row.to_dict() for row in rows],
            "booked_dates": [day.format() for day in admin.booked_dates(records)],
        }
    }


@app.delete("/api/admin/appointments/{booking_id}")
def admin_delete(booking_id: str) -> Any:
    try:
        admin.delete_bookings([booking_id])
    except DeleteFailedError as e:
        return _error(502, str(e), failed=e.failed_ids)
    return {"data": {"deleted": [booking_id]}}


@app.post("/api/admin/appointments/delete")
async def admin_delete_many(request: Request) -> Any:
    try:
        payload = await request.json()
    except ValueError:
        return _error(400, "Body must be JSON")
    ids = payload.get("ids") if isinstance(payload, dict) else None
    if not isinstance(ids, list) or not ids or not all(isinstance(i, str) and i for i in ids):
        return _error(422, "ids must be a non-empty list of appointment ids")
    try:
        deleted = admin.delete_bookings(ids)
    except DeleteFailedError as e:
        return _error(502, str(e), failed=e.failed_ids)
    return {"data": {"deleted": deleted}}
