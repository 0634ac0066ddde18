"""Calendar day value type and its single wire format.

Bookings are stored with dates written year, day, month (``2024-16-06`` is
June 16th 2024). Existing records depend on that order, so it is kept, but it
only ever appears in ``CalendarDate.parse`` and ``CalendarDate.format``.
Everything else compares ``CalendarDate`` values, never strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Union

WIRE_FORMAT = "%Y-%d-%m"


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A calendar day with no time component."""
    value: date

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """Parse a ``YYYY-DD-MM`` string. Raises ValueError on anything else."""
        if not isinstance(text, str):
            raise ValueError(f"Expected a YYYY-DD-MM string, got {text!r}")
        return cls(datetime.strptime(text.strip(), WIRE_FORMAT).date())

    @classmethod
    def today(cls, tz: tzinfo | None = None) -> "CalendarDate":
        return cls(datetime.now(tz).date())

    def format(self) -> str:
        return self.value.strftime(WIRE_FORMAT)

    def __str__(self) -> str:
        return self.format()


DateLike = Union[CalendarDate, date, str]


def as_calendar_date(value: DateLike) -> CalendarDate:
    """Coerce a CalendarDate, a date/datetime, or a ``YYYY-DD-MM`` string."""
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, datetime):
        return CalendarDate(value.date())
    if isinstance(value, date):
        return CalendarDate(value)
    return CalendarDate.parse(value)
