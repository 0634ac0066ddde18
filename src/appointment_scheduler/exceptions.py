"""Error kinds raised by the booking core and its store/SMS adapters."""

from __future__ import annotations


class SchedulerError(RuntimeError):
    """Base class for every error raised by appointment_scheduler."""


class ValidationError(SchedulerError):
    """Raised when user-entered booking data cannot be accepted. Always recoverable."""


class IncompleteFieldsError(ValidationError):
    """Raised when one or more required booking fields are missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class InvalidEmailError(ValidationError):
    """Raised when the email address does not look like an address."""


class InvalidPhoneError(ValidationError):
    """Raised when the phone number is not a North-American 10 digit number."""


class FetchFailedError(SchedulerError):
    """Raised when existing bookings or site configuration cannot be loaded."""


class SubmitFailedError(SchedulerError):
    """Raised when a new booking could not be written to the store."""


class SlotUnavailableError(SubmitFailedError):
    """Raised when the chosen slot is already taken in the schedule snapshot used for the check."""


class DeleteFailedError(SchedulerError):
    """Raised when one or more bookings could not be deleted."""

    def __init__(self, failed_ids: list[str]):
        self.failed_ids = list(failed_ids)
        super().__init__(f"Failed to delete appointments: {', '.join(self.failed_ids)}")


class WizardStateError(SchedulerError):
    """Raised when a wizard action is not allowed in its current state."""
