"""
Exception classes related to appointment operations.

This module defines exceptions raised when an appointment transition or
invariant check fails.
"""

from typing import Any

from clinic_core.domain.exceptions.base_exceptions import BusinessRuleError


class AppointmentError(BusinessRuleError):
    """Base class for appointment-related exceptions."""

    def __init__(
        self, message: str = "Appointment operation failed", *args: Any, **kwargs: Any
    ) -> None:
        super().__init__(message, *args, **kwargs)


class InvalidAppointmentStateError(AppointmentError):
    """Raised when an operation is attempted on an appointment in an invalid state."""

    def __init__(
        self,
        message: str = "Invalid appointment state for the requested operation",
        current_state: str | None = None,
        appointment_id: str | None = None,
    ) -> None:
        if current_state:
            message = f"{message}: current state is '{current_state}'"
        if appointment_id:
            message = f"{message} for appointment {appointment_id}"
        super().__init__(message)
        self.current_state = current_state
        self.appointment_id = appointment_id


class InvalidAppointmentDateError(AppointmentError):
    """Raised when an appointment or payment date is not a real calendar date."""

    def __init__(self, message: str = "Invalid date", value: Any = None) -> None:
        super().__init__(message, details={"date": value})
        self.value = value


class AppointmentCancellationError(AppointmentError):
    """Raised when an appointment cannot be cancelled."""

    def __init__(
        self,
        message: str = "Cannot cancel appointment",
        appointment_id: str | None = None,
        reason: str | None = None,
    ) -> None:
        if appointment_id and reason:
            message = f"Cannot cancel appointment {appointment_id}: {reason}"
        elif reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.appointment_id = appointment_id
        self.reason = reason
