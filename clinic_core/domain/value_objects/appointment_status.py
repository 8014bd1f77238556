"""Appointment status value object."""

from enum import Enum
from typing import Any

from clinic_core.domain.exceptions import ValidationError


class AppointmentStatus(str, Enum):
    """Lifecycle state of an appointment."""

    SCHEDULED = "scheduled"
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"

    @classmethod
    def create(cls, value: Any, is_paid: bool = False) -> "AppointmentStatus":
        """
        Build a status, letting payment win over the requested value.

        Raises:
            ValidationError: If *value* is not a known status and the
                appointment is not paid
        """
        if is_paid:
            return cls.PAID
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid status: {value}", errors={"status": value}) from None

    @property
    def is_scheduled(self) -> bool:
        return self is AppointmentStatus.SCHEDULED

    @property
    def is_pending(self) -> bool:
        return self is AppointmentStatus.PENDING

    @property
    def is_paid(self) -> bool:
        return self is AppointmentStatus.PAID

    @property
    def is_cancelled(self) -> bool:
        return self is AppointmentStatus.CANCELLED

    def __str__(self) -> str:
        return self.value
