"""
Exception classes for the application domain.

This module exports the exceptions raised by value objects, entities and
domain services.
"""

from clinic_core.domain.exceptions.appointment_exceptions import (
    AppointmentCancellationError,
    AppointmentError,
    InvalidAppointmentDateError,
    InvalidAppointmentStateError,
)
from clinic_core.domain.exceptions.base_exceptions import (
    BaseApplicationError,
    BusinessRuleError,
    CurrencyMismatchError,
    ValidationError,
)
from clinic_core.domain.exceptions.patient_exceptions import (
    ClinicError,
    InvalidLastVisitError,
    PatientDataIntegrityError,
    PatientError,
    PatientResolutionError,
)

# Callers that branch on the failure kind use these names
DomainRuleError = BusinessRuleError

__all__ = [
    # Appointment exceptions
    "AppointmentCancellationError",
    "AppointmentError",
    # Base exceptions
    "BaseApplicationError",
    "BusinessRuleError",
    # Clinic exceptions
    "ClinicError",
    "CurrencyMismatchError",
    "DomainRuleError",
    "InvalidAppointmentDateError",
    "InvalidAppointmentStateError",
    "InvalidLastVisitError",
    "PatientDataIntegrityError",
    # Patient exceptions
    "PatientError",
    "PatientResolutionError",
    "ValidationError",
]
