"""
Field-level validators.

Validators never raise unless asked to (``throw_on_error=True``); they
return a :class:`ValidationResult` with one message per failing field.
"""

from clinic_core.domain.validators.appointment_validator import AppointmentValidator
from clinic_core.domain.validators.clinic_validator import ClinicValidator
from clinic_core.domain.validators.patient_validator import PatientValidator
from clinic_core.domain.validators.validation_result import ValidationResult

__all__ = [
    "AppointmentValidator",
    "ClinicValidator",
    "PatientValidator",
    "ValidationResult",
]
