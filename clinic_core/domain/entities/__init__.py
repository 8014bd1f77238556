"""
Domain entities package.

Appointment, Patient and Clinic are independent aggregates that refer to
each other by id only.
"""

from clinic_core.domain.entities.appointment import Appointment
from clinic_core.domain.entities.base_entity import BaseEntity
from clinic_core.domain.entities.clinic import Clinic, ClinicStatus
from clinic_core.domain.entities.patient import Patient

__all__ = [
    "Appointment",
    "BaseEntity",
    "Clinic",
    "ClinicStatus",
    "Patient",
]
