"""Domain services."""

from clinic_core.domain.services.appointment_domain_service import AppointmentDomainService
from clinic_core.domain.services.patient_domain_service import PatientDomainService

__all__ = ["AppointmentDomainService", "PatientDomainService"]
