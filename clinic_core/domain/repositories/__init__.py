"""Repository interfaces used by the domain services."""

from clinic_core.domain.repositories.patient_repository import PatientRepository

__all__ = ["PatientRepository"]
