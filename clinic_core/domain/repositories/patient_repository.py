"""
Interface for the Patient Repository.
"""
from abc import ABC, abstractmethod

from clinic_core.domain.entities.patient import Patient


class PatientRepository(ABC):
    """Abstract base class defining the patient repository interface.

    Used only by PatientDomainService. Implementations own persistence and
    any uniqueness guarantees; the domain does not serialize concurrent
    resolutions of the same patient.
    """

    @abstractmethod
    def find_by_id(self, patient_id: str) -> Patient | None:
        """Retrieve a patient by their ID.

        Args:
            patient_id: Unique identifier for the patient

        Returns:
            Patient entity if found, None otherwise
        """

    @abstractmethod
    def find_by_name_or_email(self, name: str, email: str | None = None) -> Patient | None:
        """Find an existing patient matching *name* (and *email*, if given).

        Args:
            name: Patient name as typed by the user
            email: Optional e-mail narrowing the match

        Returns:
            The matching patient, or None
        """

    @abstractmethod
    def create(self, patient: Patient) -> Patient:
        """Persist a new patient.

        Args:
            patient: Patient entity to create

        Returns:
            Created patient entity
        """

    @abstractmethod
    def update(self, patient_id: str, patient: Patient) -> Patient:
        """Persist changes of an existing patient.

        Args:
            patient_id: ID of the patient being updated
            patient: Patient entity with updated data

        Returns:
            Updated patient entity
        """
