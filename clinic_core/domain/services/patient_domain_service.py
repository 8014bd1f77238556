"""
Patient Domain Service

Resolves the patient an appointment belongs to, creating one when no
existing patient matches, and keeps the last-visit date current.
"""

from typing import Any

from clinic_core.core.utils.logging import get_logger
from clinic_core.domain.entities.patient import Patient
from clinic_core.domain.exceptions import PatientResolutionError
from clinic_core.domain.repositories.patient_repository import PatientRepository
from clinic_core.domain.validators.validation_result import ValidationResult
from clinic_core.domain.value_objects import Email

logger = get_logger(__name__)


class PatientDomainService:
    """Stateless patient rules that need a repository collaborator."""

    @staticmethod
    def resolve_patient(data: dict[str, Any], repository: PatientRepository) -> str:
        """
        Return the id of the patient described by *data*.

        An explicit ``patient_id`` is returned as-is without any lookup.
        Otherwise a patient is looked up by ``patient_name`` (and
        ``patient_email``). A match is enriched with the supplied e-mail
        and/or phone and persisted; with no match a new patient owned by
        ``user_id`` is created.

        Two concurrent resolutions of the same new name may both create a
        patient; uniqueness belongs to the repository.

        Args:
            data: ``patient_id`` or ``patient_name`` plus optional
                ``patient_email``, ``patient_phone`` and ``user_id``
            repository: Patient repository

        Returns:
            The resolved patient id

        Raises:
            PatientResolutionError: If no name is given, or a new patient
                would be needed and no ``user_id`` is given
        """
        if data.get("patient_id"):
            return data["patient_id"]

        name = data.get("patient_name")
        if not name:
            raise PatientResolutionError("Patient name is required")

        email = data.get("patient_email")
        phone = data.get("patient_phone")

        existing = repository.find_by_name_or_email(name, email or None)
        if existing is not None:
            if email or phone:
                if "patient_email" in data:
                    existing.update_email(email)
                if "patient_phone" in data:
                    existing.update_phone(phone)
                repository.update(existing.id, existing)
                logger.info(f"Resolved existing patient {existing.id} with updated contact data")
            else:
                logger.debug(f"Resolved existing patient {existing.id}")
            return existing.id

        user_id = data.get("user_id")
        if not user_id:
            raise PatientResolutionError("user_id is required to create a new patient")

        patient = Patient.create(
            name=name,
            user_id=user_id,
            email=email or None,
            phone=phone or None,
        )
        created = repository.create(patient)
        logger.info(f"Created patient {created.id}")
        return created.id

    @staticmethod
    def update_last_visit(
        patient_id: str | None, visit_date: Any, repository: PatientRepository
    ) -> None:
        """
        Record *visit_date* as the patient's last visit.

        Does nothing when an argument is missing or the patient does not
        exist.

        Raises:
            InvalidLastVisitError: If *visit_date* lies in the future
        """
        if not patient_id or not visit_date:
            return

        patient = repository.find_by_id(patient_id)
        if patient is None:
            logger.debug(f"Skipped last visit update: patient {patient_id} not found")
            return

        patient.update_last_visit(visit_date)
        repository.update(patient_id, patient)

    @staticmethod
    def validate_patient_data(data: dict[str, Any]) -> ValidationResult:
        """Check that a name is present and that a given e-mail is well formed."""
        errors: dict[str, str] = {}

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            errors["name"] = "Name is required"

        email = data.get("email")
        if isinstance(email, str) and email.strip() and not Email.is_valid(email):
            errors["email"] = "Invalid email"

        return ValidationResult.from_errors(errors)
