"""
Unit tests for PatientDomainService.
"""

import datetime

import pytest

from clinic_core.domain.exceptions import (
    BusinessRuleError,
    InvalidLastVisitError,
    PatientResolutionError,
)
from clinic_core.domain.services import PatientDomainService
from clinic_core.domain.utils import datetime_utils


class TestResolvePatient:
    """Tests for resolve_patient."""

    def test_explicit_id_skips_repository(self, patient_repository):
        result = PatientDomainService.resolve_patient({"patient_id": "x"}, patient_repository)

        assert result == "x"
        assert patient_repository.mock_calls == []

    def test_missing_name_fails(self, patient_repository):
        with pytest.raises(PatientResolutionError):
            PatientDomainService.resolve_patient({"patient_name": ""}, patient_repository)

    def test_no_match_without_user_fails(self, patient_repository):
        with pytest.raises(BusinessRuleError):
            PatientDomainService.resolve_patient({"patient_name": "Ana"}, patient_repository)

        patient_repository.find_by_name_or_email.assert_called_once_with("Ana", None)
        patient_repository.create.assert_not_called()

    def test_no_match_creates_patient(self, patient_repository):
        # Arrange
        data = {
            "patient_name": "bruno lima",
            "patient_email": "bruno@example.com",
            "user_id": "user-1",
        }

        # Act
        patient_id = PatientDomainService.resolve_patient(data, patient_repository)

        # Assert
        created = patient_repository.create.call_args.args[0]
        assert patient_id == created.id
        assert str(created.name) == "Bruno Lima"
        assert created.user_id == "user-1"
        assert str(created.email) == "bruno@example.com"

    def test_match_returns_existing_id(self, patient_repository, patient):
        patient_repository.find_by_name_or_email.return_value = patient

        result = PatientDomainService.resolve_patient({"patient_name": "Ana Souza"}, patient_repository)

        assert result == "patient-1"
        patient_repository.update.assert_not_called()
        patient_repository.create.assert_not_called()

    def test_match_is_enriched_with_contact_data(self, patient_repository, patient):
        """Test that a matching patient is updated with the supplied phone."""
        patient_repository.find_by_name_or_email.return_value = patient

        result = PatientDomainService.resolve_patient(
            {"patient_name": "Ana Souza", "patient_phone": "(21) 98888-7777"},
            patient_repository,
        )

        assert result == "patient-1"
        assert str(patient.phone) == "21988887777"
        assert str(patient.email) == "ana@example.com"
        patient_repository.update.assert_called_once_with("patient-1", patient)


class TestUpdateLastVisit:
    """Tests for update_last_visit."""

    @pytest.mark.parametrize("patient_id, visit_date", [(None, "2024-01-15"), ("patient-1", None)])
    def test_missing_arguments_are_noop(self, patient_repository, patient_id, visit_date):
        PatientDomainService.update_last_visit(patient_id, visit_date, patient_repository)

        assert patient_repository.mock_calls == []

    def test_unknown_patient_is_noop(self, patient_repository):
        PatientDomainService.update_last_visit("missing", "2024-01-15", patient_repository)

        patient_repository.find_by_id.assert_called_once_with("missing")
        patient_repository.update.assert_not_called()

    def test_updates_and_persists(self, patient_repository, patient):
        patient_repository.find_by_id.return_value = patient

        PatientDomainService.update_last_visit("patient-1", "2024-01-15", patient_repository)

        assert patient.last_visit == datetime.date(2024, 1, 15)
        patient_repository.update.assert_called_once_with("patient-1", patient)

    def test_future_visit_rejected(self, patient_repository, patient):
        patient_repository.find_by_id.return_value = patient
        tomorrow = datetime_utils.local_today() + datetime.timedelta(days=1)

        with pytest.raises(InvalidLastVisitError):
            PatientDomainService.update_last_visit("patient-1", tomorrow, patient_repository)

        patient_repository.update.assert_not_called()


class TestValidatePatientData:
    """Tests for validate_patient_data."""

    def test_invalid_email_reported(self):
        result = PatientDomainService.validate_patient_data({"email": "not-an-email"})

        assert result.is_valid is False
        assert "email" in result.errors

    def test_valid(self):
        result = PatientDomainService.validate_patient_data(
            {"name": "Ana", "email": "ana@example.com"}
        )
        assert result.is_valid
