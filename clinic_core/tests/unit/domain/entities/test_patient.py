"""
Unit tests for the Patient entity.
"""

import datetime

import pytest

from clinic_core.domain.entities import Patient
from clinic_core.domain.exceptions import (
    InvalidLastVisitError,
    PatientDataIntegrityError,
    PatientError,
    ValidationError,
)
from clinic_core.domain.utils import datetime_utils


@pytest.fixture
def patient_json() -> dict:
    return {
        "id": "patient-1",
        "name": "Ana Souza",
        "email": "ana@example.com",
        "phone": "11999999999",
        "user_id": "user-1",
        "last_visit": "2024-01-15",
        "created_at": "2024-01-10T12:00:00.000Z",
        "updated_at": "2024-01-11T12:00:00.000Z",
    }


class TestPatient:
    """Tests for Patient."""

    def test_create_normalizes_values(self, patient):
        assert str(patient.name) == "Ana Souza"
        assert str(patient.phone) == "11999999999"
        assert patient.last_visit is None

    def test_missing_user_rejected(self):
        with pytest.raises(PatientError):
            Patient.create(name="Ana Souza", user_id="")

    def test_round_trip(self, patient_json):
        assert Patient.from_dict(patient_json).to_dict() == patient_json

    @pytest.mark.parametrize("user_id", [None, "", "   ", 123])
    def test_from_dict_requires_user_id(self, patient_json, user_id):
        patient_json["user_id"] = user_id

        with pytest.raises(PatientDataIntegrityError) as exc_info:
            Patient.from_dict(patient_json)

        assert exc_info.value.field == "user_id"

    def test_user_id_is_immutable(self, patient):
        with pytest.raises(AttributeError):
            patient.user_id = "user-2"

    def test_update_contact_data(self, patient):
        patient.update_email("Ana.New@Example.com")
        patient.update_phone(None)

        assert str(patient.email) == "ana.new@example.com"
        assert patient.phone is None

    def test_invalid_email_update_keeps_previous(self, patient):
        with pytest.raises(ValidationError):
            patient.update_email("not-an-email")

        assert str(patient.email) == "ana@example.com"

    def test_update_name(self, patient):
        patient.update_name("ana maria souza")
        assert str(patient.name) == "Ana Maria Souza"

    def test_update_last_visit(self, patient):
        patient.update_last_visit("2024-01-15")
        assert patient.last_visit == datetime.date(2024, 1, 15)

    def test_last_visit_today_allowed(self, patient):
        patient.update_last_visit(datetime_utils.local_today())
        assert patient.last_visit == datetime_utils.local_today()

    def test_future_last_visit_rejected(self, patient):
        tomorrow = datetime_utils.local_today() + datetime.timedelta(days=1)

        with pytest.raises(InvalidLastVisitError):
            patient.update_last_visit(tomorrow)

        assert patient.last_visit is None
