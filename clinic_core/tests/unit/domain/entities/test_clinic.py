"""
Unit tests for the Clinic entity.
"""

import pytest

from clinic_core.domain.entities import Clinic, ClinicStatus
from clinic_core.domain.exceptions import ClinicError, ValidationError


@pytest.fixture
def clinic_json() -> dict:
    return {
        "id": "clinic-1",
        "name": "Sorriso Centro",
        "address": "Rua A, 100",
        "email": "contato@sorriso.com",
        "phone": "1133334444",
        "status": "active",
        "created_at": "2024-01-10T12:00:00.000Z",
    }


class TestClinic:
    """Tests for Clinic."""

    def test_round_trip_omits_updated_at(self, clinic_json):
        clinic = Clinic.from_dict(clinic_json)

        assert clinic.to_dict() == clinic_json
        assert "updated_at" not in clinic.to_dict()

    def test_updated_at_falls_back_to_created_at(self, clinic_json):
        clinic = Clinic.from_dict(clinic_json)
        assert clinic.updated_at == clinic.created_at

    def test_default_status_is_active(self):
        clinic = Clinic.create(name="Sorriso Centro")

        assert clinic.status is ClinicStatus.ACTIVE
        assert clinic.is_active

    def test_invalid_status_rejected(self, clinic_json):
        clinic_json["status"] = "archived"

        with pytest.raises(ClinicError):
            Clinic.from_dict(clinic_json)

    def test_activate_and_deactivate(self, clinic_json):
        clinic = Clinic.from_dict(clinic_json)
        before = clinic.updated_at

        clinic.deactivate()
        assert clinic.status is ClinicStatus.INACTIVE
        assert clinic.updated_at > before

        clinic.activate()
        assert clinic.is_active

    def test_updates(self, clinic_json):
        clinic = Clinic.from_dict(clinic_json)

        clinic.update_name("sorriso norte")
        clinic.update_address("")
        clinic.update_phone("(11) 98888-7777")

        assert str(clinic.name) == "Sorriso Norte"
        assert clinic.address is None
        assert str(clinic.phone) == "11988887777"

    def test_invalid_email_rejected(self, clinic_json):
        clinic = Clinic.from_dict(clinic_json)

        with pytest.raises(ValidationError):
            clinic.update_email("nope")
