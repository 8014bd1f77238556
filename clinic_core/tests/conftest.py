"""
Shared fixtures for the clinic_core test suite.
"""

import datetime
from unittest.mock import MagicMock

import pytest

from clinic_core.core.config.settings import get_settings
from clinic_core.domain.entities import Appointment, Patient
from clinic_core.domain.repositories import PatientRepository
from clinic_core.domain.utils import datetime_utils


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def future_date() -> datetime.date:
    """A calendar date safely outside the cancellation window."""
    return datetime_utils.local_today() + datetime.timedelta(days=30)


@pytest.fixture
def appointment_json() -> dict:
    """A canonical stored appointment record."""
    return {
        "id": "a1b2c3d4-0000-4000-8000-000000000001",
        "patient_id": "patient-1",
        "clinic_id": "clinic-1",
        "date": "2024-01-15",
        "time": "14:30",
        "procedure": "Root canal",
        "value": 1000.0,
        "currency": "BRL",
        "payment_type": "percentage",
        "payment_percentage": 40.0,
        "is_paid": False,
        "payment_date": None,
        "status": "scheduled",
        "clinical_evolution": None,
        "notes": "Bring previous x-rays",
        "created_at": "2024-01-10T12:00:00.000Z",
        "updated_at": "2024-01-11T08:15:30.250Z",
    }


@pytest.fixture
def scheduled_appointment(future_date) -> Appointment:
    """An unpaid appointment 30 days from today."""
    return Appointment.create(
        patient_id="patient-1",
        clinic_id="clinic-1",
        date=future_date,
        time="10:00",
        procedure="Cleaning",
        value=200,
        updated_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def patient() -> Patient:
    return Patient.create(
        id="patient-1",
        name="ana souza",
        user_id="user-1",
        email="ana@example.com",
        phone="(11) 99999-9999",
    )


@pytest.fixture
def patient_repository() -> MagicMock:
    """Repository double; create/update echo the patient back."""
    repository = MagicMock(spec=PatientRepository)
    repository.find_by_id.return_value = None
    repository.find_by_name_or_email.return_value = None
    repository.create.side_effect = lambda patient: patient
    repository.update.side_effect = lambda patient_id, patient: patient
    return repository
