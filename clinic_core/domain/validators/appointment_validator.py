"""
Appointment form validation.

Reuses the value objects' own checks but collects their failures per field
instead of letting them propagate.
"""

from typing import Any

from clinic_core.core.constants.appointment import (
    DEFAULT_CURRENCY,
    MAX_CLINICAL_EVOLUTION_LENGTH,
    MAX_NOTES_LENGTH,
)
from clinic_core.domain.exceptions import BusinessRuleError, ValidationError
from clinic_core.domain.utils import datetime_utils
from clinic_core.domain.validators.validation_result import ValidationResult
from clinic_core.domain.value_objects import Money, PaymentType, Procedure, Time


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


class AppointmentValidator:
    """Non-throwing validator for appointment input."""

    @classmethod
    def validate(
        cls,
        data: dict[str, Any],
        allow_past_dates: bool = False,
        throw_on_error: bool = False,
    ) -> ValidationResult:
        """
        Validate every field of *data*.

        Args:
            data: Raw appointment data
            allow_past_dates: Accept dates before local today
            throw_on_error: Raise instead of returning an invalid result

        Returns:
            ValidationResult with one message per failing field

        Raises:
            ValidationError: If invalid and *throw_on_error* is set
        """
        errors: dict[str, str] = {}

        if not data.get("patient_id") and not data.get("patient_name"):
            errors["patient"] = "Patient is required"

        date = data.get("date")
        if not date:
            errors["date"] = "Date is required"
        else:
            try:
                appointment_date = datetime_utils.parse_local_date(date)
            except ValueError:
                errors["date"] = "Invalid date"
            else:
                if not allow_past_dates and appointment_date < datetime_utils.local_today():
                    errors["date"] = "Date cannot be in the past for new appointments"

        if not data.get("time"):
            errors["time"] = "Time is required"
        else:
            try:
                Time(data["time"])
            except ValidationError as error:
                errors["time"] = error.message

        if _is_blank(data.get("procedure")):
            errors["procedure"] = "Procedure is required"
        else:
            try:
                Procedure(data["procedure"])
            except ValidationError as error:
                errors["procedure"] = error.message

        if data.get("value") is not None:
            try:
                Money(data["value"], data.get("currency") or DEFAULT_CURRENCY)
            except (ValidationError, BusinessRuleError) as error:
                errors["value"] = error.message

        if data.get("payment_type"):
            try:
                PaymentType(data["payment_type"], data.get("payment_percentage"))
            except ValidationError as error:
                errors["payment_type"] = error.message

        evolution = data.get("clinical_evolution")
        if evolution is not None and not isinstance(evolution, str):
            errors["clinical_evolution"] = "Clinical evolution must be text"
        elif evolution and len(evolution) > MAX_CLINICAL_EVOLUTION_LENGTH:
            errors["clinical_evolution"] = (
                f"Clinical evolution is too long (max: {MAX_CLINICAL_EVOLUTION_LENGTH} characters)"
            )

        notes = data.get("notes")
        if notes is not None and not isinstance(notes, str):
            errors["notes"] = "Notes must be text"
        elif notes and len(notes) > MAX_NOTES_LENGTH:
            errors["notes"] = f"Notes are too long (max: {MAX_NOTES_LENGTH} characters)"

        result = ValidationResult.from_errors(errors)
        if throw_on_error:
            result.raise_if_invalid("Invalid appointment data")
        return result

    @classmethod
    def validate_essential(cls, data: dict[str, Any]) -> ValidationResult:
        """Check presence of patient, date, time and procedure only."""
        errors: dict[str, str] = {}

        if not data.get("patient_id") and not data.get("patient_name"):
            errors["patient"] = "Patient is required"
        if not data.get("date"):
            errors["date"] = "Date is required"
        if not data.get("time"):
            errors["time"] = "Time is required"
        if _is_blank(data.get("procedure")):
            errors["procedure"] = "Procedure is required"

        return ValidationResult.from_errors(errors)
