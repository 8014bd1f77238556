"""Clinic form validation."""

import re
from typing import Any

from clinic_core.core.constants.clinic import CLINIC_STATUSES, MAX_PHONE_LENGTH
from clinic_core.domain.validators.validation_result import ValidationResult
from clinic_core.domain.value_objects import Email


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ClinicValidator:
    """Non-throwing validator for clinic input."""

    @classmethod
    def validate(cls, data: dict[str, Any], throw_on_error: bool = False) -> ValidationResult:
        """
        Validate name, e-mail, phone and status of *data*.

        The phone must hold 10 or 11 digits and, as typed, fit in 15
        characters.

        Raises:
            ValidationError: If invalid and *throw_on_error* is set
        """
        errors: dict[str, str] = {}

        if not _has_text(data.get("name")):
            errors["name"] = "Name is required"

        email = data.get("email")
        if _has_text(email) and not Email.is_valid(email):
            errors["email"] = "Invalid email"

        phone = data.get("phone")
        if _has_text(phone):
            digits = re.sub(r"\D", "", phone)
            if not 10 <= len(digits) <= 11:
                errors["phone"] = "Invalid phone (must have 10 or 11 digits)"
            elif len(phone) > MAX_PHONE_LENGTH:
                errors["phone"] = f"Phone is too long (max: {MAX_PHONE_LENGTH} characters)"

        status = data.get("status")
        if status and status not in CLINIC_STATUSES:
            errors["status"] = 'Invalid status (must be "active" or "inactive")'

        result = ValidationResult.from_errors(errors)
        if throw_on_error:
            result.raise_if_invalid("Invalid clinic data")
        return result

    @classmethod
    def validate_essential(cls, data: dict[str, Any]) -> ValidationResult:
        errors = {} if _has_text(data.get("name")) else {"name": "Name is required"}
        return ValidationResult.from_errors(errors)
