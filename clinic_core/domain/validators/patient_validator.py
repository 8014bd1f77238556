"""Patient form validation."""

from typing import Any

from clinic_core.core.constants.patient import MAX_EMAIL_LENGTH
from clinic_core.domain.exceptions import ValidationError
from clinic_core.domain.validators.validation_result import ValidationResult
from clinic_core.domain.value_objects import Email, Name, Phone


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class PatientValidator:
    """Non-throwing validator for patient input."""

    @classmethod
    def validate(cls, data: dict[str, Any], throw_on_error: bool = False) -> ValidationResult:
        """
        Validate name, e-mail and phone of *data*.

        Raises:
            ValidationError: If invalid and *throw_on_error* is set
        """
        errors: dict[str, str] = {}

        if not _has_text(data.get("name")):
            errors["name"] = "Name is required"
        else:
            try:
                Name(data["name"])
            except ValidationError as error:
                errors["name"] = error.message

        email = data.get("email")
        if _has_text(email):
            if len(email) > MAX_EMAIL_LENGTH:
                errors["email"] = f"Email is too long (max: {MAX_EMAIL_LENGTH} characters)"
            else:
                try:
                    Email(email)
                except ValidationError as error:
                    errors["email"] = error.message

        if _has_text(data.get("phone")):
            try:
                Phone(data["phone"])
            except ValidationError as error:
                errors["phone"] = error.message

        result = ValidationResult.from_errors(errors)
        if throw_on_error:
            result.raise_if_invalid("Invalid patient data")
        return result

    @classmethod
    def validate_essential(cls, data: dict[str, Any]) -> ValidationResult:
        errors = {} if _has_text(data.get("name")) else {"name": "Name is required"}
        return ValidationResult.from_errors(errors)
