"""Result object returned by the non-throwing validators."""

from pydantic import BaseModel, ConfigDict, Field

from clinic_core.domain.exceptions import ValidationError


class ValidationResult(BaseModel):
    """Outcome of a validation pass: a flag plus one message per failing field."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool = True
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=dict(errors))

    def raise_if_invalid(self, message: str = "Validation failed") -> "ValidationResult":
        """Raise ``ValidationError`` carrying the error map when invalid."""
        if not self.is_valid:
            raise ValidationError(message, errors=dict(self.errors))
        return self
