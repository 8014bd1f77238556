"""Procedure value object."""

from dataclasses import dataclass

from clinic_core.core.constants.appointment import MAX_PROCEDURE_LENGTH
from clinic_core.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Procedure:
    """The clinical procedure performed in an appointment."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("Procedure is required", errors={"procedure": self.value})
        trimmed = self.value.strip()
        if len(trimmed) > MAX_PROCEDURE_LENGTH:
            raise ValidationError(
                f"Procedure must be at most {MAX_PROCEDURE_LENGTH} characters",
                errors={"procedure": self.value},
            )
        object.__setattr__(self, "value", trimmed)

    @classmethod
    def create(cls, value: str) -> "Procedure":
        return cls(value)

    def __str__(self) -> str:
        return self.value
