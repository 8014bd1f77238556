from dataclasses import dataclass
from typing import Any, Optional

from clinic_core.core.constants.patient import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from clinic_core.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Name:
    """Represents a person's or a clinic's name as a value object."""

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValidationError(f"Invalid name: {self.value}", errors={"name": self.value})
        object.__setattr__(self, "value", self.normalize(self.value))

    @staticmethod
    def is_valid(value: Any) -> bool:
        if not value or not isinstance(value, str):
            return False
        return MIN_NAME_LENGTH <= len(value.strip()) <= MAX_NAME_LENGTH

    @staticmethod
    def normalize(value: str) -> str:
        """Collapse whitespace and capitalize the first letter of each word."""
        return " ".join(word[:1].upper() + word[1:].lower() for word in value.split())

    @classmethod
    def create(cls, value: Optional[str]) -> Optional["Name"]:
        """Return a ``Name`` or ``None`` for empty input."""
        if not value:
            return None
        return cls(value)

    @property
    def first_name(self) -> str:
        return self.value.split(" ")[0]

    @property
    def last_name(self) -> str:
        parts = self.value.split(" ")
        return parts[-1] if len(parts) > 1 else ""

    def get_initials(self) -> str:
        """Return the initials."""
        return "".join(part[0] for part in self.value.split(" "))

    def __str__(self) -> str:
        """Return a string representation of the name."""
        return self.value
