"""Email value object."""

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from clinic_core.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Email:
    """Immutable, lower-cased e-mail address."""

    value: str

    EMAIL_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValidationError(f"Invalid email: {self.value}", errors={"email": self.value})
        object.__setattr__(self, "value", self.value.strip().lower())

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        if not value or not isinstance(value, str):
            return False
        return cls.EMAIL_PATTERN.match(value.strip()) is not None

    @classmethod
    def create(cls, value: Optional[str]) -> Optional["Email"]:
        """Return an ``Email`` or ``None`` for empty input."""
        if not value:
            return None
        return cls(value)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    def __str__(self) -> str:
        return self.value
