"""
Phone value object.

The canonical value is digits only (10 or 11 digits, area code included);
the formatted variant is a display view and is never stored.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from clinic_core.domain.exceptions import ValidationError

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class Phone:
    """Immutable phone number."""

    value: str

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValidationError(f"Invalid phone: {self.value}", errors={"phone": self.value})
        object.__setattr__(self, "value", self.normalize(self.value))

    @staticmethod
    def normalize(value: str) -> str:
        """Remove every non-digit character."""
        return _NON_DIGITS.sub("", value)

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        if not value or not isinstance(value, str):
            return False
        return 10 <= len(cls.normalize(value)) <= 11

    @classmethod
    def create(cls, value: Optional[str]) -> Optional["Phone"]:
        """Return a ``Phone`` or ``None`` for empty input."""
        if not value:
            return None
        return cls(value)

    def format(self) -> str:
        """Return ``(11) 99999-9999`` or ``(11) 9999-9999``."""
        digits = self.value
        if len(digits) == 11:
            return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"

    def __str__(self) -> str:
        return self.value
