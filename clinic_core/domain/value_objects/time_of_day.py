"""
Time-of-day value object.

Stored canonically as ``HH:mm``; ``HH:mm:ss`` is accepted on input and the
seconds are dropped.
"""

import datetime
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from clinic_core.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Time:
    """Immutable time of day of an appointment."""

    value: str

    TIME_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^([01][0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9])?$"
    )

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValidationError(f"Invalid time: {self.value}", errors={"time": self.value})
        object.__setattr__(self, "value", self.normalize(self.value))

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        if not value or not isinstance(value, str):
            return False
        return cls.TIME_PATTERN.match(value.strip()) is not None

    @staticmethod
    def normalize(value: str) -> str:
        """Trim and drop the seconds component."""
        return value.strip()[:5]

    @classmethod
    def create(cls, value: Optional[str]) -> Optional["Time"]:
        """Return a ``Time`` or ``None`` for empty input."""
        if not value:
            return None
        return cls(value)

    @property
    def hours(self) -> int:
        return int(self.value[:2])

    @property
    def minutes(self) -> int:
        return int(self.value[3:5])

    def to_time(self) -> datetime.time:
        return datetime.time(self.hours, self.minutes)

    def is_before(self, other: "Time") -> bool:
        return (self.hours, self.minutes) < (other.hours, other.minutes)

    def is_after(self, other: "Time") -> bool:
        return (self.hours, self.minutes) > (other.hours, other.minutes)

    def __str__(self) -> str:
        return self.value
