"""
Payment type value object.

``FULL`` (wire value ``"100"``) means the whole appointment value is
received; ``PERCENTAGE`` means only a share of it is, and then the share is
required and must lie in [0, 100].
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from clinic_core.core.constants.appointment import PAYMENT_TYPE_FULL, PAYMENT_TYPE_PERCENTAGE
from clinic_core.domain.exceptions import ValidationError
from clinic_core.domain.value_objects.money import Money


class PaymentKind(str, Enum):
    """How the received value of an appointment is computed."""

    FULL = PAYMENT_TYPE_FULL
    PERCENTAGE = PAYMENT_TYPE_PERCENTAGE

    @classmethod
    def parse(cls, value: Any) -> "PaymentKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == "full":
            return cls.FULL
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid payment type: {value}", errors={"payment_type": value}
            ) from None


def _to_percentage(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class PaymentType:
    """Immutable payment rule of an appointment."""

    type: PaymentKind = PaymentKind.FULL
    percentage: Optional[float] = None

    def __post_init__(self) -> None:
        kind = PaymentKind.parse(self.type)
        percentage = None
        if kind is PaymentKind.PERCENTAGE:
            percentage = _to_percentage(self.percentage)
            if percentage is None or not 0 <= percentage <= 100:
                raise ValidationError(
                    "Percentage must be between 0 and 100",
                    errors={"payment_percentage": self.percentage},
                )
        object.__setattr__(self, "type", kind)
        object.__setattr__(self, "percentage", percentage)

    @classmethod
    def create(cls, type: Any = PaymentKind.FULL, percentage: Any = None) -> "PaymentType":
        return cls(type, percentage)

    @classmethod
    def full(cls) -> "PaymentType":
        return cls(PaymentKind.FULL)

    @property
    def is_full(self) -> bool:
        return self.type is PaymentKind.FULL

    @property
    def is_percentage(self) -> bool:
        return self.type is PaymentKind.PERCENTAGE

    def calculate_received_value(self, value: Money) -> Money:
        """Return the part of *value* that is actually received."""
        if self.is_percentage:
            return value.percentage(self.percentage)
        return value

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "percentage": self.percentage}
