"""
Money value object.

An amount is a non-negative decimal with two fraction digits in one of the
supported currencies. Arithmetic between amounts requires matching
currencies; the rounding rule (half-up to cents) is applied on every
construction so a percentage of a value never drifts from the same value
typed in directly.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, ClassVar

from clinic_core.core.config.settings import get_settings
from clinic_core.core.constants.appointment import DEFAULT_CURRENCY, SUPPORTED_CURRENCIES
from clinic_core.domain.exceptions import (
    BusinessRuleError,
    CurrencyMismatchError,
    ValidationError,
)

CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round *value* half-up to two decimal places."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    return result if result.is_finite() else None


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    ``amount`` is a ``Decimal`` quantized to cents. Python compares ``Decimal``
    and ``float`` exactly, so ``Money.create(19.99).amount == 19.99`` is
    False; compare against ``Decimal("19.99")`` or use :meth:`to_float`.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    # Separators and symbol placement per display locale
    _LOCALE_FORMATS: ClassVar[dict[str, tuple[str, str, bool]]] = {
        # locale: (thousands separator, decimal separator, space after symbol)
        "pt-BR": (".", ",", True),
        "es-ES": (".", ",", True),
        "de-DE": (".", ",", True),
        "en-US": (",", ".", False),
        "en-GB": (",", ".", False),
    }
    _SYMBOLS: ClassVar[dict[str, str]] = {"BRL": "R$", "USD": "US$", "EUR": "€"}

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if amount is None or amount < 0:
            raise ValidationError(
                "Amount must be a non-negative number", errors={"amount": self.amount}
            )
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(
                f"Unsupported currency: {self.currency}", errors={"currency": self.currency}
            )
        object.__setattr__(self, "amount", round_money(amount))

    @classmethod
    def create(cls, amount: Any, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Factory method mirroring the constructor."""
        return cls(amount, currency)

    def _require_same_currency(self, other: "Money", operation: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(operation, self.currency, other.currency)

    def add(self, other: "Money") -> "Money":
        """Return the sum of two amounts in the same currency."""
        self._require_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """
        Return the difference of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If the currencies differ
            BusinessRuleError: If the result would be negative
        """
        self._require_same_currency(other, "subtract")
        result = self.amount - other.amount
        if result < 0:
            raise BusinessRuleError("Subtraction result cannot be negative")
        return Money(result, self.currency)

    def multiply(self, factor: int | float | Decimal) -> "Money":
        """Return the amount scaled by a non-negative *factor*."""
        decimal_factor = _to_decimal(factor)
        if decimal_factor is None:
            raise ValidationError("Factor must be a number", errors={"factor": factor})
        if decimal_factor < 0:
            raise BusinessRuleError("Factor must be non-negative")
        return Money(self.amount * decimal_factor, self.currency)

    def percentage(self, percent: int | float | Decimal) -> "Money":
        """Return *percent* % of the amount, rounded to cents."""
        decimal_percent = _to_decimal(percent)
        if decimal_percent is None:
            raise ValidationError("Percentage must be a number", errors={"percentage": percent})
        return Money(self.amount * decimal_percent / 100, self.currency)

    def is_greater_than(self, other: "Money") -> bool:
        self._require_same_currency(other, "compare")
        return self.amount > other.amount

    def is_less_than(self, other: "Money") -> bool:
        self._require_same_currency(other, "compare")
        return self.amount < other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def format(self, locale: str | None = None) -> str:
        """
        Format the amount for display, e.g. ``R$ 1.234,50`` for pt-BR.

        Display only; the stored amount is never derived from this string.
        """
        locale = locale or get_settings().DEFAULT_LOCALE
        thousands, decimal_sep, spaced = self._LOCALE_FORMATS.get(
            locale, self._LOCALE_FORMATS["en-US"]
        )
        # Build with placeholders so the two separators can be swapped safely
        number = f"{self.amount:,.2f}".replace(",", "X").replace(".", decimal_sep)
        number = number.replace("X", thousands)
        symbol = self._SYMBOLS[self.currency]
        return f"{symbol} {number}" if spaced else f"{symbol}{number}"

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def to_float(self) -> float:
        """Return the amount as a float, e.g. for JSON records."""
        return float(self.amount)

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.to_float(), "currency": self.currency}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Money":
        return cls(data["amount"], data.get("currency") or DEFAULT_CURRENCY)
