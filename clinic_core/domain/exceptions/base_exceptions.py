"""
Base exception classes for the domain.

Two failure channels are defined here and extended by the aggregate-specific
modules:

* ``ValidationError`` - a primitive is malformed (bad e-mail, phone, time,
  money, procedure or payment-type shape).
* ``BusinessRuleError`` - the shapes are valid but a business rule is
  violated (mismatched-currency arithmetic, double payment, late
  cancellation, missing identity on deserialize).
"""

from typing import Any


class BaseApplicationError(Exception):
    """Base class for all application exceptions."""

    code = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str = "An application error occurred",
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return a serializable representation of the error."""
        return {
            "name": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(BaseApplicationError):
    """Error raised when a value fails shape/format validation."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        errors: dict[str, Any] | None = None,
    ) -> None:
        self.errors = dict(errors or {})
        super().__init__(message, details=self.errors)


class BusinessRuleError(BaseApplicationError):
    """Error raised when a business rule is violated."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str = "Business rule violated", details: Any = None) -> None:
        super().__init__(message, details=details)


class CurrencyMismatchError(BusinessRuleError):
    """Raised when money in different currencies is combined or compared."""

    def __init__(
        self,
        operation: str = "combine",
        left: str | None = None,
        right: str | None = None,
    ) -> None:
        message = f"Cannot {operation} amounts in different currencies"
        if left and right:
            message = f"{message}: {left} and {right}"
        super().__init__(message, details={"left": left, "right": right})
        self.operation = operation
