"""
Exception classes for patient- and clinic-related domain operations.

These exceptions represent domain-specific error conditions and are independent
of any infrastructure or application framework.
"""

from typing import Any

from clinic_core.domain.exceptions.base_exceptions import BusinessRuleError


class PatientError(BusinessRuleError):
    """Base exception class for all patient-related errors."""

    def __init__(
        self,
        message: str = "An error occurred with patient operation",
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, *args, **kwargs)


class PatientDataIntegrityError(PatientError):
    """Exception raised when a stored patient record is missing identity fields."""

    def __init__(self, field: str, record: dict[str, Any] | None = None) -> None:
        """
        Initialize a PatientDataIntegrityError exception.

        Args:
            field: Name of the missing or blank field
            record: Identifying subset of the offending record (no contact data)
        """
        self.field = field
        message = f"Patient record is missing required field '{field}'"
        super().__init__(message, details=record)


class PatientResolutionError(PatientError):
    """Exception raised when a patient can neither be found nor created."""

    def __init__(self, message: str = "Could not resolve patient") -> None:
        super().__init__(message)


class InvalidLastVisitError(PatientError):
    """Exception raised when a last-visit date lies in the future."""

    def __init__(self, message: str = "Last visit date cannot be in the future") -> None:
        super().__init__(message)


class ClinicError(BusinessRuleError):
    """Exception raised when a clinic invariant is violated."""

    def __init__(self, message: str = "Clinic operation failed") -> None:
        super().__init__(message)
