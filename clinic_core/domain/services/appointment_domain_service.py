"""
Appointment Domain Service

Business rules that act on loosely-typed appointment input (form data,
imported rows) rather than on an Appointment entity: status derivation,
received-value computation, normalization and contextual date checks.
"""

import math
import re
from typing import Any

from clinic_core.core.constants.appointment import (
    DEFAULT_CURRENCY,
    DEFAULT_PAYMENT_TYPE,
    DEFAULT_STATUS,
    PAYMENT_TYPE_FULL,
    PAYMENT_TYPE_PERCENTAGE,
)
from clinic_core.core.utils.logging import get_logger
from clinic_core.domain.utils import datetime_utils
from clinic_core.domain.validators.validation_result import ValidationResult
from clinic_core.domain.value_objects import AppointmentStatus

logger = get_logger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> float | None:
    """
    Read the leading number of *value*, the way form inputs are read.

    ``"12.5abc"`` gives ``12.5``; anything without a leading number (including
    booleans and None) gives None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return None
        number = float(match.group(1))
    return None if math.isnan(number) else number


def _clean_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


class AppointmentDomainService:
    """
    Stateless rules over raw appointment data.

    All methods are static; the service holds no state and performs no I/O.
    """

    @staticmethod
    def determine_status(data: dict[str, Any]) -> str:
        """
        Derive the status to store for *data*.

        Order matters: payment wins over everything, an unpaid ``scheduled``
        appointment is presented as ``pending``, any other supplied status is
        kept, and ``scheduled`` is the default.

        Args:
            data: Raw appointment data with optional ``is_paid``/``status``

        Returns:
            The status wire value
        """
        if data.get("is_paid"):
            return AppointmentStatus.PAID.value

        status = data.get("status")
        if status == AppointmentStatus.SCHEDULED.value:
            return AppointmentStatus.PENDING.value

        return status or DEFAULT_STATUS

    @staticmethod
    def calculate_received_value(data: dict[str, Any]) -> float:
        """
        Compute the amount actually received for *data*.

        A ``percentage`` payment without a percentage yields 0 rather than an
        error, as does any unknown payment type.

        Args:
            data: Raw appointment data with ``value``, ``payment_type`` and
                ``payment_percentage``

        Returns:
            The received amount (0 when nothing is received)
        """
        if not data.get("value"):
            return 0

        value = parse_number(data["value"])
        if value is None:
            return 0

        payment_type = data.get("payment_type")
        if payment_type == PAYMENT_TYPE_FULL:
            return value

        if payment_type == PAYMENT_TYPE_PERCENTAGE and data.get("payment_percentage"):
            percentage = parse_number(data["payment_percentage"])
            if percentage is None:
                return 0
            return value * percentage / 100

        logger.debug(f"No received value for payment type {payment_type!r}")
        return 0

    @classmethod
    def normalize_appointment_data(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Build the canonical record used to construct or update an appointment.

        Args:
            data: Raw appointment data

        Returns:
            A dict with every appointment field present and coerced
        """
        is_paid = bool(data.get("is_paid"))
        percentage = data.get("payment_percentage")

        return {
            "clinic_id": data.get("clinic_id") or None,
            "patient_id": data.get("patient_id") or "",
            "date": data.get("date") or "",
            "time": data.get("time") or "",
            "procedure": data.get("procedure") or "",
            "value": parse_number(data.get("value")) or 0,
            "currency": data.get("currency") or DEFAULT_CURRENCY,
            "payment_type": data.get("payment_type") or DEFAULT_PAYMENT_TYPE,
            "payment_percentage": parse_number(percentage) if percentage else None,
            "is_paid": is_paid,
            "payment_date": data.get("payment_date") if is_paid and data.get("payment_date") else None,
            "status": cls.determine_status(data),
            "clinical_evolution": _clean_text(data.get("clinical_evolution")),
            "notes": _clean_text(data.get("notes")),
        }

    @staticmethod
    def validate_appointment_data(data: dict[str, Any]) -> ValidationResult:
        """
        Check presence and numeric ranges of raw appointment data.

        Args:
            data: Raw appointment data; ``patient_name`` may stand in for
                ``patient_id``

        Returns:
            ValidationResult keyed by ``patient``, ``date``, ``time``,
            ``procedure``, ``value`` and ``payment_percentage``
        """
        errors: dict[str, str] = {}

        if not data.get("patient_id") and not data.get("patient_name"):
            errors["patient"] = "Patient is required"

        if not data.get("date"):
            errors["date"] = "Date is required"

        if not data.get("time"):
            errors["time"] = "Time is required"

        procedure = data.get("procedure")
        if not isinstance(procedure, str) or not procedure.strip():
            errors["procedure"] = "Procedure is required"

        if data.get("value") is not None:
            value = parse_number(data["value"])
            if value is None or value < 0:
                errors["value"] = "Value must be a positive number"

        if data.get("payment_type") == PAYMENT_TYPE_PERCENTAGE:
            if not data.get("payment_percentage"):
                errors["payment_percentage"] = (
                    'Percentage is required when payment type is "percentage"'
                )
            else:
                percentage = parse_number(data["payment_percentage"])
                if percentage is None or not 0 <= percentage <= 100:
                    errors["payment_percentage"] = "Percentage must be between 0 and 100"

        return ValidationResult.from_errors(errors)

    @staticmethod
    def can_create_appointment(date: Any, allow_past_dates: bool = False) -> bool:
        """
        Check whether an appointment may be booked on *date*.

        Dates before local today are rejected unless *allow_past_dates* is set
        (historical imports), in which case the date is not inspected at all;
        the entity still rejects a date that is not a real calendar date. The
        comparison is by calendar day.

        Args:
            date: Date, datetime or date string
            allow_past_dates: Accept dates in the past

        Returns:
            True if the appointment can be created
        """
        if allow_past_dates:
            return True

        try:
            appointment_date = datetime_utils.parse_local_date(date)
        except ValueError:
            logger.info(f"Rejected appointment date {date!r}: not a calendar date")
            return False

        return appointment_date >= datetime_utils.local_today()
