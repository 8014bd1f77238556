"""
Appointment entity for managing clinic appointments.

Domain model of a single scheduled procedure for a patient, including its
price, payment rule and payment state.
"""

import datetime
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar

from clinic_core.core.config.settings import get_settings
from clinic_core.core.constants.appointment import (
    CANCELLATION_NOTICE_HOURS,
    DEFAULT_CURRENCY,
    DEFAULT_PAYMENT_TYPE,
    DEFAULT_STATUS,
    MAX_CLINICAL_EVOLUTION_LENGTH,
    MAX_NOTES_LENGTH,
)
from clinic_core.domain.entities.base_entity import BaseEntity
from clinic_core.domain.exceptions import (
    AppointmentCancellationError,
    BusinessRuleError,
    InvalidAppointmentDateError,
    InvalidAppointmentStateError,
    ValidationError,
)
from clinic_core.domain.utils import datetime_utils
from clinic_core.domain.value_objects import (
    AppointmentStatus,
    Money,
    PaymentType,
    Procedure,
    Time,
)

logger = logging.getLogger(__name__)

# Sentinel telling "argument not given" apart from an explicit None
_UNSET: Any = object()


def _parse_date(value: Any, field_name: str = "date") -> datetime.date:
    if value is None or value == "":
        raise InvalidAppointmentDateError(f"Invalid {field_name}: value is required", value)
    try:
        return datetime_utils.parse_local_date(value)
    except ValueError:
        raise InvalidAppointmentDateError(f"Invalid {field_name}: {value}", value) from None


# ---------------------------------------------------------------------------
# Domain entity
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class Appointment(BaseEntity):
    """Core domain model for a clinic appointment."""

    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "patient_id", "created_at"})

    # ------------------------------------------------------------------
    # Required attributes
    # ------------------------------------------------------------------

    id: str
    patient_id: str
    clinic_id: str | None
    date: datetime.date
    time: Time
    procedure: Procedure
    value: Money

    # ------------------------------------------------------------------
    # Optional / defaulted attributes
    # ------------------------------------------------------------------

    payment_type: PaymentType = field(default_factory=PaymentType.full)
    is_paid: bool = False
    payment_date: datetime.date | None = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    clinical_evolution: str | None = None
    notes: str | None = None

    created_at: datetime.datetime = field(default_factory=datetime_utils.now)
    updated_at: datetime.datetime = field(default_factory=datetime_utils.now)

    # ------------------------------------------------------------------
    # Validation & helpers
    # ------------------------------------------------------------------

    def __post_init__(self) -> None:
        """Coerce raw inputs into value objects and validate invariants."""
        # Raw primitives are accepted so that from_dict/update can pass
        # wire values straight through.
        self.__dict__["date"] = _parse_date(self.date)

        if not isinstance(self.time, Time):
            time = Time.create(self.time)
            if time is None:
                raise ValidationError("Time is required", errors={"time": self.time})
            self.__dict__["time"] = time

        if not isinstance(self.procedure, Procedure):
            self.__dict__["procedure"] = Procedure(self.procedure)

        if not isinstance(self.value, Money):
            self.__dict__["value"] = Money(self.value, DEFAULT_CURRENCY)

        if not isinstance(self.payment_type, PaymentType):
            self.__dict__["payment_type"] = PaymentType(self.payment_type)

        self.__dict__["is_paid"] = bool(self.is_paid)
        if self.payment_date is not None and self.payment_date != "":
            self.__dict__["payment_date"] = _parse_date(self.payment_date, "payment date")
        else:
            self.__dict__["payment_date"] = None

        self.__dict__["status"] = AppointmentStatus.create(self.status, self.is_paid)
        self.__dict__["created_at"] = datetime_utils.coerce_timestamp(self.created_at)
        self.__dict__["updated_at"] = datetime_utils.coerce_timestamp(self.updated_at)

        self.validate_invariants()

    def validate_invariants(self) -> None:
        """
        Check the invariants of the entity.

        Only format and consistency are checked here; contextual rules such
        as "not in the past" belong to AppointmentDomainService.
        """
        if not self.patient_id:
            raise BusinessRuleError("Patient is required")
        if self.is_paid and self.payment_date is None:
            raise BusinessRuleError("Payment date is required when the appointment is paid")
        if self.clinical_evolution and len(self.clinical_evolution) > MAX_CLINICAL_EVOLUTION_LENGTH:
            raise ValidationError(
                f"Clinical evolution is too long (max: {MAX_CLINICAL_EVOLUTION_LENGTH} characters)",
                errors={"clinical_evolution": len(self.clinical_evolution)},
            )
        if self.notes and len(self.notes) > MAX_NOTES_LENGTH:
            raise ValidationError(
                f"Notes are too long (max: {MAX_NOTES_LENGTH} characters)",
                errors={"notes": len(self.notes)},
            )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        patient_id: str,
        clinic_id: str | None,
        date: Any,
        time: str,
        procedure: str,
        value: Any,
        currency: str = DEFAULT_CURRENCY,
        payment_type: Any = DEFAULT_PAYMENT_TYPE,
        payment_percentage: Any = None,
        is_paid: bool = False,
        payment_date: Any = None,
        status: Any = DEFAULT_STATUS,
        clinical_evolution: str | None = None,
        notes: str | None = None,
        id: str | None = None,
        created_at: Any = None,
        updated_at: Any = None,
    ) -> "Appointment":
        """Build an appointment from primitive values, generating an id if needed."""
        return cls(
            id=id or str(uuid.uuid4()),
            patient_id=patient_id,
            clinic_id=clinic_id,
            date=date,
            time=time,
            procedure=procedure,
            value=Money(value, currency or DEFAULT_CURRENCY),
            payment_type=PaymentType(payment_type or DEFAULT_PAYMENT_TYPE, payment_percentage),
            is_paid=is_paid,
            payment_date=payment_date,
            status=status or DEFAULT_STATUS,
            clinical_evolution=clinical_evolution,
            notes=notes,
            created_at=created_at,
            updated_at=updated_at,
        )

    # ------------------------------------------------------------------
    # Business rules
    # ------------------------------------------------------------------

    def mark_as_paid(self, payment_date: Any = None) -> None:
        """
        Record the payment of the appointment.

        Args:
            payment_date: Date of the payment; local today when omitted

        Raises:
            InvalidAppointmentStateError: If already paid or cancelled
        """
        if self.is_paid:
            logger.warning(f"Rejected payment of appointment {self.id}: already paid")
            raise InvalidAppointmentStateError("Appointment is already paid", appointment_id=self.id)
        if self.status.is_cancelled:
            logger.warning(f"Rejected payment of appointment {self.id}: cancelled")
            raise InvalidAppointmentStateError(
                "Cannot mark appointment as paid",
                current_state=self.status.value,
                appointment_id=self.id,
            )

        paid_on = (
            _parse_date(payment_date, "payment date")
            if payment_date
            else datetime_utils.local_today()
        )
        self._commit(is_paid=True, payment_date=paid_on, status=AppointmentStatus.PAID)

    def calculate_received_value(self) -> Money:
        """Return the share of the value actually received."""
        return self.payment_type.calculate_received_value(self.value)

    @property
    def starts_at(self) -> datetime.datetime:
        """Naive local date-time at which the appointment begins."""
        return datetime.datetime.combine(self.date, self.time.to_time())

    def can_be_cancelled(self, now: datetime.datetime | None = None) -> bool:
        """
        Return whether the appointment starts at least 24 hours from *now*.

        Args:
            now: Reference time; local wall-clock time when omitted. Aware
                datetimes are converted to the local zone first.
        """
        reference = now or datetime_utils.local_now()
        if reference.tzinfo is not None:
            reference = reference.astimezone(get_settings().local_zone).replace(tzinfo=None)
        notice = self.starts_at - reference
        return notice >= datetime.timedelta(hours=CANCELLATION_NOTICE_HOURS)

    def cancel(self, now: datetime.datetime | None = None) -> None:
        """
        Cancel the appointment.

        Raises:
            InvalidAppointmentStateError: If already cancelled or paid
            AppointmentCancellationError: If it starts in less than 24 hours
        """
        if self.status in {AppointmentStatus.CANCELLED, AppointmentStatus.PAID}:
            raise InvalidAppointmentStateError(
                "Cannot cancel appointment",
                current_state=self.status.value,
                appointment_id=self.id,
            )
        if not self.can_be_cancelled(now):
            logger.warning(f"Rejected cancellation of appointment {self.id}: notice too short")
            raise AppointmentCancellationError(
                reason=f"less than {CANCELLATION_NOTICE_HOURS} hours notice"
            )
        self._commit(status=AppointmentStatus.CANCELLED)

    def update(
        self,
        *,
        clinic_id: Any = _UNSET,
        date: Any = _UNSET,
        time: Any = _UNSET,
        procedure: Any = _UNSET,
        value: Any = _UNSET,
        currency: Any = _UNSET,
        payment_type: Any = _UNSET,
        payment_percentage: Any = _UNSET,
        is_paid: Any = _UNSET,
        payment_date: Any = _UNSET,
        status: Any = _UNSET,
        clinical_evolution: Any = _UNSET,
        notes: Any = _UNSET,
    ) -> None:
        """
        Apply any subset of the mutable fields.

        ``value``/``currency`` re-derive the Money, ``payment_type``/
        ``payment_percentage`` re-derive the PaymentType (a ``None`` keeps
        the current component). All invariants are checked on the complete
        candidate before anything is applied.

        Status and payment follow the same transitions as ``mark_as_paid``
        and ``cancel``: a cancelled appointment keeps its status and cannot
        be paid, and a requested ``cancelled`` status needs 24 hours notice.

        Raises:
            InvalidAppointmentStateError: If the status or payment of a
                cancelled appointment is changed, or a paid one is cancelled
            AppointmentCancellationError: If cancelled with short notice
        """
        if self.status.is_cancelled and any(
            argument is not _UNSET for argument in (status, is_paid, payment_date)
        ):
            logger.warning(f"Rejected update of cancelled appointment {self.id}")
            raise InvalidAppointmentStateError(
                "Cannot change status or payment of appointment",
                current_state=self.status.value,
                appointment_id=self.id,
            )

        changes: dict[str, Any] = {}

        if clinic_id is not _UNSET:
            changes["clinic_id"] = clinic_id
        if date is not _UNSET:
            changes["date"] = _parse_date(date)
        if time is not _UNSET:
            changes["time"] = time
        if procedure is not _UNSET:
            changes["procedure"] = procedure

        if value is not _UNSET or currency is not _UNSET:
            changes["value"] = Money(
                self.value.amount if value is _UNSET or value is None else value,
                self.value.currency if currency is _UNSET or currency is None else currency,
            )

        if payment_type is not _UNSET or payment_percentage is not _UNSET:
            changes["payment_type"] = PaymentType(
                self.payment_type.type
                if payment_type is _UNSET or payment_type is None
                else payment_type,
                self.payment_type.percentage
                if payment_percentage is _UNSET or payment_percentage is None
                else payment_percentage,
            )

        next_is_paid = self.is_paid if is_paid is _UNSET else bool(is_paid)
        next_payment_date = self.payment_date if payment_date is _UNSET else payment_date
        next_status = self.status if status is _UNSET else status

        if is_paid is _UNSET and status is not _UNSET and str(status) == AppointmentStatus.PAID.value:
            next_is_paid = True
        if next_is_paid and not next_payment_date:
            next_payment_date = datetime_utils.local_today()
        if not next_is_paid and self.is_paid:
            # Corrective update: an un-paid appointment is pending again
            if payment_date is _UNSET:
                next_payment_date = None
            if status is _UNSET:
                next_status = AppointmentStatus.PENDING

        changes.update(
            is_paid=next_is_paid,
            payment_date=next_payment_date,
            status=AppointmentStatus.create(next_status, next_is_paid),
        )

        if clinical_evolution is not _UNSET:
            changes["clinical_evolution"] = clinical_evolution
        if notes is not _UNSET:
            changes["notes"] = notes

        candidate = self._candidate(**changes)

        if candidate.status.is_cancelled and not self.status.is_cancelled:
            if self.status.is_paid:
                raise InvalidAppointmentStateError(
                    "Cannot cancel appointment",
                    current_state=self.status.value,
                    appointment_id=self.id,
                )
            if not self.can_be_cancelled():
                logger.warning(f"Rejected cancellation of appointment {self.id}: notice too short")
                raise AppointmentCancellationError(
                    reason=f"less than {CANCELLATION_NOTICE_HOURS} hours notice"
                )

        self._adopt(candidate)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the appointment."""
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "clinic_id": self.clinic_id,
            "date": datetime_utils.format_local_date(self.date),
            "time": str(self.time),
            "procedure": str(self.procedure),
            "value": self.value.to_float(),
            "currency": self.value.currency,
            "payment_type": self.payment_type.type.value,
            "payment_percentage": self.payment_type.percentage,
            "is_paid": self.is_paid,
            "payment_date": (
                datetime_utils.format_local_date(self.payment_date) if self.payment_date else None
            ),
            "status": self.status.value,
            "clinical_evolution": self.clinical_evolution,
            "notes": self.notes,
            "created_at": datetime_utils.format_iso(self.created_at),
            "updated_at": datetime_utils.format_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Appointment":
        """Create an Appointment instance from its wire representation."""
        return cls.create(
            id=data.get("id"),
            patient_id=data.get("patient_id"),
            clinic_id=data.get("clinic_id"),
            date=data.get("date"),
            time=data.get("time"),
            procedure=data.get("procedure"),
            value=data.get("value"),
            currency=data.get("currency") or DEFAULT_CURRENCY,
            payment_type=data.get("payment_type"),
            payment_percentage=data.get("payment_percentage"),
            is_paid=bool(data.get("is_paid", False)),
            payment_date=data.get("payment_date"),
            status=data.get("status"),
            clinical_evolution=data.get("clinical_evolution"),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def __str__(self) -> str:
        return (
            f"Appointment<{self.id}> pid={self.patient_id} "
            f"{datetime_utils.format_local_date(self.date)} {self.time} status={self.status.value}"
        )
