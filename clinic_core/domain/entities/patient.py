"""Domain entity representing a patient.

A patient always belongs to exactly one user (the owning tenant), which is
why ``user_id`` is fixed at construction and checked again whenever a stored
record is loaded.
"""

from __future__ import annotations

import datetime
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar

from clinic_core.domain.entities.base_entity import BaseEntity
from clinic_core.domain.exceptions import (
    InvalidLastVisitError,
    PatientDataIntegrityError,
    PatientError,
)
from clinic_core.domain.utils import datetime_utils
from clinic_core.domain.value_objects import Email, Name, Phone

logger = logging.getLogger(__name__)


def _coerce_last_visit(value: Any) -> datetime.date | None:
    if value is None or value == "":
        return None
    try:
        last_visit = datetime_utils.parse_local_date(value)
    except ValueError:
        raise PatientError(f"Invalid last visit date: {value}") from None
    if last_visit > datetime_utils.local_today():
        raise InvalidLastVisitError()
    return last_visit


@dataclass(eq=False)
class Patient(BaseEntity):
    """Core domain model for a patient."""

    IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id", "user_id", "created_at"})

    id: str
    name: Name
    user_id: str
    email: Email | None = None
    phone: Phone | None = None
    last_visit: datetime.date | None = None
    created_at: datetime.datetime = field(default_factory=datetime_utils.now)
    updated_at: datetime.datetime = field(default_factory=datetime_utils.now)

    def __post_init__(self) -> None:
        if self.name is not None and not isinstance(self.name, Name):
            self.__dict__["name"] = Name.create(self.name)
        if not isinstance(self.email, Email):
            self.__dict__["email"] = Email.create(self.email or None)
        if not isinstance(self.phone, Phone):
            self.__dict__["phone"] = Phone.create(self.phone or None)
        self.__dict__["last_visit"] = _coerce_last_visit(self.last_visit)
        self.__dict__["created_at"] = datetime_utils.coerce_timestamp(self.created_at)
        self.__dict__["updated_at"] = datetime_utils.coerce_timestamp(self.updated_at)

        self.validate_invariants()

    def validate_invariants(self) -> None:
        if not self.name:
            raise PatientError("Name is required")
        if not self.user_id:
            raise PatientError("User is required")
        if self.last_visit and self.last_visit > datetime_utils.local_today():
            raise InvalidLastVisitError()

    @classmethod
    def create(
        cls,
        name: str,
        user_id: str,
        email: str | None = None,
        phone: str | None = None,
        last_visit: Any = None,
        id: str | None = None,
        created_at: Any = None,
        updated_at: Any = None,
    ) -> Patient:
        """Build a new patient, generating an id if needed."""
        return cls(
            id=id or str(uuid.uuid4()),
            name=name,
            user_id=user_id,
            email=email,
            phone=phone,
            last_visit=last_visit,
            created_at=created_at,
            updated_at=updated_at,
        )

    # Mutators

    def update_name(self, name: str) -> None:
        self._commit(name=Name(name))

    def update_email(self, email: str | None) -> None:
        self._commit(email=Email.create(email or None))

    def update_phone(self, phone: str | None) -> None:
        self._commit(phone=Phone.create(phone or None))

    def update_last_visit(self, visit_date: Any) -> None:
        """
        Record the date of the latest visit.

        Raises:
            InvalidLastVisitError: If the date lies after local today
        """
        self._commit(last_visit=_coerce_last_visit(visit_date))

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": str(self.name),
            "email": str(self.email) if self.email else None,
            "phone": str(self.phone) if self.phone else None,
            "user_id": self.user_id,
            "last_visit": (
                datetime_utils.format_local_date(self.last_visit) if self.last_visit else None
            ),
            "created_at": datetime_utils.format_iso(self.created_at),
            "updated_at": datetime_utils.format_iso(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Patient:
        """
        Load a patient from a stored record.

        Raises:
            PatientDataIntegrityError: If ``user_id`` is missing, not a string
                or blank
        """
        user_id = data.get("user_id")
        if not isinstance(user_id, str) or not user_id.strip():
            logger.error(f"Patient record {data.get('id')} has no owning user")
            raise PatientDataIntegrityError(
                "user_id", record={"id": data.get("id"), "user_id": user_id}
            )

        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            name=data.get("name"),
            user_id=user_id,
            email=data.get("email"),
            phone=data.get("phone"),
            last_visit=data.get("last_visit"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
