"""Clinic entity."""

from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from clinic_core.core.constants.clinic import CLINIC_STATUS_ACTIVE, CLINIC_STATUS_INACTIVE
from clinic_core.domain.entities.base_entity import BaseEntity
from clinic_core.domain.exceptions import ClinicError
from clinic_core.domain.utils import datetime_utils
from clinic_core.domain.value_objects import Email, Name, Phone


class ClinicStatus(str, Enum):
    ACTIVE = CLINIC_STATUS_ACTIVE
    INACTIVE = CLINIC_STATUS_INACTIVE


@dataclass(eq=False)
class Clinic(BaseEntity):
    """A clinic where appointments take place."""

    id: str
    name: Name
    address: str | None = None
    email: Email | None = None
    phone: Phone | None = None
    status: ClinicStatus = ClinicStatus.ACTIVE
    created_at: datetime.datetime = field(default_factory=datetime_utils.now)
    # Tracked in memory only; the stored record has no such column
    updated_at: datetime.datetime = field(default_factory=datetime_utils.now)

    def __post_init__(self) -> None:
        if self.name is not None and not isinstance(self.name, Name):
            self.__dict__["name"] = Name.create(self.name)
        self.__dict__["address"] = self.address or None
        if not isinstance(self.email, Email):
            self.__dict__["email"] = Email.create(self.email or None)
        if not isinstance(self.phone, Phone):
            self.__dict__["phone"] = Phone.create(self.phone or None)
        try:
            self.__dict__["status"] = ClinicStatus(self.status or CLINIC_STATUS_ACTIVE)
        except ValueError:
            raise ClinicError(f"Invalid clinic status: {self.status}") from None
        self.__dict__["created_at"] = datetime_utils.coerce_timestamp(self.created_at)
        self.__dict__["updated_at"] = datetime_utils.coerce_timestamp(self.updated_at)

        self.validate_invariants()

    def validate_invariants(self) -> None:
        if not self.name:
            raise ClinicError("Name is required")

    @classmethod
    def create(
        cls,
        name: str,
        address: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        status: str = CLINIC_STATUS_ACTIVE,
        id: str | None = None,
        created_at: Any = None,
        updated_at: Any = None,
    ) -> Clinic:
        return cls(
            id=id or str(uuid.uuid4()),
            name=name,
            address=address,
            email=email,
            phone=phone,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def is_active(self) -> bool:
        return self.status is ClinicStatus.ACTIVE

    def update_name(self, name: str) -> None:
        self._commit(name=Name(name))

    def update_address(self, address: str | None) -> None:
        self._commit(address=address or None)

    def update_email(self, email: str | None) -> None:
        self._commit(email=Email.create(email or None))

    def update_phone(self, phone: str | None) -> None:
        self._commit(phone=Phone.create(phone or None))

    def activate(self) -> None:
        self._commit(status=ClinicStatus.ACTIVE)

    def deactivate(self) -> None:
        self._commit(status=ClinicStatus.INACTIVE)

    def to_dict(self) -> dict[str, Any]:
        """Return the stored record; ``updated_at`` is not part of it."""
        return {
            "id": self.id,
            "name": str(self.name),
            "address": self.address,
            "email": str(self.email) if self.email else None,
            "phone": str(self.phone) if self.phone else None,
            "status": self.status.value,
            "created_at": datetime_utils.format_iso(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Clinic:
        return cls(
            id=data.get("id") or str(uuid.uuid4()),
            name=data.get("name"),
            address=data.get("address"),
            email=data.get("email"),
            phone=data.get("phone"),
            status=data.get("status") or CLINIC_STATUS_ACTIVE,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at") or data.get("created_at"),
        )
