"""
Value objects of the clinic domain.

Each wraps a primitive, validates and normalizes on construction and is
immutable afterwards. Equality compares normalized values.
"""

from clinic_core.domain.value_objects.appointment_status import AppointmentStatus
from clinic_core.domain.value_objects.email import Email
from clinic_core.domain.value_objects.money import Money
from clinic_core.domain.value_objects.name import Name
from clinic_core.domain.value_objects.payment_type import PaymentKind, PaymentType
from clinic_core.domain.value_objects.phone import Phone
from clinic_core.domain.value_objects.procedure import Procedure
from clinic_core.domain.value_objects.time_of_day import Time

__all__ = [
    "AppointmentStatus",
    "Email",
    "Money",
    "Name",
    "PaymentKind",
    "PaymentType",
    "Phone",
    "Procedure",
    "Time",
]
