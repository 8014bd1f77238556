"""
Unit tests for Procedure, PaymentType and AppointmentStatus.
"""

import pytest

from clinic_core.domain.exceptions import ValidationError
from clinic_core.domain.value_objects import (
    AppointmentStatus,
    Money,
    PaymentKind,
    PaymentType,
    Procedure,
)


class TestProcedure:
    """Tests for Procedure."""

    def test_trimmed(self):
        assert str(Procedure("  Cleaning ")) == "Cleaning"

    @pytest.mark.parametrize("value", ["", "   ", "x" * 256, None])
    def test_invalid_raises(self, value):
        with pytest.raises(ValidationError):
            Procedure(value)


class TestPaymentType:
    """Tests for PaymentType."""

    def test_percentage_received_value(self):
        payment_type = PaymentType.create("percentage", 50)

        received = payment_type.calculate_received_value(Money.create(1000, "BRL"))

        assert received == Money.create(500, "BRL")

    def test_full_received_value(self):
        value = Money.create(1000, "BRL")
        assert PaymentType.full().calculate_received_value(value) == value

    def test_full_ignores_percentage(self):
        payment_type = PaymentType.create("100", 30)

        assert payment_type.is_full
        assert payment_type.percentage is None

    def test_full_alias(self):
        assert PaymentType.create("full").type is PaymentKind.FULL

    @pytest.mark.parametrize("percentage", [None, -1, 101, "abc"])
    def test_percentage_out_of_range_raises(self, percentage):
        with pytest.raises(ValidationError):
            PaymentType.create("percentage", percentage)

    def test_percentage_accepts_numeric_string(self):
        assert PaymentType.create("percentage", "25").percentage == 25.0

    def test_unknown_type_raises(self):
        with pytest.raises(ValidationError):
            PaymentType.create("installments")

    def test_to_dict(self):
        assert PaymentType.create("percentage", 40).to_dict() == {
            "type": "percentage",
            "percentage": 40.0,
        }


class TestAppointmentStatus:
    """Tests for AppointmentStatus."""

    def test_payment_overrides_requested_status(self):
        assert AppointmentStatus.create("cancelled", is_paid=True) is AppointmentStatus.PAID

    def test_known_value(self):
        status = AppointmentStatus.create("pending")

        assert status is AppointmentStatus.PENDING
        assert status.is_pending
        assert str(status) == "pending"

    def test_unknown_value_raises(self):
        with pytest.raises(ValidationError):
            AppointmentStatus.create("archived")
