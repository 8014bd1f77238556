"""
Appointment constants.

Limits and defaults shared by the appointment entity, its value objects,
the domain service and the validator.
"""

MAX_CLINICAL_EVOLUTION_LENGTH = 10000
MAX_NOTES_LENGTH = 5000
MAX_PROCEDURE_LENGTH = 255

DEFAULT_CURRENCY = "BRL"
SUPPORTED_CURRENCIES = ("BRL", "USD", "EUR")

PAYMENT_TYPE_FULL = "100"
PAYMENT_TYPE_PERCENTAGE = "percentage"
DEFAULT_PAYMENT_TYPE = PAYMENT_TYPE_FULL

DEFAULT_STATUS = "scheduled"

# Minimum notice, in hours, for a cancellation to be accepted
CANCELLATION_NOTICE_HOURS = 24
