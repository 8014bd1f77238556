"""Clinic constants."""

CLINIC_STATUS_ACTIVE = "active"
CLINIC_STATUS_INACTIVE = "inactive"
CLINIC_STATUSES = (CLINIC_STATUS_ACTIVE, CLINIC_STATUS_INACTIVE)
DEFAULT_CLINIC_STATUS = CLINIC_STATUS_ACTIVE

MAX_PHONE_LENGTH = 15
