"""
Datetime utilities for consistent date handling.

Appointment and visit dates are calendar dates without a time zone. They are
always parsed from and formatted to their year/month/day components so that
``"2024-01-15"`` can never drift to ``"2024-01-14"`` across a UTC day
boundary. Audit timestamps (``created_at``/``updated_at``) are aware UTC
datetimes serialized as ISO 8601 with millisecond precision.
"""

import datetime
import re
from typing import Optional, Union

from clinic_core.core.config.settings import get_settings

UTC = datetime.timezone.utc

_LOCAL_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

DateInput = Union[datetime.date, datetime.datetime, str]


def now() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)


def local_now() -> datetime.datetime:
    """
    Get the current local wall-clock time as a naive datetime.

    Uses ``LOCAL_TIMEZONE`` from the settings when configured, the system
    local time otherwise.
    """
    zone = get_settings().local_zone
    if zone is None:
        return datetime.datetime.now()
    return datetime.datetime.now(zone).replace(tzinfo=None)


def local_today() -> datetime.date:
    """Get the current local calendar date."""
    return local_now().date()


def parse_local_date(value: DateInput) -> datetime.date:
    """
    Parse a calendar date from its components.

    ``YYYY-MM-DD`` strings are split into year/month/day; other strings are
    read as ISO 8601 date-times and their written date is kept as-is.

    Args:
        value: A date, a datetime or a string

    Returns:
        datetime.date: The calendar date

    Raises:
        ValueError: If the value is not a real calendar date
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    match = _LOCAL_DATE_PATTERN.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return datetime.date(year, month, day)

    return datetime.datetime.fromisoformat(text.replace("Z", "+00:00")).date()


def format_local_date(value: datetime.date) -> str:
    """Format a calendar date as ``YYYY-MM-DD`` from its local components."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_iso(dt: datetime.datetime) -> str:
    """
    Format a timestamp in ISO 8601 UTC with millisecond precision.

    Naive datetimes are assumed to be UTC already.

    Returns:
        str: e.g. ``2024-01-15T10:30:00.000Z``
    """
    return to_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(date_str: str) -> datetime.datetime:
    """
    Parse ISO 8601 datetime string to datetime object.

    Accepts the ``Z`` suffix and ensures the result carries a time zone.

    Args:
        date_str: ISO 8601 formatted string

    Returns:
        datetime.datetime: Parsed datetime in UTC
    """
    dt = datetime.datetime.fromisoformat(date_str.strip().replace("Z", "+00:00"))
    return to_utc(dt)


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """
    Convert a datetime to UTC timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime.datetime: Datetime in UTC timezone
    """
    if dt.tzinfo is None:
        # Assume naive datetimes are already UTC
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def coerce_timestamp(value: Optional[Union[datetime.datetime, str]]) -> datetime.datetime:
    """Return an aware UTC timestamp, defaulting to now when missing."""
    if value is None or value == "":
        return now()
    if isinstance(value, datetime.datetime):
        return to_utc(value)
    return parse_iso(value)
