"""Helpers for ISO calendar dates and UTC timestamps."""

import re
from datetime import date, datetime, time, timezone

from src.domain.errors import ValidationError


ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_iso_date(value, field: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date.

    Args:
        value: Raw date string.
        field: Field name used in the error message.

    Returns:
        date: Parsed calendar date.

    Raises:
        ValidationError: If the value is not a valid calendar date.
    """
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValidationError(f"{field} must be YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"{field} must be YYYY-MM-DD") from exc


def utc_now() -> datetime:
    """Return the current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def utc_midnight(value: date) -> datetime:
    """Return midnight UTC at the start of the given date."""
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def to_utc(value: date | datetime) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Plain dates map to UTC midnight; naive datetimes are read as UTC.
    """
    if not isinstance(value, datetime):
        return utc_midnight(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = [
    "ISO_DATE_PATTERN",
    "parse_iso_date",
    "utc_now",
    "utc_midnight",
    "to_utc",
]
