"""Conversions between database values and domain boundary strings."""

from datetime import date

from src.utils.decimal_utils import coerce_decimal, format_amount


def as_iso_date(value) -> str | None:
    """Return a ``YYYY-MM-DD`` string for DATE columns or stored strings."""
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def as_amount(value) -> str | None:
    """Return a two-decimal string for NUMERIC columns or stored strings."""
    if value is None:
        return None
    return format_amount(coerce_decimal(value))


def as_percentage(value) -> str | None:
    """Return a percentage string without altering its precision."""
    if value is None:
        return None
    return str(value)


__all__ = ["as_iso_date", "as_amount", "as_percentage"]
