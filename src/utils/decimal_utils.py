"""Helpers for Decimal parsing, normalization and formatting.

Monetary values travel as strings with exactly two fractional digits at the
aggregate and persistence boundaries and as ``Decimal`` everywhere else.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.domain.errors import ValidationError


AMOUNT_PATTERN = re.compile(r"-?\d+\.\d{2}", re.ASCII)
DECIMAL_PATTERN = re.compile(r"\d+(\.\d+)?", re.ASCII)
CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value, field: str = "amount") -> Decimal:
    """Parse a strict two-decimal amount string.

    Args:
        value: Raw amount, expected to match ``-?\\d+\\.\\d{2}``.
        field: Field name used in the error message.

    Returns:
        Decimal: Parsed amount.

    Raises:
        ValidationError: If the value is not a two-decimal string.
    """
    if not isinstance(value, str) or not AMOUNT_PATTERN.fullmatch(value):
        raise ValidationError(f"{field} must be decimal string")
    return Decimal(value)


def parse_non_negative_amount(value, field: str) -> Decimal:
    """Parse a strict amount string that must not be negative."""
    amount = parse_amount(value, field)
    if amount < 0:
        raise ValidationError(f"{field} must be non-negative")
    return amount


def parse_decimal(value, field: str) -> Decimal:
    """Parse an unsigned decimal string of arbitrary precision.

    Args:
        value: Raw decimal string such as ``"2"`` or ``"0.125"``.
        field: Field name used in the error message.

    Returns:
        Decimal: Parsed value.

    Raises:
        ValidationError: If the value is empty, signed or malformed.
    """
    if not isinstance(value, str) or not DECIMAL_PATTERN.fullmatch(value):
        raise ValidationError(f"{field} must be a non-negative decimal string")
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValidationError(
            f"{field} must be a non-negative decimal string"
        ) from exc


def parse_percentage(
    value,
    field: str,
    max_places: int | None = None,
) -> Decimal:
    """Parse a percentage string bounded to ``[0, 100]``.

    Args:
        value: Raw percentage string.
        field: Field name used in the error message.
        max_places: Optional cap on the number of fractional digits.

    Returns:
        Decimal: Parsed percentage.

    Raises:
        ValidationError: If the value is malformed or out of range.
    """
    percentage = parse_decimal(value, field)
    if max_places is not None:
        _, _, fraction = value.partition(".")
        if len(fraction) > max_places:
            raise ValidationError(
                f"{field} must have at most {max_places} decimal places"
            )
    if percentage > HUNDRED:
        raise ValidationError(f"{field} must be between 0 and 100")
    return percentage


def quantize_amount(value: Decimal) -> Decimal:
    """Round a Decimal to cents using half-up rounding."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Format a Decimal as a two-decimal string."""
    return f"{quantize_amount(value):.2f}"


__all__ = [
    "AMOUNT_PATTERN",
    "HUNDRED",
    "ZERO",
    "coerce_decimal",
    "parse_amount",
    "parse_non_negative_amount",
    "parse_decimal",
    "parse_percentage",
    "quantize_amount",
    "format_amount",
]
