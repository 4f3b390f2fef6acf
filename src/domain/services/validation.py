"""Domain validation helpers for statement inputs."""

from collections.abc import Mapping
from datetime import date

from src.domain.errors import ValidationError
from src.utils.date_utils import parse_iso_date
from src.utils.decimal_utils import parse_non_negative_amount, parse_percentage


def validate_period(
    period_start: str,
    period_end: str,
) -> tuple[date, date]:
    """Validate a statement period and return its bounds.

    Raises:
        ValidationError: If either bound is malformed or end precedes start.
    """
    start = parse_iso_date(period_start, "statementPeriodStart")
    end = parse_iso_date(period_end, "statementPeriodEnd")
    if end < start:
        raise ValidationError(
            "statementPeriodEnd must be on or after statementPeriodStart"
        )
    return start, end


def validate_non_negative_fields(fields: Mapping[str, str | None]) -> None:
    """Ensure every supplied monetary field is a non-negative amount.

    Args:
        fields: Field name to two-decimal string; None values are skipped.
    """
    for name, value in fields.items():
        if value is None:
            continue
        parse_non_negative_amount(value, name)


def validate_percentage_fields(fields: Mapping[str, str | None]) -> None:
    """Ensure every supplied percentage lies within ``[0, 100]``."""
    for name, value in fields.items():
        if value is None:
            continue
        parse_percentage(value, name)


__all__ = [
    "validate_period",
    "validate_non_negative_fields",
    "validate_percentage_fields",
]
