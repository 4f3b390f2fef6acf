"""Domain services package."""

from .jib_balance import calculate_interest
from .jib_linking import select_cash_call_for_jib
from .validation import (
    validate_non_negative_fields,
    validate_percentage_fields,
    validate_period,
)

__all__ = [
    "calculate_interest",
    "select_cash_call_for_jib",
    "validate_non_negative_fields",
    "validate_percentage_fields",
    "validate_period",
]
