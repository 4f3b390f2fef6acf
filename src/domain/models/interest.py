"""Value objects for late-payment interest accrual."""

from dataclasses import dataclass

from src.domain.constants import DAY_COUNT_BASES, DEFAULT_DAY_COUNT_BASIS
from src.domain.errors import ValidationError
from src.utils.decimal_utils import parse_percentage


@dataclass(frozen=True)
class InterestPolicy:
    """Interest terms applied to overdue statement balances.

    Attributes:
        annual_interest_rate_percent: Annual rate as a decimal string.
        day_count_basis: Days per year used to derive the daily rate.
    """

    annual_interest_rate_percent: str
    day_count_basis: int = DEFAULT_DAY_COUNT_BASIS

    def __post_init__(self) -> None:
        parse_percentage(
            self.annual_interest_rate_percent,
            "annualInterestRatePercent",
        )
        if self.day_count_basis not in DAY_COUNT_BASES:
            raise ValidationError("dayCountBasis must be 360 or 365")


@dataclass(frozen=True)
class InterestAccrual:
    """Result of an interest calculation."""

    days_past_due: int
    interest_accrued: str


NO_INTEREST = InterestAccrual(days_past_due=0, interest_accrued="0.00")


__all__ = ["InterestPolicy", "InterestAccrual", "NO_INTEREST"]
