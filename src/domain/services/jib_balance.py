"""Simple daily interest accrual on overdue statement balances."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models.interest import (
    NO_INTEREST,
    InterestAccrual,
    InterestPolicy,
)
from src.domain.models.jib_statement import JibStatement
from src.utils.date_utils import parse_iso_date, to_utc, utc_midnight, utc_now
from src.utils.decimal_utils import (
    HUNDRED,
    format_amount,
    parse_amount,
    parse_percentage,
)


def calculate_interest(
    statement: JibStatement,
    policy: InterestPolicy,
    as_of: date | datetime | None = None,
) -> InterestAccrual:
    """Compute interest accrued on a statement balance past its due date.

    Days are counted in whole days between UTC midnight of the due date and
    ``as_of``. Interest is ``balance * (rate / 100) / basis * days`` rounded
    half-up to cents.

    Args:
        statement: Statement providing current balance and due date.
        policy: Annual rate and day-count basis.
        as_of: Evaluation instant; defaults to now. Plain dates are read as
            UTC midnight and naive datetimes as UTC.

    Returns:
        InterestAccrual: Days past due and the accrued amount.

    Raises:
        ValidationError: If the balance, due date or rate is malformed.
    """
    balance = parse_amount(statement.current_balance, "currentBalance")
    rate = parse_percentage(
        policy.annual_interest_rate_percent,
        "annualInterestRatePercent",
    )
    if balance <= 0 or not statement.due_date:
        return NO_INTEREST

    due = utc_midnight(parse_iso_date(statement.due_date, "dueDate"))
    evaluated_at = to_utc(as_of) if as_of is not None else utc_now()
    if evaluated_at <= due:
        return NO_INTEREST

    days_past_due = (evaluated_at - due).days
    if days_past_due == 0:
        return NO_INTEREST

    # Single division keeps exact half-cent results exact before rounding.
    accrued = (balance * rate * days_past_due) / (
        HUNDRED * Decimal(policy.day_count_basis)
    )
    return InterestAccrual(
        days_past_due=days_past_due,
        interest_accrued=format_amount(accrued),
    )


__all__ = ["calculate_interest"]
