"""Policy selecting the cash call that funds a statement period."""

from collections.abc import Iterable

from src.domain.models.cash_call import CashCall
from src.domain.models.jib_statement import JibStatement
from src.utils.date_utils import parse_iso_date


def select_cash_call_for_jib(
    statement: JibStatement,
    candidates: Iterable[CashCall],
) -> CashCall | None:
    """Return the first candidate matching the statement's billing month.

    A candidate matches when it shares the statement's lease and partner and
    its billing month falls in the same calendar year and month as the
    statement period end. Candidates are expected to be scoped to the
    statement's organization already.

    Args:
        statement: Statement to link.
        candidates: Cash calls in caller-defined priority order.

    Returns:
        CashCall | None: The first match, or None.
    """
    period_end = parse_iso_date(
        statement.statement_period_end,
        "statementPeriodEnd",
    )
    for candidate in candidates:
        if candidate.lease_id != statement.lease_id:
            continue
        if candidate.partner_id != statement.partner_id:
            continue
        billing_month = parse_iso_date(candidate.billing_month, "billingMonth")
        if (billing_month.year, billing_month.month) == (
            period_end.year,
            period_end.month,
        ):
            return candidate
    return None


__all__ = ["select_cash_call_for_jib"]
