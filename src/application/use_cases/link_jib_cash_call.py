"""Use case linking a JIB statement to its cash call and accruing interest."""

from dataclasses import dataclass
from datetime import date, datetime

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.ports.jib_statement_repository import (
    JibStatementRepositoryPort,
)
from src.domain.errors import NotFoundError, OrgMismatchError
from src.domain.models.interest import InterestPolicy
from src.domain.services.jib_balance import calculate_interest
from src.domain.services.jib_linking import select_cash_call_for_jib
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LinkJibCashCallResult:
    """Outcome of a link-and-accrue run.

    Attributes:
        jib_id: Statement that was updated.
        cash_call_id: Linked cash call, or None when nothing matched.
        interest_accrued: Interest added to the current balance.
        days_past_due: Whole days the balance was overdue.
    """

    jib_id: str
    cash_call_id: str | None
    interest_accrued: str
    days_past_due: int = 0


class UpdateJibLinkCashCallUseCase:
    """Link a statement to the matching cash call and apply interest."""

    def __init__(
        self,
        jib_statement_repository: JibStatementRepositoryPort,
        cash_call_repository: CashCallRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            jib_statement_repository: Port reading and saving statements.
            cash_call_repository: Port listing candidate cash calls.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._jib_statement_repository = jib_statement_repository
        self._cash_call_repository = cash_call_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        organization_id: str,
        jib_id: str,
        policy: InterestPolicy,
        as_of: date | datetime | None = None,
    ) -> LinkJibCashCallResult:
        """Link the statement and accrue overdue interest.

        All computation happens before the single save, so a failure leaves
        the stored statement untouched.

        Args:
            organization_id: Caller's organization.
            jib_id: Statement to update.
            policy: Interest terms supplied by the caller.
            as_of: Evaluation instant for interest; defaults to now.

        Returns:
            LinkJibCashCallResult: Linked cash call and interest applied.

        Raises:
            NotFoundError: If the statement does not exist.
            OrgMismatchError: If it belongs to another organization.
            ValidationError: If balance, dates or rate are malformed.
        """
        statement = self._jib_statement_repository.find_by_id(jib_id)
        if statement is None:
            raise NotFoundError(f"JIB statement {jib_id} not found")
        if statement.organization_id != organization_id:
            raise OrgMismatchError(
                f"JIB statement {jib_id} does not belong to organization "
                f"{organization_id}"
            )

        candidates = self._cash_call_repository.find_by_organization_id(
            organization_id
        )
        match = select_cash_call_for_jib(statement, candidates)
        accrual = calculate_interest(statement, policy, as_of)

        if match is not None:
            statement.link_cash_call(match.id)
        statement.apply_interest(accrual.interest_accrued)
        saved = self._jib_statement_repository.save(statement)

        cash_call_id = match.id if match is not None else None
        if cash_call_id is None:
            self._logger.warning(
                f"No cash call matched JIB statement {jib_id} "
                f"among {len(candidates)} candidates"
            )
        self._logger.info(
            f"JIB statement {saved.id} linked to cash_call={cash_call_id}, "
            f"interest={accrual.interest_accrued} "
            f"over {accrual.days_past_due} days"
        )
        return LinkJibCashCallResult(
            jib_id=saved.id,
            cash_call_id=cash_call_id,
            interest_accrued=accrual.interest_accrued,
            days_past_due=accrual.days_past_due,
        )


__all__ = ["UpdateJibLinkCashCallUseCase", "LinkJibCashCallResult"]
