"""Use case creating a JIB statement from a draft input."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from src.application.ports.jib_statement_repository import (
    JibStatementRepositoryPort,
    NewJibStatement,
)
from src.application.ports.lease_repository import LeaseRepositoryPort
from src.application.ports.partners_repository import PartnersRepositoryPort
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models.jib_statement import (
    JibLineItem,
    JibStatement,
    JibStatementStatus,
)
from src.domain.services.validation import (
    validate_non_negative_fields,
    validate_percentage_fields,
    validate_period,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_iso_date, utc_now
from src.utils.decimal_utils import parse_amount


@dataclass(frozen=True)
class CreateJibStatementCommand:
    """Unvalidated statement input as received from the caller.

    Only ``CreateJibStatementUseCase`` turns this draft into a
    ``NewJibStatement`` after validation.
    """

    organization_id: str
    lease_id: str
    partner_id: str
    statement_period_start: str
    statement_period_end: str
    due_date: str | None = None
    gross_revenue: str | None = None
    net_revenue: str | None = None
    working_interest_share: str | None = None
    royalty_share: str | None = None
    previous_balance: str | None = None
    current_balance: str | None = None
    line_items: Sequence[JibLineItem] | None = None
    status: JibStatementStatus | str = JibStatementStatus.DRAFT
    sent_at: datetime | None = None
    paid_at: datetime | None = None


class CreateJibStatementUseCase:
    """Validate a statement draft, derive totals and persist it."""

    def __init__(
        self,
        jib_statement_repository: JibStatementRepositoryPort,
        lease_repository: LeaseRepositoryPort,
        partners_repository: PartnersRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            jib_statement_repository: Port persisting statements.
            lease_repository: Port used to check lease ownership.
            partners_repository: Port used to check partner existence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._jib_statement_repository = jib_statement_repository
        self._lease_repository = lease_repository
        self._partners_repository = partners_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        command: CreateJibStatementCommand,
        now: datetime | None = None,
    ) -> str:
        """Create the statement.

        Args:
            command: Draft statement input.
            now: Optional clock override for sent/paid timestamps.

        Returns:
            str: Identifier of the created statement.

        Raises:
            ValidationError: On malformed dates, amounts or percentages,
                end-before-start periods, negative money, a lease owned by
                another organization, or status=paid with a balance.
            NotFoundError: If the lease or partner does not exist.
        """
        validate_period(
            command.statement_period_start,
            command.statement_period_end,
        )
        if command.due_date is not None:
            parse_iso_date(command.due_date, "dueDate")
        self._ensure_references(command)

        gross_revenue = command.gross_revenue
        net_revenue = command.net_revenue
        line_items = (
            tuple(command.line_items)
            if command.line_items is not None
            else None
        )
        if line_items:
            totals = JibStatement.compute_totals(line_items)
            gross_revenue = gross_revenue or totals.gross_revenue
            net_revenue = net_revenue or totals.net_revenue

        current_balance = command.current_balance or "0.00"
        validate_non_negative_fields(
            {
                "grossRevenue": gross_revenue,
                "netRevenue": net_revenue,
                "previousBalance": command.previous_balance,
                "currentBalance": current_balance,
            }
        )
        validate_percentage_fields(
            {
                "workingInterestShare": command.working_interest_share,
                "royaltyShare": command.royalty_share,
            }
        )
        status, sent_at, paid_at = self._resolve_status(
            command,
            current_balance,
            now or utc_now(),
        )

        new_statement = NewJibStatement(
            organization_id=command.organization_id,
            lease_id=command.lease_id,
            partner_id=command.partner_id,
            statement_period_start=command.statement_period_start,
            statement_period_end=command.statement_period_end,
            due_date=command.due_date,
            gross_revenue=gross_revenue or "0.00",
            net_revenue=net_revenue or "0.00",
            working_interest_share=command.working_interest_share or "0.00",
            royalty_share=command.royalty_share or "0.00",
            previous_balance=command.previous_balance or "0.00",
            current_balance=current_balance,
            line_items=line_items,
            status=status.value,
            sent_at=sent_at,
            paid_at=paid_at,
        )
        created = self._jib_statement_repository.create(new_statement)
        self._logger.info(
            f"Created JIB statement {created.id} for lease={command.lease_id}, "
            f"partner={command.partner_id}, "
            f"period={command.statement_period_start}.."
            f"{command.statement_period_end}"
        )
        return created.id

    def _ensure_references(self, command: CreateJibStatementCommand) -> None:
        lease = self._lease_repository.find_by_id(command.lease_id)
        if lease is None:
            raise NotFoundError(f"Lease {command.lease_id} not found")
        if lease.organization_id != command.organization_id:
            raise ValidationError(
                f"Lease {command.lease_id} does not belong to organization "
                f"{command.organization_id}"
            )
        partner = self._partners_repository.find_by_id(
            command.partner_id,
            command.organization_id,
        )
        if partner is None:
            raise NotFoundError(f"Partner {command.partner_id} not found")

    @staticmethod
    def _resolve_status(
        command: CreateJibStatementCommand,
        current_balance: str,
        now: datetime,
    ) -> tuple[JibStatementStatus, datetime | None, datetime | None]:
        try:
            status = JibStatementStatus(command.status)
        except ValueError as exc:
            raise ValidationError("status must be draft, sent or paid") from exc

        if status is JibStatementStatus.SENT:
            return status, command.sent_at or now, None
        if status is JibStatementStatus.PAID:
            if parse_amount(current_balance, "currentBalance") > 0:
                raise ValidationError(
                    "Cannot set status=paid when currentBalance > 0"
                )
            return status, command.sent_at, command.paid_at or now
        return status, None, None


__all__ = ["CreateJibStatementUseCase", "CreateJibStatementCommand"]
