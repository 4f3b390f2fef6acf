"""Use case creating a draft cash call and announcing it through the outbox."""

from contextlib import nullcontext
from dataclasses import dataclass

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.ports.outbox import OutboxPort
from src.application.ports.unit_of_work import UnitOfWorkPort
from src.domain.models.cash_call import CashCall, CashCallStatus, CashCallType
from src.domain.models.events import cash_call_created_event
from src.infrastructure.logging.logger import get_app_logger
from src.utils.date_utils import parse_iso_date
from src.utils.decimal_utils import parse_amount


@dataclass(frozen=True)
class CreateCashCallCommand:
    """Input for creating a cash call.

    Attributes:
        organization_id: Owning organization.
        lease_id: Funded lease.
        partner_id: Partner asked for funds.
        billing_month: ``YYYY-MM-DD``, conventionally the first of the month.
        amount: Two-decimal amount, negative for credits.
        type: MONTHLY or SUPPLEMENTAL.
        due_date: Optional ``YYYY-MM-DD`` payment due date.
        interest_rate_percent: Optional annual late-payment rate.
        consent_required: Whether partner consent gates approval.
    """

    organization_id: str
    lease_id: str
    partner_id: str
    billing_month: str
    amount: str
    type: CashCallType | str = CashCallType.MONTHLY
    due_date: str | None = None
    interest_rate_percent: str | None = None
    consent_required: bool = False


class CreateCashCallUseCase:
    """Create a DRAFT cash call and record a CashCallCreated event."""

    def __init__(
        self,
        cash_call_repository: CashCallRepositoryPort,
        outbox: OutboxPort,
        logger=None,
        unit_of_work: UnitOfWorkPort | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            cash_call_repository: Port persisting cash calls.
            outbox: Port recording domain events.
            logger: Optional logger compatible with logging.Logger-like API.
            unit_of_work: Optional transaction provider; when given, the
                cash call and its CashCallCreated event commit together.
        """
        self._cash_call_repository = cash_call_repository
        self._outbox = outbox
        self._logger = logger or get_app_logger()
        self._unit_of_work = unit_of_work

    def execute(self, command: CreateCashCallCommand) -> str:
        """Create the cash call.

        Args:
            command: Cash call attributes.

        Returns:
            str: Identifier of the persisted cash call.

        Raises:
            ValidationError: If billing month, due date, amount or rate is
                malformed. Nothing is persisted in that case.
        """
        parse_iso_date(command.billing_month, "billingMonth")
        parse_amount(command.amount, "amount")

        cash_call = CashCall(
            organization_id=command.organization_id,
            lease_id=command.lease_id,
            partner_id=command.partner_id,
            billing_month=command.billing_month,
            amount=command.amount,
            type=command.type,
            status=CashCallStatus.DRAFT,
            due_date=command.due_date,
            interest_rate_percent=command.interest_rate_percent,
            consent_required=command.consent_required,
        )
        transaction = (
            self._unit_of_work.transaction()
            if self._unit_of_work is not None
            else nullcontext()
        )
        with transaction as handle:
            saved = self._cash_call_repository.save(cash_call, handle)
            self._outbox.record(cash_call_created_event(saved), handle)
        self._logger.info(
            f"Created cash call {saved.id} for partner={saved.partner_id}, "
            f"lease={saved.lease_id}, amount={saved.amount}"
        )
        return saved.id


__all__ = ["CreateCashCallUseCase", "CreateCashCallCommand"]
