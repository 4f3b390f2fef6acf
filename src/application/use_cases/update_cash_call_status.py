"""Use case moving a cash call along its lifecycle."""

from datetime import datetime

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.use_cases.cash_call_lookup import load_cash_call
from src.domain.errors import InvalidStateError, ValidationError
from src.domain.models.cash_call import CashCallStatus
from src.infrastructure.logging.logger import get_app_logger


_TRANSITIONS = {
    CashCallStatus.SENT: "mark_sent",
    CashCallStatus.PAID: "mark_paid",
    CashCallStatus.REJECTED: "reject",
    CashCallStatus.DEFAULTED: "mark_defaulted",
}


class UpdateCashCallStatusUseCase:
    """Apply a guarded status transition other than approval.

    Approval goes through ApproveCashCallUseCase so the consent gate
    always runs.
    """

    def __init__(
        self,
        cash_call_repository: CashCallRepositoryPort,
        logger=None,
    ) -> None:
        self._cash_call_repository = cash_call_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        organization_id: str,
        cash_call_id: str,
        status: CashCallStatus | str,
        now: datetime | None = None,
    ) -> str:
        """Transition the cash call to ``status``.

        Raises:
            ValidationError: If ``status`` is unknown or is APPROVED/DRAFT.
            InvalidStateError: If the transition table forbids the move.
        """
        try:
            target = CashCallStatus(status)
        except ValueError as exc:
            raise ValidationError(f"Unknown cash call status: {status}") from exc
        method_name = _TRANSITIONS.get(target)
        if method_name is None:
            raise ValidationError(
                f"Status {target.value} cannot be set through a status update"
            )

        cash_call = load_cash_call(
            self._cash_call_repository,
            organization_id,
            cash_call_id,
        )
        previous = cash_call.status
        try:
            getattr(cash_call, method_name)(now)
        except InvalidStateError:
            self._logger.warning(
                f"Rejected transition of cash call {cash_call_id} "
                f"from {previous.value} to {target.value}"
            )
            raise
        saved = self._cash_call_repository.save(cash_call)
        self._logger.info(
            f"Cash call {saved.id} moved from {previous.value} "
            f"to {saved.status.value}"
        )
        return saved.id


__all__ = ["UpdateCashCallStatusUseCase"]
