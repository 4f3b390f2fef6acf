"""Use case approving a cash call behind the consent gate."""

from datetime import datetime

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.use_cases.cash_call_lookup import load_cash_call
from src.domain.errors import InvalidStateError
from src.domain.policies.consent import ensure_consent_allows_approval
from src.infrastructure.logging.logger import get_app_logger


class ApproveCashCallUseCase:
    """Approve a cash call once required consent has been received."""

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
        now: datetime | None = None,
    ) -> str:
        """Approve the cash call.

        Args:
            organization_id: Caller's organization.
            cash_call_id: Cash call to approve.
            now: Optional clock override for the approval timestamp.

        Returns:
            str: Identifier of the approved cash call.

        Raises:
            NotFoundError: If the cash call does not exist.
            OrgMismatchError: If it belongs to another organization.
            InvalidStateError: If consent is required but not RECEIVED.
        """
        cash_call = load_cash_call(
            self._cash_call_repository,
            organization_id,
            cash_call_id,
        )
        try:
            ensure_consent_allows_approval(cash_call)
        except InvalidStateError:
            self._logger.warning(
                f"Rejected approval of cash call {cash_call_id}: "
                f"consent_status={cash_call.consent_status.value}"
            )
            raise
        cash_call.approve(now)
        saved = self._cash_call_repository.save(cash_call)
        self._logger.info(f"Approved cash call {saved.id}")
        return saved.id


__all__ = ["ApproveCashCallUseCase"]
