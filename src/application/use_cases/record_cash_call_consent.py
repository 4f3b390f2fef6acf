"""Use case recording partner consent on a cash call."""

from datetime import datetime

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.use_cases.cash_call_lookup import load_cash_call
from src.domain.models.cash_call import CashCallConsentStatus
from src.infrastructure.logging.logger import get_app_logger


class RecordCashCallConsentUseCase:
    """Record a consent outcome; allowed in any lifecycle status."""

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
        status: CashCallConsentStatus | str,
        received_at: datetime | None = None,
    ) -> str:
        """Record consent and persist the cash call.

        Returns:
            str: Identifier of the updated cash call.
        """
        cash_call = load_cash_call(
            self._cash_call_repository,
            organization_id,
            cash_call_id,
        )
        cash_call.record_consent(status, received_at)
        saved = self._cash_call_repository.save(cash_call)
        self._logger.info(
            f"Recorded consent {saved.consent_status.value} "
            f"on cash call {saved.id}"
        )
        return saved.id


__all__ = ["RecordCashCallConsentUseCase"]
