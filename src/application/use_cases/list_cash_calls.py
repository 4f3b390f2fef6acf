"""Use case listing an organization's cash calls."""

from src.application.ports.cash_call_repository import (
    CashCallFilters,
    CashCallRepositoryPort,
)
from src.domain.errors import ValidationError
from src.domain.models.cash_call import CashCall


class ListCashCallsUseCase:
    """Fetch cash calls scoped to one organization."""

    def __init__(self, cash_call_repository: CashCallRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._cash_call_repository = cash_call_repository

    def execute(
        self,
        organization_id: str,
        filters: CashCallFilters | None = None,
    ) -> list[CashCall]:
        """Return the organization's cash calls matching ``filters``."""
        filters = filters or CashCallFilters()
        if filters.limit is not None and filters.limit < 1:
            raise ValidationError("limit must be a positive integer")
        if filters.offset is not None and filters.offset < 0:
            raise ValidationError("offset must not be negative")
        return self._cash_call_repository.find_by_organization_id(
            organization_id,
            filters,
        )


__all__ = ["ListCashCallsUseCase"]
