"""Shared loading helper for organization-scoped cash call use cases."""

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.domain.errors import NotFoundError, OrgMismatchError
from src.domain.models.cash_call import CashCall


def load_cash_call(
    repository: CashCallRepositoryPort,
    organization_id: str,
    cash_call_id: str,
) -> CashCall:
    """Load a cash call and verify it belongs to the organization.

    Raises:
        NotFoundError: If no cash call has the given id.
        OrgMismatchError: If the cash call belongs to another organization.
    """
    cash_call = repository.find_by_id(cash_call_id)
    if cash_call is None:
        raise NotFoundError(f"Cash call {cash_call_id} not found")
    if cash_call.organization_id != organization_id:
        raise OrgMismatchError(
            f"Cash call {cash_call_id} does not belong to organization "
            f"{organization_id}"
        )
    return cash_call


__all__ = ["load_cash_call"]
