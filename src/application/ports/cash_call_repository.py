"""Port for cash call persistence."""

from dataclasses import dataclass
from typing import Protocol

from src.domain.errors import ValidationError
from src.domain.models.cash_call import CashCall, CashCallStatus


@dataclass(frozen=True)
class CashCallFilters:
    """Optional filters for organization-scoped cash call reads.

    ``status`` accepts a ``CashCallStatus`` or its string value and is
    normalized to the enum.
    """

    lease_id: str | None = None
    partner_id: str | None = None
    status: CashCallStatus | str | None = None
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        if self.status is None:
            return
        try:
            status = CashCallStatus(self.status)
        except ValueError as exc:
            raise ValidationError(
                f"Unknown cash call status: {self.status}"
            ) from exc
        object.__setattr__(self, "status", status)


class CashCallRepositoryPort(Protocol):
    """Port exposing read and write access to cash calls."""

    def save(self, cash_call: CashCall, transaction=None) -> CashCall:
        """Insert or update the cash call and return the stored aggregate.

        Args:
            cash_call: Aggregate to persist.
            transaction: Optional handle from ``UnitOfWorkPort.transaction``
                joining the write to an enclosing transaction.
        """

    def find_by_id(self, cash_call_id: str) -> CashCall | None:
        """Return the cash call with the given id, if any."""

    def find_by_organization_id(
        self,
        organization_id: str,
        filters: CashCallFilters | None = None,
    ) -> list[CashCall]:
        """Return the organization's cash calls matching ``filters``."""


__all__ = ["CashCallFilters", "CashCallRepositoryPort"]
