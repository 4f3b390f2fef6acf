"""Port for durable domain event emission."""

from typing import Protocol

from src.domain.models.events import OutboxEvent


class OutboxPort(Protocol):
    """Port recording domain events for later delivery."""

    def record(self, event: OutboxEvent, transaction=None) -> None:
        """Durably record the event; delivery happens elsewhere.

        Args:
            event: Event envelope to store.
            transaction: Optional handle from ``UnitOfWorkPort.transaction``
                so the event commits with the aggregate write.
        """


__all__ = ["OutboxPort"]
