"""Port for lease ownership lookups."""

from typing import Protocol

from src.domain.models.references import LeaseRecord


class LeaseRepositoryPort(Protocol):
    """Port exposing read access to leases."""

    def find_by_id(self, lease_id: str) -> LeaseRecord | None:
        """Return the lease with the given id, if any."""


__all__ = ["LeaseRepositoryPort"]
