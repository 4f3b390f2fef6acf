"""Port for partner existence lookups."""

from typing import Protocol

from src.domain.models.references import PartnerRecord


class PartnersRepositoryPort(Protocol):
    """Port exposing read access to partners of an organization."""

    def find_by_id(
        self,
        partner_id: str,
        organization_id: str,
    ) -> PartnerRecord | None:
        """Return the partner when it exists within the organization."""


__all__ = ["PartnersRepositoryPort"]
