"""Read-only reference records checked during statement creation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LeaseRecord:
    """Lease ownership reference."""

    id: str
    organization_id: str


@dataclass(frozen=True)
class PartnerRecord:
    """Working-interest partner reference."""

    id: str
    organization_id: str
    name: str | None = None


__all__ = ["LeaseRecord", "PartnerRecord"]
