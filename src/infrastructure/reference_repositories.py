"""SQLAlchemy-backed read-only lookups for leases and partners."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.lease_repository import LeaseRepositoryPort
from src.application.ports.partners_repository import PartnersRepositoryPort
from src.domain.models.references import LeaseRecord, PartnerRecord


SELECT_LEASE_SQL = text(
    "SELECT id, organization_id FROM leases WHERE id = :id"
)

SELECT_PARTNER_SQL = text(
    """
    SELECT id, organization_id, name
    FROM partners
    WHERE id = :id AND organization_id = :organization_id
    """
)


class SqlAlchemyLeaseRepository(LeaseRepositoryPort):
    """Lease lookups backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def find_by_id(self, lease_id: str) -> LeaseRecord | None:
        """Return the lease with the given id, if any."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_LEASE_SQL, {"id": lease_id}).first()
        if row is None:
            return None
        return LeaseRecord(id=row.id, organization_id=row.organization_id)


class SqlAlchemyPartnersRepository(PartnersRepositoryPort):
    """Partner lookups backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def find_by_id(
        self,
        partner_id: str,
        organization_id: str,
    ) -> PartnerRecord | None:
        """Return the partner when it exists within the organization."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_PARTNER_SQL,
                {"id": partner_id, "organization_id": organization_id},
            ).first()
        if row is None:
            return None
        return PartnerRecord(
            id=row.id,
            organization_id=row.organization_id,
            name=row.name,
        )


__all__ = ["SqlAlchemyLeaseRepository", "SqlAlchemyPartnersRepository"]
