"""SQLAlchemy-backed repository for cash calls."""

from dataclasses import asdict

from sqlalchemy import text

from src.application.ports.cash_call_repository import (
    CashCallFilters,
    CashCallRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.cash_call import CashCall, CashCallRecord
from src.infrastructure.row_mapping import as_amount, as_iso_date, as_percentage
from src.infrastructure.unit_of_work import joined_or_new


CASH_CALL_COLUMNS = """
    id, organization_id, lease_id, partner_id, billing_month, due_date,
    amount, type, status, interest_rate_percent, consent_required,
    consent_status, consent_received_at, approved_at, created_at, updated_at
"""

SELECT_CASH_CALL_BY_ID_SQL = text(
    f"SELECT {CASH_CALL_COLUMNS} FROM cash_calls WHERE id = :id"
)

EXISTS_CASH_CALL_SQL = text("SELECT 1 FROM cash_calls WHERE id = :id")

INSERT_CASH_CALL_SQL = text(
    """
    INSERT INTO cash_calls (
        id, organization_id, lease_id, partner_id, billing_month, due_date,
        amount, type, status, interest_rate_percent, consent_required,
        consent_status, consent_received_at, approved_at, created_at,
        updated_at
    )
    VALUES (
        :id, :organization_id, :lease_id, :partner_id, :billing_month,
        :due_date, :amount, :type, :status, :interest_rate_percent,
        :consent_required, :consent_status, :consent_received_at,
        :approved_at, :created_at, :updated_at
    )
    """
)

UPDATE_CASH_CALL_SQL = text(
    """
    UPDATE cash_calls
    SET due_date = :due_date,
        amount = :amount,
        type = :type,
        status = :status,
        interest_rate_percent = :interest_rate_percent,
        consent_required = :consent_required,
        consent_status = :consent_status,
        consent_received_at = :consent_received_at,
        approved_at = :approved_at,
        updated_at = :updated_at
    WHERE id = :id
    """
)


class SqlAlchemyCashCallRepository(CashCallRepositoryPort):
    """Repository backed by SQLAlchemy for cash calls."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the billing engine.
        """
        self._db_port = db_port

    def save(self, cash_call: CashCall, transaction=None) -> CashCall:
        """Insert the cash call, or update it when the id already exists.

        Args:
            cash_call: Aggregate to persist.
            transaction: Optional connection from ``SqlAlchemyUnitOfWork``;
                a dedicated transaction is opened when omitted.
        """
        params = asdict(cash_call.to_persistence())
        with joined_or_new(self._db_port, transaction) as conn:
            exists = conn.execute(
                EXISTS_CASH_CALL_SQL,
                {"id": params["id"]},
            ).first()
            if exists is None:
                conn.execute(INSERT_CASH_CALL_SQL, params)
            else:
                conn.execute(UPDATE_CASH_CALL_SQL, params)
        return cash_call

    def find_by_id(self, cash_call_id: str) -> CashCall | None:
        """Return the cash call with the given id, if any."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_CASH_CALL_BY_ID_SQL,
                {"id": cash_call_id},
            ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_organization_id(
        self,
        organization_id: str,
        filters: CashCallFilters | None = None,
    ) -> list[CashCall]:
        """Return cash calls ordered by billing month then creation time."""
        query, params = self._build_query(organization_id, filters)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_entity(row) for row in rows]

    @staticmethod
    def _build_query(
        organization_id: str,
        filters: CashCallFilters | None,
    ):
        filters = filters or CashCallFilters()
        base_sql = (
            f"SELECT {CASH_CALL_COLUMNS} FROM cash_calls "
            "WHERE organization_id = :organization_id"
        )
        params: dict[str, object] = {"organization_id": organization_id}
        if filters.lease_id:
            base_sql += " AND lease_id = :lease_id"
            params["lease_id"] = filters.lease_id
        if filters.partner_id:
            base_sql += " AND partner_id = :partner_id"
            params["partner_id"] = filters.partner_id
        if filters.status:
            base_sql += " AND status = :status"
            params["status"] = filters.status.value
        base_sql += " ORDER BY billing_month, created_at, id"
        if filters.limit is not None:
            base_sql += " LIMIT :limit"
            params["limit"] = filters.limit
        if filters.offset is not None:
            base_sql += " OFFSET :offset"
            params["offset"] = filters.offset
        return text(base_sql), params

    @staticmethod
    def _to_entity(row) -> CashCall:
        return CashCall.from_persistence(
            CashCallRecord(
                id=row.id,
                organization_id=row.organization_id,
                lease_id=row.lease_id,
                partner_id=row.partner_id,
                billing_month=as_iso_date(row.billing_month),
                due_date=as_iso_date(row.due_date),
                amount=as_amount(row.amount),
                type=row.type,
                status=row.status,
                interest_rate_percent=as_percentage(row.interest_rate_percent),
                consent_required=bool(row.consent_required),
                consent_status=row.consent_status,
                consent_received_at=row.consent_received_at,
                approved_at=row.approved_at,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
        )


__all__ = ["SqlAlchemyCashCallRepository"]
