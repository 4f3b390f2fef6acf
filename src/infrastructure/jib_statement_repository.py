"""SQLAlchemy-backed repository for JIB statements."""

import json
import uuid
from dataclasses import fields

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.jib_statement_repository import (
    JibStatementRepositoryPort,
    NewJibStatement,
)
from src.domain.errors import InvalidStateError, NotFoundError
from src.domain.models.jib_statement import (
    JibStatement,
    JibStatementRecord,
    deserialize_line_items,
)
from src.infrastructure.row_mapping import as_amount, as_iso_date, as_percentage
from src.utils.date_utils import utc_now


SELECT_JIB_STATEMENT_SQL = text(
    """
    SELECT id, organization_id, lease_id, partner_id, statement_period_start,
           statement_period_end, due_date, gross_revenue, net_revenue,
           working_interest_share, royalty_share, previous_balance,
           current_balance, line_items, status, sent_at, paid_at,
           cash_call_id, created_at, updated_at
    FROM jib_statements
    WHERE id = :id
    """
)

INSERT_JIB_STATEMENT_SQL = text(
    """
    INSERT INTO jib_statements (
        id, organization_id, lease_id, partner_id, statement_period_start,
        statement_period_end, due_date, gross_revenue, net_revenue,
        working_interest_share, royalty_share, previous_balance,
        current_balance, line_items, status, sent_at, paid_at,
        cash_call_id, created_at, updated_at
    )
    VALUES (
        :id, :organization_id, :lease_id, :partner_id,
        :statement_period_start, :statement_period_end, :due_date,
        :gross_revenue, :net_revenue, :working_interest_share,
        :royalty_share, :previous_balance, :current_balance, :line_items,
        :status, :sent_at, :paid_at, :cash_call_id, :created_at, :updated_at
    )
    """
)

UPDATE_JIB_STATEMENT_SQL = text(
    """
    UPDATE jib_statements
    SET gross_revenue = :gross_revenue,
        net_revenue = :net_revenue,
        working_interest_share = :working_interest_share,
        royalty_share = :royalty_share,
        previous_balance = :previous_balance,
        current_balance = :current_balance,
        status = :status,
        sent_at = :sent_at,
        paid_at = :paid_at,
        due_date = :due_date,
        cash_call_id = :cash_call_id,
        updated_at = :updated_at
    WHERE id = :id
    """
)


class SqlAlchemyJibStatementRepository(JibStatementRepositoryPort):
    """Repository backed by SQLAlchemy for JIB statements."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the billing engine.
        """
        self._db_port = db_port

    def find_by_id(self, statement_id: str) -> JibStatement | None:
        """Return the statement with the given id, if any."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_JIB_STATEMENT_SQL,
                {"id": statement_id},
            ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, statement: NewJibStatement) -> JibStatement:
        """Insert a validated statement under a freshly generated id."""
        now = utc_now()
        entity = JibStatement(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **_shallow_fields(statement),
        )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_JIB_STATEMENT_SQL, self._to_params(entity))
        return entity

    def save(self, statement: JibStatement) -> JibStatement:
        """Persist the mutable fields of an existing statement.

        Line items are fixed at creation and are never rewritten here.

        Raises:
            InvalidStateError: If the statement has no id; new statements
                go through ``create``.
            NotFoundError: If no stored statement has the id.
        """
        if not statement.id:
            raise InvalidStateError(
                "Insert for JibStatement is not supported via save; use create"
            )
        params = self._to_params(statement)
        del params["line_items"]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(UPDATE_JIB_STATEMENT_SQL, params)
        if result.rowcount == 0:
            raise NotFoundError(f"JIB statement {statement.id} not found")
        return statement

    @staticmethod
    def _to_params(statement: JibStatement) -> dict[str, object]:
        record = statement.to_persistence()
        params = _shallow_fields(record)
        params["cash_call_id"] = params.pop("linked_cash_call_id")
        params["line_items"] = (
            json.dumps([item.to_dict() for item in record.line_items])
            if record.line_items is not None
            else None
        )
        return params

    @staticmethod
    def _to_entity(row) -> JibStatement:
        raw_items = row.line_items
        if isinstance(raw_items, str):
            raw_items = json.loads(raw_items)
        return JibStatement.from_persistence(
            JibStatementRecord(
                id=row.id,
                organization_id=row.organization_id,
                lease_id=row.lease_id,
                partner_id=row.partner_id,
                statement_period_start=as_iso_date(row.statement_period_start),
                statement_period_end=as_iso_date(row.statement_period_end),
                due_date=as_iso_date(row.due_date),
                gross_revenue=as_amount(row.gross_revenue),
                net_revenue=as_amount(row.net_revenue),
                working_interest_share=as_percentage(
                    row.working_interest_share
                ),
                royalty_share=as_percentage(row.royalty_share),
                previous_balance=as_amount(row.previous_balance),
                current_balance=as_amount(row.current_balance),
                line_items=deserialize_line_items(raw_items),
                status=row.status,
                sent_at=row.sent_at,
                paid_at=row.paid_at,
                linked_cash_call_id=row.cash_call_id,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
        )


def _shallow_fields(instance) -> dict[str, object]:
    # Line items stay JibLineItem instances, unlike dataclasses.asdict.
    return {
        field.name: getattr(instance, field.name)
        for field in fields(instance)
    }


__all__ = ["SqlAlchemyJibStatementRepository"]
