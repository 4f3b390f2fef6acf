"""Tests for the SQLAlchemy outbox."""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

from src.domain.models import OutboxEvent
from src.infrastructure import outbox as outbox_module
from src.infrastructure.outbox import SqlAlchemyOutbox


def test_record_inserts_pending_event():
    engine = MagicMock()
    conn = MagicMock()
    ctx = MagicMock()
    ctx.__enter__.return_value = conn
    engine.begin.return_value = ctx
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    logger = MagicMock()
    occurred_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
    event = OutboxEvent(
        event_type="CashCallCreated",
        aggregate_type="CashCall",
        aggregate_id="cc-1",
        organization_id="org-1",
        payload={"id": "cc-1", "amount": "10.00"},
        occurred_at=occurred_at,
    )

    SqlAlchemyOutbox(db_port, logger=logger).record(event)

    statement_sql, params = conn.execute.call_args.args
    assert statement_sql is outbox_module.INSERT_OUTBOX_EVENT_SQL
    assert params["id"]
    assert params["event_type"] == "CashCallCreated"
    assert params["aggregate_id"] == "cc-1"
    assert params["organization_id"] == "org-1"
    assert json.loads(params["payload"]) == {"id": "cc-1", "amount": "10.00"}
    assert params["occurred_at"] == occurred_at
    logger.debug.assert_called_once()


def test_record_joins_supplied_transaction():
    db_port = MagicMock()
    conn = MagicMock()
    event = OutboxEvent(
        event_type="CashCallCreated",
        aggregate_type="CashCall",
        aggregate_id="cc-1",
        organization_id="org-1",
        payload={},
    )

    SqlAlchemyOutbox(db_port, logger=MagicMock()).record(event, conn)

    db_port.get_engine.assert_not_called()
    assert conn.execute.call_args.args[0] is (
        outbox_module.INSERT_OUTBOX_EVENT_SQL
    )
