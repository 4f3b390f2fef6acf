"""SQLAlchemy-backed outbox recording domain events."""

import json
import uuid

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.outbox import OutboxPort
from src.domain.models.events import OutboxEvent
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.unit_of_work import joined_or_new


INSERT_OUTBOX_EVENT_SQL = text(
    """
    INSERT INTO outbox_events (
        id, event_type, aggregate_type, aggregate_id, organization_id,
        payload, status, attempts, occurred_at
    )
    VALUES (
        :id, :event_type, :aggregate_type, :aggregate_id, :organization_id,
        :payload, 'pending', 0, :occurred_at
    )
    """
)


class SqlAlchemyOutbox(OutboxPort):
    """Outbox writing pending events to the ``outbox_events`` table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the outbox.

        Args:
            db_port: Port providing access to the billing engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def record(self, event: OutboxEvent, transaction=None) -> None:
        """Insert the event as pending; delivery is handled elsewhere.

        Args:
            event: Event envelope to store.
            transaction: Optional connection from ``SqlAlchemyUnitOfWork``
                so the event commits with the aggregate write.
        """
        params = {
            "id": str(uuid.uuid4()),
            "event_type": event.event_type,
            "aggregate_type": event.aggregate_type,
            "aggregate_id": event.aggregate_id,
            "organization_id": event.organization_id,
            "payload": json.dumps(event.payload),
            "occurred_at": event.occurred_at,
        }
        with joined_or_new(self._db_port, transaction) as conn:
            conn.execute(INSERT_OUTBOX_EVENT_SQL, params)
        self._logger.debug(
            f"Outbox event recorded: {event.event_type} for "
            f"{event.aggregate_type}:{event.aggregate_id}"
        )


__all__ = ["SqlAlchemyOutbox"]
