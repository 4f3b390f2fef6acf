"""Domain events recorded through the outbox."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from src.domain.constants import CASH_CALL_AGGREGATE, CASH_CALL_CREATED_EVENT
from src.domain.models.cash_call import CashCall
from src.utils.date_utils import utc_now


@dataclass(frozen=True)
class OutboxEvent:
    """Event envelope handed to the outbox collaborator."""

    event_type: str
    aggregate_type: str
    aggregate_id: str
    organization_id: str
    payload: dict[str, Any]
    occurred_at: datetime = field(default_factory=utc_now)


def cash_call_created_event(cash_call: CashCall) -> OutboxEvent:
    """Build the CashCallCreated event for a freshly persisted cash call."""
    return OutboxEvent(
        event_type=CASH_CALL_CREATED_EVENT,
        aggregate_type=CASH_CALL_AGGREGATE,
        aggregate_id=cash_call.id,
        organization_id=cash_call.organization_id,
        payload={
            "id": cash_call.id,
            "partner_id": cash_call.partner_id,
            "lease_id": cash_call.lease_id,
            "amount": cash_call.amount,
        },
    )


__all__ = ["OutboxEvent", "cash_call_created_event"]
