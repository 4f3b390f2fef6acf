"""Domain models package."""

from .cash_call import (
    ALLOWED_TRANSITIONS,
    CashCall,
    CashCallConsentStatus,
    CashCallRecord,
    CashCallStatus,
    CashCallType,
)
from .events import OutboxEvent, cash_call_created_event
from .interest import NO_INTEREST, InterestAccrual, InterestPolicy
from .jib_statement import (
    JibLineItem,
    JibStatement,
    JibStatementRecord,
    JibStatementStatus,
    JibTotals,
    deserialize_line_items,
)
from .references import LeaseRecord, PartnerRecord

__all__ = [
    "ALLOWED_TRANSITIONS",
    "CashCall",
    "CashCallConsentStatus",
    "CashCallRecord",
    "CashCallStatus",
    "CashCallType",
    "OutboxEvent",
    "cash_call_created_event",
    "NO_INTEREST",
    "InterestAccrual",
    "InterestPolicy",
    "JibLineItem",
    "JibStatement",
    "JibStatementRecord",
    "JibStatementStatus",
    "JibTotals",
    "deserialize_line_items",
    "LeaseRecord",
    "PartnerRecord",
]
