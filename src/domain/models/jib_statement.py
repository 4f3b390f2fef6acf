"""Joint-interest billing statement aggregate."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from src.domain.errors import InvalidStateError, ValidationError
from src.utils.date_utils import utc_now
from src.utils.decimal_utils import (
    ZERO,
    format_amount,
    parse_amount,
    parse_decimal,
)


LINE_ITEM_AMOUNT_ERROR = "Line item amounts must be non-negative decimal strings"
LINE_ITEM_TYPES = ("revenue", "expense")
LINE_ITEM_TYPE_ERROR = "Line item type must be revenue or expense"


class JibStatementStatus(str, Enum):
    """Lifecycle states of a JIB statement."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"


@dataclass(frozen=True)
class JibLineItem:
    """Revenue or expense line of a statement.

    Either ``amount`` or both ``quantity`` and ``unit_cost`` must be present
    for the line to contribute to totals.
    """

    type: str
    description: str
    amount: str | None = None
    quantity: str | None = None
    unit_cost: str | None = None

    def resolve_amount(self) -> Decimal:
        """Return the line amount, derived from quantity when needed.

        Raises:
            ValidationError: If the line type is not revenue or expense, or
                the line carries no usable amount or a negative or
                malformed value.
        """
        if self.type not in LINE_ITEM_TYPES:
            raise ValidationError(LINE_ITEM_TYPE_ERROR)
        if self.amount:
            return _parse_line_value(self.amount)
        if self.quantity and self.unit_cost:
            quantity = _parse_line_value(self.quantity)
            unit_cost = _parse_line_value(self.unit_cost)
            return quantity * unit_cost
        raise ValidationError(
            "Line item must include amount or quantity and unitCost"
        )

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly representation."""
        return {
            "type": self.type,
            "description": self.description,
            "amount": self.amount,
            "quantity": self.quantity,
            "unitCost": self.unit_cost,
        }


@dataclass(frozen=True)
class JibTotals:
    """Revenue totals derived from line items."""

    gross_revenue: str
    net_revenue: str


@dataclass(frozen=True)
class JibStatementRecord:
    """Persistence representation of a JIB statement."""

    id: str
    organization_id: str
    lease_id: str
    partner_id: str
    statement_period_start: str | None
    statement_period_end: str
    current_balance: str
    gross_revenue: str = "0.00"
    net_revenue: str = "0.00"
    working_interest_share: str = "0.00"
    royalty_share: str = "0.00"
    previous_balance: str = "0.00"
    line_items: tuple[JibLineItem, ...] | None = None
    status: str = JibStatementStatus.DRAFT.value
    sent_at: datetime | None = None
    paid_at: datetime | None = None
    due_date: str | None = None
    linked_cash_call_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def _parse_line_value(value: str) -> Decimal:
    try:
        return parse_decimal(value, "lineItem")
    except ValidationError as exc:
        raise ValidationError(LINE_ITEM_AMOUNT_ERROR) from exc


def deserialize_line_items(value) -> tuple[JibLineItem, ...] | None:
    """Read stored line items, returning None for malformed payloads.

    Args:
        value: Decoded JSON value (expected list of mappings).

    Returns:
        tuple[JibLineItem, ...] | None: Parsed line items or None.
    """
    if not isinstance(value, list):
        return None
    items = []
    for raw in value:
        if not isinstance(raw, dict):
            return None
        if raw.get("type") not in LINE_ITEM_TYPES:
            return None
        if not isinstance(raw.get("description"), str):
            return None
        optional = [raw.get(key) for key in ("amount", "quantity", "unitCost")]
        if any(v is not None and not isinstance(v, str) for v in optional):
            return None
        items.append(
            JibLineItem(
                type=raw["type"],
                description=raw["description"],
                amount=raw.get("amount"),
                quantity=raw.get("quantity"),
                unit_cost=raw.get("unitCost"),
            )
        )
    return tuple(items)


class JibStatement:
    """Periodic billing statement for a lease and partner."""

    def __init__(
        self,
        *,
        organization_id: str,
        lease_id: str,
        partner_id: str,
        statement_period_end: str,
        current_balance: str,
        id: str | None = None,
        statement_period_start: str | None = None,
        gross_revenue: str | None = None,
        net_revenue: str | None = None,
        working_interest_share: str | None = None,
        royalty_share: str | None = None,
        previous_balance: str | None = None,
        line_items: Iterable[JibLineItem] | None = None,
        status: JibStatementStatus | str = JibStatementStatus.DRAFT,
        sent_at: datetime | None = None,
        paid_at: datetime | None = None,
        due_date: str | None = None,
        linked_cash_call_id: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        self._id = id
        self._organization_id = organization_id
        self._lease_id = lease_id
        self._partner_id = partner_id
        self._statement_period_start = statement_period_start
        self._statement_period_end = statement_period_end
        self._gross_revenue = gross_revenue or "0.00"
        self._net_revenue = net_revenue or "0.00"
        self._working_interest_share = working_interest_share or "0.00"
        self._royalty_share = royalty_share or "0.00"
        self._previous_balance = previous_balance or "0.00"
        self._current_balance = current_balance
        self._line_items = (
            tuple(line_items) if line_items is not None else None
        )
        try:
            self._status = JibStatementStatus(status)
        except ValueError as exc:
            raise ValidationError("status must be draft, sent or paid") from exc
        self._sent_at = sent_at
        self._paid_at = paid_at
        self._due_date = due_date
        self._linked_cash_call_id = linked_cash_call_id
        now = utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @property
    def id(self) -> str:
        return self._id or ""

    @property
    def organization_id(self) -> str:
        return self._organization_id

    @property
    def lease_id(self) -> str:
        return self._lease_id

    @property
    def partner_id(self) -> str:
        return self._partner_id

    @property
    def statement_period_start(self) -> str | None:
        return self._statement_period_start

    @property
    def statement_period_end(self) -> str:
        return self._statement_period_end

    @property
    def gross_revenue(self) -> str:
        return self._gross_revenue

    @property
    def net_revenue(self) -> str:
        return self._net_revenue

    @property
    def working_interest_share(self) -> str:
        return self._working_interest_share

    @property
    def royalty_share(self) -> str:
        return self._royalty_share

    @property
    def previous_balance(self) -> str:
        return self._previous_balance

    @property
    def current_balance(self) -> str:
        return self._current_balance

    @property
    def line_items(self) -> list[JibLineItem] | None:
        if self._line_items is None:
            return None
        return [replace(item) for item in self._line_items]

    @property
    def status(self) -> JibStatementStatus:
        return self._status

    @property
    def sent_at(self) -> datetime | None:
        return self._sent_at

    @property
    def paid_at(self) -> datetime | None:
        return self._paid_at

    @property
    def due_date(self) -> str | None:
        return self._due_date

    @property
    def linked_cash_call_id(self) -> str | None:
        return self._linked_cash_call_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def link_cash_call(
        self,
        cash_call_id: str,
        now: datetime | None = None,
    ) -> None:
        """Associate the statement with a cash call."""
        self._linked_cash_call_id = cash_call_id
        self._updated_at = now or utc_now()

    def apply_interest(self, amount: str, now: datetime | None = None) -> None:
        """Add accrued interest to the current balance.

        Args:
            amount: Two-decimal interest amount.
            now: Optional clock override for the update timestamp.

        Raises:
            ValidationError: If the balance or amount is malformed.
        """
        balance = parse_amount(self._current_balance, "currentBalance")
        accrued = parse_amount(amount, "interestAccrued")
        self._current_balance = format_amount(balance + accrued)
        self._updated_at = now or utc_now()

    def mark_sent(self, now: datetime | None = None) -> None:
        """Move a draft statement to sent."""
        if self._status is not JibStatementStatus.DRAFT:
            raise InvalidStateError(
                f"Cannot send a statement in status {self._status.value}"
            )
        stamp = now or utc_now()
        self._status = JibStatementStatus.SENT
        self._sent_at = stamp
        self._updated_at = stamp

    def mark_paid(self, now: datetime | None = None) -> None:
        """Mark the statement paid once its balance is settled.

        Raises:
            InvalidStateError: If the statement is already paid or still
                carries a positive balance.
            ValidationError: If the current balance is malformed.
        """
        if self._status is JibStatementStatus.PAID:
            raise InvalidStateError("Statement is already paid")
        if parse_amount(self._current_balance, "currentBalance") > 0:
            raise InvalidStateError(
                "Cannot set status=paid when currentBalance > 0"
            )
        stamp = now or utc_now()
        self._status = JibStatementStatus.PAID
        self._paid_at = stamp
        self._updated_at = stamp

    @staticmethod
    def compute_totals(line_items: Iterable[JibLineItem]) -> JibTotals:
        """Derive gross and net revenue from line items.

        Args:
            line_items: Revenue and expense lines; may be empty.

        Returns:
            JibTotals: Gross revenue (sum of revenue lines) and net revenue
            (revenue minus expense), both formatted to two decimals.
        """
        revenue = ZERO
        expense = ZERO
        for item in line_items:
            amount = item.resolve_amount()
            if item.type == "revenue":
                revenue += amount
            else:
                expense += amount
        return JibTotals(
            gross_revenue=format_amount(revenue),
            net_revenue=format_amount(revenue - expense),
        )

    def to_persistence(self) -> JibStatementRecord:
        """Return the persistence representation of the aggregate."""
        return JibStatementRecord(
            id=self.id,
            organization_id=self._organization_id,
            lease_id=self._lease_id,
            partner_id=self._partner_id,
            statement_period_start=self._statement_period_start,
            statement_period_end=self._statement_period_end,
            current_balance=self._current_balance,
            gross_revenue=self._gross_revenue,
            net_revenue=self._net_revenue,
            working_interest_share=self._working_interest_share,
            royalty_share=self._royalty_share,
            previous_balance=self._previous_balance,
            line_items=self._line_items,
            status=self._status.value,
            sent_at=self._sent_at,
            paid_at=self._paid_at,
            due_date=self._due_date,
            linked_cash_call_id=self._linked_cash_call_id,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    @classmethod
    def from_persistence(cls, record: JibStatementRecord) -> "JibStatement":
        """Rebuild an aggregate from its persistence representation."""
        return cls(
            id=record.id,
            organization_id=record.organization_id,
            lease_id=record.lease_id,
            partner_id=record.partner_id,
            statement_period_start=record.statement_period_start,
            statement_period_end=record.statement_period_end,
            current_balance=record.current_balance,
            gross_revenue=record.gross_revenue,
            net_revenue=record.net_revenue,
            working_interest_share=record.working_interest_share,
            royalty_share=record.royalty_share,
            previous_balance=record.previous_balance,
            line_items=record.line_items,
            status=record.status,
            sent_at=record.sent_at,
            paid_at=record.paid_at,
            due_date=record.due_date,
            linked_cash_call_id=record.linked_cash_call_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def __repr__(self) -> str:
        return (
            f"JibStatement(id={self.id!r}, status={self._status.value}, "
            f"current_balance={self._current_balance})"
        )


__all__ = [
    "JibLineItem",
    "JibStatement",
    "JibStatementRecord",
    "JibStatementStatus",
    "JibTotals",
    "LINE_ITEM_AMOUNT_ERROR",
    "LINE_ITEM_TYPE_ERROR",
    "deserialize_line_items",
]
