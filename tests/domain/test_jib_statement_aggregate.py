"""Tests for the JibStatement aggregate and its line items."""

from datetime import datetime, timezone

import pytest

from src.domain.errors import InvalidStateError, ValidationError
from src.domain.models import (
    JibLineItem,
    JibStatement,
    JibStatementStatus,
    deserialize_line_items,
)


NOW = datetime(2025, 2, 1, tzinfo=timezone.utc)


def _statement(**overrides) -> JibStatement:
    attrs = {
        "id": "jib-1",
        "organization_id": "org-1",
        "lease_id": "lease-1",
        "partner_id": "partner-1",
        "statement_period_start": "2025-01-01",
        "statement_period_end": "2025-01-31",
        "current_balance": "100.00",
        "due_date": "2025-01-10",
    }
    attrs.update(overrides)
    return JibStatement(**attrs)


def test_defaults_for_optional_money_and_status():
    statement = _statement()

    assert statement.gross_revenue == "0.00"
    assert statement.net_revenue == "0.00"
    assert statement.working_interest_share == "0.00"
    assert statement.royalty_share == "0.00"
    assert statement.previous_balance == "0.00"
    assert statement.status is JibStatementStatus.DRAFT
    assert statement.line_items is None
    assert statement.linked_cash_call_id is None


def test_compute_totals_for_empty_list():
    totals = JibStatement.compute_totals([])

    assert totals.gross_revenue == "0.00"
    assert totals.net_revenue == "0.00"


def test_compute_totals_sums_revenue_minus_expense():
    """Gross is revenue only, net subtracts expenses."""
    items = [
        JibLineItem(type="revenue", description="Oil", amount="10000.00"),
        JibLineItem(type="expense", description="LOE", amount="2000.00"),
        JibLineItem(type="revenue", description="Gas", amount="500.50"),
    ]

    totals = JibStatement.compute_totals(items)

    assert totals.gross_revenue == "10500.50"
    assert totals.net_revenue == "8500.50"


def test_compute_totals_uses_quantity_times_unit_cost():
    items = [
        JibLineItem(
            type="revenue",
            description="Barrels",
            quantity="2",
            unit_cost="50.00",
        ),
        JibLineItem(
            type="expense",
            description="Trucking",
            quantity="3",
            unit_cost="10.005",
        ),
    ]

    totals = JibStatement.compute_totals(items)

    assert totals.gross_revenue == "100.00"
    # 100 - 30.015 = 69.985 rounds half-up.
    assert totals.net_revenue == "69.99"


def test_compute_totals_is_deterministic():
    items = [JibLineItem(type="revenue", description="Oil", amount="1.10")]

    assert JibStatement.compute_totals(items) == JibStatement.compute_totals(
        items
    )


@pytest.mark.parametrize(
    "item",
    [
        JibLineItem(type="expense", description="Bad", amount="-5.00"),
        JibLineItem(type="revenue", description="Bad", amount="ten"),
        JibLineItem(
            type="revenue",
            description="Bad",
            quantity="-1",
            unit_cost="5.00",
        ),
    ],
)
def test_compute_totals_rejects_negative_or_malformed(item):
    with pytest.raises(
        ValidationError,
        match="Line item amounts must be non-negative decimal strings",
    ):
        JibStatement.compute_totals([item])


def test_compute_totals_requires_amount_or_quantity():
    item = JibLineItem(type="revenue", description="Empty", quantity="2")

    with pytest.raises(ValidationError, match="quantity and unitCost"):
        JibStatement.compute_totals([item])


def test_apply_interest_adds_to_balance():
    statement = _statement()

    statement.apply_interest("0.16", now=NOW)

    assert statement.current_balance == "100.16"
    assert statement.updated_at == NOW


def test_apply_interest_rejects_malformed_amount():
    statement = _statement()

    with pytest.raises(ValidationError):
        statement.apply_interest("0.1")

    assert statement.current_balance == "100.00"


def test_link_cash_call_records_id():
    statement = _statement()

    statement.link_cash_call("cc-1", now=NOW)

    assert statement.linked_cash_call_id == "cc-1"
    assert statement.updated_at == NOW


def test_mark_sent_only_from_draft():
    statement = _statement()
    statement.mark_sent(NOW)

    assert statement.status is JibStatementStatus.SENT
    assert statement.sent_at == NOW
    with pytest.raises(InvalidStateError):
        statement.mark_sent()


def test_mark_paid_requires_zero_balance():
    """Paying a statement with an open balance is rejected."""
    statement = _statement()

    with pytest.raises(InvalidStateError, match="currentBalance > 0"):
        statement.mark_paid()

    settled = _statement(current_balance="0.00")
    settled.mark_paid(NOW)
    assert settled.status is JibStatementStatus.PAID
    assert settled.paid_at == NOW
    with pytest.raises(InvalidStateError, match="already paid"):
        settled.mark_paid()


def test_line_items_are_returned_as_copies():
    item = JibLineItem(type="revenue", description="Oil", amount="1.00")
    statement = _statement(line_items=[item])

    returned = statement.line_items
    returned.append(item)

    assert len(statement.line_items) == 1
    assert statement.line_items[0] == item


def test_persistence_round_trip():
    statement = _statement(
        line_items=[
            JibLineItem(type="revenue", description="Oil", amount="1.00")
        ],
        status="sent",
        sent_at=NOW,
        linked_cash_call_id="cc-1",
    )

    record = statement.to_persistence()
    restored = JibStatement.from_persistence(record)

    assert restored.to_persistence() == record
    assert record.status == "sent"


def test_deserialize_line_items_reads_valid_payload():
    payload = [
        {"type": "revenue", "description": "Oil", "amount": "1.00"},
        {
            "type": "expense",
            "description": "LOE",
            "quantity": "2",
            "unitCost": "3.00",
        },
    ]

    items = deserialize_line_items(payload)

    assert items == (
        JibLineItem(type="revenue", description="Oil", amount="1.00"),
        JibLineItem(
            type="expense",
            description="LOE",
            quantity="2",
            unit_cost="3.00",
        ),
    )


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"type": "revenue"},
        ["oops"],
        [{"type": "fee", "description": "x"}],
        [{"type": "revenue", "description": 5}],
        [{"type": "revenue", "description": "x", "amount": 1.0}],
    ],
)
def test_deserialize_line_items_returns_none_for_malformed(payload):
    assert deserialize_line_items(payload) is None


@pytest.mark.parametrize("line_type", ["Revenue", "EXPENSE", "royalty", ""])
def test_compute_totals_rejects_unknown_line_type(line_type):
    """Only revenue and expense lines may contribute to totals."""
    item = JibLineItem(type=line_type, description="Oil", amount="100.00")

    with pytest.raises(
        ValidationError,
        match="Line item type must be revenue or expense",
    ):
        JibStatement.compute_totals([item])


def test_mark_paid_rejects_malformed_balance():
    statement = _statement(current_balance="0.0")

    with pytest.raises(ValidationError, match="currentBalance"):
        statement.mark_paid()

    assert statement.status is JibStatementStatus.DRAFT
