"""Tests for CreateCashCallUseCase."""

from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import (
    CreateCashCallCommand,
    CreateCashCallUseCase,
)
from src.domain.errors import ValidationError
from src.domain.models import (
    CashCallConsentStatus,
    CashCallStatus,
    CashCallType,
)


def _command(**overrides) -> CreateCashCallCommand:
    attrs = {
        "organization_id": "org-1",
        "lease_id": "lease-1",
        "partner_id": "partner-1",
        "billing_month": "2025-01-01",
        "amount": "1000.00",
    }
    attrs.update(overrides)
    return CreateCashCallCommand(**attrs)


def test_creates_draft_and_records_event(cash_call_repository, outbox, logger):
    """A valid command persists a DRAFT call and emits CashCallCreated."""
    use_case = CreateCashCallUseCase(cash_call_repository, outbox, logger=logger)

    cash_call_id = use_case.execute(_command(type="SUPPLEMENTAL"))

    stored = cash_call_repository.find_by_id(cash_call_id)
    assert stored.status is CashCallStatus.DRAFT
    assert stored.type is CashCallType.SUPPLEMENTAL
    assert stored.consent_status is CashCallConsentStatus.NOT_REQUIRED
    assert cash_call_repository.saves == 1

    [event] = outbox.events
    assert event.event_type == "CashCallCreated"
    assert event.aggregate_type == "CashCall"
    assert event.aggregate_id == cash_call_id
    assert event.organization_id == "org-1"
    assert event.payload == {
        "id": cash_call_id,
        "partner_id": "partner-1",
        "lease_id": "lease-1",
        "amount": "1000.00",
    }
    logger.info.assert_called_once()


def test_consent_required_starts_required(cash_call_repository, outbox, logger):
    use_case = CreateCashCallUseCase(cash_call_repository, outbox, logger=logger)

    cash_call_id = use_case.execute(_command(consent_required=True))

    stored = cash_call_repository.find_by_id(cash_call_id)
    assert stored.consent_status is CashCallConsentStatus.REQUIRED


@pytest.mark.parametrize(
    "overrides",
    [
        {"billing_month": "2025-01"},
        {"amount": "1000"},
        {"amount": "10.5"},
        {"due_date": "31-01-2025"},
        {"interest_rate_percent": "12.345"},
    ],
)
def test_invalid_input_persists_nothing(
    overrides,
    cash_call_repository,
    outbox,
    logger,
):
    """Validation failures happen before any write."""
    use_case = CreateCashCallUseCase(cash_call_repository, outbox, logger=logger)

    with pytest.raises(ValidationError):
        use_case.execute(_command(**overrides))

    assert cash_call_repository.records == {}
    assert outbox.events == []


class RecordingUnitOfWork:
    """Unit of work fake tracking commit and rollback."""

    def __init__(self) -> None:
        self.handle = object()
        self.committed = False
        self.rolled_back = False

    @contextmanager
    def transaction(self):
        try:
            yield self.handle
        except Exception:
            self.rolled_back = True
            raise
        self.committed = True


def test_cash_call_and_event_share_one_transaction(
    cash_call_repository,
    outbox,
    logger,
):
    unit_of_work = RecordingUnitOfWork()
    use_case = CreateCashCallUseCase(
        cash_call_repository,
        outbox,
        logger=logger,
        unit_of_work=unit_of_work,
    )

    use_case.execute(_command())

    assert cash_call_repository.transactions == [unit_of_work.handle]
    assert outbox.transactions == [unit_of_work.handle]
    assert unit_of_work.committed is True


def test_outbox_failure_rolls_back_cash_call(cash_call_repository, logger):
    """A failed event write aborts the shared transaction."""
    unit_of_work = RecordingUnitOfWork()
    failing_outbox = MagicMock()
    failing_outbox.record.side_effect = RuntimeError("outbox down")
    use_case = CreateCashCallUseCase(
        cash_call_repository,
        failing_outbox,
        logger=logger,
        unit_of_work=unit_of_work,
    )

    with pytest.raises(RuntimeError):
        use_case.execute(_command())

    assert unit_of_work.rolled_back is True
    assert unit_of_work.committed is False
    logger.info.assert_not_called()
