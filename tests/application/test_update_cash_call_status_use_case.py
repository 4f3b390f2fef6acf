"""Tests for UpdateCashCallStatusUseCase."""

from datetime import datetime, timezone

import pytest

from src.application.use_cases import UpdateCashCallStatusUseCase
from src.domain.errors import InvalidStateError, NotFoundError, ValidationError
from src.domain.models import CashCall, CashCallStatus


NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


def _seed(repository, status="DRAFT") -> None:
    repository.add(
        CashCall(
            id="cc-1",
            organization_id="org-1",
            lease_id="lease-1",
            partner_id="partner-1",
            billing_month="2025-01-01",
            amount="1000.00",
            status=status,
        )
    )


@pytest.mark.parametrize(
    "current, target",
    [
        ("DRAFT", "SENT"),
        ("DRAFT", "REJECTED"),
        ("SENT", "REJECTED"),
        ("APPROVED", "PAID"),
        ("APPROVED", "DEFAULTED"),
        ("DEFAULTED", "PAID"),
    ],
)
def test_allowed_transitions_are_saved(
    current,
    target,
    cash_call_repository,
    logger,
):
    _seed(cash_call_repository, current)
    use_case = UpdateCashCallStatusUseCase(cash_call_repository, logger=logger)

    use_case.execute("org-1", "cc-1", target, now=NOW)

    stored = cash_call_repository.find_by_id("cc-1")
    assert stored.status is CashCallStatus(target)
    assert stored.updated_at == NOW


def test_forbidden_transition_is_logged_and_raised(
    cash_call_repository,
    logger,
):
    _seed(cash_call_repository, "PAID")
    use_case = UpdateCashCallStatusUseCase(cash_call_repository, logger=logger)

    with pytest.raises(InvalidStateError):
        use_case.execute("org-1", "cc-1", "SENT")

    logger.warning.assert_called_once()
    assert cash_call_repository.saves == 0


@pytest.mark.parametrize("target", ["APPROVED", "DRAFT", "ARCHIVED"])
def test_statuses_outside_update_flow_are_rejected(
    target,
    cash_call_repository,
    logger,
):
    """Approval must go through the consent-gated use case."""
    _seed(cash_call_repository)
    use_case = UpdateCashCallStatusUseCase(cash_call_repository, logger=logger)

    with pytest.raises(ValidationError):
        use_case.execute("org-1", "cc-1", target)


def test_missing_cash_call(cash_call_repository, logger):
    use_case = UpdateCashCallStatusUseCase(cash_call_repository, logger=logger)

    with pytest.raises(NotFoundError):
        use_case.execute("org-1", "cc-404", "SENT")
