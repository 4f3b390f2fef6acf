"""Tests for the composition root."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases import (
    ApproveCashCallUseCase,
    CreateCashCallUseCase,
    CreateJibStatementUseCase,
    ListCashCallsUseCase,
    RecordCashCallConsentUseCase,
    UpdateCashCallStatusUseCase,
    UpdateJibLinkCashCallUseCase,
)
from src.infrastructure import container
from src.infrastructure import settings as settings_module
from src.infrastructure.cash_call_repository import SqlAlchemyCashCallRepository
from src.infrastructure.jib_statement_repository import (
    SqlAlchemyJibStatementRepository,
)
from src.infrastructure.outbox import SqlAlchemyOutbox
from src.infrastructure.reference_repositories import (
    SqlAlchemyLeaseRepository,
    SqlAlchemyPartnersRepository,
)
from src.infrastructure.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture(autouse=True)
def _fake_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)


def test_create_cash_call_wiring_shares_database_port():
    db_port = MagicMock()

    use_case = container.build_create_cash_call_use_case(db_port)

    assert isinstance(use_case, CreateCashCallUseCase)
    assert isinstance(use_case._cash_call_repository, SqlAlchemyCashCallRepository)
    assert isinstance(use_case._outbox, SqlAlchemyOutbox)
    assert use_case._cash_call_repository._db_port is db_port
    assert use_case._outbox._db_port is db_port
    assert isinstance(use_case._unit_of_work, SqlAlchemyUnitOfWork)
    assert use_case._unit_of_work._db_port is db_port


def test_create_jib_statement_wiring():
    db_port = MagicMock()

    use_case = container.build_create_jib_statement_use_case(db_port)

    assert isinstance(use_case, CreateJibStatementUseCase)
    assert isinstance(
        use_case._jib_statement_repository,
        SqlAlchemyJibStatementRepository,
    )
    assert isinstance(use_case._lease_repository, SqlAlchemyLeaseRepository)
    assert isinstance(
        use_case._partners_repository,
        SqlAlchemyPartnersRepository,
    )


@pytest.mark.parametrize(
    "builder, expected",
    [
        ("build_approve_cash_call_use_case", ApproveCashCallUseCase),
        (
            "build_record_cash_call_consent_use_case",
            RecordCashCallConsentUseCase,
        ),
        (
            "build_update_cash_call_status_use_case",
            UpdateCashCallStatusUseCase,
        ),
        ("build_list_cash_calls_use_case", ListCashCallsUseCase),
        ("build_link_jib_cash_call_use_case", UpdateJibLinkCashCallUseCase),
    ],
)
def test_builders_return_use_cases(builder, expected):
    assert isinstance(getattr(container, builder)(MagicMock()), expected)


def test_default_adapter_is_used_without_port(monkeypatch):
    adapter = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: adapter)

    repository = container.build_cash_call_repository()

    assert repository._db_port is adapter


def test_default_interest_policy_from_environment(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("JIB_INTEREST_RATE_PERCENT", "8.00")
    monkeypatch.setenv("JIB_DAY_COUNT_BASIS", "360")

    policy = container.build_default_interest_policy()

    assert policy.annual_interest_rate_percent == "8.00"
    assert policy.day_count_basis == 360
