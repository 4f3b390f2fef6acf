"""Composition root for wiring infrastructure adapters and use cases."""

from src.application.ports.cash_call_repository import CashCallRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.jib_statement_repository import (
    JibStatementRepositoryPort,
)
from src.application.ports.lease_repository import LeaseRepositoryPort
from src.application.ports.outbox import OutboxPort
from src.application.ports.partners_repository import PartnersRepositoryPort
from src.application.use_cases.approve_cash_call import ApproveCashCallUseCase
from src.application.use_cases.create_cash_call import CreateCashCallUseCase
from src.application.use_cases.create_jib_statement import (
    CreateJibStatementUseCase,
)
from src.application.use_cases.link_jib_cash_call import (
    UpdateJibLinkCashCallUseCase,
)
from src.application.use_cases.list_cash_calls import ListCashCallsUseCase
from src.application.use_cases.record_cash_call_consent import (
    RecordCashCallConsentUseCase,
)
from src.application.use_cases.update_cash_call_status import (
    UpdateCashCallStatusUseCase,
)
from src.domain.models.interest import InterestPolicy
from src.infrastructure.cash_call_repository import SqlAlchemyCashCallRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.jib_statement_repository import (
    SqlAlchemyJibStatementRepository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.outbox import SqlAlchemyOutbox
from src.infrastructure.reference_repositories import (
    SqlAlchemyLeaseRepository,
    SqlAlchemyPartnersRepository,
)
from src.infrastructure.settings import JibSettings
from src.infrastructure.unit_of_work import SqlAlchemyUnitOfWork


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_cash_call_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CashCallRepositoryPort:
    """Return the cash call repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCashCallRepository(resolved_db)


def build_jib_statement_repository(
    db_port: DatabaseEnginePort | None = None,
) -> JibStatementRepositoryPort:
    """Return the JIB statement repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyJibStatementRepository(resolved_db)


def build_lease_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LeaseRepositoryPort:
    """Return the lease lookup repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLeaseRepository(resolved_db)


def build_partners_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PartnersRepositoryPort:
    """Return the partner lookup repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPartnersRepository(resolved_db)


def build_outbox(db_port: DatabaseEnginePort | None = None) -> OutboxPort:
    """Return the outbox adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyOutbox(resolved_db, logger=get_app_logger())


def build_default_interest_policy() -> InterestPolicy:
    """Return the interest policy configured through the environment."""
    return JibSettings.from_env().interest_policy()


def build_create_cash_call_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CreateCashCallUseCase:
    """Return the create-cash-call use case wired to SQLAlchemy adapters."""
    resolved_db = db_port or build_database_adapter()
    return CreateCashCallUseCase(
        build_cash_call_repository(resolved_db),
        build_outbox(resolved_db),
        logger=get_app_logger(),
        unit_of_work=SqlAlchemyUnitOfWork(resolved_db),
    )


def build_approve_cash_call_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ApproveCashCallUseCase:
    """Return the approve-cash-call use case."""
    return ApproveCashCallUseCase(
        build_cash_call_repository(db_port),
        logger=get_app_logger(),
    )


def build_record_cash_call_consent_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RecordCashCallConsentUseCase:
    """Return the record-consent use case."""
    return RecordCashCallConsentUseCase(
        build_cash_call_repository(db_port),
        logger=get_app_logger(),
    )


def build_update_cash_call_status_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> UpdateCashCallStatusUseCase:
    """Return the status-transition use case."""
    return UpdateCashCallStatusUseCase(
        build_cash_call_repository(db_port),
        logger=get_app_logger(),
    )


def build_list_cash_calls_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListCashCallsUseCase:
    """Return the cash call listing use case."""
    return ListCashCallsUseCase(build_cash_call_repository(db_port))


def build_create_jib_statement_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CreateJibStatementUseCase:
    """Return the create-statement use case."""
    resolved_db = db_port or build_database_adapter()
    return CreateJibStatementUseCase(
        build_jib_statement_repository(resolved_db),
        build_lease_repository(resolved_db),
        build_partners_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_link_jib_cash_call_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> UpdateJibLinkCashCallUseCase:
    """Return the link-statement use case."""
    resolved_db = db_port or build_database_adapter()
    return UpdateJibLinkCashCallUseCase(
        build_jib_statement_repository(resolved_db),
        build_cash_call_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_cash_call_repository",
    "build_jib_statement_repository",
    "build_lease_repository",
    "build_partners_repository",
    "build_outbox",
    "build_default_interest_policy",
    "build_create_cash_call_use_case",
    "build_approve_cash_call_use_case",
    "build_record_cash_call_consent_use_case",
    "build_update_cash_call_status_use_case",
    "build_list_cash_calls_use_case",
    "build_create_jib_statement_use_case",
    "build_link_jib_cash_call_use_case",
]
