"""Application ports package."""

from .cash_call_repository import CashCallFilters, CashCallRepositoryPort
from .database import DatabaseEnginePort
from .jib_statement_repository import (
    JibStatementRepositoryPort,
    NewJibStatement,
)
from .lease_repository import LeaseRepositoryPort
from .outbox import OutboxPort
from .partners_repository import PartnersRepositoryPort
from .unit_of_work import UnitOfWorkPort

__all__ = [
    "CashCallFilters",
    "CashCallRepositoryPort",
    "DatabaseEnginePort",
    "JibStatementRepositoryPort",
    "NewJibStatement",
    "LeaseRepositoryPort",
    "OutboxPort",
    "PartnersRepositoryPort",
    "UnitOfWorkPort",
]
