"""Application use cases package."""

from .approve_cash_call import ApproveCashCallUseCase
from .create_cash_call import CreateCashCallCommand, CreateCashCallUseCase
from .create_jib_statement import (
    CreateJibStatementCommand,
    CreateJibStatementUseCase,
)
from .link_jib_cash_call import (
    LinkJibCashCallResult,
    UpdateJibLinkCashCallUseCase,
)
from .list_cash_calls import ListCashCallsUseCase
from .record_cash_call_consent import RecordCashCallConsentUseCase
from .update_cash_call_status import UpdateCashCallStatusUseCase

__all__ = [
    "ApproveCashCallUseCase",
    "CreateCashCallCommand",
    "CreateCashCallUseCase",
    "CreateJibStatementCommand",
    "CreateJibStatementUseCase",
    "LinkJibCashCallResult",
    "UpdateJibLinkCashCallUseCase",
    "ListCashCallsUseCase",
    "RecordCashCallConsentUseCase",
    "UpdateCashCallStatusUseCase",
]
