"""In-memory port fakes shared by the use case tests."""

from dataclasses import fields
from unittest.mock import MagicMock

import pytest

from src.application.ports.cash_call_repository import (
    CashCallFilters,
    CashCallRepositoryPort,
)
from src.application.ports.jib_statement_repository import (
    JibStatementRepositoryPort,
    NewJibStatement,
)
from src.application.ports.lease_repository import LeaseRepositoryPort
from src.application.ports.outbox import OutboxPort
from src.application.ports.partners_repository import PartnersRepositoryPort
from src.domain.models import (
    CashCall,
    JibStatement,
    LeaseRecord,
    OutboxEvent,
    PartnerRecord,
)


class InMemoryCashCallRepository(CashCallRepositoryPort):
    """Fake repository storing persistence records keyed by id."""

    def __init__(self) -> None:
        self.records = {}
        self.saves = 0
        self.transactions = []

    def add(self, cash_call: CashCall) -> CashCall:
        self.records[cash_call.id] = cash_call.to_persistence()
        return cash_call

    def save(self, cash_call: CashCall, transaction=None) -> CashCall:
        self.saves += 1
        self.transactions.append(transaction)
        self.records[cash_call.id] = cash_call.to_persistence()
        return cash_call

    def find_by_id(self, cash_call_id: str) -> CashCall | None:
        record = self.records.get(cash_call_id)
        if record is None:
            return None
        return CashCall.from_persistence(record)

    def find_by_organization_id(
        self,
        organization_id: str,
        filters: CashCallFilters | None = None,
    ) -> list[CashCall]:
        self.last_filters = filters
        return [
            CashCall.from_persistence(record)
            for record in self.records.values()
            if record.organization_id == organization_id
        ]


class InMemoryJibStatementRepository(JibStatementRepositoryPort):
    """Fake statement repository issuing sequential ids."""

    def __init__(self) -> None:
        self.records = {}
        self.created = []
        self.saves = 0

    def add(self, statement: JibStatement) -> JibStatement:
        self.records[statement.id] = statement.to_persistence()
        return statement

    def find_by_id(self, statement_id: str) -> JibStatement | None:
        record = self.records.get(statement_id)
        if record is None:
            return None
        return JibStatement.from_persistence(record)

    def create(self, statement: NewJibStatement) -> JibStatement:
        self.created.append(statement)
        values = {
            field.name: getattr(statement, field.name)
            for field in fields(statement)
        }
        entity = JibStatement(id=f"jib-{len(self.created)}", **values)
        return self.add(entity)

    def save(self, statement: JibStatement) -> JibStatement:
        self.saves += 1
        return self.add(statement)


class InMemoryLeaseRepository(LeaseRepositoryPort):
    def __init__(self, leases: list[LeaseRecord]) -> None:
        self._leases = {lease.id: lease for lease in leases}

    def find_by_id(self, lease_id: str) -> LeaseRecord | None:
        return self._leases.get(lease_id)


class InMemoryPartnersRepository(PartnersRepositoryPort):
    def __init__(self, partners: list[PartnerRecord]) -> None:
        self._partners = partners

    def find_by_id(
        self,
        partner_id: str,
        organization_id: str,
    ) -> PartnerRecord | None:
        for partner in self._partners:
            if (
                partner.id == partner_id
                and partner.organization_id == organization_id
            ):
                return partner
        return None


class RecordingOutbox(OutboxPort):
    def __init__(self) -> None:
        self.events: list[OutboxEvent] = []
        self.transactions = []

    def record(self, event: OutboxEvent, transaction=None) -> None:
        self.events.append(event)
        self.transactions.append(transaction)


@pytest.fixture
def cash_call_repository():
    return InMemoryCashCallRepository()


@pytest.fixture
def jib_statement_repository():
    return InMemoryJibStatementRepository()


@pytest.fixture
def lease_repository():
    return InMemoryLeaseRepository(
        [
            LeaseRecord(id="lease-1", organization_id="org-1"),
            LeaseRecord(id="lease-9", organization_id="org-2"),
        ]
    )


@pytest.fixture
def partners_repository():
    return InMemoryPartnersRepository(
        [PartnerRecord(id="partner-1", organization_id="org-1", name="Acme")]
    )


@pytest.fixture
def outbox():
    return RecordingOutbox()


@pytest.fixture
def logger():
    return MagicMock()
