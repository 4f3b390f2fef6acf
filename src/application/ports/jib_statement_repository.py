"""Port for JIB statement persistence."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from src.domain.models.jib_statement import JibLineItem, JibStatement


@dataclass(frozen=True)
class NewJibStatement:
    """Validated input for creating a statement.

    Instances are only built by the create-statement use case after every
    date, amount, percentage and status rule has been checked.
    """

    organization_id: str
    lease_id: str
    partner_id: str
    statement_period_start: str
    statement_period_end: str
    due_date: str | None
    gross_revenue: str
    net_revenue: str
    working_interest_share: str
    royalty_share: str
    previous_balance: str
    current_balance: str
    line_items: tuple[JibLineItem, ...] | None
    status: str
    sent_at: datetime | None
    paid_at: datetime | None


class JibStatementRepositoryPort(Protocol):
    """Port exposing read and write access to JIB statements."""

    def find_by_id(self, statement_id: str) -> JibStatement | None:
        """Return the statement with the given id, if any."""

    def create(self, statement: NewJibStatement) -> JibStatement:
        """Persist a new statement and return it with its generated id."""

    def save(self, statement: JibStatement) -> JibStatement:
        """Persist changes to an existing statement."""


__all__ = ["NewJibStatement", "JibStatementRepositoryPort"]
