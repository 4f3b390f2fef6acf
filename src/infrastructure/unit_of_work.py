"""SQLAlchemy unit of work sharing one connection across adapters."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.unit_of_work import UnitOfWorkPort


class SqlAlchemyUnitOfWork(UnitOfWorkPort):
    """Unit of work whose handle is a connection inside ``engine.begin()``."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection committed on exit, rolled back on error."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            yield conn


@contextmanager
def joined_or_new(
    db_port: DatabaseEnginePort,
    transaction: Connection | None,
) -> Iterator[Connection]:
    """Yield ``transaction`` when given, else a fresh ``engine.begin()``."""
    if transaction is not None:
        yield transaction
        return
    with db_port.get_engine().begin() as conn:
        yield conn


__all__ = ["SqlAlchemyUnitOfWork", "joined_or_new"]
