"""Port grouping several persistence writes into one transaction."""

from contextlib import AbstractContextManager
from typing import Any, Protocol


class UnitOfWorkPort(Protocol):
    """Port opening a transaction shared by repositories and the outbox."""

    def transaction(self) -> AbstractContextManager[Any]:
        """Return a context manager yielding an opaque transaction handle.

        The handle is passed to ``save``/``record`` calls; everything
        commits on clean exit and rolls back when the block raises.
        """


__all__ = ["UnitOfWorkPort"]
