"""In-memory unit of work.

Stages writes against a plain dictionary and applies them only when the
unit of work commits. Used by tests and by services without a database;
it behaves like a transaction: staged writes are visible through the unit
of work while it is active and never reach the store if it rolls back.

Usage:
    store: dict[str, object] = {}
    with InMemoryUnitOfWork(store) as uow:
        uow.write("user:1", user)
        result = register(user)   # may mark uow rollback-only
    # store has "user:1" only if nothing marked the unit of work
"""

from types import TracebackType
from typing import Any, Self

from resultkit.infrastructure.persistence.unit_of_work import BaseUnitOfWork


class InMemoryUnitOfWork(BaseUnitOfWork):
    """Transactional view over a dictionary store.

    Supports both `with` and `async with`.

    Args:
        store: Committed state. A new empty dict if None.

    Attributes:
        store: Committed state, shared with whoever passed it in.
        committed: True once the last scope ended with a commit.
        rolled_back: True once the last scope ended with a rollback.
    """

    def __init__(self, store: dict[str, Any] | None = None) -> None:
        super().__init__()
        self.store: dict[str, Any] = store if store is not None else {}
        self._pending: dict[str, Any] = {}
        self.committed = False
        self.rolled_back = False

    def write(self, key: str, value: Any) -> None:
        """Stage a write; applied to the store on commit."""
        self._pending[key] = value

    def read(self, key: str, default: Any = None) -> Any:
        """Read through staged writes, then the committed store."""
        if key in self._pending:
            return self._pending[key]
        return self.store.get(key, default)

    def commit(self) -> None:
        """Apply staged writes, unless marked rollback-only."""
        if self.is_rollback_only:
            self.rollback()
            return
        self.store.update(self._pending)
        self._pending.clear()
        self.committed = True

    def rollback(self) -> None:
        """Discard staged writes."""
        self._pending.clear()
        self.rolled_back = True

    def __enter__(self) -> Self:
        self._bind()
        self._pending.clear()
        self.committed = False
        self.rolled_back = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None:
                self.rollback()
            else:
                self.commit()
        finally:
            self._unbind()

    async def __aenter__(self) -> Self:
        return self.__enter__()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.__exit__(exc_type, exc, tb)
