"""Unit of work protocol (port) for the rollback observer.

The rollback observer treats the ambient unit of work as an opaque handle
with a single operation: mark it so that, when it concludes, every effect
performed under it is undone instead of committed. Opening, committing and
rolling back belong to the adapter and to whoever opened it.

Implementations:
    - InMemoryUnitOfWork: resultkit/infrastructure/persistence/in_memory_unit_of_work.py
    - SqlAlchemyUnitOfWork: resultkit/infrastructure/persistence/sqlalchemy_unit_of_work.py
"""

from collections.abc import Callable
from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    """Handle to an ambient unit of work."""

    @property
    def is_rollback_only(self) -> bool:
        """True once mark_rollback_only() has been called."""
        ...

    def mark_rollback_only(self) -> None:
        """Mark the unit of work so it rolls back when it concludes.

        Idempotent: marking twice has the same effect as marking once.
        """
        ...


UnitOfWorkResolver = Callable[[], UnitOfWorkProtocol | None]
"""Zero-argument callable returning the ambient unit of work, or None."""
