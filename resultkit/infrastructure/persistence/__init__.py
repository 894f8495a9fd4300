"""Unit of work adapters and the ambient binding."""

from resultkit.infrastructure.persistence.in_memory_unit_of_work import (
    InMemoryUnitOfWork,
)
from resultkit.infrastructure.persistence.unit_of_work import (
    BaseUnitOfWork,
    current_unit_of_work,
)

__all__ = ["BaseUnitOfWork", "InMemoryUnitOfWork", "current_unit_of_work"]
