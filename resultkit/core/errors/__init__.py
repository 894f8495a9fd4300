"""Core errors package.

Exports the failure taxonomy (data carried by Failure) and the exceptions
raised on API misuse.

Usage:
    from resultkit.core.errors import NotFoundError, ValidationError
"""

from resultkit.core.errors.exceptions import (
    InvalidResultStateError,
    ResultKitError,
    UnitOfWorkError,
)
from resultkit.core.errors.result_error import (
    ConflictError,
    ForbiddenError,
    GenericError,
    NotFoundError,
    ResultError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "ResultError",
    "NotFoundError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "GenericError",
    "ResultKitError",
    "InvalidResultStateError",
    "UnitOfWorkError",
]
