"""Core shared kernel.

Foundational types used across all layers:
- Result types for railway-oriented programming
- Failure taxonomy carried by Failure
- Enums (error categories, event triggers)

The core module has NO dependencies on infrastructure or presentation.
"""

from resultkit.core.enums import ErrorCategory, EventTrigger
from resultkit.core.errors import (
    ConflictError,
    ForbiddenError,
    GenericError,
    InvalidResultStateError,
    NotFoundError,
    ResultError,
    UnauthorizedError,
    ValidationError,
)
from resultkit.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "ErrorCategory",
    "EventTrigger",
    "Failure",
    "ForbiddenError",
    "GenericError",
    "InvalidResultStateError",
    "NotFoundError",
    "Result",
    "ResultError",
    "Success",
    "UnauthorizedError",
    "ValidationError",
]
