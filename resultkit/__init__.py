"""resultkit: explicit success/failure values for service code.

Usage:
    from resultkit import (
        EventTrigger,
        Result,
        not_found,
        result_operation,
        success,
    )

    @result_operation(publish=EventTrigger.ON_SUCCESS)
    async def get_user(user_id: int) -> Result[User]:
        user = await repo.find(user_id)
        if user is None:
            return not_found(f"User {user_id} not found")
        return success(user)
"""

from resultkit.application.observers import (
    publish_event,
    result_operation,
    rollback_on_failure,
    wrap_event,
    wrap_rollback,
)
from resultkit.core.combinators import combine, run_async
from resultkit.core.enums import ErrorCategory, EventTrigger
from resultkit.core.errors import (
    ConflictError,
    ForbiddenError,
    GenericError,
    InvalidResultStateError,
    NotFoundError,
    ResultError,
    ResultKitError,
    UnauthorizedError,
    UnitOfWorkError,
    ValidationError,
)
from resultkit.core.factory import (
    ResultFactory,
    conflict,
    failure,
    failure_from_exception,
    forbidden,
    not_found,
    success,
    unauthorized,
    validation_failure,
)
from resultkit.core.result import Failure, Result, Success
from resultkit.domain.events import ResultEvent
from resultkit.infrastructure.persistence import InMemoryUnitOfWork, current_unit_of_work

__version__ = "0.1.0"

__all__ = [
    "ConflictError",
    "ErrorCategory",
    "EventTrigger",
    "Failure",
    "ForbiddenError",
    "GenericError",
    "InMemoryUnitOfWork",
    "InvalidResultStateError",
    "NotFoundError",
    "Result",
    "ResultError",
    "ResultEvent",
    "ResultFactory",
    "ResultKitError",
    "Success",
    "UnauthorizedError",
    "UnitOfWorkError",
    "ValidationError",
    "combine",
    "conflict",
    "current_unit_of_work",
    "failure",
    "failure_from_exception",
    "forbidden",
    "not_found",
    "publish_event",
    "result_operation",
    "rollback_on_failure",
    "run_async",
    "success",
    "unauthorized",
    "validation_failure",
    "wrap_event",
    "wrap_rollback",
]
