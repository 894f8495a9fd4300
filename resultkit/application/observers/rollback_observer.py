"""Rollback observer.

Wraps an operation so that a Failure it returns marks the ambient unit of
work rollback-only. A Success leaves the unit of work alone, so whoever
opened it commits normally.

Contract:
    - The observer never opens, commits or rolls back a unit of work; it
      only marks an existing one.
    - The returned value is inspected exactly once, right after the wrapped
      call returns and before the caller receives it. The operation is
      never re-invoked.
    - The returned value is passed back unchanged (non-Result values too).
    - Exceptions raised by the operation propagate untouched.
    - A Failure with no unit of work in scope is logged and otherwise
      ignored.

Usage:
    @rollback_on_failure
    async def register_user(session: AsyncSession, command: RegisterUser) -> Result[User]:
        session.add(user)
        if await email_taken(session, command.email):
            return conflict("Email already registered")  # insert rolled back
        return success(user)

    async with SqlAlchemyUnitOfWork(session_factory) as uow:
        result = await register_user(uow.session, command)
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

from resultkit.core.result import Failure
from resultkit.domain.protocols.logger_protocol import LoggerProtocol
from resultkit.domain.protocols.unit_of_work_protocol import (
    UnitOfWorkProtocol,
    UnitOfWorkResolver,
)
from resultkit.infrastructure.persistence.unit_of_work import current_unit_of_work

P = ParamSpec("P")
R = TypeVar("R")

UnitOfWorkSource = UnitOfWorkProtocol | UnitOfWorkResolver


def wrap_rollback(
    operation: Callable[P, R],
    *,
    unit_of_work: UnitOfWorkSource | None = None,
    logger: LoggerProtocol | None = None,
) -> Callable[P, R]:
    """Return operation wrapped with the rollback observer.

    Args:
        operation: Sync or async callable returning a Result.
        unit_of_work: Unit of work to mark, or a zero-argument resolver
            returning one. Defaults to current_unit_of_work.
        logger: Logger (container default if None).

    Returns:
        Callable with the same signature as operation.
    """
    resolve = _resolver_for(unit_of_work)
    operation_name = getattr(operation, "__name__", repr(operation))

    if inspect.iscoroutinefunction(operation):

        @functools.wraps(operation)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            result = await operation(*args, **kwargs)
            _inspect_result(result, operation_name, resolve, logger)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(operation)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        result = operation(*args, **kwargs)
        _inspect_result(result, operation_name, resolve, logger)
        return result

    return wrapper


@overload
def rollback_on_failure(func: Callable[P, R]) -> Callable[P, R]: ...


@overload
def rollback_on_failure(
    func: None = None,
    *,
    unit_of_work: UnitOfWorkSource | None = None,
    logger: LoggerProtocol | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def rollback_on_failure(
    func: Callable[P, R] | None = None,
    *,
    unit_of_work: UnitOfWorkSource | None = None,
    logger: LoggerProtocol | None = None,
) -> Any:
    """Decorator form of wrap_rollback.

    Usable bare (`@rollback_on_failure`) or configured
    (`@rollback_on_failure(unit_of_work=uow)`).
    """

    def decorator(operation: Callable[P, R]) -> Callable[P, R]:
        return wrap_rollback(operation, unit_of_work=unit_of_work, logger=logger)

    if func is not None:
        return decorator(func)
    return decorator


def _resolver_for(source: UnitOfWorkSource | None) -> UnitOfWorkResolver:
    if source is None:
        return current_unit_of_work
    if hasattr(source, "mark_rollback_only"):
        return lambda: source  # type: ignore[return-value]
    return source  # type: ignore[return-value]


def _inspect_result(
    result: object,
    operation_name: str,
    resolve: UnitOfWorkResolver,
    logger: LoggerProtocol | None,
) -> None:
    if not isinstance(result, Failure):
        return

    if logger is None:
        from resultkit.core.container import get_logger

        logger = get_logger()

    unit_of_work = resolve()
    if unit_of_work is None:
        logger.warning(
            "rollback_skipped_no_unit_of_work",
            operation_name=operation_name,
            error_category=result.error.category.value,
        )
        return

    unit_of_work.mark_rollback_only()
    logger.debug(
        "rollback_marked",
        operation_name=operation_name,
        error_category=result.error.category.value,
        error_message=result.error.message,
    )
