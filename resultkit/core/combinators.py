"""Bulk and async combinators over Results.

combine:
    Collapses an ordered sequence of Results into one Result holding the
    list of data. First failure wins: scanning stops at the first Failure,
    which is returned as-is. Errors are never aggregated.

run_async:
    Runs a Result-producing supplier on an executor worker and returns an
    asyncio future (task) resolving to a Result. Failures are always data:
    if the supplier raises, or the task is cancelled while waiting on the
    worker, the future resolves to a generic Failure instead of raising.

Usage:
    >>> combine([success(1), success(2), success(3)]).data
    [1, 2, 3]
    >>>
    >>> async def handler() -> Result[Report]:
    ...     future = run_async(lambda: build_report(account_id))
    ...     return await future  # never raises for supplier errors
"""

import asyncio
import contextvars
import functools
from collections.abc import Callable, Iterable
from concurrent.futures import Executor
from typing import TypeVar

from resultkit.core.factory import ResultFactory
from resultkit.core.result import Failure, Result
from resultkit.domain.protocols.logger_protocol import LoggerProtocol
from resultkit.domain.protocols.result_messages_protocol import ResultMessagesProtocol

T = TypeVar("T")

CANCELLED_DETAIL = "async operation was cancelled before completing"


def combine(
    results: Iterable[Result[T]],
    *,
    messages: ResultMessagesProtocol | None = None,
) -> Result[list[T]]:
    """Combine Results, first failure wins.

    Args:
        results: Results in order. May be a lazy iterable; items after the
            first Failure are never pulled.
        messages: Message source for the combined Success.

    Returns:
        The first Failure encountered, or Success(list of data in order).
        An empty input yields Success([]).
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.data)
    return ResultFactory(messages).success(values)


def run_async(
    supplier: Callable[[], Result[T]],
    *,
    executor: Executor | None = None,
    messages: ResultMessagesProtocol | None = None,
    logger: LoggerProtocol | None = None,
) -> "asyncio.Future[Result[T]]":
    """Schedule supplier on a worker and return a future Result.

    The executor is owned by the caller or the container, never by this
    function. The calling coroutine is not blocked: the returned task
    is already scheduled.

    Args:
        supplier: Zero-argument callable producing a Result. Runs in a
            worker thread.
        executor: Executor to run supplier on. Defaults to the container's
            get_async_executor(), which is the loop default unless
            RESULTKIT_ASYNC_MAX_WORKERS is set.
        messages: Message source for converted failures.
        logger: Logger for converted exceptions (container default if None).

    Returns:
        Task resolving to supplier's Result, or to a GenericError Failure
        when supplier raises or the wait is cancelled.

    Raises:
        RuntimeError: If called without a running event loop.

    Notes:
        - Only Exception subclasses raised by supplier are converted;
          SystemExit and KeyboardInterrupt propagate.
        - supplier runs in a copy of the caller's contextvars context, so
          current_unit_of_work() on the worker is the caller's.
        - Cancelling the task at any point resolves it to a Failure; the
          worker thread itself cannot be interrupted and its eventual
          result is discarded.
    """
    loop = asyncio.get_running_loop()
    factory = ResultFactory(messages)
    if executor is None or logger is None:
        from resultkit.core.container import get_async_executor, get_logger

        executor = executor or get_async_executor()
        logger = logger or get_logger()

    # Supplier sees the caller's contextvars (ambient unit of work included)
    call = functools.partial(
        contextvars.copy_context().run, _call_supplier, supplier, factory, logger
    )
    # Eager start: the task is already awaiting the worker when returned
    return asyncio.Task(
        _resolve(loop, call, supplier, executor, factory, logger),
        loop=loop,
        eager_start=True,
    )


async def _resolve(
    loop: asyncio.AbstractEventLoop,
    call: Callable[[], Result[T]],
    supplier: Callable[[], Result[T]],
    executor: Executor | None,
    factory: ResultFactory,
    logger: LoggerProtocol,
) -> Result[T]:
    try:
        return await loop.run_in_executor(executor, call)
    except asyncio.CancelledError:
        logger.warning("async_supplier_cancelled", supplier=_name_of(supplier))
        return factory.failure(factory.messages.default_error_message(CANCELLED_DETAIL))
    except Exception as exc:
        # Scheduling failures (e.g. executor already shut down)
        logger.error("async_supplier_failed", error=exc, supplier=_name_of(supplier))
        return factory.failure_from_exception(exc)


def _call_supplier(
    supplier: Callable[[], Result[T]],
    factory: ResultFactory,
    logger: LoggerProtocol,
) -> Result[T]:
    try:
        return supplier()
    except Exception as exc:
        logger.error("async_supplier_failed", error=exc, supplier=_name_of(supplier))
        return factory.failure_from_exception(exc)


def _name_of(func: Callable[..., object]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
