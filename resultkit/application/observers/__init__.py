"""Result observers.

Decorators that inspect the Result an operation returns and perform a side
effect without changing it:

- rollback_on_failure: mark the ambient unit of work rollback-only on Failure
- publish_event: emit a ResultEvent according to a trigger policy
- result_operation: both, in the required order (rollback, then event)
"""

from collections.abc import Callable
from typing import Any

from resultkit.application.observers.event_observer import publish_event, wrap_event
from resultkit.application.observers.rollback_observer import (
    UnitOfWorkSource,
    rollback_on_failure,
    wrap_rollback,
)
from resultkit.core.enums import EventTrigger
from resultkit.domain.protocols.event_bus_protocol import EventBusProtocol
from resultkit.domain.protocols.logger_protocol import LoggerProtocol


def result_operation(
    *,
    rollback: bool = True,
    publish: EventTrigger | None = None,
    event_name: str | None = None,
    unit_of_work: UnitOfWorkSource | None = None,
    event_bus: EventBusProtocol | None = None,
    logger: LoggerProtocol | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Apply the rollback and event observers around one operation.

    The rollback observer is the inner wrapper, so on return it inspects
    the Result first; the event observer inspects it second; the caller
    then receives the unchanged Result.

    Args:
        rollback: Apply the rollback observer.
        publish: Trigger policy for the event observer; None disables it.
        event_name: Event name (defaults to the operation name).
        unit_of_work: Unit of work or resolver for the rollback observer.
        event_bus: Event sink for the event observer.
        logger: Logger for the rollback observer.

    Example:
        >>> @result_operation(publish=EventTrigger.BOTH)
        ... async def close_account(account_id: UUID) -> Result[Account]:
        ...     ...
    """

    def decorator(operation: Callable[..., Any]) -> Callable[..., Any]:
        wrapped = operation
        if rollback:
            wrapped = wrap_rollback(wrapped, unit_of_work=unit_of_work, logger=logger)
        if publish is not None:
            wrapped = wrap_event(
                wrapped,
                on=publish,
                event_name=event_name or operation.__name__,
                event_bus=event_bus,
            )
        return wrapped

    return decorator


__all__ = [
    "publish_event",
    "result_operation",
    "rollback_on_failure",
    "wrap_event",
    "wrap_rollback",
]
