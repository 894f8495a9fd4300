"""Event observer.

Wraps an operation so that the Result it returns is announced as a
ResultEvent when the trigger policy matches the outcome.

Contract:
    - ON_SUCCESS emits only for Success, ON_FAILURE only for Failure, BOTH
      for every Result: exactly one event per matching call, none otherwise.
    - The event carries the same Result instance the caller receives, the
      operation name and the original arguments.
    - Emission completes before the caller receives the Result: sync
      operations publish with publish_sync(), async operations await
      publish(). No retries, no batching.
    - The returned value is passed back unchanged. Non-Result values are
      passed back without emitting.

Usage:
    @publish_event(on=EventTrigger.BOTH, event_name="user_registered")
    async def register_user(command: RegisterUser) -> Result[User]:
        ...

    event_bus.subscribe("user_registered", send_welcome_email)
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

from resultkit.core.enums import EventTrigger
from resultkit.core.result import is_result
from resultkit.domain.events.invocation_context import InvocationContext
from resultkit.domain.events.result_event import ResultEvent
from resultkit.domain.protocols.event_bus_protocol import EventBusProtocol

P = ParamSpec("P")
R = TypeVar("R")


def wrap_event(
    operation: Callable[P, R],
    *,
    on: EventTrigger = EventTrigger.ON_SUCCESS,
    event_name: str | None = None,
    event_bus: EventBusProtocol | None = None,
) -> Callable[P, R]:
    """Return operation wrapped with the event observer.

    Args:
        operation: Sync or async callable returning a Result.
        on: Trigger policy.
        event_name: Name of emitted events. Defaults to operation.__name__.
        event_bus: Sink for events. Defaults to the container's
            get_event_bus(), resolved at call time.

    Returns:
        Callable with the same signature as operation.
    """
    operation_name = getattr(operation, "__name__", repr(operation))
    name = event_name or operation_name

    def build_event(args: tuple[Any, ...], kwargs: dict[str, Any], result: object) -> ResultEvent | None:
        if not is_result(result) or not on.matches(result.is_success):  # type: ignore[attr-defined]
            return None
        context = InvocationContext(
            operation_name=operation_name,
            arguments=args,
            keyword_arguments=kwargs,
            result=result,  # type: ignore[arg-type]
        )
        return ResultEvent.from_invocation(name, context)

    if inspect.iscoroutinefunction(operation):

        @functools.wraps(operation)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            result = await operation(*args, **kwargs)
            event = build_event(args, kwargs, result)
            if event is not None:
                await _bus(event_bus).publish(event)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(operation)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        result = operation(*args, **kwargs)
        event = build_event(args, kwargs, result)
        if event is not None:
            _bus(event_bus).publish_sync(event)
        return result

    return wrapper


@overload
def publish_event(func: Callable[P, R]) -> Callable[P, R]: ...


@overload
def publish_event(
    func: None = None,
    *,
    on: EventTrigger = EventTrigger.ON_SUCCESS,
    event_name: str | None = None,
    event_bus: EventBusProtocol | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def publish_event(
    func: Callable[P, R] | None = None,
    *,
    on: EventTrigger = EventTrigger.ON_SUCCESS,
    event_name: str | None = None,
    event_bus: EventBusProtocol | None = None,
) -> Any:
    """Decorator form of wrap_event.

    Usable bare (`@publish_event`, ON_SUCCESS with the function name) or
    configured (`@publish_event(on=EventTrigger.BOTH, event_name="...")`).
    """

    def decorator(operation: Callable[P, R]) -> Callable[P, R]:
        return wrap_event(operation, on=on, event_name=event_name, event_bus=event_bus)

    if func is not None:
        return decorator(func)
    return decorator


def _bus(event_bus: EventBusProtocol | None) -> EventBusProtocol:
    if event_bus is not None:
        return event_bus
    from resultkit.core.container import get_event_bus

    return get_event_bus()
