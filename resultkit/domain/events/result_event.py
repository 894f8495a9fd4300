"""Event emitted by the event observer.

ResultEvent carries the complete Result of an observed operation together
with the invocation metadata, so subscribers can reconstruct the full call
(which operation, which arguments, which outcome).

Usage:
    >>> async def audit(event: ResultEvent) -> None:
    ...     if event.is_success:
    ...         logger.info("operation_succeeded", event_name=event.event_name)
    ...     else:
    ...         logger.warning(
    ...             "operation_failed",
    ...             event_name=event.event_name,
    ...             error=event.result.error.message,
    ...         )
    >>>
    >>> event_bus.subscribe("create_user", audit)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from resultkit.core.result import Result
from resultkit.domain.events.base_event import DomainEvent
from resultkit.domain.events.invocation_context import InvocationContext


@dataclass(frozen=True, kw_only=True, slots=True)
class ResultEvent(DomainEvent):
    """An observed operation produced a Result.

    Attributes:
        event_name: Configured event name, or the operation name.
        result: The full Result returned by the operation (same instance).
        operation_name: Name of the operation that was executed.
        arguments: Positional arguments passed to the operation.
        keyword_arguments: Keyword arguments passed to the operation.
    """

    event_name: str
    result: Result[Any]
    operation_name: str
    arguments: tuple[Any, ...] = ()
    keyword_arguments: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """True if the Result is a Success."""
        return self.result.is_success

    @classmethod
    def from_invocation(cls, event_name: str, context: InvocationContext) -> "ResultEvent":
        """Build an event from an observer's invocation context."""
        return cls(
            event_name=event_name,
            result=context.result,
            operation_name=context.operation_name,
            arguments=context.arguments,
            keyword_arguments=context.keyword_arguments,
        )
