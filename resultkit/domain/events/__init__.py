"""Domain events package."""

from resultkit.domain.events.base_event import DomainEvent
from resultkit.domain.events.invocation_context import InvocationContext
from resultkit.domain.events.result_event import ResultEvent

__all__ = ["DomainEvent", "InvocationContext", "ResultEvent"]
