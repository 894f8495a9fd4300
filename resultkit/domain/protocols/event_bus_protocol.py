"""Event bus protocol (port) for result events.

The event observer hands every emitted ResultEvent to an implementation of
this protocol. The domain defines the port; infrastructure provides adapters.

Implementations:
    - InMemoryEventBus: resultkit/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from resultkit.core.container import get_event_bus
    >>>
    >>> event_bus = get_event_bus()
    >>>
    >>> async def on_user_created(event: ResultEvent) -> None:
    ...     await mailer.send_welcome(event.result.data.email)
    >>>
    >>> event_bus.subscribe("user_created", on_user_created)
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from resultkit.domain.events.result_event import ResultEvent

# Type alias for event handler functions
EventHandler = Callable[[ResultEvent], Awaitable[None] | None]
"""Event handlers accept a single ResultEvent and return None.

Handlers may be plain functions or coroutine functions. Coroutine handlers
are awaited by publish() only; publish_sync() skips them.
"""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT reach the publisher.
        2. **Name-based routing**: Handlers subscribe to an event name, or to
           every event.
        3. **No retries, no batching**: Each publish delivers one event once.
    """

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register handler for events with the given name.

        Args:
            event_name: ResultEvent.event_name to match exactly.
            handler: Function called with the event.
        """
        ...

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register handler for every event, regardless of name."""
        ...

    async def publish(self, event: ResultEvent) -> None:
        """Deliver event to matching handlers, awaiting async ones.

        Never raises for handler failures.
        """
        ...

    def publish_sync(self, event: ResultEvent) -> None:
        """Deliver event to matching synchronous handlers.

        Used when the observed operation is synchronous. Never raises for
        handler failures.
        """
        ...
