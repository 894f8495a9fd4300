"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based registry keyed by event
name. Suitable for single-process deployments; a broker-backed adapter can
replace it behind the same protocol.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_name → list of handlers)
    - Wildcard handlers receive every event
    - Fail-open behavior (one handler failure doesn't break others)
    - Concurrent execution of async handlers (asyncio.gather)

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe("user_created", send_welcome_email)
    >>> bus.subscribe_all(audit_result_event)
    >>> await bus.publish(event)
"""

import asyncio
import inspect
from collections import defaultdict
from collections.abc import Awaitable

from resultkit.domain.events.result_event import ResultEvent
from resultkit.domain.protocols.event_bus_protocol import EventHandler
from resultkit.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        - Subscribing is expected at startup, before events flow
        - Publishing only reads the registry

    Attributes:
        _handlers: Event name → handlers registered for that name.
        _wildcard_handlers: Handlers registered for every event.
        _logger: Logger for handler failures and event publishing.

    Design Decisions:
        - **Fail-open**: Handler failures logged but not propagated
        - **Concurrent**: async handlers run with asyncio.gather in publish()
        - **Sync path**: publish_sync() calls plain handlers in order and
          skips coroutine handlers (there is no loop to await them on)
        - **No retries, no batching**: one delivery per publish
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)
        self._wildcard_handlers: list[EventHandler] = []
        self._logger = logger

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register event handler for a specific event name.

        Args:
            event_name: ResultEvent.event_name to match exactly.
            handler: Function (plain or coroutine) taking the event.

        Notes:
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_name].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register handler for every published event."""
        self._wildcard_handlers.append(handler)

    def handlers_for(self, event_name: str) -> list[EventHandler]:
        """Handlers that receive events named event_name, name-specific first."""
        return [*self._handlers.get(event_name, []), *self._wildcard_handlers]

    async def publish(self, event: ResultEvent) -> None:
        """Publish event to all matching handlers.

        Plain handlers are called immediately, in registration order. The
        awaitables returned by coroutine handlers are then awaited
        concurrently. Handler exceptions are logged, never propagated.

        Args:
            event: Event to deliver.

        Flow:
            1. Look up handlers for event.event_name (plus wildcards)
            2. If no handlers, return immediately (no-op)
            3. Call each handler, collecting awaitables
            4. asyncio.gather(return_exceptions=True) on the awaitables
            5. Log any failures (warning level)
        """
        handlers = self.handlers_for(event.event_name)
        if not handlers:
            return

        self._log_publishing(event, len(handlers))

        pending: list[tuple[EventHandler, Awaitable[None]]] = []
        for handler in handlers:
            try:
                outcome = handler(event)
            except Exception as exc:
                self._log_handler_failure(event, handler, exc)
                continue
            if inspect.isawaitable(outcome):
                pending.append((handler, outcome))

        if not pending:
            return

        # return_exceptions=True prevents one handler failure from breaking others
        results = await asyncio.gather(
            *(awaitable for _, awaitable in pending),
            return_exceptions=True,
        )

        for (handler, _), result in zip(pending, results):
            if isinstance(result, Exception):
                self._log_handler_failure(event, handler, result)

    def publish_sync(self, event: ResultEvent) -> None:
        """Publish event to all matching synchronous handlers.

        Handlers run in registration order on the caller's thread. A handler
        that returns an awaitable is a coroutine handler: its coroutine is
        closed without running and a warning is logged.

        Args:
            event: Event to deliver.
        """
        handlers = self.handlers_for(event.event_name)
        if not handlers:
            return

        self._log_publishing(event, len(handlers))

        for handler in handlers:
            try:
                outcome = handler(event)
            except Exception as exc:
                self._log_handler_failure(event, handler, exc)
                continue
            if inspect.isawaitable(outcome):
                if inspect.iscoroutine(outcome):
                    outcome.close()
                self._logger.warning(
                    "event_handler_skipped_async",
                    event_name=event.event_name,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                )

    def _log_publishing(self, event: ResultEvent, handler_count: int) -> None:
        self._logger.debug(
            "event_publishing",
            event_name=event.event_name,
            event_id=str(event.event_id),
            operation_name=event.operation_name,
            is_success=event.is_success,
            handler_count=handler_count,
        )

    def _log_handler_failure(
        self, event: ResultEvent, handler: EventHandler, exc: Exception
    ) -> None:
        self._logger.warning(
            "event_handler_failed",
            event_name=event.event_name,
            event_id=str(event.event_id),
            handler_name=_handler_name(handler),
            error_type=type(exc).__name__,
            error_message=str(exc),
        )


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", None) or repr(handler)
