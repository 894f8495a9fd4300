"""Container module - centralized dependency factories.

Application-scoped singletons (lru_cache) for the collaborators resultkit
needs at its edges:
- Logger (console, structlog)
- Event bus (in-memory)
- Result messages / factory (Settings-backed wording)
- Async executor (optional bounded worker pool)

Factories import their adapters lazily so importing the container never
drags infrastructure into the core.

Usage:
    from resultkit.core.container import get_event_bus, get_result_factory

    results = get_result_factory()
    event_bus = get_event_bus()

    # Presentation Layer (FastAPI Depends)
    results: ResultFactory = Depends(get_result_factory)
"""

from concurrent.futures import Executor, ThreadPoolExecutor
from functools import lru_cache
from typing import TYPE_CHECKING

from resultkit.core.config import get_settings

if TYPE_CHECKING:
    from resultkit.core.factory import ResultFactory
    from resultkit.domain.protocols.event_bus_protocol import EventBusProtocol
    from resultkit.domain.protocols.logger_protocol import LoggerProtocol
    from resultkit.domain.protocols.result_messages_protocol import (
        ResultMessagesProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Human-readable console output in development, JSON everywhere else or
    when RESULTKIT_LOG_JSON is set.

    Returns:
        Logger implementing LoggerProtocol.
    """
    from resultkit.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Returns the adapter selected by RESULTKIT_EVENT_BUS_TYPE:
        - 'in-memory': InMemoryEventBus (single process)

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If RESULTKIT_EVENT_BUS_TYPE is unsupported.
    """
    from resultkit.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus_type = get_settings().event_bus_type

    if event_bus_type == "in-memory":
        return InMemoryEventBus(logger=get_logger())

    raise ValueError(
        f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
    )


@lru_cache()
def get_result_messages() -> "ResultMessagesProtocol":
    """Get the environment-configured message source (app-scoped).

    Falls back to the built-in wording for anything not set in the
    environment.
    """
    from resultkit.core.messages import SettingsResultMessages

    return SettingsResultMessages(get_settings())


@lru_cache()
def get_result_factory() -> "ResultFactory":
    """Get a ResultFactory bound to the configured messages (app-scoped).

    Inject this into services that build Results so their default messages
    follow configuration.
    """
    from resultkit.core.factory import ResultFactory

    return ResultFactory(messages=get_result_messages())


@lru_cache()
def get_async_executor() -> Executor | None:
    """Get the executor run_async schedules suppliers on (app-scoped).

    Returns:
        A ThreadPoolExecutor sized by RESULTKIT_ASYNC_MAX_WORKERS, or None
        to use the event loop's default executor.
    """
    max_workers = get_settings().async_max_workers
    if max_workers is None:
        return None
    return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="resultkit")
