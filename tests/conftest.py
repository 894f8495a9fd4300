"""Pytest configuration shared by unit and integration tests.

This configuration ensures:
1. Container singletons (lru_cache) never leak between tests
2. Collaborators (logger, event bus) are available as fixtures
"""

from unittest.mock import MagicMock

import pytest

from resultkit.core.config import get_settings
from resultkit.core.container import (
    get_async_executor,
    get_event_bus,
    get_logger,
    get_result_factory,
    get_result_messages,
)
from resultkit.infrastructure.events.in_memory_event_bus import InMemoryEventBus

_CACHED_FACTORIES = (
    get_settings,
    get_logger,
    get_event_bus,
    get_result_messages,
    get_result_factory,
    get_async_executor,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset every cached singleton before and after each test.

    Tests that patch RESULTKIT_* environment variables rely on this to get
    freshly built settings and collaborators.
    """
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()
    yield
    for factory in _CACHED_FACTORIES:
        factory.cache_clear()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def event_bus(mock_logger: MagicMock) -> InMemoryEventBus:
    """Fresh in-memory event bus with a mocked logger."""
    return InMemoryEventBus(logger=mock_logger)


@pytest.fixture
def recorded_events(event_bus: InMemoryEventBus) -> list:
    """Every event published on the event_bus fixture, in order."""
    events: list = []
    event_bus.subscribe_all(events.append)
    return events
