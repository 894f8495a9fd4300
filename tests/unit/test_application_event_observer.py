"""Unit tests for the event observer.

Tests cover:
- Trigger policy matrix (ON_SUCCESS, ON_FAILURE, BOTH) for sync and async
- Event content (same Result instance, operation name, arguments)
- Non-Result pass-through
- Handler failures never reach the caller
"""

import inspect
from unittest.mock import MagicMock

import pytest

from resultkit.application.observers import publish_event, wrap_event
from resultkit.core.enums import EventTrigger
from resultkit.core.factory import not_found, success

TRIGGER_MATRIX = [
    (EventTrigger.ON_SUCCESS, True, 1),
    (EventTrigger.ON_SUCCESS, False, 0),
    (EventTrigger.ON_FAILURE, True, 0),
    (EventTrigger.ON_FAILURE, False, 1),
    (EventTrigger.BOTH, True, 1),
    (EventTrigger.BOTH, False, 1),
]


def outcome(succeed: bool):
    return success("ok") if succeed else not_found("missing")


@pytest.mark.unit
class TestTriggerPolicy:
    """Test exactly-one-or-zero emission per call."""

    @pytest.mark.parametrize("trigger,succeed,expected", TRIGGER_MATRIX)
    def test_sync_operation(self, event_bus, recorded_events, trigger, succeed, expected):
        """Test the sync wrapper emits according to the trigger."""
        operation = wrap_event(lambda: outcome(succeed), on=trigger, event_bus=event_bus)

        operation()

        assert len(recorded_events) == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("trigger,succeed,expected", TRIGGER_MATRIX)
    async def test_async_operation(self, event_bus, recorded_events, trigger, succeed, expected):
        """Test the async wrapper emits according to the trigger."""

        async def operation():
            return outcome(succeed)

        wrapped = wrap_event(operation, on=trigger, event_bus=event_bus)

        await wrapped()

        assert len(recorded_events) == expected


@pytest.mark.unit
class TestEventContent:
    """Test what the emitted event carries."""

    def test_event_carries_result_and_invocation(self, event_bus, recorded_events):
        """Test the event holds the same Result and the original arguments."""

        @publish_event(on=EventTrigger.BOTH, event_bus=event_bus)
        def get_user(user_id: int, *, include_deleted: bool = False):
            return not_found(f"User {user_id} not found")

        result = get_user(42, include_deleted=True)

        [event] = recorded_events
        assert event.result is result
        assert event.event_name == "get_user"
        assert event.operation_name == "get_user"
        assert event.arguments == (42,)
        assert event.keyword_arguments == {"include_deleted": True}
        assert event.is_success is False

    def test_custom_event_name(self, event_bus):
        """Test event_name overrides the operation name."""
        handler = MagicMock()
        event_bus.subscribe("user_registered", handler)

        @publish_event(event_name="user_registered", event_bus=event_bus)
        def register():
            return success({"id": 1})

        register()

        handler.assert_called_once()
        event = handler.call_args.args[0]
        assert event.event_name == "user_registered"
        assert event.operation_name == "register"

    @pytest.mark.asyncio
    async def test_event_published_before_caller_resumes(self, event_bus):
        """Test emission completes before the Result is returned."""
        delivered: list[str] = []

        async def handler(event):
            delivered.append(event.event_name)

        event_bus.subscribe("register", handler)

        @publish_event(event_bus=event_bus)
        async def register():
            return success(None)

        await register()

        assert delivered == ["register"]

    def test_bare_decorator_uses_container_bus(self):
        """Test the default sink is the container's event bus."""
        from resultkit.core.container import get_event_bus

        handler = MagicMock()
        get_event_bus().subscribe("ping", handler)

        @publish_event
        def ping():
            return success("pong")

        ping()

        handler.assert_called_once()


@pytest.mark.unit
class TestPassThrough:
    """Test the observer never alters the outcome."""

    def test_non_result_is_returned_without_event(self, event_bus, recorded_events):
        """Test non-Result values are passed back and not announced."""
        wrapped = wrap_event(lambda: 42, on=EventTrigger.BOTH, event_bus=event_bus)

        assert wrapped() == 42
        assert recorded_events == []

    def test_handler_failure_does_not_reach_caller(self, event_bus, mock_logger):
        """Test a failing subscriber is logged and the Result still returned."""
        event_bus.subscribe("register", MagicMock(side_effect=RuntimeError("down")))
        returned = success("ok")

        @publish_event(event_bus=event_bus)
        def register():
            return returned

        assert register() is returned
        assert mock_logger.warning.call_args.args[0] == "event_handler_failed"

    def test_exceptions_propagate_without_event(self, event_bus, recorded_events):
        """Test raised exceptions are not converted or announced."""

        @publish_event(on=EventTrigger.BOTH, event_bus=event_bus)
        def explode():
            raise ValueError("bad input")

        with pytest.raises(ValueError):
            explode()

        assert recorded_events == []

    def test_async_wrapper_is_coroutine_function(self, event_bus):
        """Test the wrapper of a coroutine function is one too."""

        @publish_event(event_bus=event_bus)
        async def register():
            return success(None)

        assert inspect.iscoroutinefunction(register)
