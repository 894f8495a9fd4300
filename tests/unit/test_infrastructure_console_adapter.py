"""Unit tests for the structlog console adapter.

Tests cover:
- JSON rendering of event name and context
- error() exception fields
- bind() returning a new adapter with permanent context
- Level filtering
"""

import json

import pytest

from resultkit.infrastructure.logging.console_adapter import ConsoleAdapter


def read_entries(capsys) -> list[dict]:
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]


@pytest.mark.unit
class TestConsoleAdapter:
    """Test structured output."""

    def test_logs_event_and_context_as_json(self, capsys):
        """Test JSON mode renders the event name and key-value context."""
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.info("event_publishing", event_name="user_created")

        [entry] = read_entries(capsys)
        assert entry["event"] == "event_publishing"
        assert entry["event_name"] == "user_created"
        assert entry["level"] == "info"

    def test_error_adds_exception_fields(self, capsys):
        """Test error= is expanded to error_type and error_message."""
        logger = ConsoleAdapter(use_json=True)

        logger.error("async_supplier_failed", error=ValueError("nope"))

        [entry] = read_entries(capsys)
        assert entry["error_type"] == "ValueError"
        assert entry["error_message"] == "nope"

    def test_bind_returns_new_adapter_with_context(self, capsys):
        """Test bound context appears on every entry of the new adapter only."""
        logger = ConsoleAdapter(use_json=True)

        bound = logger.bind(observer="rollback")
        bound.warning("rollback_skipped_no_unit_of_work", operation_name="register")
        logger.warning("event_handler_failed")

        assert isinstance(bound, ConsoleAdapter)
        assert bound is not logger
        bound_entry, plain_entry = read_entries(capsys)
        assert bound_entry["observer"] == "rollback"
        assert bound_entry["operation_name"] == "register"
        assert "observer" not in plain_entry

    def test_level_filters_lower_entries(self, capsys):
        """Test entries below the configured level are dropped."""
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.debug("event_publishing")
        logger.info("event_publishing")
        logger.warning("event_handler_failed")

        [entry] = read_entries(capsys)
        assert entry["event"] == "event_handler_failed"
