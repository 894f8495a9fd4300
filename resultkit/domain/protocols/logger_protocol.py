"""LoggerProtocol definition for structured logging.

Standardizes structured logging across resultkit while staying
backend-agnostic. Every call is a snake_case event name plus key-value
context.

Log Levels:
    - DEBUG: Detailed diagnostic info (event publishing, rollback marking)
    - INFO: Normal operational events
    - WARNING: Degraded behavior (handler failure, missing unit of work)
    - ERROR: Operation failed and was converted to a Failure

Usage:
    from resultkit.core.container import get_logger

    logger = get_logger()
    logger.warning("event_handler_failed", event_name="user_created")

    observer_logger = logger.bind(observer="rollback")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
