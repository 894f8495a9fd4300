"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from resultkit.core.enums import ErrorCategory, EventTrigger
"""

from resultkit.core.enums.environment import Environment
from resultkit.core.enums.error_category import ErrorCategory
from resultkit.core.enums.event_trigger import EventTrigger

__all__ = ["Environment", "ErrorCategory", "EventTrigger"]
