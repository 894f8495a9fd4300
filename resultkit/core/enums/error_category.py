"""Failure categories (machine-readable).

The set is closed: every failure carried by a Result belongs to exactly one
category. The presentation layer maps each category to a fixed HTTP status.

Categories:
- NOT_FOUND: Requested resource does not exist
- VALIDATION: Input or business rule validation failed
- UNAUTHORIZED: Caller is not authenticated
- FORBIDDEN: Caller is authenticated but not allowed
- CONFLICT: Resource already exists or is in a conflicting state
- GENERIC: Anything else (unexpected failures, converted exceptions)
"""

from enum import Enum


class ErrorCategory(Enum):
    """Failure categories for ResultError."""

    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    GENERIC = "generic"
