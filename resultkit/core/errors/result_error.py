"""Error taxonomy for Result failures.

ResultError is the base class for every error a Failure can carry. Errors
flow through the system as data (inside Failure), not as exceptions.

Architecture:
- Does NOT inherit from Exception (returned in Result, never raised)
- Frozen dataclasses (created once at the failure site, never mutated)
- Category is a class-level constant, one subclass per ErrorCategory
- Flat: no hierarchy beyond the category enumeration

Usage:
    from resultkit.core.errors import NotFoundError, ResultError
    from resultkit.core.enums import ErrorCategory

    error = NotFoundError(message="User 42 not found")
    same = ResultError.of(ErrorCategory.NOT_FOUND, "User 42 not found")
    assert error == same
"""

from dataclasses import dataclass
from typing import ClassVar

from resultkit.core.enums import ErrorCategory


@dataclass(frozen=True, slots=True, kw_only=True)
class ResultError:
    """Base failure value (does NOT inherit from Exception).

    Attributes:
        message: Human-readable message. Required; empty string is allowed.
        category: Failure category (class-level, fixed per subclass).

    Raises:
        TypeError: If message is None or not a string.
    """

    category: ClassVar[ErrorCategory] = ErrorCategory.GENERIC

    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            raise TypeError(
                f"{type(self).__name__} message must be a str, "
                f"got {type(self.message).__name__}"
            )

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.category.value}: {self.message}"

    @classmethod
    def of(cls, category: ErrorCategory, message: str) -> "ResultError":
        """Build the error type matching a category.

        Args:
            category: Failure category.
            message: Human-readable message.

        Returns:
            Instance of the ResultError subclass registered for category.

        Example:
            >>> ResultError.of(ErrorCategory.CONFLICT, "Email taken")
            ConflictError(message='Email taken')
        """
        return _ERROR_TYPES[category](message=message)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(ResultError):
    """Requested resource does not exist."""

    category: ClassVar[ErrorCategory] = ErrorCategory.NOT_FOUND


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(ResultError):
    """Input or business rule validation failed."""

    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION


@dataclass(frozen=True, slots=True, kw_only=True)
class UnauthorizedError(ResultError):
    """Caller is not authenticated."""

    category: ClassVar[ErrorCategory] = ErrorCategory.UNAUTHORIZED


@dataclass(frozen=True, slots=True, kw_only=True)
class ForbiddenError(ResultError):
    """Caller is authenticated but lacks permission."""

    category: ClassVar[ErrorCategory] = ErrorCategory.FORBIDDEN


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(ResultError):
    """Resource already exists or is in a conflicting state."""

    category: ClassVar[ErrorCategory] = ErrorCategory.CONFLICT


@dataclass(frozen=True, slots=True, kw_only=True)
class GenericError(ResultError):
    """Any failure outside the other categories."""

    category: ClassVar[ErrorCategory] = ErrorCategory.GENERIC


_ERROR_TYPES: dict[ErrorCategory, type[ResultError]] = {
    ErrorCategory.NOT_FOUND: NotFoundError,
    ErrorCategory.VALIDATION: ValidationError,
    ErrorCategory.UNAUTHORIZED: UnauthorizedError,
    ErrorCategory.FORBIDDEN: ForbiddenError,
    ErrorCategory.CONFLICT: ConflictError,
    ErrorCategory.GENERIC: GenericError,
}
