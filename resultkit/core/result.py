"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. A Result is exactly one of:

    - Success: carries data and a human-readable message
    - Failure: carries a ResultError (never data)

Both variants are frozen dataclasses. Every combinator returns a new value
(or the same instance when nothing changes); nothing is ever mutated.

Short-circuit rules:
    - map / flat_map / validate / filter on a Failure return it untouched;
      the callable is never invoked.
    - Chained validations stop at the first failing predicate, and the
      resulting error carries that predicate's message.

Usage:
    from resultkit.core.factory import success

    result = (
        success(user)
        .validate(lambda u: u.email is not None, "Email is required")
        .validate(lambda u: "@" in u.email, "Email is invalid")
        .map(lambda u: u.id)
    )

    match result:
        case Success(data=user_id):
            print(f"Created {user_id}")
        case Failure(error=error):
            print(f"Rejected: {error.message}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeVar

from resultkit.core.errors import (
    InvalidResultStateError,
    ResultError,
    ValidationError,
)

T = TypeVar("T")  # Success data type
R = TypeVar("R")  # Mapped data type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        data: The successful result value.
        message: Human-readable message describing the outcome.
    """

    data: T
    message: str

    @property
    def is_success(self) -> Literal[True]:
        return True

    @property
    def is_failure(self) -> Literal[False]:
        return False

    @property
    def error(self) -> NoReturn:
        """Always raises: a Success carries no error.

        Raises:
            InvalidResultStateError: Always.
        """
        raise InvalidResultStateError("Success has no error")

    def data_or(self, default: Any) -> T:
        """Return the data (default is ignored on Success)."""
        return self.data

    def map(self, func: "Callable[[T], R]") -> "Success[R]":
        """Apply func to the data, keeping the message.

        Args:
            func: Transformation of the data.

        Returns:
            New Success wrapping func(data) with the same message.
        """
        return Success(data=func(self.data), message=self.message)

    def flat_map(self, func: "Callable[[T], Result[R]]") -> "Result[R]":
        """Chain an operation that itself returns a Result.

        Args:
            func: Next step of the chain.

        Returns:
            Whatever func returns, verbatim.
        """
        return func(self.data)

    def validate(self, predicate: Callable[[T], bool], message: str) -> "Result[T]":
        """Check the data against a predicate.

        Args:
            predicate: Condition the data must satisfy.
            message: Validation error message if the predicate is false.

        Returns:
            self if predicate(data) is true, otherwise a Failure carrying
            ValidationError(message).
        """
        if predicate(self.data):
            return self
        return Failure(error=ValidationError(message=message))

    filter = validate

    def on_success(self, action: Callable[[T], Any]) -> "Success[T]":
        """Run action with the data for its side effects.

        Exceptions raised by action propagate to the caller.

        Returns:
            self, unchanged.
        """
        action(self.data)
        return self

    def on_failure(self, action: Callable[[ResultError], Any]) -> "Success[T]":
        """No-op on Success; action is not invoked.

        Returns:
            self, unchanged.
        """
        return self

    def or_else(self, alternative: "Result[T]") -> "Success[T]":
        """Return self; the alternative is only used by Failure."""
        return self

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the data; supplier is not invoked."""
        return self.data


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure:
    """Represents a failed operation result.

    Failure is independent of the success data type, so a Failure can be
    returned unchanged from any step of a chain.

    Attributes:
        error: The error that occurred.
    """

    error: ResultError

    @property
    def is_success(self) -> Literal[False]:
        return False

    @property
    def is_failure(self) -> Literal[True]:
        return True

    @property
    def data(self) -> NoReturn:
        """Always raises: a Failure carries no data.

        Use data_or(default), or_else_get(supplier) or pattern matching when
        the outcome is not known.

        Raises:
            InvalidResultStateError: Always.
        """
        raise InvalidResultStateError(
            f"Failure has no data ({self.error.category.value}: {self.error.message})"
        )

    @property
    def message(self) -> str:
        """The error message (mirrors Success.message for the wire format)."""
        return self.error.message

    def data_or(self, default: T) -> T:
        """Return default (a Failure has no data)."""
        return default

    def map(self, func: Callable[[Any], Any]) -> "Failure":
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> "Failure":
        return self

    def validate(self, predicate: Callable[[Any], bool], message: str) -> "Failure":
        """Return self; the predicate is never evaluated on a Failure."""
        return self

    filter = validate

    def on_success(self, action: Callable[[Any], Any]) -> "Failure":
        return self

    def on_failure(self, action: Callable[[ResultError], Any]) -> "Failure":
        """Run action with the error for its side effects.

        Exceptions raised by action propagate to the caller.

        Returns:
            self, unchanged.
        """
        action(self.error)
        return self

    def or_else(self, alternative: "Result[T]") -> "Result[T]":
        """Return the alternative verbatim."""
        return alternative

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return supplier()."""
        return supplier()


# Type alias for Result union
type Result[T] = Success[T] | Failure


def is_result(value: object) -> bool:
    """Check whether value is a Success or a Failure."""
    return isinstance(value, (Success, Failure))
