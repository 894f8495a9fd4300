"""Result factories.

ResultFactory builds Success and Failure values with default messages taken
from an injected ResultMessagesProtocol. The module-level functions use a
factory over the built-in wording (DefaultResultMessages), constructed at the
call site; services that need configured wording receive their own
ResultFactory instance.

Usage:
    from resultkit.core.factory import ResultFactory, not_found, success

    # Built-in wording
    result = success(user)  # message: "Operation completed successfully."

    # Injected wording
    results = ResultFactory(messages=SettingsResultMessages(get_settings()))
    result = results.success(user)

    # Category constructors
    return not_found(f"User {user_id} not found")
"""

from typing import TypeVar

from resultkit.core.errors import (
    ConflictError,
    ForbiddenError,
    GenericError,
    NotFoundError,
    ResultError,
    UnauthorizedError,
    ValidationError,
)
from resultkit.core.messages import DefaultResultMessages
from resultkit.core.result import Failure, Success
from resultkit.domain.protocols.result_messages_protocol import ResultMessagesProtocol

T = TypeVar("T")


class ResultFactory:
    """Builds Results using an injected messages collaborator.

    Args:
        messages: Default message source. Defaults to DefaultResultMessages.
    """

    def __init__(self, messages: ResultMessagesProtocol | None = None) -> None:
        self.messages: ResultMessagesProtocol = messages or DefaultResultMessages()

    def success(self, data: T, message: str | None = None) -> Success[T]:
        """Build a Success.

        Args:
            data: Payload.
            message: Explicit message; the default success message if None.
        """
        if message is None:
            message = self.messages.default_success_message()
        return Success(data=data, message=message)

    def failure(self, error: ResultError | str) -> Failure:
        """Build a Failure.

        Args:
            error: A ResultError (wrapped verbatim) or a message, which is
                wrapped in a GenericError.
        """
        if isinstance(error, ResultError):
            return Failure(error=error)
        return Failure(error=GenericError(message=error))

    def failure_from_exception(self, exc: BaseException) -> Failure:
        """Build a generic Failure describing an exception.

        The message comes from default_error_message(str(exc)); when the
        exception has no text, its class name is used as the detail.
        """
        detail = str(exc) or type(exc).__name__
        return Failure(error=GenericError(message=self.messages.default_error_message(detail)))

    def not_found(self, message: str) -> Failure:
        return Failure(error=NotFoundError(message=message))

    def validation_failure(self, message: str) -> Failure:
        return Failure(error=ValidationError(message=message))

    def unauthorized(self, message: str) -> Failure:
        return Failure(error=UnauthorizedError(message=message))

    def forbidden(self, message: str) -> Failure:
        return Failure(error=ForbiddenError(message=message))

    def conflict(self, message: str) -> Failure:
        return Failure(error=ConflictError(message=message))


def success(data: T, message: str | None = None) -> Success[T]:
    """Build a Success with the built-in default message."""
    return ResultFactory().success(data, message)


def failure(error: ResultError | str) -> Failure:
    """Build a Failure from an error or a message (GenericError)."""
    return ResultFactory().failure(error)


def failure_from_exception(exc: BaseException) -> Failure:
    """Build a generic Failure describing an exception."""
    return ResultFactory().failure_from_exception(exc)


def not_found(message: str) -> Failure:
    return ResultFactory().not_found(message)


def validation_failure(message: str) -> Failure:
    return ResultFactory().validation_failure(message)


def unauthorized(message: str) -> Failure:
    return ResultFactory().unauthorized(message)


def forbidden(message: str) -> Failure:
    return ResultFactory().forbidden(message)


def conflict(message: str) -> Failure:
    return ResultFactory().conflict(message)
