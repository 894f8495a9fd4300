"""Unit tests for ResultFactory and the module-level factories.

Tests cover:
- Default success message from the messages collaborator
- Explicit messages override the default
- failure() wrapping of errors and plain messages
- One constructor per error category
- failure_from_exception() wording
"""

import pytest

from resultkit.core.errors import (
    ConflictError,
    ForbiddenError,
    GenericError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from resultkit.core.factory import (
    ResultFactory,
    conflict,
    failure,
    failure_from_exception,
    forbidden,
    not_found,
    success,
    unauthorized,
    validation_failure,
)
from resultkit.core.messages import DEFAULT_SUCCESS_MESSAGE, DefaultResultMessages
from resultkit.core.result import Failure, Success


class ShoutingMessages:
    """Custom messages collaborator."""

    def default_success_message(self) -> str:
        return "DONE!"

    def default_error_message(self, detail: str) -> str:
        return f"FAILED: {detail.upper()}"


@pytest.mark.unit
class TestSuccessFactory:
    """Test success construction."""

    def test_default_message_is_built_in(self):
        """Test module-level success() uses the built-in wording."""
        assert success(1) == Success(data=1, message="Operation completed successfully.")

    def test_explicit_message_wins(self):
        """Test an explicit message overrides the default."""
        assert success(1, "User created").message == "User created"

    def test_empty_explicit_message_is_kept(self):
        """Test an empty string is an explicit message, not a missing one."""
        assert success(1, "").message == ""

    def test_injected_messages_supply_default(self):
        """Test ResultFactory uses the injected collaborator."""
        factory = ResultFactory(messages=ShoutingMessages())

        assert factory.success({"id": 1}) == Success(data={"id": 1}, message="DONE!")

    def test_factory_defaults_to_built_in_messages(self):
        """Test parameterless ResultFactory uses DefaultResultMessages."""
        factory = ResultFactory()

        assert isinstance(factory.messages, DefaultResultMessages)
        assert factory.success(None).message == DEFAULT_SUCCESS_MESSAGE


@pytest.mark.unit
class TestFailureFactories:
    """Test failure construction."""

    def test_failure_wraps_error_verbatim(self):
        """Test failure(error) keeps the given error."""
        error = ConflictError(message="Email taken")

        result = failure(error)

        assert isinstance(result, Failure)
        assert result.error is error

    def test_failure_wraps_message_in_generic_error(self):
        """Test failure(message) produces a GenericError."""
        assert failure("Upstream timeout") == Failure(
            error=GenericError(message="Upstream timeout")
        )

    @pytest.mark.parametrize(
        ("constructor", "error_type"),
        [
            (not_found, NotFoundError),
            (validation_failure, ValidationError),
            (unauthorized, UnauthorizedError),
            (forbidden, ForbiddenError),
            (conflict, ConflictError),
        ],
    )
    def test_category_constructors(self, constructor, error_type):
        """Test each constructor builds the matching error type."""
        result = constructor("details")

        assert result == Failure(error=error_type(message="details"))

    def test_failure_from_exception_uses_default_error_message(self):
        """Test exceptions become generic failures with the error template."""
        result = failure_from_exception(ValueError("bad input"))

        assert result == Failure(error=GenericError(message="An error occurred: bad input"))

    def test_failure_from_exception_without_text_uses_class_name(self):
        """Test an exception with empty str() is described by its type."""
        result = failure_from_exception(TimeoutError())

        assert result.error.message == "An error occurred: TimeoutError"

    def test_failure_from_exception_uses_injected_messages(self):
        """Test injected wording applies to converted exceptions."""
        factory = ResultFactory(messages=ShoutingMessages())

        result = factory.failure_from_exception(KeyError("user"))

        assert result.error.message == "FAILED: 'USER'"
