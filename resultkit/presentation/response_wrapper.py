"""Wire format for Results.

Every Result leaves the service as the same JSON envelope:

    {"success": true, "message": "Operation completed successfully.", "data": {...}}
    {"success": false, "message": "User 42 not found", "data": null}

Exports:
    ResponseWrapper: Pydantic model of the envelope
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from resultkit.core.result import Failure, Result

T = TypeVar("T")


class ResponseWrapper(BaseModel, Generic[T]):
    """Standard response envelope.

    Attributes:
        success: Whether the operation succeeded.
        message: Success message, or the error message for failures.
        data: Payload for successes, null for failures.

    Examples:
        >>> ResponseWrapper.from_result(success({"id": 1})).model_dump()
        {'success': True, 'message': 'Operation completed successfully.', 'data': {'id': 1}}
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Outcome message")
    data: T | None = Field(default=None, description="Payload (null for failures)")

    @classmethod
    def from_result(cls, result: Result[Any]) -> "ResponseWrapper[Any]":
        """Build the envelope for a Result."""
        if isinstance(result, Failure):
            return cls(success=False, message=result.error.message, data=None)
        return cls(success=True, message=result.message, data=result.data)
