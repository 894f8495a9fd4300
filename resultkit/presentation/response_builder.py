"""Result → HTTP response translation.

Maps a Result to a JSONResponse carrying the ResponseWrapper envelope and
the status code fixed for its outcome:

    Success        200
    NOT_FOUND      404
    VALIDATION     400
    UNAUTHORIZED   401
    FORBIDDEN      403
    CONFLICT       409
    GENERIC        500

Usage:
    @router.get("/users/{user_id}")
    async def get_user(user_id: int) -> JSONResponse:
        return ResultResponseBuilder.as_response(await users.get(user_id))
"""

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from resultkit.core.enums import ErrorCategory
from resultkit.core.result import Failure, Result
from resultkit.presentation.response_wrapper import ResponseWrapper

_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.GENERIC: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ResultResponseBuilder:
    """Build HTTP responses from Results."""

    @staticmethod
    def status_code_for(result: Result[Any]) -> int:
        """HTTP status code for a Result.

        Example:
            >>> ResultResponseBuilder.status_code_for(not_found("gone"))
            404
        """
        if isinstance(result, Failure):
            return _STATUS_BY_CATEGORY.get(
                result.error.category, status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return status.HTTP_200_OK

    @staticmethod
    def as_response(result: Result[Any]) -> JSONResponse:
        """Convert a Result to a JSONResponse with the standard envelope."""
        return JSONResponse(
            status_code=ResultResponseBuilder.status_code_for(result),
            content=jsonable_encoder(ResponseWrapper.from_result(result)),
        )
