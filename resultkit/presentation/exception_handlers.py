"""Global exception handlers for FastAPI applications.

The boundary where exceptions raised by framework or legacy code become
Failures, exactly once, and leave as the standard envelope.

Handlers:
    validation_exception_handler: RequestValidationError → VALIDATION (400)
    integrity_exception_handler: sqlalchemy IntegrityError → CONFLICT (409)
    generic_exception_handler: any other Exception → GENERIC (500)

Exports:
    register_exception_handlers: Register all handlers with a FastAPI app
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from resultkit.core.container import get_logger, get_result_factory
from resultkit.presentation.response_builder import ResultResponseBuilder

DUPLICATE_RESOURCE_MESSAGE = "Resource already exists"
INVALID_REQUEST_MESSAGE = "Request validation failed"


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a request validation error into a validation Failure.

    The message is the first field error reported by Pydantic.
    """
    assert isinstance(exc, RequestValidationError)

    errors = exc.errors()
    message = errors[0].get("msg", INVALID_REQUEST_MESSAGE) if errors else INVALID_REQUEST_MESSAGE
    result = get_result_factory().validation_failure(message)
    return ResultResponseBuilder.as_response(result)


async def integrity_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert a database integrity violation into a conflict Failure."""
    get_logger().warning(
        "integrity_error_converted",
        request_path=request.url.path,
        error_type=type(exc).__name__,
    )
    result = get_result_factory().conflict(DUPLICATE_RESOURCE_MESSAGE)
    return ResultResponseBuilder.as_response(result)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert any unhandled exception into a generic Failure.

    The message is built by the configured default_error_message(detail).
    """
    get_logger().error(
        "unhandled_exception_converted",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )
    result = get_result_factory().failure_from_exception(exc)
    return ResultResponseBuilder.as_response(result)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with a FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
