"""Exception handlers that turn errors into HTTP responses.

Every failure leaves the API as a plain-text body holding the error
message, with the status the error carries (500 when it carries none).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from ..errors import TaskboardError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> PlainTextResponse:
    status_code = exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return PlainTextResponse(exc.message, status_code=status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> PlainTextResponse:
    """Body that is not a JSON object, or missing path/query values."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in errors
    ) or "Invalid request"
    logger.warning(f"{request.method} {request.url.path} rejected (400): {message}")
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def unexpected_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    message = str(exc) or UNEXPECTED_ERROR_MESSAGE
    return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
