"""Exception handlers that render errors as `{"error": {"message": ...}}`."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.auth import AuthenticationError
from schemas.errors import ErrorResponse
from services.exceptions import BookmarkServiceError


logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = ("body", "path", "query")


def error_response(status_code: int, message: str, **kwargs) -> JSONResponse:
    """Build a JSON error response in the API's error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.from_message(message).model_dump(),
        **kwargs,
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """
    Summarize the first request validation error as a single message.

    e.g. a non-numeric rating becomes "Invalid 'rating' in request body".
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    if errors[0].get("type") == "json_invalid":
        return "Invalid request body"
    loc = errors[0].get("loc", ())
    if len(loc) >= 2 and loc[0] in REQUEST_LOCATIONS:
        return f"Invalid '{loc[-1]}' in request {loc[0]}"
    if loc and loc[0] == "body":
        return "Invalid request body"
    return "Invalid request"


async def service_error_handler(_request: Request, exc: BookmarkServiceError) -> JSONResponse:
    """Map service exceptions to their HTTP status."""
    return error_response(exc.status_code, exc.message)


async def authentication_error_handler(
    _request: Request, exc: AuthenticationError,
) -> JSONResponse:
    """Reject unauthenticated requests with 401."""
    return error_response(401, exc.message, headers={"WWW-Authenticate": "Bearer"})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed requests as 400 in the same envelope as service errors."""
    message = describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(400, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the app."""
    app.add_exception_handler(BookmarkServiceError, service_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
