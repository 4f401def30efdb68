"""
Error taxonomy and the FastAPI handlers that render it.

Every error leaving the API has the same body shape::

    {"error": {"message": "<human readable message>"}}

Domain errors derive from ``BlogfulError`` and carry their own status code.
Framework errors (request parsing, unknown routes) and unexpected failures
are folded into the same shape by the handlers registered in
``install_exception_handlers``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BlogfulError(Exception):
    status_code: int = 500
    message: str = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingField(BlogfulError):
    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class InvalidField(BlogfulError):
    status_code = 400

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid '{field}' in request body")


class NoUpdatableFields(BlogfulError):
    status_code = 400
    message = "Request body must contain either title, style, or content"


class NotFound(BlogfulError):
    status_code = 404

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} doesn't exist")


class Conflict(BlogfulError):
    status_code = 409


class StoreFailure(BlogfulError):
    """Any persistence error; details stay in the logs."""

    status_code = 500
    message = "Server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


async def _handle_blogful_error(request: Request, exc: BlogfulError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location} {first.get('msg', '')}".strip()
    else:
        message = "Invalid request"
    return error_response(400, message)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, StoreFailure.message)


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogfulError, _handle_blogful_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(Exception, _handle_unexpected)
