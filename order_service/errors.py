"""
errors.py — Error Normalizer

Single translation point between failures and HTTP responses. Every failure
leaves the service as

    {"error": {"message": "...", ...context}}

with a matching status code:
    • OrderValidationError → 400, with the full list of field errors
    • NotFoundError / routing misses (including unsupported methods) → 404,
      with the requested path as sent by the client
    • other ApiError → its declared status
    • anything unexpected → 500 with a generic message; details are only logged
"""

from http import HTTPStatus
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_service_env
from .logging_config import get_logger
from .models import FieldError

log = get_logger(__name__)


def request_path(request: Request) -> str:
    """Returns the path exactly as the client sent it, without percent-decoding."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    return request.url.path


class ApiError(Exception):
    """
    Base class for failures that carry their own HTTP status.

    Args:
        message (str): Client-facing message.
        status_code (int, optional): Overrides the class default.
        **context: Extra keys placed next to `message` in the error envelope.
    """
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, **context):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.context = context


class OrderValidationError(ApiError):
    """Raised when an order payload fails one or more validation rules."""
    status_code = 400

    def __init__(self, errors: List[FieldError]):
        super().__init__("Validation failed", errors=[error.model_dump() for error in errors])
        self.errors = errors


class NotFoundError(ApiError):
    status_code = 404

    def __init__(self, path: str):
        super().__init__("Not found", path=path)


def error_response(status_code: int, message: str, headers=None, **context) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, **context}},
        headers=headers,
    )


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error(f"{request.method} {request_path(request)} failed: {exc.message}")
    else:
        log.info(f"{request.method} {request_path(request)} rejected ({exc.status_code}): {exc.message}")
    return error_response(exc.status_code, exc.message, **exc.context)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalizes routing misses. An unsupported method on a known path is a miss as well."""
    path = request_path(request)
    if exc.status_code in (404, 405):
        return await handle_api_error(request, NotFoundError(path))

    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None), path=path)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    log.critical(f"Unhandled error on {request.method} {request_path(request)}: {exc}", exc_info=exc)
    return error_response(500, "Internal server error", environment=get_service_env())


def register_error_handlers(app: FastAPI):
    """Installs the error normalizer handlers on the application."""
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
