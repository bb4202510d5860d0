"""Centralized error dispatch.

Route handlers and services never build error responses themselves; they
raise and let the dispatcher below translate the error into a single
``{"message": ...}`` JSON response.
"""

from __future__ import annotations

from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import DomainError, ErrorKind, ValidationError
from app.services.places import INVALID_PLACE_DATA_MESSAGE

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

logger = structlog.get_logger(__name__)


def _message_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def dispatch_error(exc: BaseException) -> JSONResponse:
    """Map any caught error to exactly one JSON response.

    NotFound -> 404 and Validation -> 400 surface the error's message.
    Everything else is masked behind a fixed 500 body; the raw error is
    only logged (and reported to Sentry when it is initialised).
    """
    match exc:
        case DomainError(kind=ErrorKind.NOT_FOUND):
            status_code = 404
        case DomainError(kind=ErrorKind.VALIDATION):
            status_code = 400
        case _:
            logger.error(
                "unhandled_error",
                error_type=type(exc).__name__,
                error=str(exc),
                exc_info=exc,
            )
            sentry_sdk.capture_exception(exc)
            return _message_response(500, INTERNAL_ERROR_MESSAGE)

    logger.warning(
        "domain_error",
        kind=exc.kind.value,
        error_type=type(exc).__name__,
        error=exc.message,
        status=status_code,
    )
    return _message_response(status_code, exc.message)


def _domain_error_handler(_: Request, exc: DomainError) -> JSONResponse:
    return dispatch_error(exc)


def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Framework errors (unknown route, method not allowed) keep their status
    logger.info("http_error", status=exc.status_code, error=str(exc.detail))
    return _message_response(exc.status_code, str(exc.detail), headers=exc.headers)


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable request bodies are reported like any other invalid place data
    logger.debug("request_validation_failed", errors=exc.errors())
    return dispatch_error(ValidationError(INVALID_PLACE_DATA_MESSAGE))


async def error_dispatch_middleware(request: Request, call_next: Callable) -> Response:
    """Convert anything that escapes the exception handlers into a 500 response.

    Registering a handler for ``Exception`` would make Starlette re-raise the
    error after responding; catching it here keeps the response final.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return dispatch_error(exc)


def install(app: FastAPI) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.middleware("http")(error_dispatch_middleware)
