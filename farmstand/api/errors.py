"""Error chain: normalize failures into ``AppError`` then render them.

Every failure path ends in ``handle_error``. Normalizers run in order and
each either maps an error to an ``AppError`` or returns it unchanged. The
renderer reads ``status``/``message`` off ``AppError`` and falls back to the
defaults for anything else, so internal details never reach the client.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sentry_sdk
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from farmstand.core.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_ERROR_STATUS,
    AppError,
    InvalidIdentifierError,
    ProductValidationError,
)
from farmstand.logging import get_logger

Normalizer = Callable[[Exception], Exception]

logger = get_logger(__name__)


def normalize_validation_error(exc: Exception) -> Exception:
    if isinstance(exc, ProductValidationError):
        return AppError(f"Validation Failed...{exc.message}", 400)
    return exc


def normalize_invalid_identifier(exc: Exception) -> Exception:
    if isinstance(exc, InvalidIdentifierError):
        return AppError(f"Invalid Product Id: {exc.value}", 400)
    return exc


def normalize_http_exception(exc: Exception) -> Exception:
    if isinstance(exc, StarletteHTTPException):
        return AppError(str(exc.detail), exc.status_code)
    return exc


NORMALIZERS: tuple[Normalizer, ...] = (
    normalize_validation_error,
    normalize_invalid_identifier,
    normalize_http_exception,
)


def normalize(exc: Exception, normalizers: Sequence[Normalizer] = NORMALIZERS) -> Exception:
    for stage in normalizers:
        exc = stage(exc)
    return exc


def render_error(exc: Exception) -> PlainTextResponse:
    if isinstance(exc, AppError):
        status = exc.status or DEFAULT_ERROR_STATUS
        message = exc.message or DEFAULT_ERROR_MESSAGE
    else:
        status, message = DEFAULT_ERROR_STATUS, DEFAULT_ERROR_MESSAGE
    return PlainTextResponse(message, status_code=status)


def handle_error(exc: Exception) -> PlainTextResponse:
    original = exc
    exc = normalize(exc)
    response = render_error(exc)
    if response.status_code >= 500:
        logger.error(
            "request_failed",
            status=response.status_code,
            error_type=type(original).__name__,
            exc_info=original,
        )
        sentry_sdk.capture_exception(original)
    else:
        logger.warning(
            "request_rejected",
            status=response.status_code,
            error_type=type(original).__name__,
            detail=str(original),
        )
    return response


async def _app_error_handler(_: Request, exc: Exception) -> PlainTextResponse:
    return handle_error(exc)


def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Routing failures (404/405) keep their status with a plain-text body
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse("Unprocessable Entity", status_code=422)


def install(app) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(ProductValidationError, _app_error_handler)
    app.add_exception_handler(InvalidIdentifierError, _app_error_handler)
    app.add_exception_handler(Exception, _app_error_handler)
