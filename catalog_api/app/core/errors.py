"""
Error translation for the HTTP layer.

Store failures arrive as ``StoreError`` values and are turned into
``HTTPException`` here: ``NOT_FOUND`` becomes 404, every other kind 400.
The exception handlers registered by ``install_error_handlers`` render
all errors, including request validation failures and unexpected
exceptions, with the same ``ErrorResponse`` body.
"""

import logging
from typing import NoReturn, Optional, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.common import error_body
from ..services.results import StoreError, StoreErrorKind, StoreResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_BY_KIND = {
    StoreErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreErrorKind.DUPLICATE_KEY: status.HTTP_400_BAD_REQUEST,
    StoreErrorKind.INSUFFICIENT_STOCK: status.HTTP_400_BAD_REQUEST,
    StoreErrorKind.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: StoreError) -> NoReturn:
    raise HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)


def unwrap(result: StoreResult[T]) -> Optional[T]:
    """Return the value of a successful result or raise the matching HTTP error."""
    value, error = result
    if error:
        raise_for_error(error)
    return value


def _field_name(loc) -> str:
    # Drop the leading "body"/"query"/"path" segment.
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message, request.url.path),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"property": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, "Invalid input data", request.url.path, errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", request.url.path),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
