"""
Exception handlers.

Renders every error as ``{statusCode, message, error}``: domain errors
(ShopError and subclasses), request validation failures and plain
framework HTTP errors such as an unknown route. Anything else becomes a
generic 500 with the same shape.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import AuthenticationError, ShopError, error_body

logger = logging.getLogger(__name__)


def _format_validation_error(error: dict) -> str:
    # ("body", "items", 0, "quantity") -> "items.0.quantity"
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    field = ".".join(location)
    return f"{field}: {error['msg']}" if field else error["msg"]


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    else:
        logger.debug("%s on %s %s", exc.code, request.method, request.url.path)

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [_format_validation_error(error) for error in exc.errors()]
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=error_body(HTTPStatus.BAD_REQUEST, messages),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Database and other unexpected failures; details stay in the log
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=error_body(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the application."""
    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
