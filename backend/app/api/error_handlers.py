"""Error Handlers — every failure leaves the app as a StorefrontError envelope.

Invariants:
    - StorefrontError → its own status and to_response() envelope
    - RequestValidationError → RequestValidationFailed (400) with field details
    - Exception (catch-all) → InternalError (500), cause logged, never returned
    - Envelope context carries the request path and Origin
    - HTTPException (404 etc.) left to the framework defaults

Design Decisions:
    - Framework errors are translated into typed errors first, so the envelope
      is built in one place (StorefrontError.to_response)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import (
    InternalError, RequestValidationFailed, StorefrontError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(StorefrontError, _handle_storefront_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _respond(request: Request, exc: StorefrontError) -> JSONResponse:
    exc.context.path = request.url.path
    exc.context.origin = exc.context.origin or request.headers.get("origin")
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_storefront_error(request: Request, exc: StorefrontError):
    logger.error(
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _respond(request, exc)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError,
):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Validation error on {request.url.path}: {len(details)} field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _respond(request, RequestValidationFailed(details))


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return _respond(request, InternalError())
