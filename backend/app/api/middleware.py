"""CORS Middleware — origin gate plus credentialed CORS headers.

Invariants:
    - Gate runs before every other middleware and every route handler
    - Rejected origins get 403 CORS_ORIGIN_REJECTED; no handler runs
    - Accepted cross-origin responses carry Allow-Credentials: true
    - Gate and header middleware share one allow-list

Design Decisions:
    - Gate returns the error envelope itself: exception handlers sit inside
      the middleware stack and never see errors raised here
"""

import logging
from collections.abc import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.cors_policy import is_origin_allowed
from app.core.errors import ErrorContext, OriginNotAllowedError

logger = logging.getLogger(__name__)


class OriginGateMiddleware(BaseHTTPMiddleware):
    """Abort requests whose Origin is not in the allow-list."""

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next) -> Response:
        origin = request.headers.get("origin")
        if is_origin_allowed(origin, self.allowed_origins):
            return await call_next(request)

        exc = OriginNotAllowedError(
            origin, ErrorContext(path=request.url.path),
        )
        logger.warning(
            f"Rejected cross-origin request from {origin}",
            extra={"origin": origin, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def configure_cors(app: FastAPI, allowed_origins: list[str]) -> None:
    """Install CORS headers, then the gate (last added runs first)."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginGateMiddleware, allowed_origins=allowed_origins)
