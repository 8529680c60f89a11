"""Process Lifecycle — startup strategies selected by deployment mode.

Invariants:
    - STANDALONE: a ConnectorError aborts startup (lifespan raises), so the
      ASGI server never binds its socket
    - EMBEDDED: a ConnectorError is logged and startup continues; the host
      keeps dispatching requests to the app
    - No retries in either mode
    - Connectors are closed on shutdown in both modes, and after a failed
      standalone startup (whatever connected before the failure)
    - Process exception hooks installed at startup are restored on shutdown

Design Decisions:
    - One lifespan factory with a strategy table instead of per-target entry files
"""

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import DeploymentMode
from app.core.errors import ConnectorError
from app.infrastructure.context import AppContext
from app.infrastructure.observability import (
    install_exception_hooks, setup_logging,
)

logger = logging.getLogger(__name__)

StartupStrategy = Callable[[AppContext], Awaitable[None]]


async def connect_or_fail(context: AppContext) -> None:
    """Standalone startup: any connector failure is fatal."""
    try:
        await context.connect()
    except ConnectorError as e:
        logger.critical(
            f"Init error: {e.message}",
            extra={"error_code": e.code, "service": e.service},
        )
        raise


async def connect_best_effort(context: AppContext) -> None:
    """Embedded startup: connector failures are logged only."""
    try:
        await context.connect()
    except ConnectorError as e:
        logger.error(
            f"Init error: {e.message}",
            extra={"error_code": e.code, "service": e.service},
        )


STARTUP_STRATEGIES: dict[DeploymentMode, StartupStrategy] = {
    DeploymentMode.STANDALONE: connect_or_fail,
    DeploymentMode.EMBEDDED: connect_best_effort,
}


def build_lifespan(context: AppContext):
    """Startup/shutdown lifecycle bound to one application context."""
    mode = context.settings.deployment_mode
    startup = STARTUP_STRATEGIES[mode]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = context.settings
        setup_logging(settings.log_level, settings.log_format)
        restore_hooks = install_exception_hooks()
        try:
            await startup(context)
            logger.info(
                "Storefront API started",
                extra={"deployment_mode": mode.value},
            )
            yield
        finally:
            logger.info("Storefront API shutting down")
            await context.close()
            restore_hooks()

    return lifespan
