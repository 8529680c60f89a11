"""Standalone Runner — binds the listening socket after a successful startup.

Invariants:
    - uvicorn runs the lifespan before binding; a failed startup never binds
    - Exit status 1 when startup failed, whatever status uvicorn itself
      would exit with; 0 after a normal shutdown
    - Refuses to run in embedded mode (exit status 2): the host owns dispatch

Usage:
    storefront-api            # console script
    python -m app.server
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI

from app.config import DeploymentMode, Settings, get_settings
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

EXIT_STARTUP_FAILURE = 1
EXIT_WRONG_MODE = 2


def run_standalone(app: FastAPI, settings: Settings) -> int:
    """Serve until shutdown. Returns the process exit status."""
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=None,
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except SystemExit:
        # newer uvicorn exits on its own when the lifespan startup fails
        if server.started:
            raise
    if not server.started:
        logger.critical("Startup failed, exiting")
        return EXIT_STARTUP_FAILURE
    return 0


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if settings.deployment_mode is not DeploymentMode.STANDALONE:
        logger.error(
            "DEPLOYMENT_MODE=embedded: serve app.main:app from the host instead",
            extra={"deployment_mode": settings.deployment_mode.value},
        )
        sys.exit(EXIT_WRONG_MODE)

    from app.main import app

    logger.info(f"Starting server on {settings.host}:{settings.port}")
    sys.exit(run_standalone(app, settings))


if __name__ == "__main__":
    main()
