"""Structured Logging — JSON formatter, setup, and process-level error hooks.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (service, path, origin, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - Unhandled async/thread errors are logged, never re-raised

Design Decisions:
    - setup_logging is idempotent: replaces its own handler, leaves others alone
    - install_exception_hooks called from lifespan so it binds the serving loop;
      the lifespan undoes it on shutdown
"""

import asyncio
import logging
import json
import threading
from collections.abc import Callable
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

_EXTRA_FIELDS = (
    "service", "database", "cloud_name", "path", "origin",
    "error_code", "deployment_mode", "prefix",
)

_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    global _handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    if _handler is not None:
        logging.root.removeHandler(_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler


def log_async_exception(
    loop: asyncio.AbstractEventLoop, context: dict,
) -> None:
    """asyncio loop exception handler: unretrieved task errors, callback errors."""
    exc = context.get("exception")
    message = context.get("message") or "Unhandled async error"
    logger.error(f"Unhandled async error: {message}", exc_info=exc)


def log_thread_exception(args: threading.ExceptHookArgs) -> None:
    if issubclass(args.exc_type, SystemExit):
        return
    name = args.thread.name if args.thread else "unknown"
    logger.error(
        f"Uncaught exception in thread {name}",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def install_exception_hooks(
    loop: asyncio.AbstractEventLoop | None = None,
) -> Callable[[], None]:
    """Route unhandled async and thread errors to the log.

    Returns a callable that puts the previous loop handler and thread hook back.
    """
    loop = loop or asyncio.get_running_loop()
    previous_handler = loop.get_exception_handler()
    previous_hook = threading.excepthook
    loop.set_exception_handler(log_async_exception)
    threading.excepthook = log_thread_exception

    def restore() -> None:
        loop.set_exception_handler(previous_handler)
        threading.excepthook = previous_hook

    return restore
