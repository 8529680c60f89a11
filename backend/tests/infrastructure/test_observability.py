"""Observability — JSON log shape, idempotent setup, process-level error hooks."""

import asyncio
import json
import logging
import sys
import threading

import pytest

from app.infrastructure import observability
from app.infrastructure.observability import (
    JSONFormatter,
    install_exception_hooks,
    log_async_exception,
    log_thread_exception,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    observability._handler = None


def _record(msg="hello", **extra):
    record = logging.LogRecord(
        "app.test", logging.WARNING, __file__, 1, msg, None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "app.test"
    assert log["message"] == "hello"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    record = _record(origin="https://evil.example.com", secret="x")
    log = json.loads(JSONFormatter().format(record))
    assert log["origin"] == "https://evil.example.com"
    assert "secret" not in log


def test_json_formatter_keeps_non_ascii():
    out = JSONFormatter().format(_record("Server running fine 🚀"))
    assert "🚀" in out


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    count = len(restore_root_logger.handlers)
    setup_logging("WARNING", "text")

    assert len(restore_root_logger.handlers) == count
    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(observability._handler.formatter, JSONFormatter)


def test_async_exception_handler_logs(caplog):
    caplog.set_level(logging.ERROR, logger="app.infrastructure.observability")
    log_async_exception(
        None,
        {"message": "Task exception was never retrieved",
         "exception": RuntimeError("lost")},
    )
    assert "Task exception was never retrieved" in caplog.text
    assert caplog.records[-1].exc_info[0] is RuntimeError


def test_thread_exception_hook_logs(caplog, monkeypatch):
    caplog.set_level(logging.ERROR, logger="app.infrastructure.observability")
    monkeypatch.setattr(threading, "excepthook", log_thread_exception)

    def boom():
        raise RuntimeError("thread failure")

    t = threading.Thread(target=boom, name="worker-1")
    t.start()
    t.join()

    assert "Uncaught exception in thread worker-1" in caplog.text


async def test_install_exception_hooks_binds_running_loop():
    loop = asyncio.get_running_loop()
    previous_handler = loop.get_exception_handler()
    previous_hook = threading.excepthook

    restore = install_exception_hooks()
    assert loop.get_exception_handler() is log_async_exception
    assert threading.excepthook is log_thread_exception

    restore()
    assert loop.get_exception_handler() is previous_handler
    assert threading.excepthook is previous_hook
