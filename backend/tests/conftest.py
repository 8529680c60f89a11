"""Root conftest — shared test configuration."""

import logging
import os
import tempfile
import threading

import pytest

# Ensure tests never reach a real database or media account
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/storefront-test")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")
os.environ.setdefault("CLOUDINARY_API_KEY", "test-key")
os.environ.setdefault("CLOUDINARY_API_SECRET", "test-secret")
os.environ.setdefault(
    "UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "storefront-test-uploads"),
)


@pytest.fixture(autouse=True)
def restore_process_hooks(monkeypatch):
    """Lifespans install a root log handler and threading.excepthook; undo both."""
    monkeypatch.setattr(threading, "excepthook", threading.excepthook)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
