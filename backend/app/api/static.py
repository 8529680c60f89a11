"""Uploaded Images — serves files from the upload directory under /images.

Invariants:
    - html=False: no index files, no directory listing (directories are 404)
    - Paths resolving outside the directory are 404 (Starlette StaticFiles)
    - A missing or unusable upload directory is logged at mount time and every
      lookup is a 404; building the app never fails because of it
    - No authentication on this prefix
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "/images"


class UploadFiles(StaticFiles):
    """StaticFiles that answers 404 instead of 500 while the directory is absent."""

    async def check_config(self) -> None:
        if Path(self.directory).is_dir():
            await super().check_config()


def mount_uploads(app: FastAPI, directory: str | Path) -> None:
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(
            f"Upload directory unavailable, /images will answer 404: {e}",
            extra={"path": str(directory)},
        )
    app.mount(
        UPLOADS_PREFIX,
        UploadFiles(directory=directory, check_dir=False),
        name="images",
    )
