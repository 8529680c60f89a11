"""Media Connector — configures the Cloudinary SDK for image storage.

Invariants:
    - connect() fails with MediaConnectionError when any credential is missing
    - SDK configured once per connect(); route groups use the cloudinary
      module (uploader, api) directly afterwards
    - API secret never logged

Design Decisions:
    - Optional verification ping (CLOUDINARY_VERIFY): the SDK call is blocking,
      so it runs in a worker thread
"""

import asyncio
import logging

import cloudinary
import cloudinary.api
from cloudinary.exceptions import Error as CloudinaryError

from app.core.errors import MediaConnectionError

logger = logging.getLogger(__name__)


class MediaConnector:
    """Holds the media-hosting service configuration."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        verify: bool = False,
    ):
        self.cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        self.verify = verify
        self.is_connected = False

    async def connect(self) -> None:
        missing = [
            name for name, value in (
                ("cloud_name", self.cloud_name),
                ("api_key", self._api_key),
                ("api_secret", self._api_secret),
            )
            if not value
        ]
        if missing:
            raise MediaConnectionError(
                f"Missing credentials: {', '.join(missing)}",
            )
        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=self._api_key,
            api_secret=self._api_secret,
            secure=True,
        )
        if self.verify:
            await self._ping()
        self.is_connected = True
        logger.info(
            "Media service configured",
            extra={"service": "media", "cloud_name": self.cloud_name},
        )

    async def close(self) -> None:
        self.is_connected = False

    async def _ping(self) -> None:
        try:
            await asyncio.to_thread(cloudinary.api.ping)
        except (CloudinaryError, OSError) as e:
            logger.error(
                f"Media service ping failed: {e}",
                extra={"service": "media"},
            )
            raise MediaConnectionError(str(e)) from e
