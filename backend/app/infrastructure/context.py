"""Application Context — the connectors shared by every request, created once.

Invariants:
    - Exactly one AppContext per application instance (attached to app.state)
    - connect() is sequential: media is only attempted after the database resolves
    - close() releases connectors in reverse order

Design Decisions:
    - Explicit context object instead of module-level singletons: tests and
      hosts inject fakes through the Connector protocol
"""

import logging
from dataclasses import dataclass

from app.config import Settings
from app.core.connector_protocols import Connector
from app.infrastructure.database import DatabaseConnector
from app.infrastructure.media import MediaConnector

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    database: Connector
    media: Connector

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            database=DatabaseConnector(
                settings.mongodb_uri,
                settings.mongodb_db_name,
                timeout_ms=settings.mongodb_timeout_ms,
            ),
            media=MediaConnector(
                settings.cloudinary_cloud_name,
                settings.cloudinary_api_key,
                settings.cloudinary_api_secret,
                verify=settings.cloudinary_verify,
            ),
        )

    async def connect(self) -> None:
        """Connect database, then media. Raises ConnectorError on first failure."""
        await self.database.connect()
        await self.media.connect()
        logger.info("Database + media service connected")

    async def close(self) -> None:
        await self.media.close()
        await self.database.close()
