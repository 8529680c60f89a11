"""Database Connector — async MongoDB client with connect-time ping.

Invariants:
    - connect() pings the server before the client is published; a failed ping
      closes the client and raises DatabaseConnectionError
    - One client per connector, reused by all requests (driver handles pooling)
    - Connection URI never logged (may carry credentials)

Design Decisions:
    - pymongo AsyncMongoClient: native asyncio driver, no thread pool
    - Owned by AppContext, not a module singleton: lifespan manages lifecycle
"""

import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.core.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


class DatabaseConnector:
    """Holds the process-wide document database client."""

    def __init__(
        self, uri: str, db_name: str, timeout_ms: int = 5000,
    ):
        self._uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self.client: AsyncMongoClient | None = None

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    @property
    def database(self) -> AsyncDatabase:
        """Database handle for route groups. Requires a prior connect()."""
        if self.client is None:
            raise DatabaseConnectionError("Database not connected")
        return self.client[self.db_name]

    async def connect(self) -> None:
        if self.client is not None:
            return
        client = None
        try:
            client = AsyncMongoClient(
                self._uri, serverSelectionTimeoutMS=self.timeout_ms,
            )
            await client.admin.command("ping")
        except PyMongoError as e:
            if client is not None:
                await client.close()
            logger.error(
                f"DB connection failed: {e}",
                extra={"service": "database"},
            )
            raise DatabaseConnectionError(str(e)) from e
        self.client = client
        logger.info(
            "Database connected",
            extra={"service": "database", "database": self.db_name},
        )

    async def close(self) -> None:
        if self.client is None:
            return
        await self.client.close()
        self.client = None
        logger.info("Database connection closed", extra={"service": "database"})
