"""
MongoDB Connection
==================

Explicit MongoDB connection handle. One instance is created at startup,
passed to whoever needs storage, and closed on shutdown.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from app.domain.exceptions import DatabaseNotConnectedError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB client handle.

    Owns one AsyncMongoClient and the selected database.
    """

    def __init__(self, uri: str, database_name: str):
        self._uri = uri
        self._database_name = database_name
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    async def connect(self) -> None:
        """Open the client and verify the server answers a ping."""
        if self._client is not None:
            return  # Already connected

        client = AsyncMongoClient(self._uri, tz_aware=True)
        try:
            await client.admin.command("ping")
        except Exception:
            logger.exception("Error connecting to MongoDB (database=%s)", self._database_name)
            await client.close()
            raise

        self._client = client
        self._database = client[self._database_name]
        logger.info("Connected to MongoDB: %s", self._database_name)

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            raise DatabaseNotConnectedError()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB AsyncCollection object
        """
        return self.get_database()[collection_name]

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None
            logger.info("Disconnected from MongoDB: %s", self._database_name)
