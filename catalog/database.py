"""
MongoDB connection management for the book catalog.
Handles connection, indexing and health checks for the book collection.
"""

from typing import Any, Dict, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure

from catalog.repository import MongoBookRepository

logger = structlog.get_logger(__name__)


class MongoDBManager:
    """
    Async MongoDB manager for the book collection.
    Owns the client; the driver pools connections internally.
    """

    def __init__(
        self,
        connection_url: str,
        database_name: str,
        collection_name: str,
        timeout_ms: int = 5000
    ):
        """
        Initialize MongoDB manager.

        Args:
            connection_url: MongoDB connection URL
            database_name: Name of the database
            collection_name: Name of the book collection
            timeout_ms: Server selection timeout in milliseconds
        """
        self.connection_url = connection_url
        self.database_name = database_name
        self.collection_name = collection_name
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None
        self.collection: Optional[AsyncIOMotorCollection] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(
                self.connection_url,
                serverSelectionTimeoutMS=self.timeout_ms
            )
            self.database = self.client[self.database_name]
            self.collection = self.database[self.collection_name]

            await self.client.admin.command('ping')
            logger.info("Successfully connected to MongoDB",
                        database=self.database_name,
                        collection=self.collection_name)

            await self._create_indexes()

        except ConnectionFailure as e:
            logger.error("Failed to connect to MongoDB", error=str(e))
            raise

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")

    async def _create_indexes(self) -> None:
        """Create indexes for the most searched fields."""
        try:
            await self.collection.create_index("title")
            await self.collection.create_index("author")
            logger.info("Successfully created MongoDB indexes")

        except Exception as e:
            logger.error("Failed to create indexes", error=str(e))
            raise

    def get_repository(self) -> MongoBookRepository:
        """Repository over the connected book collection."""
        if self.collection is None:
            raise RuntimeError("MongoDB manager is not connected")
        return MongoBookRepository(self.collection)

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check.

        Returns:
            Dictionary with health status
        """
        try:
            await self.database.command("ping")
            books_count = await self.collection.count_documents({})

            return {
                "status": "healthy",
                "books_collection": "accessible",
                "books_count": books_count
            }
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }
