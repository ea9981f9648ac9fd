# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import PostFields, UserFields

logger = logging.getLogger(__name__)


USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"


class MongoDatabase:
    """
    Store handle with an explicit lifecycle.

    Opened once at application startup, passed to the repositories through
    the DI container, closed at shutdown.
    """

    def __init__(self, mongo_uri: str, database_name: str) -> None:
        self.mongo_uri = mongo_uri
        self.database_name = database_name
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoDatabase":
        return cls(settings.mongo_uri, settings.mongo_database_name)

    async def connect(self) -> None:
        """Create the client and fail fast if the server is unreachable."""
        if self._client is not None:
            return
        client = AsyncIOMotorClient(
            self.mongo_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=10000,
            connectTimeoutMS=10000,
        )
        try:
            await client.admin.command("ping")
        except Exception as e:
            client.close()
            raise RuntimeError(f"Failed to connect to MongoDB: {e}") from e
        self._client = client
        self._database = client[self.database_name]
        logger.info(f"Connected to MongoDB database '{self.database_name}'")

    async def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None
        self._database = None
        logger.info("MongoDB connection closed")

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoDatabase is not connected")
        return self._database

    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]

    def get_post_collection(self) -> AsyncIOMotorCollection:
        """
        Get posts collection from MongoDB
        
        Returns:
            MongoDB collection for posts
        """
        return self.database[POSTS_COLLECTION]

    async def ensure_indexes(self) -> None:
        """Create the indexes the application relies on (idempotent)."""
        await self.get_user_collection().create_index(
            [(UserFields.EMAIL, ASCENDING)], unique=True, name="uniq_email"
        )
        posts = self.get_post_collection()
        await posts.create_index([(PostFields.CREATED_AT, DESCENDING)], name="created_at_desc")
        await posts.create_index([(PostFields.AUTHOR_ID, ASCENDING)], name="author_id")
        logger.info("MongoDB indexes ensured")
