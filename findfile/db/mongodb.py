"""MongoDB connection lifecycle for the document store"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from typing import Optional
import logging
from ..config import settings
from ..errors import ErrorKind, StoreError

logger = logging.getLogger(__name__)


class MongoDB:
    """
    Process-wide motor client holding the document collection

    The client is opened once on application startup and closed on
    shutdown; everything else reaches the collection through
    ``get_documents_collection``.
    """

    client: Optional[AsyncIOMotorClient] = None
    database: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    async def connect_db(cls, url: Optional[str] = None, db_name: Optional[str] = None):
        """
        Open the client and verify the server answers

        Args:
            url: Connection string, defaults to ``settings.mongodb_url``
            db_name: Database name, defaults to ``settings.mongodb_db_name``

        Raises:
            StoreError: STORE_READ if the server cannot be reached
        """
        url = url or settings.mongodb_url
        db_name = db_name or settings.mongodb_db_name

        logger.info(f"Connecting to document store database {db_name}")
        client = AsyncIOMotorClient(url, serverSelectionTimeoutMS=settings.mongodb_timeout_ms)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(f"Document store unreachable: {e}")
            raise StoreError(ErrorKind.STORE_READ, "error connecting to document store") from e

        cls.client = client
        cls.database = client[db_name]
        logger.info(f"Connected to document store database {db_name}")

    @classmethod
    async def close_db(cls):
        if cls.client is not None:
            cls.client.close()
            logger.info("Document store connection closed")
        cls.client = None
        cls.database = None

    @classmethod
    def is_connected(cls) -> bool:
        return cls.database is not None

    @classmethod
    def get_database(cls) -> AsyncIOMotorDatabase:
        if cls.database is None:
            raise RuntimeError("Document store not connected. Call connect_db() first")
        return cls.database


def get_db() -> AsyncIOMotorDatabase:
    """Dependency returning the connected database"""
    return MongoDB.get_database()


def get_documents_collection() -> AsyncIOMotorCollection:
    """Collection holding the document trees"""
    return get_db()[settings.documents_collection]
