# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"

# Global MongoDB connection instances (opened once at application startup)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


async def connect_to_mongo() -> AsyncIOMotorDatabase:
    """
    Open the MongoDB connection and prepare the users collection.

    Called once from the application lifespan before requests are served.
    Calling it again returns the existing database.

    Returns:
        MongoDB database instance

    Raises:
        RuntimeError: If MongoDB is unreachable
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=10000,
        connectTimeoutMS=10000,
    )
    try:
        await client.admin.command("ping")
    except Exception as e:
        client.close()
        raise RuntimeError(f"Failed to connect to MongoDB: {e}") from e

    database = client[settings.mongo_database_name]
    # Duplicate-email races are settled by this index, not by application code
    await database[USERS_COLLECTION].create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True
    )

    _mongo_client = client
    _mongo_database = database
    logger.info("MongoDB connected (database=%s)", settings.mongo_database_name)
    return _mongo_database


async def close_mongo_connection() -> None:
    """Close the MongoDB client if one is open."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database opened by connect_to_mongo()

    Returns:
        MongoDB database instance

    Raises:
        RuntimeError: If the connection has not been initialized
    """
    if _mongo_database is None:
        raise RuntimeError("MongoDB connection not initialized; call connect_to_mongo() first")
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]
