from .mongo_connection import connect_to_mongo, close_mongo_connection, get_database, get_user_collection
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "connect_to_mongo",
    "close_mongo_connection",
    "get_database",
    "get_user_collection",
    "MongoUserRepository",
]
