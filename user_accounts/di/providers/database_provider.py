from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register database handles in the container.
        The connection itself is opened by connect_to_mongo() at startup.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
