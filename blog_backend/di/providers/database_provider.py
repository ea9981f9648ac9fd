from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoDatabase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer", database: MongoDatabase) -> None:
        """
        Register the store handle and its collections in the container.
        The handle must already be connected.
        """
        container.register_singleton(MongoDatabase, database)
        container.register_singleton("user_collection", database.get_user_collection())
        container.register_singleton("post_collection", database.get_post_collection())
