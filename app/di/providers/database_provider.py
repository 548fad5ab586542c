from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import (
    create_mongo_client,
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
        Register the MongoDB client, database and collections in the container.
        This is the ONLY place where database connections are created.
        The client is closed by the application lifespan on shutdown.
        """
        settings = container.get(Settings)
        client = create_mongo_client(settings)
        database = get_database(client, settings)
        
        container.register_singleton("mongo_client", client)
        container.register_singleton("database", database)
        container.register_singleton("user_collection", get_user_collection(database, settings))
