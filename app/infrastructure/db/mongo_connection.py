# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create a MongoDB client for the configured URI
    
    The client connects lazily; the caller owns it and must close it.
    
    Args:
        settings: Application settings
        
    Returns:
        Motor client instance
    """
    return AsyncIOMotorClient(settings.mongo_uri)


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """
    Get the configured MongoDB database from a client
    
    Returns:
        MongoDB database instance
    """
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_users_collection]
