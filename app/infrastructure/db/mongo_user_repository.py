# Standard library imports
import asyncio
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.security import hash_password
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import UserNotFoundError, UserStoreError


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def create_user(
        self,
        nickname: str,
        first_name: str,
        last_name: str,
        password: str,
        email: str,
        country: str,
    ) -> User:
        """
        Insert a new user document
        
        The password is stored as a bcrypt hash.
        
        Returns:
            Created User domain model with ID set
        """
        hashed_password = await self._hash_password(password)
        user_dict = self._fields_to_dict(nickname, first_name, last_name, hashed_password, email, country)
        
        try:
            result = await self.user_collection.insert_one(user_dict)
            
            # Fetch and return the newly created document
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            raise UserStoreError(f"Error creating user: {str(e)}") from e
        
        if new_document is None:
            raise UserStoreError("User was created but could not be retrieved")
        return self._document_to_user(new_document)
    
    async def update_user(
        self,
        user_id: str,
        nickname: str,
        first_name: str,
        last_name: str,
        password: str,
        email: str,
        country: str,
    ) -> User:
        """
        Replace the stored fields of an existing user
        
        Returns:
            Updated User domain model
            
        Raises:
            UserNotFoundError: If the ID is malformed or matches no document
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            raise UserNotFoundError(user_id)
        
        hashed_password = await self._hash_password(password)
        user_dict = self._fields_to_dict(nickname, first_name, last_name, hashed_password, email, country)
        
        try:
            update_result = await self.user_collection.update_one(
                {UserFields.MONGO_ID: object_id},
                {"$set": user_dict}
            )
            if update_result.matched_count == 0:
                raise UserNotFoundError(user_id)
            
            # Fetch and return updated document
            updated_document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise UserStoreError(f"Error updating user: {str(e)}") from e
        
        if updated_document is None:
            raise UserStoreError(f"User {user_id} was updated but could not be retrieved")
        return self._document_to_user(updated_document)
    
    async def remove_user(self, user_id: str) -> int:
        """
        Delete a user document
        
        Returns:
            Number of deleted documents; 0 for a malformed or unknown ID
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return 0
        
        try:
            delete_result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise UserStoreError(f"Error removing user: {str(e)}") from e
        return delete_result.deleted_count
    
    async def get_users(self, params: Dict[str, List[str]]) -> List[User]:
        """
        List users matching the query parameters
        
        Args:
            params: Query parameters; keys that are not filterable fields are ignored
            
        Returns:
            List of matching User domain models
        """
        query = self._params_to_query(params)
        
        try:
            cursor = self.user_collection.find(query)
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise UserStoreError(f"Error listing users: {str(e)}") from e
    
    async def _hash_password(self, password: str) -> str:
        """Hash off the event loop; bcrypt rejects inputs over 72 bytes"""
        try:
            return await asyncio.to_thread(hash_password, password)
        except ValueError as e:
            raise UserStoreError(f"Error hashing password: {str(e)}") from e
    
    def _params_to_query(self, params: Dict[str, List[str]]) -> Dict[str, Any]:
        """Translate query parameters into a MongoDB filter document"""
        query: Dict[str, Any] = {}
        for key, values in params.items():
            if key not in UserFields.FILTERABLE or not values:
                continue
            
            if key == UserFields.ID:
                # Malformed IDs match nothing
                object_ids = [oid for oid in (_to_object_id(v) for v in values) if oid is not None]
                query[UserFields.MONGO_ID] = {"$in": object_ids}
            elif len(values) == 1:
                query[key] = values[0]
            else:
                query[key] = {"$in": list(values)}
        return query
    
    def _fields_to_dict(
        self,
        nickname: str,
        first_name: str,
        last_name: str,
        hashed_password: str,
        email: str,
        country: str,
    ) -> Dict[str, Any]:
        """Build the MongoDB document body for a user"""
        return {
            UserFields.NICKNAME: nickname,
            UserFields.FIRST_NAME: first_name,
            UserFields.LAST_NAME: last_name,
            UserFields.PASSWORD: hashed_password,
            UserFields.EMAIL: email,
            UserFields.COUNTRY: country,
        }
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise UserStoreError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            nickname=document.get(UserFields.NICKNAME, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            country=document.get(UserFields.COUNTRY, ""),
            password=document.get(UserFields.PASSWORD, ""),
        )
