from abc import ABC, abstractmethod
from typing import Dict, List
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.
    
    Implementations wrap storage failures in ``UserStoreError``.
    """
    
    @abstractmethod
    async def create_user(
        self,
        nickname: str,
        first_name: str,
        last_name: str,
        password: str,
        email: str,
        country: str,
    ) -> User:
        """Insert a new user and return it with its generated ID"""
        pass
    
    @abstractmethod
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
        """Replace the fields of an existing user; raises UserNotFoundError if absent"""
        pass
    
    @abstractmethod
    async def remove_user(self, user_id: str) -> int:
        """Delete a user and return the number of removed records"""
        pass
    
    @abstractmethod
    async def get_users(self, params: Dict[str, List[str]]) -> List[User]:
        """List users matching the given query parameters"""
        pass
