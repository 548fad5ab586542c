# Standard library imports
from typing import Dict, List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ._mapping import to_user_response


class GetUsersUseCase:
    """Use case for listing users filtered by query parameters"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, params: Dict[str, List[str]]) -> List[UserResponse]:
        """
        List users
        
        Args:
            params: Raw query parameters, handed to the store as-is
            
        Returns:
            List of UserResponse objects (possibly empty)
        """
        users = await self.user_repository.get_users(params)
        return [to_user_response(user) for user in users]
