# Local application imports
from ....domain.exceptions import UserNotFoundError
from ....domain.repositories.user_repository import UserRepository


class RemoveUserUseCase:
    """Use case for deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> int:
        """
        Delete a user by ID
        
        Returns:
            Number of removed records (always > 0)
            
        Raises:
            UserNotFoundError: If nothing was removed
            UserStoreError: If the store fails
        """
        count = await self.user_repository.remove_user(user_id)
        if count == 0:
            raise UserNotFoundError(user_id)
        return count
