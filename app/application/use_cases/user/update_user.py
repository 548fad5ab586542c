# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserInput, UserResponse
from ._mapping import to_user_response


class UpdateUserUseCase:
    """Use case for replacing the fields of an existing user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserInput) -> UserResponse:
        """
        Update a user
        
        Args:
            user_id: ID of the user to update
            request: Validated user input
            
        Returns:
            UserResponse with the stored values
            
        Raises:
            UserNotFoundError: If no user has this ID
            UserStoreError: If the store fails
        """
        updated_user = await self.user_repository.update_user(
            user_id=user_id,
            nickname=request.nickname,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
            email=request.email,
            country=request.country,
        )
        return to_user_response(updated_user)
