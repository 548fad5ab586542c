# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserInput, UserResponse
from ._mapping import to_user_response


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserInput) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Validated user input
            
        Returns:
            UserResponse with the store-generated ID
            
        Raises:
            UserStoreError: If the store fails to insert the user
        """
        saved_user = await self.user_repository.create_user(
            nickname=request.nickname,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
            email=request.email,
            country=request.country,
        )
        return to_user_response(saved_user)
