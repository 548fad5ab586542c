from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.remove_user import RemoveUserUseCase
from ...application.use_cases.user.get_users import GetUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            RemoveUserUseCase,
            lambda: RemoveUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
        
        container.register_factory(
            GetUsersUseCase,
            lambda: GetUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )
