from .create_user import CreateUserUseCase
from .update_user import UpdateUserUseCase
from .remove_user import RemoveUserUseCase
from .get_users import GetUsersUseCase

__all__ = ["CreateUserUseCase", "UpdateUserUseCase", "RemoveUserUseCase", "GetUsersUseCase"]
