from .user import (
    CreateUserUseCase,
    UpdateUserUseCase,
    RemoveUserUseCase,
    GetUsersUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "RemoveUserUseCase",
    "GetUsersUseCase",
]
