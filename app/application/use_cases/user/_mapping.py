from ....domain.models.user import User
from ...dto.user_dto import UserResponse


def to_user_response(user: User) -> UserResponse:
    """Convert a domain User into the public DTO (password is dropped)"""
    return UserResponse(
        id=user.id or "",
        nickname=user.nickname,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        country=user.country,
    )
