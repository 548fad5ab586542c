from .user_dto import InvalidJSONBodyError, UserInput, UserResponse, parse_user_input

__all__ = [
    "InvalidJSONBodyError",
    "UserInput",
    "UserResponse",
    "parse_user_input",
]
