# Standard library imports
import logging
from typing import Dict, List

# External package imports
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import InvalidJSONBodyError, UserInput, parse_user_input
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.remove_user import RemoveUserUseCase
from ...application.use_cases.user.get_users import GetUsersUseCase
from ...core.config import Settings
from ...domain.exceptions import UserNotFoundError, UserStoreError
from .dependencies import get_app_settings, get_logger, provide
from .responses import write_response


router = APIRouter(tags=["users"])

INVALID_JSON_BODY = "invalid json body"
USER_NOT_FOUND = "user not found"
INTERNAL_ERROR = "internal server error"


async def _read_user_input(request: Request) -> UserInput | JSONResponse:
    """
    Parse and validate the request body

    Returns:
        The validated UserInput, or the 400 response to send back
    """
    try:
        user_input = parse_user_input(await request.body())
    except InvalidJSONBodyError:
        return write_response(status.HTTP_400_BAD_REQUEST, INVALID_JSON_BODY)

    validation_errors = user_input.validate_fields()
    if validation_errors:
        return write_response(
            status.HTTP_400_BAD_REQUEST,
            {"validationError": validation_errors},
        )
    return user_input


def _store_failure(
    logger: logging.Logger,
    settings: Settings,
    route: str,
    exception: UserStoreError,
) -> JSONResponse:
    """Log a persistence failure and build the 500 response"""
    logger.error(
        f"{route} failed: {exception}",
        extra={
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "route": route,
            "error": str(exception),
        },
    )
    detail = str(exception) if settings.expose_internal_errors else INTERNAL_ERROR
    return write_response(status.HTTP_500_INTERNAL_SERVER_ERROR, {"error": detail})


@router.post("")
async def create_user(
    request: Request,
    create_use_case: CreateUserUseCase = Depends(provide(CreateUserUseCase)),
    logger: logging.Logger = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    Create a new user

    Responds 200 (not 201) with the created user, including its generated ID.
    """
    route = "POST /users"
    user_input = await _read_user_input(request)
    if isinstance(user_input, JSONResponse):
        return user_input

    try:
        user = await create_use_case.execute(user_input)
    except UserStoreError as exception:
        return _store_failure(logger, settings, route, exception)

    logger.info(
        f"{route} created user {user.id}",
        extra={"status_code": status.HTTP_200_OK, "route": route, "userID": user.id},
    )
    return write_response(status.HTTP_200_OK, user)


@router.put("/{userid}")
async def update_user(
    userid: str,
    request: Request,
    update_use_case: UpdateUserUseCase = Depends(provide(UpdateUserUseCase)),
    logger: logging.Logger = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Replace the fields of an existing user"""
    route = f"PUT /users/{userid}"
    user_input = await _read_user_input(request)
    if isinstance(user_input, JSONResponse):
        return user_input

    try:
        user = await update_use_case.execute(userid, user_input)
    except UserNotFoundError:
        return write_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    except UserStoreError as exception:
        return _store_failure(logger, settings, route, exception)

    logger.info(
        f"{route} updated user {user.id}",
        extra={"status_code": status.HTTP_200_OK, "route": route, "userID": user.id},
    )
    return write_response(status.HTTP_200_OK, user)


@router.delete("/{userid}")
async def remove_user(
    userid: str,
    remove_use_case: RemoveUserUseCase = Depends(provide(RemoveUserUseCase)),
    logger: logging.Logger = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Delete a user; 404 when nothing was removed"""
    route = f"DELETE /users/{userid}"
    try:
        await remove_use_case.execute(userid)
    except UserNotFoundError:
        return write_response(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    except UserStoreError as exception:
        return _store_failure(logger, settings, route, exception)

    logger.info(
        f"{route} removed user",
        extra={"status_code": status.HTTP_200_OK, "route": route},
    )
    return write_response(status.HTTP_200_OK, "OK")


@router.get("")
async def get_users(
    request: Request,
    get_users_use_case: GetUsersUseCase = Depends(provide(GetUsersUseCase)),
    logger: logging.Logger = Depends(get_logger),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    List users

    Every query parameter is forwarded untouched to the store as a filter;
    repeated keys keep all their values.
    """
    route = "GET /users"
    params: Dict[str, List[str]] = {
        key: request.query_params.getlist(key) for key in request.query_params.keys()
    }

    try:
        users = await get_users_use_case.execute(params)
    except UserStoreError as exception:
        return _store_failure(logger, settings, route, exception)

    logger.info(
        f"{route} returned {len(users)} user(s)",
        extra={
            "status_code": status.HTTP_200_OK,
            "route": route,
            "params": params,
            "number_users": len(users),
        },
    )
    return write_response(status.HTTP_200_OK, users)
