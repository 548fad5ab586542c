"""
Unit tests for user use cases (Create, Update, Remove, GetUsers).
"""
import json

import pytest
from app.application.dto.user_dto import UserInput, UserResponse, parse_user_input
from app.application.use_cases.user.create_user import CreateUserUseCase
from app.application.use_cases.user.update_user import UpdateUserUseCase
from app.application.use_cases.user.remove_user import RemoveUserUseCase
from app.application.use_cases.user.get_users import GetUsersUseCase
from app.domain.exceptions import UserNotFoundError, UserStoreError


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_passes_fields_and_hides_password(self, mock_user_repo, make_user, valid_payload):
        mock_user_repo.create_user.return_value = make_user("usr-new")
        use_case = CreateUserUseCase(mock_user_repo)

        result = await use_case.execute(UserInput(**valid_payload))

        mock_user_repo.create_user.assert_awaited_once_with(
            nickname="jdoe",
            first_name="John",
            last_name="Doe",
            password="supersecret",
            email="john@example.com",
            country="PT",
        )
        assert isinstance(result, UserResponse)
        assert result.id == "usr-new"
        assert "password" not in result.model_dump()

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_user_repo, valid_payload):
        mock_user_repo.create_user.side_effect = UserStoreError("duplicate key")
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(UserStoreError, match="duplicate key"):
            await use_case.execute(UserInput(**valid_payload))


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_update_returns_stored_user(self, mock_user_repo, make_user, valid_payload):
        mock_user_repo.update_user.return_value = make_user("usr-1", country="ES")
        use_case = UpdateUserUseCase(mock_user_repo)

        result = await use_case.execute("usr-1", UserInput(**valid_payload))

        assert mock_user_repo.update_user.await_args.kwargs["user_id"] == "usr-1"
        assert result.id == "usr-1"
        assert result.country == "ES"

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, mock_user_repo, valid_payload):
        mock_user_repo.update_user.side_effect = UserNotFoundError("usr-x")
        use_case = UpdateUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute("usr-x", UserInput(**valid_payload))


class TestRemoveUserUseCase:
    """Tests for RemoveUserUseCase"""

    @pytest.mark.asyncio
    async def test_remove_existing(self, mock_user_repo):
        mock_user_repo.remove_user.return_value = 1
        use_case = RemoveUserUseCase(mock_user_repo)
        assert await use_case.execute("usr-1") == 1
        mock_user_repo.remove_user.assert_awaited_once_with("usr-1")

    @pytest.mark.asyncio
    async def test_remove_nothing_raises_not_found(self, mock_user_repo):
        mock_user_repo.remove_user.return_value = 0
        use_case = RemoveUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError) as exc_info:
            await use_case.execute("usr-missing")
        assert exc_info.value.user_id == "usr-missing"


class TestGetUsersUseCase:
    """Tests for GetUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_user_repo):
        mock_user_repo.get_users.return_value = []
        use_case = GetUsersUseCase(mock_user_repo)
        assert await use_case.execute({}) == []

    @pytest.mark.asyncio
    async def test_params_passed_unmodified(self, mock_user_repo, make_user):
        params = {"country": ["PT", "ES"], "unknown": ["x"]}
        mock_user_repo.get_users.return_value = [
            make_user("usr-1"),
            make_user("usr-2", nickname="mary"),
        ]
        use_case = GetUsersUseCase(mock_user_repo)

        result = await use_case.execute(params)

        mock_user_repo.get_users.assert_awaited_once_with(params)
        assert [user.id for user in result] == ["usr-1", "usr-2"]
        assert result[1].nickname == "mary"


class TestStrippedInputReachesStore:
    """The repository receives the same (stripped) values that were validated"""

    @pytest.mark.asyncio
    async def test_create_passes_stripped_fields(self, mock_user_repo, make_user):
        mock_user_repo.create_user.return_value = make_user("usr-new")
        body = json.dumps({
            "nickname": "  jdoe  ",
            "first_name": " John",
            "last_name": "Doe ",
            "password": " supersecret ",
            "email": "  john@example.com ",
            "country": "\tPT\n",
        }).encode("utf-8")
        user_input = parse_user_input(body)
        assert user_input.validate_fields() == {}

        await CreateUserUseCase(mock_user_repo).execute(user_input)

        mock_user_repo.create_user.assert_awaited_once_with(
            nickname="jdoe",
            first_name="John",
            last_name="Doe",
            password="supersecret",
            email="john@example.com",
            country="PT",
        )
