"""Unit tests for CreateUserUseCase."""

import pytest
from pydantic import ValidationError

from roster.application.usecase.user import CreateUserRequest, CreateUserUseCase
from roster.domain.error import DuplicateEmailError
from roster.domain.repository import UserRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateUserRequest:
    """Validation of create requests."""

    def test_name_and_email_are_trimmed(self):
        """Surrounding whitespace is removed before validation."""
        request = CreateUserRequest(name="  Ivan ", email=" ivan@x.com ", age=25)

        assert request.name == "Ivan"
        assert request.email == "ivan@x.com"

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": "I", "email": "ivan@x.com", "age": 25},
            {"name": "x" * 101, "email": "ivan@x.com", "age": 25},
            {"name": "Ivan", "email": "not-an-email", "age": 25},
            {"name": "Ivan", "email": "   ", "age": 25},
            {"name": "Ivan", "email": "ivan@x.com", "age": 0},
            {"name": "Ivan", "email": "ivan@x.com", "age": 151},
            {"name": "Ivan", "email": "ivan@x.com", "age": True},
            {"name": "Ivan", "email": "ivan@x.com", "age": 25.5},
        ],
    )
    def test_invalid_fields_are_rejected(self, fields):
        """Out-of-range or malformed fields fail validation."""
        with pytest.raises(ValidationError):
            CreateUserRequest(**fields)

    @pytest.mark.parametrize("age", [1, 150])
    def test_boundary_ages_are_accepted(self, age):
        """Age bounds are inclusive."""
        assert CreateUserRequest(name="Ivan", email="ivan@x.com", age=age).age == age


class TestCreateUserUseCase:
    """Tests for create user flow."""

    @pytest.mark.asyncio
    async def test_create_user_returns_response(self, unit_env):
        """The created user is returned with a string ID."""
        # Arrange
        use_case = await unit_env.get(CreateUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(
            CreateUserRequest(name="Ivan", email="ivan@x.com", age=25)
        )

        # Assert
        assert response.name == "Ivan"
        assert response.email == "ivan@x.com"
        assert response.age == 25
        assert len(await user_repo.find_all()) == 1
        assert str((await user_repo.find_all())[0].id) == response.user_id

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, unit_env):
        """Duplicate emails propagate as DuplicateEmailError."""
        # Arrange
        use_case = await unit_env.get(CreateUserUseCase)
        request = CreateUserRequest(name="Ivan", email="dup@x.com", age=25)
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(DuplicateEmailError):
            await use_case.execute(request)
