"""Unit tests for the interactive console menu."""

import io

import pytest

from roster.adapter.kafka import MockEventPublisher
from roster.domain.repository import UserRepository
from roster.domain.value import UserOperation
from roster.interface.console.menu import ConsoleMenu
from tests.conftest import make_user
from tests.harness import create_app_container_fixture

# APP-scoped container; the menu opens one request scope per command
app_container = create_app_container_fixture()


class ScriptedInput:
    """Feeds prepared answers to prompts, then signals end of input."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


async def _run(container, *answers: str) -> str:
    output = io.StringIO()
    menu = ConsoleMenu(container, input_fn=ScriptedInput(*answers), output=output)
    await menu.run()
    return output.getvalue()


async def _stored_user(container, **kwargs):
    async with container() as request_container:
        repo = await request_container.get(UserRepository)
        return await repo.save(make_user(**kwargs))


async def _all_users(container):
    async with container() as request_container:
        repo = await request_container.get(UserRepository)
        return await repo.find_all()


class TestMenuLoop:
    """Menu navigation."""

    @pytest.mark.asyncio
    async def test_exit_option_stops_loop(self, app_container):
        """Option 6 ends the session."""
        output = await _run(app_container, "6")

        assert "Shutting down" in output

    @pytest.mark.asyncio
    async def test_end_of_input_stops_loop(self, app_container):
        """Closed stdin ends the session without an error."""
        output = await _run(app_container)

        assert "USER MANAGEMENT" in output

    @pytest.mark.asyncio
    async def test_invalid_choice_is_reported(self, app_container):
        """Unknown options keep the loop running."""
        output = await _run(app_container, "9", "abc", "6")

        assert output.count("Invalid choice") == 2
        assert "Shutting down" in output


class TestCreateCommand:
    """Option 1."""

    @pytest.mark.asyncio
    async def test_create_user(self, app_container):
        """A user is created and an event is published."""
        # Act
        output = await _run(app_container, "1", "Ivan", "ivan@x.com", "25", "6")

        # Assert
        assert "User created with ID" in output
        users = await _all_users(app_container)
        assert [(u.name, u.email, u.age) for u in users] == [("Ivan", "ivan@x.com", 25)]
        publisher = await app_container.get(MockEventPublisher)
        assert publisher.published[0][1].operation == UserOperation.CREATE

    @pytest.mark.asyncio
    async def test_create_with_non_numeric_age(self, app_container):
        """A bad age is reported and nothing is stored."""
        output = await _run(app_container, "1", "Ivan", "ivan@x.com", "old", "6")

        assert "Age must be a number" in output
        assert await _all_users(app_container) == []

    @pytest.mark.asyncio
    async def test_create_with_invalid_fields(self, app_container):
        """Validation errors name the fields."""
        output = await _run(app_container, "1", "I", "broken", "200", "6")

        assert "Invalid input" in output
        assert "name" in output and "email" in output and "age" in output
        assert await _all_users(app_container) == []

    @pytest.mark.asyncio
    async def test_create_with_duplicate_email(self, app_container):
        """A taken email is reported and the loop continues."""
        # Arrange
        await _stored_user(app_container, email="dup@x.com")

        # Act
        output = await _run(app_container, "1", "Other", "dup@x.com", "30", "3", "6")

        # Assert
        assert "User with email dup@x.com already exists" in output
        assert "Total users: 1" in output


class TestFindAndListCommands:
    """Options 2 and 3."""

    @pytest.mark.asyncio
    async def test_find_user(self, app_container):
        """A found user is printed."""
        user = await _stored_user(app_container, name="Ivan", email="ivan@x.com")

        output = await _run(app_container, "2", str(user.id), "6")

        assert f"ID: {user.id}" in output
        assert "ivan@x.com" in output

    @pytest.mark.asyncio
    async def test_find_with_malformed_id(self, app_container):
        """IDs that are not UUIDs are rejected."""
        output = await _run(app_container, "2", "42", "6")

        assert "Invalid user ID" in output

    @pytest.mark.asyncio
    async def test_find_unknown_user(self, app_container):
        """Missing users are reported."""
        output = await _run(
            app_container, "2", "123e4567-e89b-12d3-a456-426614174000", "6"
        )

        assert "User not found" in output

    @pytest.mark.asyncio
    async def test_list_users_empty(self, app_container):
        """An empty store says so."""
        output = await _run(app_container, "3", "6")

        assert "No users found." in output

    @pytest.mark.asyncio
    async def test_list_users_prints_total(self, app_container):
        """All users are printed with a total."""
        await _stored_user(app_container, email="a@x.com")
        await _stored_user(app_container, email="b@x.com")

        output = await _run(app_container, "3", "6")

        assert "a@x.com" in output and "b@x.com" in output
        assert "Total users: 2" in output


class TestUpdateCommand:
    """Option 4."""

    @pytest.mark.asyncio
    async def test_empty_answers_keep_current_values(self, app_container):
        """Only the answered field changes."""
        # Arrange
        user = await _stored_user(
            app_container, name="Ivan", email="ivan@x.com", age=25
        )

        # Act
        output = await _run(app_container, "4", str(user.id), "", "", "30", "6")

        # Assert
        assert "User updated." in output
        [stored] = await _all_users(app_container)
        assert (stored.name, stored.email, stored.age) == ("Ivan", "ivan@x.com", 30)

    @pytest.mark.asyncio
    async def test_update_with_out_of_range_age(self, app_container):
        """Invalid ages are reported and nothing changes."""
        user = await _stored_user(app_container, age=25)

        output = await _run(app_container, "4", str(user.id), "", "", "0", "6")

        assert "Age must be between 1 and 150" in output
        [stored] = await _all_users(app_container)
        assert stored.age == 25

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, app_container):
        """A taken email is reported."""
        user = await _stored_user(app_container, email="a@x.com")
        await _stored_user(app_container, email="b@x.com")

        output = await _run(app_container, "4", str(user.id), "", "b@x.com", "", "6")

        assert "User with email b@x.com already exists" in output


class TestDeleteCommand:
    """Option 5."""

    @pytest.mark.asyncio
    async def test_delete_confirmed(self, app_container):
        """Confirming removes the user."""
        user = await _stored_user(app_container)

        output = await _run(app_container, "5", str(user.id), "y", "6")

        assert "User deleted." in output
        assert await _all_users(app_container) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", ["", "n", "no", "maybe"])
    async def test_delete_not_confirmed(self, app_container, answer):
        """Anything but yes cancels."""
        user = await _stored_user(app_container)

        output = await _run(app_container, "5", str(user.id), answer, "6")

        assert "Deletion cancelled." in output
        assert len(await _all_users(app_container)) == 1

    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, app_container):
        """Deleting a missing user is reported."""
        output = await _run(
            app_container, "5", "123e4567-e89b-12d3-a456-426614174000", "yes", "6"
        )

        assert "User not found" in output
