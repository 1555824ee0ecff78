"""Interactive console menu for managing users.

Each command runs in its own DI request scope, so every command gets a
fresh session that commits when the command succeeds.
"""

import sys
from collections.abc import Callable
from typing import TextIO
from uuid import UUID

import logfire
from dishka import AsyncContainer
from pydantic import ValidationError as PydanticValidationError

from roster.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserResponse,
)
from roster.domain.error import DomainError

SEPARATOR = "=" * 40

MENU = f"""
{SEPARATOR}
      USER MANAGEMENT
{SEPARATOR}
1. Create user
2. Find user by ID
3. List all users
4. Update user
5. Delete user
6. Exit
{"-" * 40}"""


class InvalidInputError(Exception):
    """Raised when console input cannot be parsed."""

    pass


def format_user(user: UserResponse) -> str:
    """Render a user as a single line."""
    return (
        f"ID: {user.user_id} | Name: {user.name:<20} | Email: {user.email:<25} "
        f"| Age: {user.age:<3} | Created: {user.created_at.isoformat()}"
    )


def format_validation_error(exc: PydanticValidationError) -> str:
    """Summarize pydantic errors as ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "input"
        parts.append(f"{field}: {error.get('msg', 'Invalid value')}")
    return "; ".join(parts)


class ConsoleMenu:
    """Menu loop driving the user use cases."""

    def __init__(
        self,
        container: AsyncContainer,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        """Initialize console menu.

        Args:
            container: APP-scoped DI container
            input_fn: Prompt reader, ``input`` by default
            output: Stream to print to, stdout by default
        """
        self.container = container
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self._commands: dict[str, Callable] = {
            "1": self.create_user,
            "2": self.find_user,
            "3": self.list_users,
            "4": self.update_user,
            "5": self.delete_user,
        }

    def _print(self, message: str = "") -> None:
        print(message, file=self.output)

    def _ask(self, prompt: str) -> str:
        return self.input_fn(prompt)

    def _ask_user_id(self, prompt: str) -> UUID:
        raw = self._ask(prompt).strip()
        try:
            return UUID(raw)
        except ValueError:
            raise InvalidInputError(f"Invalid user ID: {raw!r}") from None

    def _ask_int(self, prompt: str, *, optional: bool = False) -> int | None:
        raw = self._ask(prompt).strip()
        if optional and not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise InvalidInputError(f"Age must be a number, got {raw!r}") from None

    async def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        logfire.info("Console started")
        while True:
            self._print(MENU)
            try:
                choice = self._ask("\nSelect an option (1-6): ").strip()
            except EOFError:
                break

            if choice == "6":
                self._print("Shutting down...")
                break

            command = self._commands.get(choice)
            if command is None:
                logfire.warn("Invalid menu choice", choice=choice)
                self._print("Invalid choice. Please enter a number from 1 to 6.")
                continue

            await self._dispatch(command)

        logfire.info("Console stopped")

    async def _dispatch(self, command: Callable) -> None:
        """Run one command, reporting errors without leaving the loop."""
        try:
            await command()
        except InvalidInputError as e:
            self._print(f"Error: {e}")
        except DomainError as e:
            self._print(f"Error: {e}")
        except PydanticValidationError as e:
            self._print(f"Invalid input: {format_validation_error(e)}")
        except EOFError:
            self._print("Input closed, command aborted.")
        except Exception as e:
            logfire.error(
                "Console command failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=e,
            )
            self._print(f"Unexpected error: {e}")

    async def create_user(self) -> None:
        self._print("\n=== Create user ===")
        name = self._ask("Name: ")
        email = self._ask("Email: ")
        age = self._ask_int("Age: ")
        request = CreateUserRequest(name=name, email=email, age=age)

        async with self.container() as request_container:
            use_case = await request_container.get(CreateUserUseCase)
            user = await use_case.execute(request)

        self._print(f"User created with ID: {user.user_id}")

    async def find_user(self) -> None:
        self._print("\n=== Find user by ID ===")
        user_id = self._ask_user_id("User ID: ")

        async with self.container() as request_container:
            use_case = await request_container.get(GetUserUseCase)
            user = await use_case.execute(GetUserRequest(user_id=user_id))

        self._print(format_user(user))

    async def list_users(self) -> None:
        self._print("\n=== All users ===")
        async with self.container() as request_container:
            use_case = await request_container.get(ListUsersUseCase)
            result = await use_case.execute(ListUsersRequest())

        if not result.users:
            self._print("No users found.")
            return

        for user in result.users:
            self._print(format_user(user))
        self._print(f"\nTotal users: {len(result.users)}")

    async def update_user(self) -> None:
        """Update a user; an empty answer keeps the current value."""
        self._print("\n=== Update user ===")
        user_id = self._ask_user_id("User ID: ")
        name = self._ask("New name (Enter to keep current): ")
        email = self._ask("New email (Enter to keep current): ")
        age = self._ask_int("New age (Enter to keep current): ", optional=True)
        request = UpdateUserRequest(
            user_id=user_id,
            name=name or None,
            email=email or None,
            age=age,
        )

        async with self.container() as request_container:
            use_case = await request_container.get(UpdateUserUseCase)
            await use_case.execute(request)

        self._print("User updated.")

    async def delete_user(self) -> None:
        self._print("\n=== Delete user ===")
        user_id = self._ask_user_id("User ID: ")
        confirmation = self._ask(f"Delete user {user_id}? (y/N): ").strip().lower()
        if confirmation not in ("y", "yes"):
            self._print("Deletion cancelled.")
            return

        async with self.container() as request_container:
            use_case = await request_container.get(DeleteUserUseCase)
            await use_case.execute(DeleteUserRequest(user_id=user_id))

        self._print("User deleted.")
