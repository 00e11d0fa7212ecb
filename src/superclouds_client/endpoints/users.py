"""
Client for the users endpoints of the Superclouds API.
"""

from typing import Optional

from superclouds_client.http import AsyncHTTPClient
from superclouds_client.models import (
    ChangePasswordInput,
    CreateUserInput,
    DeleteUserInput,
    ListRolesOutput,
    ListUsersInput,
    ListUsersOutput,
    UpdateUserInput,
    UpdateUserRoleInput,
    User,
)
from superclouds_client.transport import SupercloudsConfig


class UsersClient:
    """
    Client for users endpoints.

    Example usage:
        ```python
        users = UsersClient(config)
        page = await users.list_users(ListUsersInput(size=10, page=1, search_term="jane"))
        new_user = await users.create_user(CreateUserInput(email="new.user@example.com"))
        await users.update_user_role(UpdateUserRoleInput(email="user@example.com", role="MODIFY"))
        ```
    """

    def __init__(self, config: SupercloudsConfig) -> None:
        self._http = AsyncHTTPClient(config)

    @property
    def config(self) -> SupercloudsConfig:
        return self._http.config

    async def list_users(self, query: Optional[ListUsersInput] = None) -> ListUsersOutput:
        """
        List users of the organization, one page at a time.

        Args:
            query: Page size, page number and search term; zero or empty
                values fall back to the server defaults

        Returns:
            The page of users with pagination details
        """
        query = query or ListUsersInput()
        return await self._http.get_model("/users", ListUsersOutput, params=query.to_params())

    async def create_user(self, data: CreateUserInput) -> User:
        """Create a new user within the organization."""
        return await self._http.send_model("POST", "/users", data, User)

    async def delete_user(self, data: DeleteUserInput) -> None:
        """
        Remove a user from the organization.

        The email is sent as a query parameter.

        Raises:
            APIError: If the API does not answer 200
        """
        await self._http.send_void(
            "DELETE",
            "/users",
            "failed to delete user",
            params={"email": data.email},
        )

    async def update_user(self, data: UpdateUserInput) -> User:
        """Update the profile of the authenticated user."""
        return await self._http.send_model("PATCH", "/user", data, User)

    async def get_user(self) -> User:
        """Get the authenticated user."""
        return await self._http.get_model("/user", User)

    async def list_roles(self) -> ListRolesOutput:
        """List the roles available in the system."""
        return await self._http.get_model("/users/roles", ListRolesOutput)

    async def update_user_role(self, data: UpdateUserRoleInput) -> None:
        """
        Change the role of a user within the organization.

        Raises:
            APIError: If the API does not answer 200
        """
        await self._http.send_void(
            "PATCH",
            "/users/role",
            "failed to update user role",
            body=data,
        )

    async def change_password(self, data: ChangePasswordInput) -> None:
        """
        Change the password of the authenticated user.

        Raises:
            APIError: If the API does not answer 200
        """
        await self._http.send_void(
            "PATCH",
            "/change-password",
            "failed to change password",
            body=data,
        )
