"""
Superclouds Client Library.

A typed async client for the Superclouds user-management API, using a
bearer token and a mutual-TLS client certificate.

Example usage:
    ```python
    from superclouds_client import SupercloudsClient, CreateUserInput

    async with SupercloudsClient.from_env() as client:
        new_user = await client.users.create_user(
            CreateUserInput(email="new.user@example.com")
        )
        page = await client.users.list_users()
    ```
"""

__version__ = "0.1.0"

# Main client
from superclouds_client.client import SupercloudsClient

# Configuration
from superclouds_client.config import API_BASE_URL, SupercloudsSettings
from superclouds_client.transport import SupercloudsConfig, build_ssl_context

# HTTP layer and endpoint clients
from superclouds_client.http import AsyncHTTPClient
from superclouds_client.endpoints import UsersClient

# Models
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

# Exceptions
from superclouds_client.exceptions import (
    SupercloudsError,
    ConfigurationError,
    TLSSetupError,
    SerializationError,
    TransportError,
    RequestTimeoutError,
    DecodeError,
    APIError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ServerError,
    exception_from_status,
)

__all__ = [
    "__version__",
    # Main client
    "SupercloudsClient",
    # Configuration
    "API_BASE_URL",
    "SupercloudsSettings",
    "SupercloudsConfig",
    "build_ssl_context",
    # HTTP layer
    "AsyncHTTPClient",
    "UsersClient",
    # Models
    "User",
    "ListUsersInput",
    "ListUsersOutput",
    "CreateUserInput",
    "DeleteUserInput",
    "UpdateUserInput",
    "ListRolesOutput",
    "UpdateUserRoleInput",
    "ChangePasswordInput",
    # Exceptions
    "SupercloudsError",
    "ConfigurationError",
    "TLSSetupError",
    "SerializationError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ServerError",
    "exception_from_status",
]
