"""
Main Superclouds API client.

This module provides the SupercloudsClient class, the primary entry point
for the Superclouds API. It owns a transport configuration, hands out
endpoint clients and closes the connection pool when done.
"""

from typing import Any, Dict, Optional, Type, TypeVar
import logging

from superclouds_client.config import SupercloudsSettings
from superclouds_client.endpoints import UsersClient
from superclouds_client.transport import SupercloudsConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SupercloudsClient:
    """
    Main client for the Superclouds API.

    Example usage:
        ```python
        async with SupercloudsClient.from_env() as client:
            me = await client.users.get_user()
            roles = await client.users.list_roles()
        ```

    Or without context manager:
        ```python
        config = SupercloudsConfig.from_params(cert_path, key_path, token)
        client = SupercloudsClient(config)
        # ... use client ...
        await client.close()
        ```
    """

    def __init__(self, config: SupercloudsConfig):
        self._config = config
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_env(cls, settings: Optional[SupercloudsSettings] = None) -> "SupercloudsClient":
        """Create a client configured from SUPER_* environment variables."""
        return cls(SupercloudsConfig.from_env(settings))

    @property
    def config(self) -> SupercloudsConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def _get_endpoint_client(self, client_class: Type[T]) -> T:
        """Get or create an endpoint client instance."""
        class_name = client_class.__name__
        if class_name not in self._endpoint_clients:
            self._endpoint_clients[class_name] = client_class(self._config)
        return self._endpoint_clients[class_name]

    @property
    def users(self) -> UsersClient:
        return self._get_endpoint_client(UsersClient)

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._config.aclose()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "SupercloudsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"SupercloudsClient(base_url={self.base_url!r})"
