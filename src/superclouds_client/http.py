"""
Async HTTP layer for the Superclouds API.

This module implements the request contract shared by every operation:
- URL composition from the configured base URL
- JSON body encoding
- Content-Type and bearer token headers
- One attempt per request, no retries
- Typed decoding or status checking of the response
"""

from typing import Any, Dict, Optional, Type, TypeVar
import json
import logging

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from superclouds_client.exceptions import (
    DecodeError,
    RequestTimeoutError,
    SerializationError,
    TransportError,
    exception_from_status,
)
from superclouds_client.transport import SupercloudsConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class AsyncHTTPClient:
    """
    Sends requests over the client held by a SupercloudsConfig.

    The configuration is borrowed, not copied: the token and client handle
    are read from it on every request.
    """

    def __init__(self, config: SupercloudsConfig):
        self.config = config

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _build_url(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers with authentication."""
        headers = {"Content-Type": "application/json"}
        if self.config.token != "":
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    @staticmethod
    def _encode_body(data: BaseModel) -> bytes:
        """Encode a request model as a JSON body."""
        try:
            payload = data.model_dump(mode="json", by_alias=True)
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError, PydanticSerializationError) as e:
            raise SerializationError(f"Error marshaling JSON: {e}") from e

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[BaseModel] = None,
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: Resource path appended to the base URL
            params: Query parameters, sent as given
            body: Request model encoded as the JSON body

        Returns:
            httpx.Response with its body already read

        Raises:
            SerializationError: If the body cannot be encoded
            RequestTimeoutError: On request timeout
            TransportError: On connection or TLS failures, or once the
                configuration has been closed
        """
        if self.config.is_closed:
            raise TransportError(f"Error executing request: client is closed ({method} {path})")

        content = self._encode_body(body) if body is not None else None

        try:
            response = await self.config.client.request(
                method,
                self._build_url(path),
                params=params,
                content=content,
                headers=self._build_headers(),
            )
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Error executing request: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    # Response handling

    @staticmethod
    def status_text(response: httpx.Response) -> str:
        """Status line text, e.g. "404 Not Found"."""
        return f"{response.status_code} {response.reason_phrase}".strip()

    def decode(self, response: httpx.Response, model: Type[T]) -> T:
        """
        Decode a JSON response body into a model.

        The status code is not inspected; a body of the wrong shape fails.

        Raises:
            DecodeError: If the body is not valid JSON for the model
        """
        try:
            return model.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Error decoding response: {e}",
                status_code=response.status_code,
            ) from e

    def ensure_ok(self, response: httpx.Response, action: str) -> None:
        """
        Check that a bodiless operation answered 200.

        Args:
            response: The response to check
            action: Operation description, e.g. "failed to delete user"

        Raises:
            APIError: For any status other than 200
        """
        if response.status_code != httpx.codes.OK:
            raise exception_from_status(
                response.status_code,
                self.status_text(response),
                action,
            )

    # Convenience methods for typed responses

    async def get_model(
        self,
        path: str,
        model: Type[T],
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> T:
        """Make a GET request and decode the response into model."""
        response = await self.request("GET", path, params=params)
        return self.decode(response, model)

    async def send_model(
        self,
        method: str,
        path: str,
        body: BaseModel,
        model: Type[T],
    ) -> T:
        """Send body and decode the response into model."""
        response = await self.request(method, path, body=body)
        return self.decode(response, model)

    async def send_void(
        self,
        method: str,
        path: str,
        action: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[BaseModel] = None,
    ) -> None:
        """Send a request whose only result is its status code."""
        response = await self.request(method, path, params=params, body=body)
        self.ensure_ok(response, action)
