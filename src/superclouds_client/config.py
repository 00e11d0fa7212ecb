"""
Environment settings for the Superclouds client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE_URL = "https://api.superclouds.io/v1"

REQUIRED_SETTINGS = ("cert", "key", "token")


class SupercloudsSettings(BaseSettings):
    """
    Settings loaded from environment variables with SUPER_ prefix.

    Example: SUPER_CERT, SUPER_KEY, SUPER_TOKEN.

    The three credentials default to empty strings so that a missing variable
    and an empty one are reported the same way by SupercloudsConfig.from_env.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUPER_",
        extra="ignore",
    )

    # Credentials
    cert: str = Field(
        default="",
        description="Path to the PEM client certificate"
    )
    key: str = Field(
        default="",
        description="Path to the PEM private key"
    )
    token: str = Field(
        default="",
        description="Bearer token for API authorization"
    )
    key_password: Optional[str] = Field(
        default=None,
        description="Password for an encrypted private key"
    )

    # Server
    url: str = Field(
        default=API_BASE_URL,
        description="Superclouds API base URL"
    )
    insecure_skip_verify: bool = Field(
        default=True,
        description="Skip server certificate verification (trust any server)"
    )
    ca_bundle: Optional[str] = Field(
        default=None,
        description="CA bundle used when server verification is enabled"
    )

    # HTTP client settings
    timeout: Optional[float] = Field(
        default=None,
        description="HTTP request timeout in seconds; unset means no timeout"
    )

    def missing(self) -> list:
        """Return the environment variable names of unset required settings."""
        return [
            f"SUPER_{name.upper()}"
            for name in REQUIRED_SETTINGS
            if not getattr(self, name)
        ]
