"""
Transport configuration for the Superclouds API.

SupercloudsConfig bundles the API base URL, the bearer token and an
httpx.AsyncClient whose TLS context presents a client certificate (mutual
TLS). It is built once, shared by reference and never mutated afterwards.

Server verification:
- By default the server certificate is NOT verified and no trusted roots are
  loaded, so any server certificate is accepted
- Pass insecure_skip_verify=False (or SUPER_INSECURE_SKIP_VERIFY=false) to
  verify the server against the system trust store or ca_bundle
"""

from typing import Optional
import logging
import ssl

import httpx
from pydantic import ValidationError as PydanticValidationError

from superclouds_client.config import API_BASE_URL, SupercloudsSettings
from superclouds_client.exceptions import ConfigurationError, TLSSetupError

logger = logging.getLogger(__name__)


def _no_password() -> bytes:
    return b""


def build_ssl_context(
    cert_path: str,
    key_path: str,
    *,
    insecure_skip_verify: bool = True,
    ca_bundle: Optional[str] = None,
    key_password: Optional[str] = None,
) -> ssl.SSLContext:
    """
    Build a client SSL context presenting the given certificate/key pair.

    Args:
        cert_path: Path to the PEM client certificate
        key_path: Path to the PEM private key
        insecure_skip_verify: Accept any server certificate
        ca_bundle: CA file used to verify the server when verification is on
        key_password: Password for an encrypted private key

    Returns:
        Configured ssl.SSLContext

    Raises:
        TLSSetupError: If the key pair or CA bundle cannot be loaded
    """
    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    if insecure_skip_verify:
        # check_hostname must be cleared before verify_mode can drop to CERT_NONE
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
    else:
        try:
            if ca_bundle:
                ctx.load_verify_locations(cafile=ca_bundle)
            else:
                ctx.load_default_certs(ssl.Purpose.SERVER_AUTH)
        except (OSError, ssl.SSLError) as e:
            raise TLSSetupError(
                f"Failed to load CA bundle: {e}",
                details={"ca_bundle": ca_bundle},
            ) from e

    try:
        # An encrypted key with no password fails here instead of prompting on the tty
        ctx.load_cert_chain(
            certfile=cert_path,
            keyfile=key_path,
            password=key_password if key_password is not None else _no_password,
        )
    except (OSError, ssl.SSLError) as e:
        raise TLSSetupError(
            f"Failed to load key pair: {e}",
            cert_path=cert_path,
            key_path=key_path,
        ) from e

    return ctx


class SupercloudsConfig:
    """
    Immutable connection settings plus the shared HTTP client.

    Example usage:
        ```python
        config = SupercloudsConfig.from_env()
        async with config:
            users = UsersClient(config)
            me = await users.get_user()
        ```

    Or with explicit values:
        ```python
        config = SupercloudsConfig.from_params(cert_path, key_path, token)
        ```
    """

    def __init__(
        self,
        cert_path: str,
        key_path: str,
        token: str,
        *,
        base_url: str = API_BASE_URL,
        insecure_skip_verify: bool = True,
        ca_bundle: Optional[str] = None,
        key_password: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Load the key pair and build the HTTP client.

        Args:
            cert_path: Path to the PEM client certificate
            key_path: Path to the PEM private key
            token: Bearer token; an empty token sends no Authorization header
            base_url: API base URL
            insecure_skip_verify: Accept any server certificate
            ca_bundle: CA file for server verification
            key_password: Password for an encrypted private key
            timeout: Request timeout in seconds; None leaves requests unbounded
                so deadlines come from the caller

        Raises:
            TLSSetupError: If the key pair cannot be loaded
        """
        self._ssl_context = build_ssl_context(
            cert_path,
            key_path,
            insecure_skip_verify=insecure_skip_verify,
            ca_bundle=ca_bundle,
            key_password=key_password,
        )
        if insecure_skip_verify:
            logger.warning(
                "Server certificate verification is disabled; "
                "any server certificate will be trusted"
            )

        self._base_url = base_url.rstrip("/")
        self._cert_path = cert_path
        self._key_path = key_path
        self._token = token
        self._insecure_skip_verify = insecure_skip_verify
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            verify=self._ssl_context,
            timeout=httpx.Timeout(timeout),
        )

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def from_env(cls, settings: Optional[SupercloudsSettings] = None) -> "SupercloudsConfig":
        """
        Create a configuration from SUPER_* environment variables.

        Required variables:
        - SUPER_CERT: path to the client certificate
        - SUPER_KEY: path to the private key
        - SUPER_TOKEN: bearer token

        Args:
            settings: Preloaded settings; read from the environment if omitted

        Raises:
            ConfigurationError: If a required variable is unset or empty
            TLSSetupError: If the key pair cannot be loaded
        """
        if settings is None:
            try:
                settings = SupercloudsSettings()
            except PydanticValidationError as e:
                raise ConfigurationError(f"Invalid environment settings: {e}") from e

        missing = settings.missing()
        if missing:
            raise ConfigurationError(
                f"missing {missing[0]} environment variable",
                setting=missing[0],
            )

        return cls(
            settings.cert,
            settings.key,
            settings.token,
            base_url=settings.url,
            insecure_skip_verify=settings.insecure_skip_verify,
            ca_bundle=settings.ca_bundle,
            key_password=settings.key_password,
            timeout=settings.timeout,
        )

    @classmethod
    def from_params(
        cls,
        cert_path: str,
        key_path: str,
        token: str,
        **kwargs,
    ) -> "SupercloudsConfig":
        """
        Create a configuration from explicit values.

        The three values are used as given; only the key pair is checked.

        Args:
            cert_path: Path to the client certificate
            key_path: Path to the private key
            token: Bearer token
            **kwargs: base_url, insecure_skip_verify, ca_bundle,
                key_password, timeout

        Raises:
            TLSSetupError: If the key pair cannot be loaded
        """
        return cls(cert_path, key_path, token, **kwargs)

    # =========================================================================
    # Read-only attributes
    # =========================================================================

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def cert_path(self) -> str:
        return self._cert_path

    @property
    def key_path(self) -> str:
        return self._key_path

    @property
    def token(self) -> str:
        return self._token

    @property
    def insecure_skip_verify(self) -> bool:
        """Whether the server certificate is accepted without verification."""
        return self._insecure_skip_verify

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def ssl_context(self) -> ssl.SSLContext:
        return self._ssl_context

    @property
    def client(self) -> httpx.AsyncClient:
        """The shared HTTP client."""
        return self._client

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Transport closed")

    async def __aenter__(self) -> "SupercloudsConfig":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"SupercloudsConfig(base_url={self._base_url!r}, "
            f"cert_path={self._cert_path!r}, "
            f"insecure_skip_verify={self._insecure_skip_verify})"
        )
