"""
Exception hierarchy for the Superclouds client library.

Every failure a client call can produce is a subclass of SupercloudsError.
The original cause (OSError, ssl.SSLError, httpx.HTTPError, ...) is always
chained with ``raise ... from`` so it stays available for diagnostics.
"""

from typing import Any, Dict, Optional


class SupercloudsError(Exception):
    """
    Base exception for all Superclouds client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Construction Errors
# =============================================================================


class ConfigurationError(SupercloudsError):
    """
    A required setting is missing or empty.

    Raised before any filesystem or network access takes place.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        setting: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if setting:
            details = details or {}
            details["setting"] = setting
        super().__init__(message, details=details)
        self.setting = setting


class TLSSetupError(SupercloudsError):
    """The client certificate/key pair could not be read or parsed."""

    def __init__(
        self,
        message: str = "Failed to load key pair",
        *,
        cert_path: Optional[str] = None,
        key_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if cert_path:
            details["cert_path"] = cert_path
        if key_path:
            details["key_path"] = key_path
        super().__init__(message, details=details)
        self.cert_path = cert_path
        self.key_path = key_path


# =============================================================================
# Request/Response Errors
# =============================================================================


class SerializationError(SupercloudsError):
    """The request body could not be encoded as JSON."""

    def __init__(
        self,
        message: str = "Error marshaling JSON",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TransportError(SupercloudsError):
    """
    Network-level error occurred while executing a request.

    Raised for connection failures, TLS handshake failures, DNS problems and
    other errors below the HTTP layer.
    """

    def __init__(
        self,
        message: str = "Error executing request",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class RequestTimeoutError(TransportError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class DecodeError(SupercloudsError):
    """The response body is not valid JSON of the expected shape."""

    def __init__(
        self,
        message: str = "Error decoding response",
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)


# =============================================================================
# API Errors (non-200 status on operations without a response body)
# =============================================================================


class APIError(SupercloudsError):
    """
    The API answered with a status other than 200.

    Attributes:
        status_text: Status line text, e.g. "404 Not Found"
    """

    def __init__(
        self,
        message: str = "Request failed",
        *,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, details=details)
        self.status_text = status_text or ""


class AuthenticationError(APIError):
    """Bearer token or client certificate was rejected (401)."""


class AuthorizationError(APIError):
    """Authenticated caller lacks permission for the operation (403)."""


class NotFoundError(APIError):
    """Target resource does not exist (404)."""


class ServerError(APIError):
    """Server-side error occurred (5xx)."""


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
}


def exception_from_status(
    status_code: int,
    status_text: str,
    message: str,
) -> APIError:
    """
    Create an appropriate APIError subclass for an HTTP status.

    Args:
        status_code: HTTP status code
        status_text: Status line text, e.g. "404 Not Found"
        message: Prefix describing the failed operation

    Returns:
        APIError or one of its subclasses
    """
    if 500 <= status_code < 600:
        exception_class = ServerError
    else:
        exception_class = STATUS_CODE_EXCEPTIONS.get(status_code, APIError)
    return exception_class(
        f"{message}: {status_text}",
        status_code=status_code,
        status_text=status_text,
    )
