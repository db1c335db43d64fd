"""
Exception hierarchy for the Cumulocity core client.

All custom exceptions inherit from CumulocityError base class.
"""

from typing import Any, Optional


class CumulocityError(Exception):
    """Base exception for all Cumulocity client errors."""
    pass


# Configuration Errors
class ConfigurationError(CumulocityError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class ConfigurationLoadError(ConfigurationError):
    """Raised when loading configuration fails."""
    pass


# SDK Errors
class SDKError(CumulocityError):
    """Base exception for SDK-related errors."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when SDK configuration is invalid."""
    pass


class InvalidRequestError(SDKError):
    """Raised when a request cannot be assembled (unknown verb, missing path)."""
    pass


class TransportError(SDKError):
    """Raised when a request fails below the HTTP layer.

    Connection refused, timeouts and TLS failures all end up here. The
    underlying transport exception is chained as ``__cause__``.
    """
    pass


class EncodeError(SDKError):
    """Raised when a request model or multipart body cannot be serialized."""
    pass


class DecodeError(SDKError):
    """Raised when a successful response body does not match the expected type."""
    pass


# API Errors
class ApiError(SDKError):
    """Base exception for non-2xx responses.

    Attributes:
        status_code: HTTP status code returned by the platform.
        reason: Fixed reason text for status codes with a declared meaning.
        method: HTTP method of the originating request.
        path: Resource path of the originating request.
    """

    def __init__(
        self,
        status_code: int,
        reason: Optional[str] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.path = path
        super().__init__(self._describe())

    def _describe(self) -> str:
        target = f" for {self.method} {self.path}" if self.method and self.path else ""
        if self.reason:
            return f"HTTP {self.status_code}{target}: {self.reason}"
        return f"HTTP {self.status_code}{target}"


class StructuredApiError(ApiError):
    """Raised when the platform answered with a decodable error body.

    Attributes:
        error: The decoded ``C8yError`` payload.
    """

    def __init__(
        self,
        status_code: int,
        error: Any,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        self.error = error
        reason = getattr(error, "message", None) or getattr(error, "error", None)
        super().__init__(status_code, reason=reason, method=method, path=path)


class UnstructuredApiError(ApiError):
    """Raised for non-2xx responses whose body is absent or not error-shaped."""
    pass
