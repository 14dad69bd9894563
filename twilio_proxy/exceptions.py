"""
Twilio Proxy Python Client - Exceptions

This module contains all custom exceptions used by the client.

Two families are kept apart. ``TransportError`` and ``DecodeError`` report
that the call itself failed (the network broke or a body could not be
parsed). ``RemoteServiceError`` and its subclasses wrap a structured error
the service returned on purpose and are raised by ``ProxyResult.unwrap()``
(``AuthenticationError`` is also raised when credentials are missing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Dict, Any

if TYPE_CHECKING:
    from twilio_proxy.models import TwilioException


class ProxyError(Exception):
    """
    Base exception for all Twilio Proxy client errors.

    Attributes:
        message: Human-readable error message
        code: Error code if available
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', code='{self.code}')"


class TransportError(ProxyError):
    """
    Raised when the HTTP exchange itself fails.

    This can occur when:
    - The connection cannot be established
    - The request times out
    - The response body cannot be read
    """

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="TRANSPORT_ERROR")


class DecodeError(ProxyError):
    """
    Raised when a response body does not have the expected shape.

    Attributes:
        status_code: HTTP status of the response being decoded
        body: Raw response text
    """

    def __init__(
        self,
        message: str = "Could not decode response",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message, code="DECODE_ERROR")
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code:
            return f"{base} (HTTP {self.status_code})"
        return base


class RemoteServiceError(ProxyError):
    """
    Raised by ``ProxyResult.unwrap()`` when the service rejected a request.

    Attributes:
        exception: The decoded error payload returned by the service
        status_code: HTTP status of the rejection
    """

    def __init__(self, exception: "TwilioException") -> None:
        super().__init__(
            exception.message or f"HTTP {exception.status}",
            code=str(exception.code) if exception.code else None,
            details={"more_info": exception.more_info} if exception.more_info else None,
        )
        self.exception = exception
        self.status_code = exception.status

    @classmethod
    def from_exception(cls, exception: "TwilioException") -> "RemoteServiceError":
        """Build the most specific subclass for the payload's HTTP status."""
        status = exception.status
        if status in (401, 403):
            return AuthenticationError(exception)
        if status == 404:
            return NotFoundError(exception)
        if status == 409:
            return ConflictError(exception)
        if status == 429:
            return RateLimitError(exception)
        if status >= 500:
            return ServerError(exception)
        return cls(exception)


class AuthenticationError(RemoteServiceError):
    """
    Raised when authentication fails.

    This can occur when:
    - Credentials are missing when the client is built
    - The account SID or auth token is rejected by the service
    """

    def __init__(
        self,
        exception: Optional["TwilioException"] = None,
        message: str = "Authentication failed",
    ) -> None:
        if exception is not None:
            super().__init__(exception)
            return
        ProxyError.__init__(self, message, code="AUTHENTICATION_ERROR")
        self.exception = None
        self.status_code = None


class NotFoundError(RemoteServiceError):
    """Raised when the service, or the phone number in it, does not exist."""


class ConflictError(RemoteServiceError):
    """
    Raised when there's a resource conflict.

    This can occur when:
    - The phone number is already attached to the service
    - The phone number is in use by an active session
    """


class RateLimitError(RemoteServiceError):
    """Raised when the API rate limit is exceeded. The client never retries."""


class ServerError(RemoteServiceError):
    """
    Raised when a server error occurs.

    This indicates an unexpected error on the API server.
    """
