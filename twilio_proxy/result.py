"""
Twilio Proxy Python Client - Results

Every operation returns a ``ProxyResult`` instead of raising, so callers can
tell "the call failed" (``error``) apart from "the service said no"
(``exception``) and handle each on its own terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from twilio_proxy.exceptions import ProxyError, RemoteServiceError
from twilio_proxy.models import TwilioException


T = TypeVar("T")


@dataclass(frozen=True)
class ProxyResult(Generic[T]):
    """
    Outcome of a single request.

    Attributes:
        value: The decoded resource on success, otherwise ``None``
        exception: Error payload sent by the service on a non-success status
        error: Transport or decoding failure raised while making the call

    ``exception`` and ``error`` are both set when the service rejected the
    request and its error payload could not be decoded.

    Example:
        >>> result = client.phone_numbers.get(service, "PN123")
        >>> if result.failed:
        ...     raise result.error
        >>> if result.rejected:
        ...     print(result.exception.message)
        >>> number = result.value
    """
    value: Optional[T] = None
    exception: Optional[TwilioException] = None
    error: Optional[ProxyError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ProxyResult[T]":
        return cls(value=value)

    @classmethod
    def rejected_with(
        cls,
        exception: TwilioException,
        error: Optional[ProxyError] = None,
    ) -> "ProxyResult[T]":
        return cls(exception=exception, error=error)

    @classmethod
    def failure(cls, error: ProxyError) -> "ProxyResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when neither channel reported a problem."""
        return self.exception is None and self.error is None

    @property
    def failed(self) -> bool:
        """True when the call itself failed (transport or decoding)."""
        return self.error is not None

    @property
    def rejected(self) -> bool:
        """True when the service answered with a non-success status."""
        return self.exception is not None

    def unwrap(self) -> Optional[T]:
        """
        Return the value or raise.

        Raises:
            ProxyError: The transport or decoding error, if any
            RemoteServiceError: Built from the service's error payload
        """
        if self.error is not None:
            raise self.error
        if self.exception is not None:
            raise RemoteServiceError.from_exception(self.exception)
        return self.value
