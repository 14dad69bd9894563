"""
Twilio Proxy Python Client

A small client for the phone number endpoints of the Twilio Proxy API.
Each call is one HTTP round trip that returns a ``ProxyResult`` holding
either the decoded resource, the service's error payload, or the
transport/decoding error.

Example:
    >>> from twilio_proxy import TwilioProxy, PhoneNumberRequest
    >>> client = TwilioProxy(account_sid="AC...", auth_token="...")
    >>> service = client.service("KS...")
    >>> result = client.phone_numbers.add(
    ...     service,
    ...     PhoneNumberRequest(phone_number="+15551234567", is_reserved=True),
    ... )
    >>> number = result.unwrap()
"""

__version__ = "1.0.0"
__license__ = "MIT"

from twilio_proxy.client import TwilioProxy
from twilio_proxy.config import ClientConfig
from twilio_proxy.models import (
    FriendlyName,
    FriendlyNameKind,
    Meta,
    PhoneNumber,
    PhoneNumberList,
    PhoneNumberRequest,
    ProxyServiceContext,
    TwilioException,
)
from twilio_proxy.result import ProxyResult
from twilio_proxy.exceptions import (
    ProxyError,
    TransportError,
    DecodeError,
    RemoteServiceError,
    AuthenticationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
)

__all__ = [
    # Main client
    "TwilioProxy",
    "ClientConfig",

    # Models
    "FriendlyName",
    "FriendlyNameKind",
    "Meta",
    "PhoneNumber",
    "PhoneNumberList",
    "PhoneNumberRequest",
    "ProxyServiceContext",
    "TwilioException",
    "ProxyResult",

    # Exceptions
    "ProxyError",
    "TransportError",
    "DecodeError",
    "RemoteServiceError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
]
