"""
Twilio Proxy Python Client - Main Client

This module provides the TwilioProxy client: the HTTP transport shared by
all resources and the entry point for API interactions. It owns the
connection pool, credentials and timeouts. It performs no retries.
"""

from __future__ import annotations

import os
import logging
from typing import Optional, Dict

import httpx

from twilio_proxy import __version__
from twilio_proxy.config import (
    ClientConfig,
    DEFAULT_CONFIG,
    ENV_ACCOUNT_SID,
    ENV_AUTH_TOKEN,
    ENV_BASE_URL,
)
from twilio_proxy.exceptions import AuthenticationError, TransportError
from twilio_proxy.models import ProxyServiceContext
from twilio_proxy.resources.phone_numbers import PhoneNumbersResource

logger = logging.getLogger("twilio_proxy")


class TwilioProxy:
    """
    Client for the Twilio Proxy API.

    Args:
        account_sid: Twilio account SID. If not provided, will look for the
            TWILIO_ACCOUNT_SID environment variable.
        auth_token: Twilio auth token. If not provided, will look for the
            TWILIO_AUTH_TOKEN environment variable.
        base_url: The base URL for the API. Defaults to
            https://proxy.twilio.com/v1 or TWILIO_PROXY_BASE_URL.
        timeout: Request timeout in seconds. Defaults to 30.
        debug: Enable debug logging. Defaults to False.

    Example:
        >>> with TwilioProxy(account_sid="AC...", auth_token="...") as client:
        ...     service = client.service("KS...")
        ...     result = client.phone_numbers.list(service)
        ...     for number in result.unwrap():
        ...         print(number.phone_number)

    Attributes:
        phone_numbers: Resource for managing phone numbers in a service
    """

    def __init__(
        self,
        account_sid: Optional[str] = None,
        auth_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        debug: bool = False,
    ) -> None:
        # Get credentials from parameters or environment
        self._account_sid = account_sid or os.environ.get(ENV_ACCOUNT_SID)
        self._auth_token = auth_token or os.environ.get(ENV_AUTH_TOKEN)
        if not self._account_sid or not self._auth_token:
            raise AuthenticationError(
                message=(
                    "Account SID and auth token are required. Provide them as "
                    f"parameters or set the {ENV_ACCOUNT_SID} and "
                    f"{ENV_AUTH_TOKEN} environment variables."
                )
            )

        # Configuration
        self._config = ClientConfig(
            base_url=(
                base_url or os.environ.get(ENV_BASE_URL, DEFAULT_CONFIG.base_url)
            ).rstrip("/"),
            timeout=timeout,
            debug=debug,
        )

        # Setup logging
        if debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        # Create HTTP client
        self._http_client = self._create_http_client()

        self.phone_numbers = PhoneNumbersResource(self)

        logger.debug(f"TwilioProxy client initialized with base URL: {self._config.base_url}")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _create_http_client(self) -> httpx.Client:
        """Create and configure the HTTP client."""
        headers = {
            "Accept": "application/json",
            "User-Agent": f"twilio-proxy-python/{__version__}",
        }

        return httpx.Client(
            auth=httpx.BasicAuth(self._account_sid, self._auth_token),
            headers=headers,
            timeout=httpx.Timeout(self._config.timeout),
            follow_redirects=True,
        )

    def url(self, path: str) -> str:
        """Join an endpoint path onto the configured base URL."""
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def service(self, sid: str) -> ProxyServiceContext:
        """Build the context for the Proxy service identified by ``sid``."""
        return ProxyServiceContext(sid=sid)

    def request(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Perform one HTTP exchange.

        Args:
            method: HTTP method (GET, POST, DELETE)
            url: Absolute URL of the endpoint
            data: Form fields, sent form-urlencoded

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: If the request could not be completed
        """
        logger.debug(f"Making {method} request to {url}")

        try:
            response = self._http_client.request(method=method, url=url, data=data)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")
        return response

    def get(self, url: str) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", url)

    def post(self, url: str, data: Dict[str, str]) -> httpx.Response:
        """Make a form-encoded POST request."""
        return self.request("POST", url, data=data)

    def delete(self, url: str) -> httpx.Response:
        """Make a DELETE request."""
        return self.request("DELETE", url)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http_client.close()
        logger.debug("TwilioProxy client closed")

    def __enter__(self) -> "TwilioProxy":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"TwilioProxy(base_url='{self._config.base_url}')"
