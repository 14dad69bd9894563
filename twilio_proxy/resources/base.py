"""
Twilio Proxy Python Client - Base Resource

This module contains the base class for all API resources. It turns one
HTTP exchange into a ``ProxyResult``: the typed value on the expected
status, the service's error payload on any other status, and a
``TransportError`` or ``DecodeError`` when the call itself fails.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional, Dict, Any, Callable, TypeVar, Union
from urllib.parse import quote

import httpx

from twilio_proxy.exceptions import DecodeError, TransportError
from twilio_proxy.models import ProxyServiceContext, TwilioException
from twilio_proxy.result import ProxyResult

if TYPE_CHECKING:
    from twilio_proxy.client import TwilioProxy


T = TypeVar("T")

logger = logging.getLogger("twilio_proxy")


class BaseResource:
    """
    Base class for all API resources.

    Provides common functionality for making API requests
    and handling responses.
    """

    def __init__(self, client: "TwilioProxy") -> None:
        """
        Initialize the resource.

        Args:
            client: The TwilioProxy client instance
        """
        self._client = client

    @staticmethod
    def _service_sid(service: Union[ProxyServiceContext, str]) -> str:
        """Accept a service context or a bare SID; returns the SID escaped as one path segment."""
        sid = service.sid if isinstance(service, ProxyServiceContext) else service
        if not sid:
            raise ValueError("Proxy service SID is required")
        return quote(sid, safe="")

    def _execute(
        self,
        method: str,
        path: str,
        expected_status: int,
        decoder: Optional[Callable[[Any], T]] = None,
        data: Optional[Dict[str, str]] = None,
    ) -> ProxyResult[T]:
        """
        Make a request and decode its outcome.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            expected_status: The only status treated as success
            decoder: Builds the typed value from the JSON body; ``None``
                means the success body is ignored
            data: Form fields for POST requests

        Returns:
            ProxyResult carrying the value, the service exception, or the error
        """
        url = self._client.url(path)

        try:
            response = self._client.request(method, url, data=data)
        except TransportError as e:
            logger.debug(f"{method} {url} failed: {e}")
            return ProxyResult.failure(e)

        if response.status_code != expected_status:
            return self._rejection(response)

        if decoder is None:
            return ProxyResult.success()

        try:
            return ProxyResult.success(decoder(self._json(response)))
        except DecodeError as e:
            logger.debug(f"Could not decode {method} {url} response: {e.message}")
            return ProxyResult.failure(self._with_response(e, response))

    def _rejection(self, response: httpx.Response) -> ProxyResult[Any]:
        """Decode the error payload of a non-success response."""
        try:
            exception = TwilioException.from_dict(self._json(response))
        except DecodeError as e:
            logger.debug(f"Could not decode error payload for HTTP {response.status_code}: {e.message}")
            return ProxyResult.rejected_with(
                TwilioException(status=response.status_code),
                self._with_response(e, response),
            )

        if not exception.status:
            exception = replace(exception, status=response.status_code)

        logger.debug(
            f"Request rejected with HTTP {exception.status}, code {exception.code}: {exception.message}"
        )
        return ProxyResult.rejected_with(exception)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

    @staticmethod
    def _with_response(error: DecodeError, response: httpx.Response) -> DecodeError:
        """Attach the status and raw body of the offending response."""
        error.status_code = response.status_code
        error.body = response.text
        return error
