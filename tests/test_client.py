"""
Unit Tests for the TwilioProxy Client

Tests for credential resolution, configuration and the HTTP transport.
"""

import logging

import httpx
import pytest

from twilio_proxy import (
    AuthenticationError,
    ProxyServiceContext,
    TransportError,
    TwilioProxy,
    __version__,
)
from twilio_proxy.config import DEFAULT_CONFIG, ENV_ACCOUNT_SID, ENV_AUTH_TOKEN, ENV_BASE_URL
from twilio_proxy.resources import PhoneNumbersResource

from tests.conftest import BASE_URL, COLLECTION_PATH


# =============================================================================
# Construction Tests
# =============================================================================


class TestConstruction:
    """Tests for building a client."""

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.delenv(ENV_ACCOUNT_SID, raising=False)
        monkeypatch.delenv(ENV_AUTH_TOKEN, raising=False)

        with pytest.raises(AuthenticationError) as exc_info:
            TwilioProxy()
        assert exc_info.value.code == "AUTHENTICATION_ERROR"
        assert exc_info.value.exception is None

    def test_missing_auth_token(self, monkeypatch):
        monkeypatch.delenv(ENV_AUTH_TOKEN, raising=False)

        with pytest.raises(AuthenticationError):
            TwilioProxy(account_sid="AC123")

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv(ENV_ACCOUNT_SID, "AC123")
        monkeypatch.setenv(ENV_AUTH_TOKEN, "secret")
        monkeypatch.setenv(ENV_BASE_URL, "https://proxy.example.com/v1/")

        with TwilioProxy() as client:
            assert client.config.base_url == "https://proxy.example.com/v1"

    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv(ENV_BASE_URL, raising=False)

        with TwilioProxy(account_sid="AC123", auth_token="secret") as client:
            assert client.config.base_url == DEFAULT_CONFIG.base_url
            assert client.url("/Services/KS1") == "https://proxy.twilio.com/v1/Services/KS1"

    def test_resources(self, client):
        assert isinstance(client.phone_numbers, PhoneNumbersResource)

    def test_service_context(self, client):
        assert client.service("KS1") == ProxyServiceContext(sid="KS1")

    def test_repr(self, client):
        assert repr(client) == f"TwilioProxy(base_url='{BASE_URL}')"

    def test_debug_enables_logging(self):
        with TwilioProxy(account_sid="AC123", auth_token="secret", debug=True):
            assert logging.getLogger("twilio_proxy").isEnabledFor(logging.DEBUG)


# =============================================================================
# Transport Tests
# =============================================================================


class TestTransport:
    """Tests for the get/post/delete primitives."""

    def test_headers(self, client, api):
        route = api.get(COLLECTION_PATH).mock(return_value=httpx.Response(200, json={}))

        client.get(client.url(COLLECTION_PATH))

        headers = route.calls.last.request.headers
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == f"twilio-proxy-python/{__version__}"
        assert headers["Authorization"].startswith("Basic ")

    def test_returns_any_status(self, client, api):
        """Test that HTTP errors are returned, not raised."""
        api.delete(COLLECTION_PATH).mock(return_value=httpx.Response(503, text="down"))

        response = client.delete(client.url(COLLECTION_PATH))

        assert response.status_code == 503
        assert response.text == "down"

    def test_post_sends_form(self, client, api):
        route = api.post(COLLECTION_PATH).mock(return_value=httpx.Response(201, json={}))

        client.post(client.url(COLLECTION_PATH), {"IsReserved": "false"})

        assert route.calls.last.request.content == b"IsReserved=false"

    def test_connect_error(self, client, api):
        api.get(COLLECTION_PATH).mock(side_effect=httpx.ConnectError)

        with pytest.raises(TransportError) as exc_info:
            client.get(client.url(COLLECTION_PATH))
        assert exc_info.value.message.startswith("Request failed")

    def test_timeout(self, client, api):
        api.get(COLLECTION_PATH).mock(side_effect=httpx.ConnectTimeout)

        with pytest.raises(TransportError) as exc_info:
            client.get(client.url(COLLECTION_PATH))
        assert exc_info.value.message.startswith("Request timed out")
