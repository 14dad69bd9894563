"""Shared pytest fixtures for testing."""

import pytest
import respx

from twilio_proxy import TwilioProxy


BASE_URL = "https://proxy.test.local/v1"
SERVICE_SID = "KSaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
PHONE_NUMBER_SID = "PNaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
ACCOUNT_SID = "ACaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"

COLLECTION_PATH = f"/Services/{SERVICE_SID}/PhoneNumbers"
ITEM_PATH = f"{COLLECTION_PATH}/{PHONE_NUMBER_SID}"


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Client pointed at the mocked base URL."""
    with TwilioProxy(
        account_sid=ACCOUNT_SID,
        auth_token="test-token",
        base_url=BASE_URL,
    ) as proxy:
        yield proxy


@pytest.fixture
def service(client):
    """Context for the Proxy service under test."""
    return client.service(SERVICE_SID)


@pytest.fixture
def api():
    """Mocked Proxy API; every declared route must be hit."""
    with respx.mock(base_url=BASE_URL, assert_all_called=True) as mock:
        yield mock


# =============================================================================
# Payload Fixtures
# =============================================================================


def make_phone_number_payload(**overrides):
    """Phone number resource shaped like the service's response."""
    payload = {
        "sid": PHONE_NUMBER_SID,
        "account_sid": ACCOUNT_SID,
        "service_sid": SERVICE_SID,
        "date_created": "2015-07-30T20:00:00Z",
        "date_updated": "2015-07-31T08:30:00Z",
        "phone_number": "+15551234567",
        "friendly_name": "Front desk",
        "iso_country": "US",
        "capabilities": {"sms_outbound": True, "voice_inbound": False},
        "url": f"{BASE_URL}{ITEM_PATH}",
        "is_reserved": False,
        "in_use": 0,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def phone_number_payload():
    return make_phone_number_payload()


@pytest.fixture
def exception_payload():
    """Error body returned by the service for a missing phone number."""
    return {
        "code": 20404,
        "message": "The requested resource was not found",
        "more_info": "https://www.twilio.com/docs/errors/20404",
        "status": 404,
    }
