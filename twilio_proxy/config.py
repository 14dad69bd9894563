"""
Twilio Proxy Python Client - Configuration

This module contains configuration classes and defaults for the client.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the Twilio Proxy client.

    Attributes:
        base_url: Base URL of the Proxy API, including the version segment
        timeout: Request timeout in seconds
        debug: Enable debug logging
    """
    base_url: str = "https://proxy.twilio.com/v1"
    timeout: float = 30.0
    debug: bool = False


# Default configuration
DEFAULT_CONFIG = ClientConfig()


# Environment variables consulted when arguments are omitted
ENV_ACCOUNT_SID = "TWILIO_ACCOUNT_SID"
ENV_AUTH_TOKEN = "TWILIO_AUTH_TOKEN"
ENV_BASE_URL = "TWILIO_PROXY_BASE_URL"


# Endpoints
class Endpoints:
    """API endpoint paths, relative to the configured base URL."""

    # Phone Numbers
    PHONE_NUMBERS = "/Services/{service_sid}/PhoneNumbers"
    PHONE_NUMBER = "/Services/{service_sid}/PhoneNumbers/{phone_number_sid}"


# HTTP status codes that mark success for each phone number operation
class SuccessStatus:
    """Expected success status per operation."""

    CREATE = 201
    READ = 200
    DELETE = 204
