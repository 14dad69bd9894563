"""
Twilio Proxy Python Client - Resources

This module contains all API resource classes.
"""

from twilio_proxy.resources.base import BaseResource
from twilio_proxy.resources.phone_numbers import PhoneNumbersResource

__all__ = [
    "BaseResource",
    "PhoneNumbersResource",
]
