"""
Twilio Proxy Python Client - Phone Numbers Resource

This module provides methods for managing the phone numbers attached to a
Proxy service.
"""

from __future__ import annotations

from typing import Optional, List, Union
from urllib.parse import quote

from twilio_proxy.resources.base import BaseResource
from twilio_proxy.models import (
    PhoneNumber,
    PhoneNumberList,
    PhoneNumberRequest,
    ProxyServiceContext,
)
from twilio_proxy.config import Endpoints, SuccessStatus
from twilio_proxy.result import ProxyResult


class PhoneNumbersResource(BaseResource):
    """
    Resource for managing phone numbers in a Proxy service.

    Phone numbers in a service form the pool Proxy picks from when it
    masks participants in a session. Every method is a single request and
    returns a ``ProxyResult``; nothing is retried.

    Example:
        >>> client = TwilioProxy(account_sid="AC...", auth_token="...")
        >>> service = client.service("KS...")
        >>> result = client.phone_numbers.add(service, phone_number="+15551234567")
        >>> if result.rejected:
        ...     print(result.exception.message)
    """

    def add(
        self,
        service: Union[ProxyServiceContext, str],
        request: Optional[PhoneNumberRequest] = None,
        *,
        sid: str = "",
        phone_number: str = "",
        is_reserved: bool = False,
    ) -> ProxyResult[PhoneNumber]:
        """
        Attach a phone number to a service.

        Args:
            service: The service, or its SID
            request: Prepared request; when omitted one is built from the
                keyword arguments, which must then be left unset
            sid: SID of an existing incoming phone number
            phone_number: E.164 number to attach
            is_reserved: Reserve the number for manual assignment

        Returns:
            ProxyResult with the created PhoneNumber on HTTP 201
        """
        if request is not None and (sid or phone_number or is_reserved):
            raise ValueError("Pass either a PhoneNumberRequest or keyword fields, not both")
        if request is None:
            request = PhoneNumberRequest(
                sid=sid,
                phone_number=phone_number,
                is_reserved=is_reserved,
            )
        path = Endpoints.PHONE_NUMBERS.format(service_sid=self._service_sid(service))
        return self._execute(
            "POST",
            path,
            SuccessStatus.CREATE,
            PhoneNumber.from_dict,
            data=request.to_form(),
        )

    def list(self, service: Union[ProxyServiceContext, str]) -> ProxyResult[List[PhoneNumber]]:
        """
        List the phone numbers in a service.

        Only the first page is read and its pagination metadata is dropped;
        use ``list_page`` to inspect it.

        Args:
            service: The service, or its SID

        Returns:
            ProxyResult with the phone numbers in the order the service sent them
        """
        page = self.list_page(service)
        if page.value is None:
            return ProxyResult(exception=page.exception, error=page.error)
        return ProxyResult.success(page.value.phone_numbers)

    def list_page(self, service: Union[ProxyServiceContext, str]) -> ProxyResult[PhoneNumberList]:
        """
        Read the first page of phone numbers with its pagination metadata.

        Args:
            service: The service, or its SID

        Returns:
            ProxyResult with the PhoneNumberList envelope
        """
        path = Endpoints.PHONE_NUMBERS.format(service_sid=self._service_sid(service))
        return self._execute("GET", path, SuccessStatus.READ, PhoneNumberList.from_dict)

    def get(
        self,
        service: Union[ProxyServiceContext, str],
        phone_number_sid: str,
    ) -> ProxyResult[PhoneNumber]:
        """
        Get a phone number by SID.

        Args:
            service: The service, or its SID
            phone_number_sid: The phone number's SID

        Returns:
            ProxyResult with the PhoneNumber on HTTP 200
        """
        return self._execute(
            "GET",
            self._item_path(service, phone_number_sid),
            SuccessStatus.READ,
            PhoneNumber.from_dict,
        )

    def delete(
        self,
        service: Union[ProxyServiceContext, str],
        phone_number_sid: str,
    ) -> ProxyResult[None]:
        """
        Remove a phone number from a service.

        Args:
            service: The service, or its SID
            phone_number_sid: The phone number's SID

        Returns:
            ProxyResult that is ``ok`` on HTTP 204
        """
        return self._execute(
            "DELETE",
            self._item_path(service, phone_number_sid),
            SuccessStatus.DELETE,
        )

    def _item_path(self, service: Union[ProxyServiceContext, str], phone_number_sid: str) -> str:
        if not phone_number_sid:
            raise ValueError("Phone number SID is required")
        return Endpoints.PHONE_NUMBER.format(
            service_sid=self._service_sid(service),
            phone_number_sid=quote(phone_number_sid, safe=""),
        )
