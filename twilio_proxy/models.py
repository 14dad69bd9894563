"""
Twilio Proxy Python Client - Data Models

This module contains the data models exchanged with the Proxy phone number
endpoints. Models are frozen dataclasses; decoding goes through
``from_dict`` and raises ``DecodeError`` when the payload has the wrong shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Union
import json

from twilio_proxy.exceptions import DecodeError


class BaseModel:
    """Base class for all models with common functionality."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert model to JSON string."""
        return json.dumps(self.to_dict(), default=str)


# =============================================================================
# Field decoding helpers
# =============================================================================

def _expect_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _verbatim(data: Dict[str, Any], key: str) -> str:
    # Strings pass through untouched; other JSON values keep their JSON text
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def _integer(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _timestamp(data: Dict[str, Any], key: str) -> Optional[datetime]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}' must be a timestamp string, got {type(value).__name__}")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise DecodeError(f"Field '{key}' is not an ISO-8601 timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        raise DecodeError(f"Field '{key}' has no UTC offset: {value!r}")
    return parsed


# =============================================================================
# Enums
# =============================================================================

class FriendlyNameKind(str, Enum):
    """Shape of a friendly_name value on the wire."""
    ABSENT = "absent"
    STRING = "string"
    OBJECT = "object"


# =============================================================================
# Resource Models
# =============================================================================

@dataclass(frozen=True)
class FriendlyName(BaseModel):
    """
    The loosely typed ``friendly_name`` field.

    The service may omit it, send a string, or send an object. Any other
    JSON type is rejected while decoding.
    """
    kind: FriendlyNameKind = FriendlyNameKind.ABSENT
    value: Union[None, str, Dict[str, Any]] = None

    @classmethod
    def absent(cls) -> "FriendlyName":
        return cls()

    @classmethod
    def of(cls, value: Union[None, str, Dict[str, Any]]) -> "FriendlyName":
        if value is None:
            return cls()
        if isinstance(value, str):
            return cls(FriendlyNameKind.STRING, value)
        if isinstance(value, dict):
            return cls(FriendlyNameKind.OBJECT, value)
        raise DecodeError(
            f"Field 'friendly_name' must be a string or an object, got {type(value).__name__}"
        )

    @property
    def is_absent(self) -> bool:
        return self.kind is FriendlyNameKind.ABSENT

    def __str__(self) -> str:
        if self.kind is FriendlyNameKind.STRING:
            return self.value
        if self.kind is FriendlyNameKind.OBJECT:
            return json.dumps(self.value, sort_keys=True)
        return ""


@dataclass(frozen=True)
class PhoneNumber(BaseModel):
    """
    Phone number attached to a Proxy service.

    ``capabilities``, ``is_reserved`` and ``in_use`` are kept as the strings
    the service sends rather than being coerced to native types.
    """
    sid: str = ""
    service_sid: str = ""
    phone_number: str = ""
    date_updated: Optional[datetime] = None
    friendly_name: FriendlyName = field(default_factory=FriendlyName)
    iso_country: str = ""
    account_sid: str = ""
    url: str = ""
    date_created: Optional[datetime] = None
    capabilities: str = ""
    is_reserved: str = ""
    in_use: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhoneNumber":
        """Create a phone number from its JSON representation."""
        data = _expect_object(data, "phone number")
        return cls(
            sid=_string(data, "sid"),
            service_sid=_string(data, "service_sid"),
            phone_number=_string(data, "phone_number"),
            date_updated=_timestamp(data, "date_updated"),
            friendly_name=FriendlyName.of(data.get("friendly_name")),
            iso_country=_string(data, "iso_country"),
            account_sid=_string(data, "account_sid"),
            url=_string(data, "url"),
            date_created=_timestamp(data, "date_created"),
            capabilities=_verbatim(data, "capabilities"),
            is_reserved=_verbatim(data, "is_reserved"),
            in_use=_verbatim(data, "in_use"),
        )


@dataclass(frozen=True)
class Meta(BaseModel):
    """Pagination metadata attached to list responses."""
    page: int = 0
    page_size: int = 0
    first_page_url: str = ""
    previous_page_url: str = ""
    next_page_url: str = ""
    key: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meta":
        data = _expect_object(data, "meta")
        return cls(
            page=_integer(data, "page"),
            page_size=_integer(data, "page_size"),
            first_page_url=_string(data, "first_page_url"),
            previous_page_url=_string(data, "previous_page_url"),
            next_page_url=_string(data, "next_page_url"),
            key=_string(data, "key"),
            url=_string(data, "url"),
        )

    @property
    def has_more(self) -> bool:
        return bool(self.next_page_url)


@dataclass(frozen=True)
class PhoneNumberList(BaseModel):
    """
    One page of phone numbers.

    The service returns the items under the ``participants`` key.
    """
    phone_numbers: List[PhoneNumber] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhoneNumberList":
        data = _expect_object(data, "phone number list")
        items = data.get("participants")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise DecodeError(
                f"Field 'participants' must be an array, got {type(items).__name__}"
            )
        meta = data.get("meta")
        return cls(
            phone_numbers=[PhoneNumber.from_dict(item) for item in items],
            meta=Meta.from_dict(meta) if meta is not None else Meta(),
        )

    def __iter__(self):
        return iter(self.phone_numbers)

    def __len__(self):
        return len(self.phone_numbers)


@dataclass(frozen=True)
class TwilioException(BaseModel):
    """
    Structured error body returned by the service on a non-success status.

    Attributes:
        status: HTTP status reported by the service
        message: Human-readable description
        code: Twilio error code (see ``more_info``)
        more_info: Link to the error code documentation
    """
    status: int = 0
    message: str = ""
    code: int = 0
    more_info: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TwilioException":
        data = _expect_object(data, "exception")
        return cls(
            status=_integer(data, "status"),
            message=_string(data, "message"),
            code=_integer(data, "code"),
            more_info=_string(data, "more_info"),
        )

    def __str__(self) -> str:
        if self.code:
            return f"{self.status} [{self.code}] {self.message}"
        return f"{self.status} {self.message}"


# =============================================================================
# Request Models
# =============================================================================

@dataclass(frozen=True)
class PhoneNumberRequest(BaseModel):
    """
    Parameters for attaching a phone number to a Proxy service.

    Attributes:
        sid: SID of an existing incoming phone number to attach
        phone_number: E.164 number to attach, alternative to ``sid``
        is_reserved: Reserve the number for manual assignment
    """
    sid: str = ""
    phone_number: str = ""
    is_reserved: bool = False

    def to_form(self) -> Dict[str, str]:
        """
        Build the form body for the create request.

        Empty optional fields are left out entirely; the service treats a
        missing key differently from an empty value. ``IsReserved`` is
        always sent.
        """
        form: Dict[str, str] = {}
        if self.sid:
            form["Sid"] = self.sid
        if self.phone_number:
            form["PhoneNumber"] = self.phone_number
        form["IsReserved"] = "true" if self.is_reserved else "false"
        return form


@dataclass(frozen=True)
class ProxyServiceContext:
    """The Proxy service that scopes phone number operations."""
    sid: str

    def __post_init__(self) -> None:
        if not self.sid:
            raise ValueError("Proxy service SID is required")
