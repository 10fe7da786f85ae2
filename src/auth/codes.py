from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class CommonErrorCode(str, Enum):
    """Transport/service-layer failure reasons shared by every remote call."""

    UNKNOWN = "Unknown"
    TRANSPORT_ERROR = "TransportError"
    TIMEOUT = "Timeout"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    API_MISSING = "ApiMissing"
    REQUEST_REJECTED = "RequestRejected"
    TOO_MANY_REQUESTS = "TooManyRequests"
    INVALID_TOKEN = "InvalidToken"
    TOKEN_EXPIRED = "TokenExpired"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    INVALID_REQUEST = "InvalidRequest"

    def __str__(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        """Numeric code used on the wire by the vendor SDK."""
        return _NUMBERS[self]

    @classmethod
    def coerce(
        cls, value: Union["CommonErrorCode", str, int]
    ) -> Union["CommonErrorCode", str, int]:
        """
        Resolve a member, display name or numeric code to a member.

        Integers and names outside the enumeration are returned unchanged so
        callers can still report them.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return _BY_NUMBER.get(value, value)
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return value
        raise TypeError(f"Unsupported error code: {value!r}")


_NUMBERS: Dict[CommonErrorCode, int] = {
    CommonErrorCode.UNKNOWN: 0,
    CommonErrorCode.TRANSPORT_ERROR: 1,
    CommonErrorCode.TIMEOUT: 2,
    CommonErrorCode.SERVICE_UNAVAILABLE: 3,
    CommonErrorCode.API_MISSING: 4,
    CommonErrorCode.REQUEST_REJECTED: 5,
    CommonErrorCode.TOO_MANY_REQUESTS: 50,
    CommonErrorCode.INVALID_TOKEN: 51,
    CommonErrorCode.TOKEN_EXPIRED: 52,
    CommonErrorCode.FORBIDDEN: 53,
    CommonErrorCode.NOT_FOUND: 54,
    CommonErrorCode.INVALID_REQUEST: 55,
}

_BY_NUMBER: Dict[int, CommonErrorCode] = {n: code for code, n in _NUMBERS.items()}
