"""
User-facing text for failed authentication operations.

Two failure categories are recognised: ``AuthenticationFailed`` from the
identity layer and ``RequestFailed`` from the transport/service layer.
Every description ends with the machine code so support can diagnose it.
"""

from __future__ import annotations

from typing import Tuple

from auth.codes import CommonErrorCode
from auth.errors import AuthenticationFailed, RequestFailed
from logger import get_logger

_log = get_logger("auth.classifier")

# Looked up in order, first match wins.
_REQUEST_MESSAGES: Tuple[Tuple[Tuple[CommonErrorCode, ...], str], ...] = (
    ((CommonErrorCode.UNKNOWN,), "An unexpected error occurred. Please try again."),
    (
        (CommonErrorCode.TRANSPORT_ERROR,),
        "Network issue connecting to server. Check your internet.",
    ),
    ((CommonErrorCode.TIMEOUT,), "Server took too long to respond. Please retry"),
    (
        (CommonErrorCode.SERVICE_UNAVAILABLE,),
        "Service is temporarily unavailable. Please try again later.",
    ),
    ((CommonErrorCode.API_MISSING,), "Requested feature is currently unavailable."),
    (
        (CommonErrorCode.REQUEST_REJECTED,),
        "Your request was rejected — please try again or contact support.",
    ),
    (
        (CommonErrorCode.TOO_MANY_REQUESTS,),
        "You're making requests too quickly. Please slow down.",
    ),
    (
        (CommonErrorCode.INVALID_TOKEN, CommonErrorCode.TOKEN_EXPIRED),
        "Your session expired. Please sign in again.",
    ),
    (
        (CommonErrorCode.FORBIDDEN,),
        "You don't have permission to perform this action.",
    ),
    ((CommonErrorCode.NOT_FOUND,), "Requested item not found."),
    ((CommonErrorCode.INVALID_REQUEST,), "Invalid request. Please check your input."),
)


def format_error_message(raw: str | None) -> str:
    """
    Turn a machine string such as ``INVALID_token`` into ``Invalid Token``.

    Blank input gives an empty string.
    """
    if raw is None or not raw.strip():
        return ""

    words = [w[0].upper() + w[1:].lower() for w in raw.split("_") if w]
    return " ".join(words)


def _with_code(message: str, code: object) -> str:
    _log.debug(f"Error with Code {code}")
    return f"{message}\nError Code {code}"


def describe_authentication_failure(failure: AuthenticationFailed) -> str:
    message = f"Authentication Failed with Error: {format_error_message(failure.message)}"
    return _with_code(message, failure.code)


def describe_request_failure(failure: RequestFailed) -> str:
    message = f"Request Failed with Error: {format_error_message(failure.message)}"

    for codes, text in _REQUEST_MESSAGES:
        if failure.code in codes:
            message = text
            break

    return _with_code(message, failure.code)


def describe_failure(failure: AuthenticationFailed | RequestFailed) -> str:
    if isinstance(failure, AuthenticationFailed):
        return describe_authentication_failure(failure)
    if isinstance(failure, RequestFailed):
        return describe_request_failure(failure)
    raise TypeError(f"Cannot describe {type(failure).__name__}")
