from __future__ import annotations

from typing import Union

from auth.codes import CommonErrorCode


class AuthError(Exception):
    """Base error for any failure surfaced by the identity services."""

    def __init__(self, message: str, code: object) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class AuthenticationFailed(AuthError):
    """Raised by the identity layer itself (credentials, session state)."""

    code: int

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message, code)


class RequestFailed(AuthError):
    """Raised by the transport/service layer underneath the identity layer."""

    code: Union[CommonErrorCode, str, int]

    def __init__(self, message: str, code: Union[CommonErrorCode, str, int]) -> None:
        super().__init__(message, CommonErrorCode.coerce(code))
