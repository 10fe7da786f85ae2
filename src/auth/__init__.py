from __future__ import annotations

from auth.base import (
    ErrorScreen,
    IdentityService,
    LoadingScreen,
    PlayerAccountService,
    SessionStatus,
)
from auth.classifier import (
    describe_authentication_failure,
    describe_failure,
    describe_request_failure,
    format_error_message,
)
from auth.codes import CommonErrorCode
from auth.errors import AuthError, AuthenticationFailed, RequestFailed
from auth.events import Signal
from auth.manager import AuthenticationManager, SignInState
from auth.task import run

__all__ = [
    "AuthError",
    "AuthenticationFailed",
    "AuthenticationManager",
    "CommonErrorCode",
    "ErrorScreen",
    "IdentityService",
    "LoadingScreen",
    "PlayerAccountService",
    "RequestFailed",
    "SessionStatus",
    "Signal",
    "SignInState",
    "describe_authentication_failure",
    "describe_failure",
    "describe_request_failure",
    "format_error_message",
    "run",
]
