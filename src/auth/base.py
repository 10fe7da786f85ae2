from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence, Tuple

from auth.events import Signal


class ExternalIdentity(Protocol):
    type_id: str


class PlayerInfo(Protocol):
    identities: Optional[Sequence[ExternalIdentity]]


class IdentityService(Protocol):
    """
    The identity/session service. Owns sign-in, session token and account
    state; every async method may raise AuthenticationFailed or
    RequestFailed.

    - expired fires when the session could not be refreshed
    """

    expired: Signal

    @property
    def is_initialized(self) -> bool: ...

    @property
    def is_signed_in(self) -> bool: ...

    @property
    def session_token_exists(self) -> bool: ...

    @property
    def player_id(self) -> Optional[str]: ...

    @property
    def player_info(self) -> Optional[PlayerInfo]: ...

    async def initialize(self) -> None: ...

    async def sign_in_anonymously(self) -> None: ...

    async def sign_in_with_platform(self, access_token: Optional[str]) -> None: ...

    async def delete_account(self) -> None: ...

    def sign_out(self) -> None: ...

    def clear_session_token(self) -> None: ...


class PlayerAccountService(Protocol):
    """
    Platform account sign-in (browser based).

    - start_sign_in() only opens the external flow; completion arrives later
      through signed_in, or sign_in_failed with a RequestFailed payload
    """

    signed_in: Signal
    sign_in_failed: Signal

    @property
    def is_signed_in(self) -> bool: ...

    @property
    def access_token(self) -> Optional[str]: ...

    async def start_sign_in(self) -> None: ...

    def sign_out(self) -> None: ...


class ErrorScreen(Protocol):
    def show(self, message: str, dismiss_label: str) -> None: ...


class LoadingScreen(Protocol):
    def show(
        self,
        with_text: bool = False,
        text: str = "",
        with_cancel_button: bool = False,
        cancel_label: str = "",
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> None: ...

    def hide(self) -> None: ...


@dataclass(frozen=True)
class SessionStatus:
    player_accounts_signed_in: bool
    access_token_exists: bool
    signed_in: bool
    session_token_exists: bool
    player_id: Optional[str] = None
    linked_providers: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def can_sign_in(self) -> bool:
        return not self.signed_in

    @property
    def can_sign_out(self) -> bool:
        return self.signed_in

    @property
    def can_delete_account(self) -> bool:
        return self.signed_in

    @property
    def can_clear_session_token(self) -> bool:
        return not self.signed_in and self.session_token_exists
