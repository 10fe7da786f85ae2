from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from auth.base import (
    ErrorScreen,
    IdentityService,
    LoadingScreen,
    PlayerAccountService,
    PlayerInfo,
    SessionStatus,
)
from auth.classifier import describe_request_failure
from auth.errors import RequestFailed
from auth.events import Signal
from auth.task import run
from env import FlowSettings, get_env
from logger import get_logger, init_logging

SESSION_EXPIRED_MESSAGE = (
    "Your session has expired and couldn't be refreshed, "
    "you will need to sign in again in order to use services."
)


class SignInState(str, Enum):
    IDLE = "idle"
    AWAITING_EXTERNAL_SIGN_IN = "awaiting_external_sign_in"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _linked_providers(info: Optional[PlayerInfo]) -> Tuple[str, ...]:
    if info is None or info.identities is None:
        return ()
    return tuple(identity.type_id for identity in info.identities)


class AuthenticationManager:
    """
    Drives sign-in, sign-out and account deletion for one player.

    Every remote call goes through ``auth.task.run`` so failures only ever
    surface as text on the error screen. Status snapshots are published on
    ``status_changed`` after each state-changing action.
    """

    def __init__(
        self,
        identity: IdentityService,
        accounts: PlayerAccountService,
        error_screen: ErrorScreen,
        loading_screen: LoadingScreen,
        settings: Optional[FlowSettings] = None,
    ) -> None:
        self._identity = identity
        self._accounts = accounts
        self._error_screen = error_screen
        self._loading = loading_screen
        self._settings = settings or get_env().flow
        self._registered = False
        self._logger = get_logger("auth.manager")

        self.sign_in_state = SignInState.IDLE
        self.status_changed = Signal("status_changed")

    # -----------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------

    async def start(self, configure_logging: bool = True) -> None:
        """
        Bring the flow up: attach the run log (named after AUTHFLOW_COMMAND),
        initialize services, then subscribe to service events.
        """
        if configure_logging:
            init_logging()
        await self.startup()
        self.register_events()

    def close(self) -> None:
        self.deregister_events()

    def register_events(self) -> None:
        if self._registered:
            return
        self._identity.expired.subscribe(self._on_token_expired)
        self._accounts.signed_in.subscribe(self._on_player_account_signed_in)
        self._accounts.sign_in_failed.subscribe(self._on_player_account_sign_in_failed)
        self._registered = True

    def deregister_events(self) -> None:
        if not self._registered:
            return
        self._identity.expired.unsubscribe(self._on_token_expired)
        self._accounts.signed_in.unsubscribe(self._on_player_account_signed_in)
        self._accounts.sign_in_failed.unsubscribe(self._on_player_account_sign_in_failed)
        self._registered = False

    async def startup(self) -> None:
        """Initialize services and resume a stored session if there is one."""
        self._loading.show(True, self._settings.init_text)

        success = await run(self._do_initialize, self._show_error)

        if success and self._identity.session_token_exists:
            self._loading.show(True, self._settings.signing_in_text)
            await run(self._do_sign_in_anonymously, self._show_error)

        self._loading.hide()
        await self._publish_status()

    # -----------------------------------------------------------------
    # User actions
    # -----------------------------------------------------------------

    async def sign_in_anonymously(self) -> None:
        if not self._services_initialized():
            return

        self._loading.show(True, self._settings.signing_in_text)
        await run(self._do_sign_in_anonymously, self._show_error)
        await self._publish_status()
        self._loading.hide()

    async def sign_in_with_platform(self) -> None:
        """
        Open the platform account sign-in. The identity sign-in happens when
        the platform reports back, unless cancelled in the meantime.
        """
        if not self._services_initialized():
            return
        if self.sign_in_state is SignInState.AWAITING_EXTERNAL_SIGN_IN:
            self._logger.debug("auth.platform.already_waiting")
            return

        self.sign_in_state = SignInState.AWAITING_EXTERNAL_SIGN_IN
        self._loading.show(
            True,
            self._settings.signing_in_text,
            True,
            self._settings.cancel_label,
            self.cancel_platform_sign_in,
        )

        success = await run(self._do_start_platform_sign_in, self._show_error)

        if not success:
            self.sign_in_state = SignInState.IDLE
            self._loading.hide()

    def cancel_platform_sign_in(self) -> None:
        # The external flow keeps running; its result is ignored.
        self._logger.info("auth.platform.cancelled")
        self.sign_in_state = SignInState.CANCELLED
        self._loading.hide()

    async def sign_out(self) -> None:
        if not self._services_initialized():
            return

        self._sign_out_services()
        await self._publish_status()

    async def delete_account(self) -> None:
        if not self._services_initialized():
            return
        if not self._identity.is_signed_in:
            return

        self._loading.show(True, self._settings.deleting_text)
        await run(self._do_delete_account, self._show_error)
        await self._publish_status()
        self._loading.hide()

    async def clear_session_token(self) -> None:
        if not self._services_initialized():
            return

        if self._identity.session_token_exists and not self._identity.is_signed_in:
            self._identity.clear_session_token()
            self._logger.info("auth.session_token.cleared")
            await self._publish_status()

    # -----------------------------------------------------------------
    # Status
    # -----------------------------------------------------------------

    def status(self) -> SessionStatus:
        signed_in = self._identity.is_signed_in

        return SessionStatus(
            player_accounts_signed_in=self._accounts.is_signed_in,
            access_token_exists=bool(self._accounts.access_token),
            signed_in=signed_in,
            session_token_exists=self._identity.session_token_exists,
            player_id=self._identity.player_id if signed_in else None,
            linked_providers=(
                _linked_providers(self._identity.player_info) if signed_in else ()
            ),
        )

    # -----------------------------------------------------------------
    # Service events
    # -----------------------------------------------------------------

    async def _on_token_expired(self) -> None:
        self._logger.warning("auth.session.expired")
        self._sign_out_services()
        self._show_error(SESSION_EXPIRED_MESSAGE)
        await self._publish_status()

    async def _on_player_account_signed_in(self) -> None:
        if self.sign_in_state is not SignInState.AWAITING_EXTERNAL_SIGN_IN:
            self._logger.debug(f"auth.platform.signed_in.ignored state={self.sign_in_state.value}")
            return

        success = await run(self._do_sign_in_with_platform, self._show_error)
        self.sign_in_state = SignInState.COMPLETED if success else SignInState.IDLE

        await self._publish_status()
        self._loading.hide()

    def _on_player_account_sign_in_failed(self, failure: RequestFailed) -> None:
        self._show_error(describe_request_failure(failure))

        if self.sign_in_state is SignInState.AWAITING_EXTERNAL_SIGN_IN:
            self.sign_in_state = SignInState.IDLE
            self._loading.hide()

    # -----------------------------------------------------------------
    # Operations handed to the runner
    # -----------------------------------------------------------------

    async def _do_initialize(self) -> None:
        await self._identity.initialize()
        self._logger.info("Services initialized")

    async def _do_sign_in_anonymously(self) -> None:
        await self._identity.sign_in_anonymously()
        self._logger.info(f"Signed in anonymously, Player ID: {self._identity.player_id}")

    async def _do_start_platform_sign_in(self) -> None:
        await self._accounts.start_sign_in()

    async def _do_sign_in_with_platform(self) -> None:
        await self._identity.sign_in_with_platform(self._accounts.access_token)
        self._logger.info(f"Signed in with platform account, Player ID: {self._identity.player_id}")

    async def _do_delete_account(self) -> None:
        await self._identity.delete_account()
        self._sign_out_services()
        self._logger.info("Deleted account")

    # -----------------------------------------------------------------
    # Internals
    # -----------------------------------------------------------------

    def _services_initialized(self) -> bool:
        return self._identity.is_initialized

    def _sign_out_services(self) -> None:
        if self._identity.is_signed_in:
            self._identity.sign_out()
        if self._accounts.is_signed_in:
            self._accounts.sign_out()

    def _show_error(self, message: str) -> None:
        self._error_screen.show(message, self._settings.dismiss_label)

    async def _publish_status(self) -> None:
        await self.status_changed.emit(self.status())
