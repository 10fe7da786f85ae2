import logging
from types import SimpleNamespace

import pytest

from auth.events import Signal


@pytest.fixture(autouse=True)
def clean_env_and_logging(monkeypatch, tmp_path):
    """
    Ensure tests don't leak env, logger state, or log files.
    """

    keys = [
        "AUTHFLOW_LOGS_DIR",
        "AUTHFLOW_COMMAND",
        "AUTHFLOW_RUN_ID",
        "AUTHFLOW_VERBOSE",
        "AUTHFLOW_QUIET",
        "AUTHFLOW_DISMISS_LABEL",
        "AUTHFLOW_CANCEL_LABEL",
        "AUTHFLOW_INIT_TEXT",
        "AUTHFLOW_SIGNING_IN_TEXT",
        "AUTHFLOW_DELETING_TEXT",
        "LOG_LEVEL",
        "LOG_RETENTION",
    ]
    for k in keys:
        monkeypatch.delenv(k, raising=False)

    monkeypatch.setenv("AUTHFLOW_LOGS_DIR", str(tmp_path / "logs"))

    import env

    env.reset_env_caches()

    # Reset logger global state
    import logger.state

    logger.state.reset()

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    yield

    logger.state.reset()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    env.reset_env_caches()


# ---------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------


class FakeIdentityService:
    def __init__(self) -> None:
        self.expired = Signal("expired")
        self.is_initialized = False
        self.is_signed_in = False
        self.session_token_exists = False
        self.player_id = None
        self.player_info = None
        self.failures = {}
        self.calls = []

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        failure = self.failures.pop(name, None)
        if failure is not None:
            raise failure

    async def initialize(self) -> None:
        self._maybe_fail("initialize")
        self.is_initialized = True

    async def sign_in_anonymously(self) -> None:
        self._maybe_fail("sign_in_anonymously")
        self._signed_in("anon-player")

    async def sign_in_with_platform(self, access_token) -> None:
        self._maybe_fail("sign_in_with_platform")
        self.last_access_token = access_token
        self._signed_in("platform-player", identities=["unity"])

    async def delete_account(self) -> None:
        self._maybe_fail("delete_account")
        self.session_token_exists = False

    def sign_out(self) -> None:
        self.calls.append("sign_out")
        self.is_signed_in = False
        self.player_id = None
        self.player_info = None

    def clear_session_token(self) -> None:
        self.calls.append("clear_session_token")
        self.session_token_exists = False

    def _signed_in(self, player_id, identities=None) -> None:
        self.is_signed_in = True
        self.session_token_exists = True
        self.player_id = player_id
        self.player_info = SimpleNamespace(
            identities=(
                [SimpleNamespace(type_id=t) for t in identities]
                if identities is not None
                else None
            )
        )


class FakePlayerAccountService:
    def __init__(self) -> None:
        self.signed_in = Signal("signed_in")
        self.sign_in_failed = Signal("sign_in_failed")
        self.is_signed_in = False
        self.access_token = None
        self.failures = {}
        self.started = 0

    async def start_sign_in(self) -> None:
        failure = self.failures.pop("start_sign_in", None)
        if failure is not None:
            raise failure
        self.started += 1

    async def complete_sign_in(self, access_token: str = "token-123") -> None:
        self.is_signed_in = True
        self.access_token = access_token
        await self.signed_in.emit()

    def sign_out(self) -> None:
        self.is_signed_in = False
        self.access_token = None


class FakeErrorScreen:
    def __init__(self) -> None:
        self.shown = []

    def show(self, message: str, dismiss_label: str) -> None:
        self.shown.append((message, dismiss_label))


class FakeLoadingScreen:
    def __init__(self) -> None:
        self.visible = False
        self.text = ""
        self.with_cancel_button = False
        self.cancel_label = ""
        self.on_cancel = None
        self.history = []

    def show(
        self,
        with_text=False,
        text="",
        with_cancel_button=False,
        cancel_label="",
        on_cancel=None,
    ) -> None:
        if with_text:
            self.text = text
        self.with_cancel_button = with_cancel_button
        self.cancel_label = cancel_label
        self.on_cancel = on_cancel
        self.visible = True
        self.history.append(("show", text))

    def hide(self) -> None:
        self.visible = False
        self.history.append(("hide", None))


@pytest.fixture
def identity():
    return FakeIdentityService()


@pytest.fixture
def accounts():
    return FakePlayerAccountService()


@pytest.fixture
def error_screen():
    return FakeErrorScreen()


@pytest.fixture
def loading_screen():
    return FakeLoadingScreen()


@pytest.fixture
def manager(identity, accounts, error_screen, loading_screen):
    from auth.manager import AuthenticationManager

    return AuthenticationManager(identity, accounts, error_screen, loading_screen)
