from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from env.paths import PROJECT_ROOT

# ------------------------------------------------------------
# Logs path (logger depends on this)
# ------------------------------------------------------------


def logs_dir() -> Path:
    return (
        Path(os.environ.get("AUTHFLOW_LOGS_DIR") or PROJECT_ROOT / "logs")
        .expanduser()
        .resolve()
    )


# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _text(name: str, default: str) -> str:
    v = os.environ.get(name)
    if v is None:
        return default
    if not v.strip():
        raise ConfigError(f"Environment variable must not be blank: {name}")
    return v.strip()


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except ValueError:
        return default


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    log_level: str
    log_retention: int
    verbose: bool
    quiet: bool


def get_logging_env() -> LoggingEnvironment:
    return LoggingEnvironment(
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_retention=_as_int(os.environ.get("LOG_RETENTION", "30"), 30),
        verbose=_as_bool(os.environ.get("AUTHFLOW_VERBOSE", "0")),
        quiet=_as_bool(os.environ.get("AUTHFLOW_QUIET", "0")),
    )


# ------------------------------------------------------------
# Sign-in flow settings
# ------------------------------------------------------------


@dataclass(frozen=True)
class FlowSettings:
    """Labels and loading texts handed to the UI collaborators."""

    dismiss_label: str = "OK"
    cancel_label: str = "Cancel"
    init_text: str = "Init Services..."
    signing_in_text: str = "Signing In..."
    deleting_text: str = "Deleting Account..."


def get_flow_settings() -> FlowSettings:
    defaults = FlowSettings()
    return FlowSettings(
        dismiss_label=_text("AUTHFLOW_DISMISS_LABEL", defaults.dismiss_label),
        cancel_label=_text("AUTHFLOW_CANCEL_LABEL", defaults.cancel_label),
        init_text=_text("AUTHFLOW_INIT_TEXT", defaults.init_text),
        signing_in_text=_text("AUTHFLOW_SIGNING_IN_TEXT", defaults.signing_in_text),
        deleting_text=_text("AUTHFLOW_DELETING_TEXT", defaults.deleting_text),
    )


# ------------------------------------------------------------
# Full runtime environment (cached, see get_env)
# ------------------------------------------------------------


class Environment:
    """Snapshot of every AUTHFLOW_* setting, taken once per reset."""

    def __init__(self):
        # Logging snapshot (immutable)
        self._logging = get_logging_env()

        self.command = os.environ.get("AUTHFLOW_COMMAND") or "authflow"
        self.run_id = os.environ.get("AUTHFLOW_RUN_ID", "")
        self.logs_dir = logs_dir()

        self.flow = get_flow_settings()

    # ---- logging passthrough ----
    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_retention(self) -> int:
        return self._logging.log_retention

    @property
    def verbose(self) -> bool:
        return self._logging.verbose

    @property
    def quiet(self) -> bool:
        return self._logging.quiet


_ENV: Optional[Environment] = None


def reset_env_caches() -> None:
    """Invalidate cached views of environment variables."""
    global _ENV
    _ENV = None


def get_env() -> Environment:
    global _ENV
    if _ENV is None:
        _ENV = Environment()
    return _ENV
