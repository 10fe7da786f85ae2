"""
Process-wide logging for authflow.

Handlers live on the root logger only; modules log through get_logger().
One file per run under ``<logs>/<command>/``, plus a Rich console unless
quiet mode is on.
"""

from __future__ import annotations

import logging
from datetime import datetime

from env import get_env
from .console import build_console_handler
from .file import build_file_handler, repoint_file_handler, run_log_path
from .retention import enforce_retention
from .state import STATE


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _level_to_int(level: str) -> int:
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def _run_id(configured: str) -> str:
    # One run id per process unless configured explicitly
    if configured:
        return configured
    if STATE.run_id is None:
        STATE.run_id = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    return STATE.run_id


def init_logging(command: str | None = None) -> None:
    """
    Attach the run's handlers to the root logger.

    Calling again for the same file only refreshes the level; a different
    command moves the existing file handler instead of adding another.
    """
    env = get_env()
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    run_id = _run_id(env.run_id)
    logfile = run_log_path(env.logs_dir, command or env.command, run_id)

    root = logging.getLogger()
    root_level = logging.DEBUG if env.verbose else _level_to_int(env.log_level)
    root.setLevel(root_level)

    if STATE.log_file_path == logfile:
        return

    file_handler = next(
        (h for h in root.handlers if isinstance(h, logging.FileHandler)), None
    )
    root.handlers.clear()

    if file_handler is None:
        file_handler = build_file_handler(logfile)
    else:
        repoint_file_handler(file_handler, logfile)
    root.addHandler(file_handler)

    if not env.quiet:
        root.addHandler(build_console_handler(root_level))

    STATE.run_id = run_id
    STATE.log_file_path = logfile

    pruned = enforce_retention(logfile.parent, env.log_retention)
    if pruned:
        get_logger("logger").debug(f"logger.retention.pruned count={len(pruned)}")


__all__ = ["get_logger", "init_logging"]
