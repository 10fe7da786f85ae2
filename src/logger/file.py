from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | [%(levelname)s] | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def run_log_path(logs_dir: Path, command: str, run_id: str) -> Path:
    """<logs>/<command>/<command>-<run_id>.log"""
    return logs_dir / command / f"{command}-{run_id}.log"


def build_file_handler(logfile: Path, level: int = logging.NOTSET) -> logging.FileHandler:
    logfile.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def repoint_file_handler(handler: logging.FileHandler, new_logfile: Path) -> None:
    """Swap the target file of a live handler without detaching it."""
    new_logfile.parent.mkdir(parents=True, exist_ok=True)

    handler.acquire()
    try:
        handler.close()
        handler.baseFilename = str(new_logfile)
        handler.stream = handler._open()
    finally:
        handler.release()
