from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class LoggingState:
    """What the last init_logging() call attached to the root logger."""

    run_id: Optional[str] = None
    log_file_path: Optional[Path] = None

    @property
    def initialized(self) -> bool:
        return self.log_file_path is not None

    @property
    def log_dir(self) -> Optional[Path]:
        return self.log_file_path.parent if self.log_file_path else None


STATE = LoggingState()


def reset() -> None:
    STATE.run_id = None
    STATE.log_file_path = None
