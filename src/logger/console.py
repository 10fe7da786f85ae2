from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def build_console_handler(level: int = logging.NOTSET) -> logging.Handler:
    """
    Rich console handler on the current sys.stdout.

    Quiet mode is decided once by init_logging(), which then skips this
    handler entirely.
    """
    console = Console(file=sys.stdout, soft_wrap=True)

    handler = RichHandler(
        console=console,
        level=level,
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
    )

    # RichHandler renders the level column itself.
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler
