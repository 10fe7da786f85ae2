from __future__ import annotations

from pathlib import Path
from typing import List


def enforce_retention(log_dir: Path, keep: int, pattern: str = "*.log") -> List[Path]:
    """
    Delete all but the ``keep`` newest files matching ``pattern``.

    Returns the deleted paths, oldest last. ``keep <= 0`` disables pruning.
    """
    if keep <= 0:
        return []

    newest_first = sorted(
        log_dir.glob(pattern),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    pruned = newest_first[keep:]
    for path in pruned:
        # a concurrent run may have pruned it first
        path.unlink(missing_ok=True)
    return pruned
