from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from .fs__shared_util import ensure_directory


class RunLogger:
    """Appends timestamped lines to a run log; does nothing without a path."""

    def __init__(self, log_path: Path | None = None):
        self.log_path = Path(log_path) if log_path else None
        if self.log_path is not None:
            ensure_directory(self.log_path.parent)

    def write(self, message: str) -> None:
        if self.log_path is None:
            return
        ts = datetime.now(timezone.utc).isoformat()
        line = f"[{ts}] {message}"
        with self.log_path.open("a", encoding="utf-8", errors="replace") as f:
            f.write(line + "\n")
