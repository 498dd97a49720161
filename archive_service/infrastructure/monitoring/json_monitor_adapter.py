from __future__ import annotations

import json
import sys
from pathlib import Path
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.entities.error_log import ErrorLog
from ...shared.fs__shared_util import ensure_directory


class JsonErrorMonitorAdapter(ErrorMonitorPort):
    def __init__(self, log_path: str | Path):
        self.path = Path(log_path)

    def _load(self) -> list:
        if not self.path.exists():
            return []
        content = self.path.read_text(encoding="utf-8")
        return json.loads(content) if content.strip() else []

    def log_error(self, error: ErrorLog) -> None:
        try:
            ensure_directory(self.path.parent)
            logs = self._load()
            logs.append(error.model_dump(mode="json"))
            self.path.write_text(json.dumps(logs, indent=2), encoding="utf-8")
        except (OSError, ValueError) as e:
            print(f"Fallback Log Error: {e}", file=sys.stderr)


class NullErrorMonitorAdapter(ErrorMonitorPort):
    def log_error(self, error: ErrorLog) -> None:
        return None
